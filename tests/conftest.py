from __future__ import annotations

from typing import Any, Callable, Dict

import pytest

from mobilemessage import Client
from tests.fixtures.doubles import FakeClock


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "USERNAME",
        "PASSWORD",
        "DEFAULT_FROM",
        "SANDBOX",
        "CONTRACT",
        "MAX_RETRY_DELAY",
        "RETRY_JITTER",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(f"MOBILEMESSAGE_{name}", raising=False)


@pytest.fixture()
def credentials() -> Dict[str, str]:
    return {"username": "test_user", "password": "test_password"}


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def make_client(credentials: Dict[str, str], clock: FakeClock) -> Callable[..., Client]:
    def _make(transport: Any = None, **options: Any) -> Client:
        return Client(
            **credentials,
            transport=transport,
            sleep=clock.sleep,
            clock=clock,
            **options,
        )

    return _make
