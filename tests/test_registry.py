from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from mobilemessage import Client, Configuration
from mobilemessage.adapters import HttpTransport, SandboxTransport, TransportRegistry


class DummyTransport:
    def __init__(self, config: Configuration) -> None:
        self.config = config
        self.paths: List[str] = []

    @classmethod
    def from_config(cls, config: Configuration) -> "DummyTransport":
        return cls(config)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self.paths.append(path)
        return {"status": "complete", "credit_balance": 5}

    post = put = delete = get


def test_registry_builds_builtin_transports() -> None:
    config = Configuration(username="u", password="p", read_timeout=5)

    live = TransportRegistry.get("live", config)
    assert isinstance(live, HttpTransport)
    assert live.read_timeout == 5
    assert isinstance(TransportRegistry.get("sandbox", config), SandboxTransport)


def test_registry_picks_sandbox_from_config() -> None:
    config = Configuration(username="u", password="p", sandbox_mode=True)

    assert isinstance(TransportRegistry.for_config(config), SandboxTransport)


def test_registry_register_custom(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(TransportRegistry, "_registry", dict(TransportRegistry._registry))
    TransportRegistry.register("live", DummyTransport)

    client = Client(username="u", password="p")

    assert isinstance(client.transport, DummyTransport)
    assert client.get_balance().balance == 5
    assert client.transport.paths == ["account"]


def test_registry_unknown() -> None:
    with pytest.raises(KeyError):
        TransportRegistry.get("missing", Configuration())
