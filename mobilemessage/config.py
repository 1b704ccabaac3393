"""Client configuration.

`Configuration` is an immutable value passed to `Client`; there is no
process-wide default. `Configuration.from_env()` builds one from
``MOBILEMESSAGE_*`` environment variables, optionally seeded from a ``.env``
file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from mobilemessage.errors import ConfigurationError
from mobilemessage.retry import DEFAULT_BASE_DELAY, DEFAULT_JITTER_FACTOR, DEFAULT_MAX_DELAY
from mobilemessage.types import ContractVariant, ResponseFormat

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.mobilemessage.com.au/v1/"
ENV_PREFIX = "MOBILEMESSAGE_"


def load_env_file(path: Union[str, Path]) -> None:
    """Load KEY=VALUE lines from `path` into os.environ without overriding."""
    env_path = Path(path)
    if not env_path.is_file():
        return
    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#") and "=" in stripped:
            key, value = stripped.split("=", 1)
            key, value = key.strip(), value.strip().strip("'\"")
            if key and value and key not in os.environ:
                os.environ[key] = value


def _env(name: str) -> Optional[str]:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    return value if value not in (None, "") else None


def _env_bool(name: str) -> Optional[bool]:
    value = _env(name)
    if value is None:
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Configuration(BaseModel):
    """Credentials and tunables for one client.

    Timeouts are in seconds. `max_retries` is the total attempt ceiling when
    `auto_retry` is on; with it off every call gets exactly one attempt.
    """

    model_config = ConfigDict(frozen=True)

    username: Optional[str] = None
    password: Optional[str] = None
    default_from: Optional[str] = None

    response_format: ResponseFormat = ResponseFormat.ENHANCED
    contract: ContractVariant = ContractVariant.RESULTS
    base_url: str = DEFAULT_BASE_URL

    open_timeout: float = Field(default=30, gt=0)
    read_timeout: float = Field(default=60, gt=0)

    auto_retry: bool = True
    max_retries: int = Field(default=3, ge=1)
    retry_delay: float = Field(default=DEFAULT_BASE_DELAY, ge=0)
    max_retry_delay: float = Field(default=DEFAULT_MAX_DELAY, ge=0)
    retry_jitter: float = Field(default=DEFAULT_JITTER_FACTOR, ge=0)

    sandbox_mode: bool = False

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None, **overrides: Any) -> "Configuration":
        """Build a configuration from ``MOBILEMESSAGE_*`` variables.

        Recognised: USERNAME, PASSWORD, DEFAULT_FROM, RESPONSE_FORMAT,
        CONTRACT, BASE_URL, OPEN_TIMEOUT, READ_TIMEOUT, AUTO_RETRY,
        MAX_RETRIES, RETRY_DELAY, MAX_RETRY_DELAY, RETRY_JITTER, SANDBOX.
        Explicit `overrides` win.
        """
        if env_file is not None:
            load_env_file(env_file)

        values: dict[str, Any] = {
            "username": _env("USERNAME"),
            "password": _env("PASSWORD"),
            "default_from": _env("DEFAULT_FROM"),
            "response_format": _env("RESPONSE_FORMAT"),
            "contract": _env("CONTRACT"),
            "base_url": _env("BASE_URL"),
            "open_timeout": _env("OPEN_TIMEOUT"),
            "read_timeout": _env("READ_TIMEOUT"),
            "auto_retry": _env_bool("AUTO_RETRY"),
            "max_retries": _env("MAX_RETRIES"),
            "retry_delay": _env("RETRY_DELAY"),
            "max_retry_delay": _env("MAX_RETRY_DELAY"),
            "retry_jitter": _env("RETRY_JITTER"),
            "sandbox_mode": _env_bool("SANDBOX"),
        }
        values = {key: value for key, value in values.items() if value is not None}
        values.update(overrides)
        return cls._build(values)

    @classmethod
    def _build(cls, values: dict[str, Any]) -> "Configuration":
        try:
            return cls.model_validate(values)
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    @property
    def is_sandbox(self) -> bool:
        return self.sandbox_mode is True

    @property
    def max_attempts(self) -> int:
        return self.max_retries if self.auto_retry else 1

    def with_options(self, **options: Any) -> "Configuration":
        """Return a validated copy with `options` applied; unknown keys are ignored."""
        known = {key: value for key, value in options.items() if key in type(self).model_fields}
        ignored = sorted(set(options) - set(known))
        if ignored:
            logger.debug("ignoring unknown configuration options", extra={"options": ignored})
        if not known:
            return self
        return type(self)._build({**self.model_dump(), **known})

    def validate_required(self) -> None:
        if not self.username:
            raise ConfigurationError("username is required")
        if not self.password:
            raise ConfigurationError("password is required")
