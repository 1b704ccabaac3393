from __future__ import annotations

from typing import TYPE_CHECKING, Dict

from mobilemessage.adapters.http import HttpTransport
from mobilemessage.adapters.sandbox import SandboxTransport
from mobilemessage.types import Transport

if TYPE_CHECKING:
    from mobilemessage.config import Configuration


class TransportRegistry:
    """Registry for transports by name.

    Transport classes expose ``from_config(config)``. The client asks for
    ``"sandbox"`` when `Configuration.sandbox_mode` is set and ``"live"``
    otherwise; tests and integrators can register their own.
    """

    _registry: Dict[str, type] = {
        "live": HttpTransport,
        "sandbox": SandboxTransport,
    }

    @classmethod
    def get(cls, name: str, config: "Configuration") -> Transport:
        transport_cls = cls._registry.get(name)
        if transport_cls is None:
            raise KeyError(f"Unknown transport: {name}")
        return transport_cls.from_config(config)

    @classmethod
    def for_config(cls, config: "Configuration") -> Transport:
        return cls.get("sandbox" if config.is_sandbox else "live", config)

    @classmethod
    def register(cls, name: str, transport_cls: type) -> None:
        cls._registry[name] = transport_cls
