"""Transports: the live HTTP API and the in-memory sandbox."""

from .http import HttpTransport
from .registry import TransportRegistry
from .sandbox import SandboxTransport

__all__ = [
    "HttpTransport",
    "SandboxTransport",
    "TransportRegistry",
]
