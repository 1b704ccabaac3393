"""Core types for the Mobile Message client.

This package centralizes enums, outbound message models, normalized result
records, webhook event models and the transport/contract protocols in one
place. Most modules should import types from here rather than directly from
submodules.

Usage:
    from mobilemessage.types import OutboundSms, InboundMessage, ContractVariant
"""

from .enums import ContractVariant, MessageOutcome, ResponseFormat
from .events import InboundMessage, StatusUpdate, WebhookEvent
from .messages import OutboundSms
from .protocols import ResponseContract, Transport
from .results import BalanceRecord, SendResult, StatusRecord

__all__ = [
    "ContractVariant",
    "MessageOutcome",
    "ResponseFormat",
    "InboundMessage",
    "StatusUpdate",
    "WebhookEvent",
    "OutboundSms",
    "ResponseContract",
    "Transport",
    "BalanceRecord",
    "SendResult",
    "StatusRecord",
]
