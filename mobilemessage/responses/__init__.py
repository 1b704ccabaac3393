"""Normalized response wrappers.

Each wrapper pairs a decoded API response with the active wire contract and
exposes the same accessors whichever contract produced it.
"""

from .balance import BalanceResponse
from .base import BaseResponse
from .collection import ResponseCollection
from .send import SendSmsResponse
from .status import MessageStatusResponse

__all__ = [
    "BaseResponse",
    "SendSmsResponse",
    "MessageStatusResponse",
    "BalanceResponse",
    "ResponseCollection",
]
