from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from .enums import MessageOutcome


class SendResult(BaseModel):
    """Normalized outcome of one message in a send response.

    Contracts build these from their own record shapes, so `sender` and
    `body` are populated whichever field names the API used.

    Attributes:
        to: Recipient number as echoed by the API.
        sender: Sender ID the message went out with.
        body: Message text.
        status: Raw status string from the API.
        outcome: SENT, FAILED or UNKNOWN for unmapped statuses.
        message_id: Provider-assigned identifier, when one was issued.
        cost: Credits charged for the message.
        custom_ref: Caller tracking token, echoed back.

    Example:
        >>> from mobilemessage.types import SendResult, MessageOutcome
        >>> SendResult(to="+61400000000", status="success", outcome=MessageOutcome.SENT)
    """

    to: Optional[str] = None
    sender: Optional[str] = None
    body: Optional[str] = None
    status: Optional[str] = None
    outcome: MessageOutcome = MessageOutcome.UNKNOWN
    message_id: Optional[str] = None
    cost: Optional[float] = None
    custom_ref: Optional[str] = None

    @property
    def is_sent(self) -> bool:
        return self.outcome is MessageOutcome.SENT

    @property
    def is_failed(self) -> bool:
        return self.outcome is MessageOutcome.FAILED


class StatusRecord(BaseModel):
    """Delivery status of a single message as returned by a status lookup."""

    message_id: Optional[str] = None
    status: Optional[str] = None
    to: Optional[str] = None
    sender: Optional[str] = None
    body: Optional[str] = None
    custom_ref: Optional[str] = None
    cost: Optional[float] = None
    timestamp: Optional[datetime] = None


class BalanceRecord(BaseModel):
    """Account balance snapshot."""

    balance: float = 0
    currency: str = "AUD"
    account_name: Optional[str] = None
