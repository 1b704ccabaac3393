from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from mobilemessage.types import StatusRecord

from .base import BaseResponse

DELIVERED_STATUSES = frozenset({"success", "delivered"})
PENDING_STATUSES = frozenset({"queued", "sent"})
FAILED_STATUSES = frozenset({"failed", "rejected", "error"})


class MessageStatusResponse(BaseResponse):
    """Result of a status lookup (GET /messages).

    Accessors describe the first matching record; lookups by a wildcard
    `custom_ref` may return several, all available from `records`.
    Unknown status strings are neither delivered, pending nor failed.
    """

    @property
    def results(self) -> List[Dict[str, Any]]:
        return self.contract.status_records(self._raw)

    @property
    def records(self) -> List[StatusRecord]:
        return [self.contract.to_status_record(r) for r in self.results]

    @property
    def record(self) -> StatusRecord:
        results = self.results
        return self.contract.to_status_record(results[0] if results else {})

    @property
    def message_id(self) -> Optional[str]:
        return self.record.message_id

    @property
    def status(self) -> Optional[str]:
        return self.record.status

    @property
    def to(self) -> Optional[str]:
        return self.record.to

    @property
    def sender(self) -> Optional[str]:
        return self.record.sender

    from_ = sender

    @property
    def body(self) -> Optional[str]:
        return self.record.body

    @property
    def custom_ref(self) -> Optional[str]:
        return self.record.custom_ref

    @property
    def cost(self) -> Optional[float]:
        return self.record.cost

    @property
    def requested_at(self) -> Optional[datetime]:
        return self.record.timestamp

    @property
    def is_delivered(self) -> bool:
        return self.status in DELIVERED_STATUSES

    @property
    def is_pending(self) -> bool:
        return self.status in PENDING_STATUSES

    @property
    def is_failed(self) -> bool:
        return self.status in FAILED_STATUSES

    @property
    def is_terminal(self) -> bool:
        return self.is_delivered or self.is_failed
