from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from mobilemessage.types import MessageOutcome, SendResult

from .base import BaseResponse


class SendSmsResponse(BaseResponse):
    """Result of POST /messages (single send, bulk send or broadcast)."""

    @property
    def messages(self) -> List[Dict[str, Any]]:
        return self.contract.records(self._raw)

    @property
    def results(self) -> List[SendResult]:
        return [self.contract.to_send_result(record) for record in self.messages]

    def iter_messages(self) -> Iterator[Dict[str, Any]]:
        return iter(self.messages)

    def message_at(self, index: int) -> Optional[Dict[str, Any]]:
        messages = self.messages
        if -len(messages) <= index < len(messages):
            return messages[index]
        return None

    @property
    def message_ids(self) -> List[str]:
        return [r.message_id for r in self.results if r.message_id is not None]

    @property
    def first_message_id(self) -> Optional[str]:
        messages = self.messages
        if not messages:
            return None
        return self.contract.to_send_result(messages[0]).message_id

    def _count(self, outcome: MessageOutcome) -> int:
        return sum(
            1 for record in self.messages if self.contract.outcome(record.get("status")) is outcome
        )

    @property
    def sent_count(self) -> int:
        return self._count(MessageOutcome.SENT)

    @property
    def failed_count(self) -> int:
        return self._count(MessageOutcome.FAILED)

    @property
    def all_successful(self) -> bool:
        return self.is_success and bool(self.messages) and self.failed_count == 0

    @property
    def has_failures(self) -> bool:
        return self.failed_count > 0

    @property
    def total_cost(self) -> float:
        return self.contract.total_cost(self._raw)
