"""Wire contracts spoken by the two generations of the Mobile Message API.

`ResultsContract` handles the ``{"status": "complete", "results": [...]}``
shape; `MessagesContract` handles ``{"success": true, "messages": [...]}``.
Both satisfy `mobilemessage.types.ResponseContract`; response wrappers
delegate every contract-specific lookup to one of them.
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

from mobilemessage.types import (
    ContractVariant,
    MessageOutcome,
    OutboundSms,
    ResponseContract,
    SendResult,
    StatusRecord,
)
from mobilemessage.utils import parse_timestamp

DEFAULT_CURRENCY = "AUD"


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    # "1000" stays 1000, not 1000.0
    return int(parsed) if parsed.is_integer() else parsed


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _record_list(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


class _BaseContract:
    variant: ContractVariant
    sender_field: str
    body_field: str
    status_lookup_keys: Tuple[str, ...]
    records_key: str
    balance_key: str
    timestamp_key: str
    sent_statuses: FrozenSet[str]
    failed_statuses: FrozenSet[str]

    def records(self, raw: Mapping[str, Any]) -> List[Dict[str, Any]]:
        return _record_list(raw.get(self.records_key))

    def outcome(self, status: Any) -> MessageOutcome:
        if status in self.sent_statuses:
            return MessageOutcome.SENT
        if status in self.failed_statuses:
            return MessageOutcome.FAILED
        return MessageOutcome.UNKNOWN

    def total_cost(self, raw: Mapping[str, Any]) -> float:
        return _number(raw.get("total_cost")) or 0

    def to_send_result(self, record: Mapping[str, Any]) -> SendResult:
        status = record.get("status")
        return SendResult(
            to=_text(record.get("to")),
            sender=_text(record.get(self.sender_field)),
            body=_text(record.get(self.body_field)),
            status=_text(status),
            outcome=self.outcome(status),
            message_id=_text(record.get("message_id")),
            cost=_number(record.get("cost")),
            custom_ref=_text(record.get("custom_ref")),
        )

    def status_records(self, raw: Mapping[str, Any]) -> List[Dict[str, Any]]:
        return self.records(raw)

    def to_status_record(self, record: Mapping[str, Any]) -> StatusRecord:
        return StatusRecord(
            message_id=_text(record.get("message_id")),
            status=_text(record.get("status")),
            to=_text(record.get("to")),
            sender=_text(record.get(self.sender_field)),
            body=_text(record.get(self.body_field)),
            custom_ref=_text(record.get("custom_ref")),
            cost=_number(record.get("cost")),
            timestamp=parse_timestamp(record.get(self.timestamp_key)),
        )

    def balance(self, raw: Mapping[str, Any]) -> float:
        return _number(raw.get(self.balance_key)) or 0

    def build_message(self, message: OutboundSms) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "to": message.to,
            self.sender_field: message.sender,
            self.body_field: message.message,
        }
        if message.custom_ref:
            data["custom_ref"] = message.custom_ref
        if message.unicode:
            data["unicode"] = True
        return data

    def build_send_body(
        self, messages: Sequence[OutboundSms], enable_unicode: bool = False
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"messages": [self.build_message(m) for m in messages]}
        if enable_unicode:
            body["enable_unicode"] = True
        return body


class ResultsContract(_BaseContract):
    """Current API: ``status == "complete"`` and a ``results`` record list."""

    variant = ContractVariant.RESULTS
    sender_field = "sender"
    body_field = "message"
    status_lookup_keys = ("message_id", "custom_ref")
    records_key = "results"
    balance_key = "credit_balance"
    timestamp_key = "requested_at"
    # queued/sent appear on messages the network has not finished with yet
    sent_statuses = frozenset({"success", "queued", "sent"})
    failed_statuses = frozenset({"failed", "error"})

    def is_success(self, raw: Mapping[str, Any]) -> bool:
        return raw.get("status") == "complete"

    def currency(self, raw: Mapping[str, Any]) -> str:
        return DEFAULT_CURRENCY

    def format_balance(self, balance: float, currency: str) -> str:
        return f"{balance} credits"


class MessagesContract(_BaseContract):
    """Legacy API: boolean ``success`` and a ``messages`` record list."""

    variant = ContractVariant.MESSAGES
    sender_field = "from"
    body_field = "body"
    status_lookup_keys = ("message_id",)
    records_key = "messages"
    balance_key = "balance"
    timestamp_key = "delivered_at"
    sent_statuses = frozenset({"queued", "sent"})
    failed_statuses = frozenset({"failed"})

    def is_success(self, raw: Mapping[str, Any]) -> bool:
        return raw.get("success") is True

    def status_records(self, raw: Mapping[str, Any]) -> List[Dict[str, Any]]:
        # Single lookups come back as one "message" object
        single = raw.get("message")
        if isinstance(single, dict):
            return [single]
        return self.records(raw)

    def currency(self, raw: Mapping[str, Any]) -> str:
        value = raw.get("currency")
        return value if isinstance(value, str) and value else DEFAULT_CURRENCY

    def format_balance(self, balance: float, currency: str) -> str:
        return f"{currency} {balance:.2f}"


_CONTRACTS: Dict[ContractVariant, ResponseContract] = {
    ContractVariant.RESULTS: ResultsContract(),
    ContractVariant.MESSAGES: MessagesContract(),
}


def get_contract(variant: ContractVariant | str) -> ResponseContract:
    """Return the contract for `variant` (enum member or its string value)."""
    try:
        return _CONTRACTS[ContractVariant(variant)]
    except ValueError as exc:
        raise KeyError(f"Unknown contract variant: {variant}") from exc
