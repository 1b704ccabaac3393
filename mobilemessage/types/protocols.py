from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple

from .enums import ContractVariant, MessageOutcome
from .messages import OutboundSms
from .results import SendResult, StatusRecord


class Transport(Protocol):
    """Protocol for the HTTP layer beneath the client.

    Implementations perform one authenticated call per method invocation and
    either return the decoded JSON body or raise one of the errors in
    `mobilemessage.errors`. `HttpTransport` talks to the live API;
    `SandboxTransport` answers from memory.

    Minimal example:
        >>> from typing import Any, Dict, Optional
        >>> class EchoTransport(Transport):
        ...     def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...         return {"status": "complete", "path": path}
        ...     def post(self, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...         return {"status": "complete", "results": []}
        ...     def put(self, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...         return {}
        ...     def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...         return {}
    """

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...

    def post(self, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...

    def put(self, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...

    def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...


class ResponseContract(Protocol):
    """Protocol for one wire-contract generation of the API.

    A contract knows where each contract-specific fact lives in a raw
    response and how to spell an outbound message. Response wrappers ask the
    contract instead of reading keys themselves, so the accessor names stay
    the same whichever contract a deployment speaks.
    """

    variant: ContractVariant
    sender_field: str
    body_field: str
    status_lookup_keys: Tuple[str, ...]

    def is_success(self, raw: Mapping[str, Any]) -> bool:
        """Return True when the response carries this contract's success signal."""
        ...

    def records(self, raw: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """Per-message records of a send response, never None."""
        ...

    def outcome(self, status: Any) -> MessageOutcome:
        ...

    def total_cost(self, raw: Mapping[str, Any]) -> float:
        ...

    def to_send_result(self, record: Mapping[str, Any]) -> SendResult:
        ...

    def status_records(self, raw: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """Records of a status lookup response, never None."""
        ...

    def to_status_record(self, record: Mapping[str, Any]) -> StatusRecord:
        ...

    def balance(self, raw: Mapping[str, Any]) -> float:
        ...

    def currency(self, raw: Mapping[str, Any]) -> str:
        ...

    def format_balance(self, balance: float, currency: str) -> str:
        ...

    def build_send_body(
        self, messages: Sequence[OutboundSms], enable_unicode: bool = False
    ) -> Dict[str, Any]:
        """Request body for POST /messages."""
        ...
