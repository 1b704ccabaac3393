from __future__ import annotations

import itertools
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from mobilemessage.contracts import get_contract
from mobilemessage.types import ContractVariant, Transport

if TYPE_CHECKING:
    from mobilemessage.config import Configuration

SANDBOX_BALANCE = 1000


class SandboxTransport(Transport):
    """In-memory transport answering with canned responses.

    Responses follow the configured contract's shape so consumer code can be
    exercised end to end without network access. Every call is appended to
    `calls` as ``(method, path, params_or_body)``.
    """

    def __init__(
        self,
        variant: ContractVariant = ContractVariant.RESULTS,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> None:
        self.variant = ContractVariant(variant)
        self.contract = get_contract(self.variant)
        self.username = username
        self.password = password
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []
        self._ids = itertools.count(1)

    @classmethod
    def from_config(cls, config: "Configuration") -> "SandboxTransport":
        return cls(config.contract, username=config.username, password=config.password)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._respond("GET", path, params or {})

    def post(self, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._respond("POST", path, body or {})

    def put(self, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._respond("PUT", path, body or {})

    def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._respond("DELETE", path, params or {})

    def _respond(self, method: str, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append((method, path, data))
        endpoint = path.strip("/")
        if endpoint == "messages" and method == "POST":
            return self._send_response(data)
        if endpoint == "messages" and method == "GET":
            return self._status_response(data)
        if endpoint == "account":
            return self._balance_response()
        return self._envelope({"message": "Sandbox response"})

    def _envelope(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        if self.variant is ContractVariant.MESSAGES:
            return {"success": True, **payload}
        return {"status": "complete", **payload}

    def _send_response(self, body: Dict[str, Any]) -> Dict[str, Any]:
        sender_field = self.contract.sender_field
        body_field = self.contract.body_field
        sent_status = "queued" if self.variant is ContractVariant.MESSAGES else "success"

        records = []
        for msg in body.get("messages") or []:
            records.append(
                {
                    "to": msg.get("to"),
                    sender_field: msg.get(sender_field),
                    body_field: msg.get(body_field),
                    "custom_ref": msg.get("custom_ref"),
                    "status": sent_status,
                    "cost": 1,
                    "message_id": f"sandbox_msg_{next(self._ids)}",
                    "encoding": "ucs2" if msg.get("unicode") else "gsm7",
                }
            )

        if self.variant is ContractVariant.MESSAGES:
            return {"success": True, "messages": records}
        return {"status": "complete", "total_cost": len(records), "results": records}

    def _status_response(self, params: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        record = {
            "message_id": params.get("message_id") or "sandbox_msg_12345",
            "to": "+61400000000",
            self.contract.sender_field: "TestSender",
            self.contract.body_field: "Test message",
            "custom_ref": params.get("custom_ref") or "tracking001",
            "cost": 1,
        }
        if self.variant is ContractVariant.MESSAGES:
            record.update(status="delivered", delivered_at=now)
            return {"success": True, "message": record}
        record.update(status="success", requested_at=now)
        return {"status": "complete", "results": [record]}

    def _balance_response(self) -> Dict[str, Any]:
        if self.variant is ContractVariant.MESSAGES:
            return {
                "success": True,
                "balance": SANDBOX_BALANCE,
                "currency": "AUD",
                "account_name": "Sandbox Account",
            }
        return {"status": "complete", "credit_balance": SANDBOX_BALANCE}
