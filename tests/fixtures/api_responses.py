from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence


# --- Results contract (status == "complete") ---
def results_send(
    *, statuses: Sequence[str] = ("success",), total_cost: Optional[float] = None
) -> Dict[str, Any]:
    results: List[Dict[str, Any]] = [
        {
            "to": f"+6140000000{i}",
            "sender": "TestSender",
            "message": f"Message {i}",
            "custom_ref": f"ref_{i}",
            "status": status,
            "cost": 1,
            "message_id": f"msg_{i}",
        }
        for i, status in enumerate(statuses)
    ]
    return {
        "status": "complete",
        "total_cost": len(results) if total_cost is None else total_cost,
        "results": results,
    }


def results_status(*, status: str = "success", message_id: str = "msg_12345") -> Dict[str, Any]:
    return {
        "status": "complete",
        "results": [
            {
                "to": "+61400000000",
                "message": "Test message",
                "sender": "TestSender",
                "custom_ref": "tracking001",
                "status": status,
                "cost": 1,
                "message_id": message_id,
                "requested_at": "2024-05-01 10:30:00",
            }
        ],
    }


def results_balance(balance: Any = 1000) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"status": "complete"}
    if balance is not None:
        payload["credit_balance"] = balance
    return payload


# --- Messages contract (success: true) ---
def messages_send(*, statuses: Sequence[str] = ("queued",)) -> Dict[str, Any]:
    return {
        "success": True,
        "messages": [
            {
                "message_id": f"msg_{i}",
                "to": "+61400000000",
                "from": "TestSender",
                "body": "Test message",
                "status": status,
            }
            for i, status in enumerate(statuses)
        ],
    }


def messages_status(*, status: str = "delivered") -> Dict[str, Any]:
    return {
        "success": True,
        "message": {
            "message_id": "msg_12345",
            "to": "+61400000000",
            "from": "TestSender",
            "body": "Test message",
            "status": status,
            "delivered_at": "2024-05-01T10:31:00+00:00",
        },
    }


def messages_balance(balance: Any = 100.50) -> Dict[str, Any]:
    return {
        "success": True,
        "balance": balance,
        "currency": "AUD",
        "account_name": "Test Account",
    }


def error_response(*, message: str = "Error occurred", code: str = "ERROR") -> Dict[str, Any]:
    return {"success": False, "error": {"message": message, "code": code}}
