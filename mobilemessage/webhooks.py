"""Inbound webhook parsing and signature verification.

The library never serves HTTP; integrators hand the raw request body to
`parse_webhook` and the signature header to `verify_webhook_signature`.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
from typing import Any, Mapping, Optional, Union

from mobilemessage.errors import ParseError
from mobilemessage.types import InboundMessage, StatusUpdate, WebhookEvent

logger = logging.getLogger(__name__)

Payload = Union[str, bytes, bytearray, Mapping[str, Any]]


def _decode(payload: Payload) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload
    if isinstance(payload, (bytes, bytearray)):
        try:
            text = bytes(payload).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError("Failed to parse webhook payload", response=payload) from e
    elif isinstance(payload, str):
        text = payload
    else:
        raise ParseError("Unsupported webhook payload type", response=payload)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError("Failed to parse webhook payload", response=payload) from e
    if not isinstance(data, dict):
        raise ParseError("Webhook payload must be a JSON object", response=payload)
    return data


def parse_webhook(payload: Payload) -> WebhookEvent:
    """Turn a webhook body into an `InboundMessage` or a `StatusUpdate`.

    A ``type`` field marks an inbound message, a ``status`` field a delivery
    receipt. Payloads with neither are treated as inbound messages, which is
    logged because it can hide a malformed body.

    Field values of an unexpected type never fail the parse: scalars are
    read as text and anything else as missing.

    Raises:
        ParseError: the body is not valid JSON or not a JSON object.
    """
    data = dict(_decode(payload))

    if data.get("type") is not None:
        return InboundMessage.from_payload(data)
    if data.get("status") is not None:
        return StatusUpdate.from_payload(data)
    logger.warning(
        "webhook payload has neither type nor status; treating as inbound message",
        extra={"fields": sorted(data, key=str)},
    )
    return InboundMessage.from_payload(data)


def compute_signature(payload: Union[str, bytes], secret: Union[str, bytes]) -> str:
    """Hex HMAC-SHA256 of `payload` keyed by `secret`."""
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    if isinstance(secret, str):
        secret = secret.encode("utf-8")
    return hmac.new(secret, payload, hashlib.sha256).hexdigest()


def verify_webhook_signature(
    payload: Union[str, bytes], signature: Optional[str], secret: Union[str, bytes]
) -> bool:
    """Check `signature` against the HMAC-SHA256 of the raw payload.

    The comparison is constant time for equal-length inputs. A missing
    signature or one of the wrong length is a failed check, not an error.
    """
    if not signature:
        return False
    expected = compute_signature(payload, secret)
    if len(signature) != len(expected):
        return False
    try:
        return hmac.compare_digest(expected.encode("ascii"), signature.encode("ascii"))
    except UnicodeEncodeError:
        return False
