from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Type, Union

from pydantic import ValidationError as PydanticValidationError

from mobilemessage.adapters.registry import TransportRegistry
from mobilemessage.config import Configuration
from mobilemessage.contracts import get_contract
from mobilemessage.errors import TrackingTimeoutError, ValidationError
from mobilemessage.responses import (
    BalanceResponse,
    BaseResponse,
    MessageStatusResponse,
    ResponseCollection,
    SendSmsResponse,
)
from mobilemessage.retry import RetryExecutor, RetryPolicy
from mobilemessage.types import OutboundSms, ResponseFormat, Transport, WebhookEvent
from mobilemessage.webhooks import Payload
from mobilemessage.webhooks import parse_webhook as _parse_webhook
from mobilemessage.webhooks import verify_webhook_signature as _verify_webhook_signature

logger = logging.getLogger(__name__)

# Capacity ceiling of a single POST /messages
MAX_BULK_MESSAGES = 100

MessageInput = Union[OutboundSms, Mapping[str, Any]]


class Client:
    """Synchronous client for the Mobile Message SMS API.

    Every call blocks until the API answers, including retry backoff and
    delivery tracking waits. A client holds only its immutable configuration
    and its own transport, so separate threads should use separate clients.

    Args:
        config: Base configuration; keyword `options` override its fields.
        username / password: Account credentials.
        transport: Injected transport. Defaults to the live HTTP transport, or
            the sandbox when `sandbox_mode` is set.
        sleep / clock: Blocking wait and monotonic clock used by retries and
            `track_delivery`.

    Example:
        >>> client = Client(username="user", password="secret", default_from="MyBrand")
        >>> client.send_sms(to="0412345678", message="Hello").first_message_id
    """

    def __init__(
        self,
        config: Optional[Configuration] = None,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        transport: Optional[Transport] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
        **options: Any,
    ) -> None:
        if username:
            options["username"] = username
        if password:
            options["password"] = password
        self.config = (config or Configuration()).with_options(**options)
        self.config.validate_required()

        self.contract = get_contract(self.config.contract)
        self.transport: Transport = transport or TransportRegistry.for_config(self.config)
        self._sleep = sleep
        self._clock = clock
        self._retry = RetryExecutor(RetryPolicy.from_config(self.config), sleep=sleep)

    # --- Plumbing ---
    def _call(self, operation: Callable[[], Dict[str, Any]]) -> Dict[str, Any]:
        return self._retry.run(operation)

    def _present(self, response: BaseResponse) -> Any:
        if self.config.response_format is ResponseFormat.RAW:
            return response.to_dict()
        return response

    def _wrap(self, response_cls: Type[BaseResponse], raw: Dict[str, Any]) -> Any:
        return self._present(response_cls(raw, self.contract))

    def _resolve_sender(self, sender: Optional[str]) -> str:
        resolved = sender or self.config.default_from
        if not resolved:
            raise ValidationError("sender (sender ID) is required")
        return resolved

    def _coerce_message(self, entry: MessageInput, idx: int) -> OutboundSms:
        if isinstance(entry, OutboundSms):
            message = entry
        elif isinstance(entry, Mapping):
            if not entry.get("to"):
                raise ValidationError(f"Message {idx} missing 'to' field")
            body_field = self.contract.body_field
            if not entry.get(body_field):
                raise ValidationError(f"Message {idx} missing '{body_field}' field")
            try:
                message = OutboundSms.model_validate(dict(entry))
            except PydanticValidationError as e:
                raise ValidationError(f"Message {idx} is invalid: {e}") from e
        else:
            raise ValidationError(f"Message {idx} must be a mapping or OutboundSms")

        message = message.with_sender(self.config.default_from)
        if not message.sender:
            raise ValidationError(f"Message {idx} missing 'sender' (sender ID)")
        return message

    def _validate_messages(self, messages: Sequence[MessageInput]) -> List[OutboundSms]:
        if not isinstance(messages, (list, tuple)):
            raise ValidationError("messages must be a list")
        if not messages:
            raise ValidationError("messages list cannot be empty")
        return [self._coerce_message(entry, idx) for idx, entry in enumerate(messages)]

    def _post_messages(self, messages: Sequence[OutboundSms], enable_unicode: bool) -> Dict[str, Any]:
        body = self.contract.build_send_body(messages, enable_unicode=enable_unicode)
        logger.debug("sending messages", extra={"count": len(messages)})
        return self._call(lambda: self.transport.post("messages", body))

    # --- Sending ---
    def send_sms(
        self,
        to: str,
        message: str,
        sender: Optional[str] = None,
        unicode: bool = False,
        custom_ref: Optional[str] = None,
    ) -> Any:
        """Send one SMS. Returns a `SendSmsResponse` (or the raw dict)."""
        resolved = self._resolve_sender(sender)
        try:
            outbound = OutboundSms(
                to=to, message=message, sender=resolved, unicode=unicode, custom_ref=custom_ref
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid message: {e}") from e
        raw = self._post_messages([outbound], enable_unicode=unicode)
        return self._wrap(SendSmsResponse, raw)

    def send_bulk(self, messages: Sequence[MessageInput], enable_unicode: bool = False) -> Any:
        """Send up to `MAX_BULK_MESSAGES` messages in one request.

        Entries are mappings (``to`` plus the contract's body field, with
        optional sender, custom_ref and unicode) or `OutboundSms` instances.
        Every entry is validated before anything is sent.
        """
        if isinstance(messages, (list, tuple)) and len(messages) > MAX_BULK_MESSAGES:
            raise ValidationError(
                f"messages list cannot exceed {MAX_BULK_MESSAGES} messages"
            )
        outbound = self._validate_messages(messages)
        raw = self._post_messages(outbound, enable_unicode=enable_unicode)
        return self._wrap(SendSmsResponse, raw)

    def broadcast(
        self,
        to_numbers: Sequence[str],
        message: str,
        sender: Optional[str] = None,
        unicode: bool = False,
        custom_ref: Optional[str] = None,
    ) -> Any:
        """Send the same text to every number in `to_numbers`."""
        resolved = self._resolve_sender(sender)
        if not isinstance(to_numbers, (list, tuple)):
            raise ValidationError("to_numbers must be a list")
        if not to_numbers:
            raise ValidationError("to_numbers list cannot be empty")

        entries: List[MessageInput] = []
        for number in to_numbers:
            entry: Dict[str, Any] = {
                "to": number,
                "sender": resolved,
                self.contract.body_field: message,
                "unicode": unicode,
            }
            if custom_ref:
                entry["custom_ref"] = custom_ref
            entries.append(entry)
        return self.send_bulk(entries, enable_unicode=unicode)

    def send_batches(
        self,
        messages: Sequence[MessageInput],
        batch_size: int = MAX_BULK_MESSAGES,
        enable_unicode: bool = False,
    ) -> ResponseCollection:
        """Send an arbitrarily long message list as consecutive bulk requests.

        All entries are validated before the first request. The returned
        collection always holds normalized responses, whatever the
        configured response format.
        """
        if not 1 <= batch_size <= MAX_BULK_MESSAGES:
            raise ValidationError(f"batch_size must be between 1 and {MAX_BULK_MESSAGES}")
        outbound = self._validate_messages(messages)

        collection = ResponseCollection()
        for start in range(0, len(outbound), batch_size):
            batch = outbound[start : start + batch_size]
            raw = self._post_messages(batch, enable_unicode=enable_unicode)
            collection.add(SendSmsResponse(raw, self.contract))
        logger.info(
            "batch send finished",
            extra={"batches": collection.total_count, "success_rate": collection.success_rate},
        )
        return collection

    # --- Status & tracking ---
    def _fetch_status(
        self, message_id: Optional[str] = None, custom_ref: Optional[str] = None
    ) -> MessageStatusResponse:
        keys = self.contract.status_lookup_keys
        params: Dict[str, Any] = {}
        if message_id and "message_id" in keys:
            params["message_id"] = message_id
        if custom_ref and "custom_ref" in keys:
            params["custom_ref"] = custom_ref
        if not params:
            raise ValidationError(f"{' or '.join(keys)} is required")

        raw = self._call(lambda: self.transport.get("messages", params))
        return MessageStatusResponse(raw, self.contract)

    def get_message_status(
        self, message_id: Optional[str] = None, custom_ref: Optional[str] = None
    ) -> Any:
        """Look up delivery status by message id or custom reference.

        With the results contract, `custom_ref` accepts ``%`` wildcards.
        """
        return self._present(self._fetch_status(message_id=message_id, custom_ref=custom_ref))

    def track_delivery(
        self, message_id: str, timeout: float = 300, poll_interval: float = 30
    ) -> Any:
        """Poll the status of one message until it is delivered or failed.

        Blocks the calling thread between polls. Raises
        `TrackingTimeoutError` once more than `timeout` seconds have passed
        without a terminal status. Not meant for tracking many messages at once.
        """
        if not message_id:
            raise ValidationError("message_id is required")

        started = self._clock()
        while True:
            response = self._fetch_status(message_id=message_id)
            if response.is_terminal:
                return self._present(response)

            elapsed = self._clock() - started
            if elapsed > timeout:
                raise TrackingTimeoutError(
                    f"Tracking timeout after {timeout} seconds",
                    message_id=message_id,
                    timeout=timeout,
                    last_status=response.status,
                )
            logger.debug(
                "message not in a final state yet",
                extra={"message_id": message_id, "status": response.status},
            )
            self._sleep(poll_interval)

    # --- Account ---
    def get_balance(self) -> Any:
        raw = self._call(lambda: self.transport.get("account"))
        return self._wrap(BalanceResponse, raw)

    balance = get_balance

    def get_messages(self, *args: Any, **kwargs: Any) -> Any:
        """Not supported: the API has no polling endpoint for received messages."""
        raise NotImplementedError(
            "The Mobile Message API does not support polling for received messages. "
            "Configure webhooks in your account settings to receive inbound "
            "messages and delivery receipts, then use parse_webhook()."
        )

    # --- Webhooks ---
    def parse_webhook(self, payload: Payload) -> WebhookEvent:
        return _parse_webhook(payload)

    def verify_webhook_signature(
        self, payload: Union[str, bytes], signature: Optional[str], secret: Union[str, bytes]
    ) -> bool:
        return _verify_webhook_signature(payload, signature, secret)
