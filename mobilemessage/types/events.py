from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from mobilemessage.utils.timestamps import parse_timestamp


def _lenient_text(v: Any) -> Optional[str]:
    # Scalars become text; objects and arrays cannot be mapped
    if v is None or isinstance(v, str):
        return v
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (int, float)):
        return str(v)
    return None


class _WebhookModel(BaseModel):
    """Shared behaviour for webhook payload models.

    The decoded payload is kept verbatim so fields the models do not map stay
    reachable through `raw` / `to_dict()`.
    """

    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", coerce_numbers_to_str=True
    )

    received_at: Optional[datetime] = None

    _raw: Dict[str, Any] = PrivateAttr(default_factory=dict)

    @field_validator("received_at", mode="before")
    @classmethod
    def _lenient_timestamp(cls, v: Any) -> Optional[datetime]:
        return parse_timestamp(v)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]):
        # `event` is the model's own tag, never read from the wire
        fields = {key: value for key, value in data.items() if key != "event"}
        instance = cls.model_validate(fields)
        instance._raw = dict(data)
        return instance

    @property
    def raw(self) -> Dict[str, Any]:
        return self._raw

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._raw)


class InboundMessage(_WebhookModel):
    """Inbound SMS (or unsubscribe notice) delivered by webhook.

    The results contract posts ``sender``/``message``; the messages contract
    posts ``from``/``body``. Both are accepted.

    Example:
        >>> from mobilemessage.types import InboundMessage
        >>> msg = InboundMessage.from_payload({"type": "inbound", "from": "+61400000001", "body": "STOP"})
        >>> msg.sender, msg.is_inbound
        ('+61400000001', True)
    """

    event: Literal["inbound_message"] = "inbound_message"

    message_id: Optional[str] = None
    to: Optional[str] = None
    sender: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("sender", "from")
    )
    body: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("message", "body")
    )
    type: Optional[str] = None
    original_message_id: Optional[str] = None
    original_custom_ref: Optional[str] = None
    unicode: Optional[bool] = None

    @field_validator(
        "message_id",
        "to",
        "sender",
        "body",
        "type",
        "original_message_id",
        "original_custom_ref",
        mode="before",
    )
    @classmethod
    def _text(cls, v: Any) -> Optional[str]:
        return _lenient_text(v)

    @field_validator("unicode", mode="before")
    @classmethod
    def _strict_flag(cls, v: Any) -> Optional[bool]:
        # Only the JSON boolean counts
        return v if isinstance(v, bool) else None

    @property
    def from_(self) -> Optional[str]:
        return self.sender

    @property
    def is_inbound(self) -> bool:
        return self.type == "inbound"

    @property
    def is_unsubscribe(self) -> bool:
        return self.type == "unsubscribe"

    @property
    def is_unicode(self) -> bool:
        return self.unicode is True

    @property
    def is_reply(self) -> bool:
        return bool(self.original_message_id or self.original_custom_ref)


class StatusUpdate(_WebhookModel):
    """Delivery receipt for a previously sent message."""

    event: Literal["status_update"] = "status_update"

    message_id: Optional[str] = None
    custom_ref: Optional[str] = None
    to: Optional[str] = None
    sender: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("sender", "from")
    )
    body: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("message", "body")
    )
    status: Optional[str] = None

    @field_validator(
        "message_id", "custom_ref", "to", "sender", "body", "status", mode="before"
    )
    @classmethod
    def _text(cls, v: Any) -> Optional[str]:
        return _lenient_text(v)

    @property
    def is_delivered(self) -> bool:
        return self.status == "delivered"

    @property
    def is_failed(self) -> bool:
        return self.status == "failed"


# Result of `mobilemessage.webhooks.parse_webhook`; `event` is the tag
WebhookEvent = Annotated[
    Union[InboundMessage, StatusUpdate],
    Field(discriminator="event"),
]
