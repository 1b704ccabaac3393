from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class OutboundSms(BaseModel):
    """One outbound SMS, independent of the wire contract.

    Contracts translate this model to their own field names when building a
    request body (`sender`/`message` for the results contract, `from`/`body`
    for the messages contract). Both spellings are accepted on input, so a
    bulk list written for either contract validates.

    Anatomy:
    - to: recipient number, local or E.164
    - message: text body (``body`` accepted as an alias)
    - sender: sender ID; falls back to `Configuration.default_from`
    - custom_ref: caller-supplied tracking token echoed in status lookups
    - unicode: request UCS-2 encoding

    Example:
        >>> from mobilemessage.types import OutboundSms
        >>> OutboundSms(to="0412345678", message="Hi", sender="MyBrand")
        >>> OutboundSms.model_validate({"to": "0412345678", "body": "Hi"})
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    to: str
    message: str = Field(validation_alias=AliasChoices("message", "body"))
    sender: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("sender", "from")
    )
    custom_ref: Optional[str] = None
    unicode: bool = False

    @field_validator("to", "message")
    @classmethod
    def _require_text(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("must be a non-empty string")
        return v

    def with_sender(self, default_sender: Optional[str]) -> "OutboundSms":
        """Return a copy with the sender filled in from `default_sender` if unset."""
        if self.sender or not default_sender:
            return self
        return self.model_copy(update={"sender": default_sender})
