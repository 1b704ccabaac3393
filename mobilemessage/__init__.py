"""Python client for the Mobile Message SMS API.

Usage:
    import mobilemessage

    client = mobilemessage.sms(username="user", password="secret", default_from="MyBrand")
    response = client.send_sms(to="0412345678", message="Hello")
    if response.all_successful:
        print(response.first_message_id)
"""

from typing import Any, Optional

from .client import MAX_BULK_MESSAGES, Client
from .config import Configuration
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    InsufficientCreditsError,
    InvalidRequestError,
    MobileMessageError,
    NetworkError,
    ParseError,
    RateLimitError,
    ServerError,
    TrackingTimeoutError,
    ValidationError,
)
from .logging_config import configure_logging
from .responses import (
    BalanceResponse,
    BaseResponse,
    MessageStatusResponse,
    ResponseCollection,
    SendSmsResponse,
)
from .types import (
    ContractVariant,
    InboundMessage,
    OutboundSms,
    ResponseFormat,
    StatusUpdate,
)
from .version import __version__
from .webhooks import parse_webhook, verify_webhook_signature


def sms(username: Optional[str] = None, password: Optional[str] = None, **options: Any) -> Client:
    """Create a client; responses are normalized wrappers unless configured otherwise."""
    return Client(username=username, password=password, **options)


def enhanced_sms(username: Optional[str] = None, password: Optional[str] = None, **options: Any) -> Client:
    options["response_format"] = ResponseFormat.ENHANCED
    return sms(username, password, **options)


def raw_sms(username: Optional[str] = None, password: Optional[str] = None, **options: Any) -> Client:
    """Create a client that returns decoded JSON dicts untouched."""
    options["response_format"] = ResponseFormat.RAW
    return sms(username, password, **options)


__all__ = [
    "__version__",
    "sms",
    "enhanced_sms",
    "raw_sms",
    "configure_logging",
    "Client",
    "Configuration",
    "MAX_BULK_MESSAGES",
    "ContractVariant",
    "ResponseFormat",
    "OutboundSms",
    "InboundMessage",
    "StatusUpdate",
    "BaseResponse",
    "SendSmsResponse",
    "MessageStatusResponse",
    "BalanceResponse",
    "ResponseCollection",
    "parse_webhook",
    "verify_webhook_signature",
    "MobileMessageError",
    "ValidationError",
    "ConfigurationError",
    "AuthenticationError",
    "InvalidRequestError",
    "InsufficientCreditsError",
    "RateLimitError",
    "ServerError",
    "NetworkError",
    "ParseError",
    "TrackingTimeoutError",
    "ApiError",
]
