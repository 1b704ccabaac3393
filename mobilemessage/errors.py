"""Exception taxonomy for the Mobile Message client.

Every error raised by this package derives from `MobileMessageError`, so
callers can catch the whole family in one place. Errors that originate from
an HTTP exchange keep the `httpx.Response` (or the offending payload) on
`response` for diagnostics.

Retry behaviour keys off these classes: only `RateLimitError` and
`ServerError` are retried by `mobilemessage.retry.RetryExecutor`.
"""

from __future__ import annotations

from typing import Any, Optional


class MobileMessageError(Exception):
    """Base class for all Mobile Message errors."""

    default_message = "Mobile Message error"

    def __init__(self, message: Optional[str] = None, *, response: Any = None) -> None:
        super().__init__(message or self.default_message)
        self.response = response

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(MobileMessageError, ValueError):
    """A client-side precondition failed; no request was sent."""

    default_message = "Invalid arguments"


class ConfigurationError(ValidationError):
    """Required configuration is missing or malformed."""

    default_message = "Invalid configuration"


class AuthenticationError(MobileMessageError):
    default_message = "Authentication failed"


class InvalidRequestError(MobileMessageError):
    """The API rejected the request as malformed."""

    default_message = "Invalid request"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        response: Any = None,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message, response=response)
        self.field = field


class InsufficientCreditsError(MobileMessageError):
    default_message = "Insufficient credits"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        response: Any = None,
        required: Optional[float] = None,
        available: Optional[float] = None,
    ) -> None:
        super().__init__(message, response=response)
        self.required_credits = required
        self.available_credits = available


class RateLimitError(MobileMessageError):
    """HTTP 429. `retry_after` carries the server's Retry-After hint in seconds."""

    default_message = "Rate limit exceeded"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        response: Any = None,
        retry_after: Optional[int] = None,
    ) -> None:
        super().__init__(message, response=response)
        self.retry_after = retry_after

    @property
    def suggested_retry_delay(self) -> int:
        return self.retry_after if self.retry_after is not None else 60


class ServerError(MobileMessageError):
    default_message = "Server error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        response: Any = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, response=response)
        self.status_code = status_code


class NetworkError(MobileMessageError):
    """Connection-level failure (DNS, refused connection, timeout)."""

    default_message = "Network error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        original_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


class ParseError(MobileMessageError):
    """A response body or webhook payload was not valid JSON.

    `response` holds the offending payload as received.
    """

    default_message = "Failed to parse API response"


class TrackingTimeoutError(MobileMessageError):
    """`Client.track_delivery` ran out of time before a terminal status."""

    default_message = "Tracking timeout"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        message_id: Optional[str] = None,
        timeout: Optional[float] = None,
        last_status: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message_id = message_id
        self.timeout = timeout
        self.last_status = last_status


class ApiError(MobileMessageError):
    """Unexpected API response that does not fit a narrower class.

    The helpers classify the error from its status code and API error code so
    callers can decide what to do without matching on message text.
    """

    default_message = "API error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        response: Any = None,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, response=response)
        self.error_code = error_code
        self.status_code = status_code

    def _code_contains(self, needle: str) -> bool:
        return needle in str(self.error_code or "").lower()

    @property
    def is_authentication_error(self) -> bool:
        return self.status_code == 401 or self._code_contains("auth")

    @property
    def is_invalid_number(self) -> bool:
        return self._code_contains("number") or "invalid number" in self.message.lower()

    @property
    def is_insufficient_credits(self) -> bool:
        return self._code_contains("credit") or "insufficient credit" in self.message.lower()

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429 or self._code_contains("rate")

    @property
    def is_server_error(self) -> bool:
        return (self.status_code or 0) >= 500

    @property
    def is_invalid_request(self) -> bool:
        return self.status_code == 400 or self._code_contains("invalid")

    @property
    def is_retryable(self) -> bool:
        return self.is_rate_limited or self.is_server_error

    @property
    def suggested_retry_delay(self) -> int:
        if self.is_rate_limited:
            return 60
        if self.is_server_error:
            return 30
        return 10


__all__ = [
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
