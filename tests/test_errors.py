from __future__ import annotations

import pytest

from mobilemessage import (
    ApiError,
    AuthenticationError,
    MobileMessageError,
    NetworkError,
    ParseError,
    TrackingTimeoutError,
    ValidationError,
)


def test_errors_share_a_base() -> None:
    for cls in (AuthenticationError, NetworkError, ParseError, TrackingTimeoutError, ApiError):
        assert issubclass(cls, MobileMessageError)
    assert issubclass(ValidationError, ValueError)


def test_default_and_custom_messages() -> None:
    assert AuthenticationError().message == "Authentication failed"
    assert str(ParseError("bad body", response="{")) == "bad body"
    assert ParseError(response="{").response == "{"


def test_network_error_keeps_cause() -> None:
    cause = OSError("refused")

    assert NetworkError(original_error=cause).original_error is cause


@pytest.mark.parametrize(
    "kwargs, message, flags, delay",
    [
        ({"status_code": 401}, None, {"is_authentication_error"}, 10),
        ({"error_code": "AUTH_FAILED"}, None, {"is_authentication_error"}, 10),
        ({"status_code": 429}, None, {"is_rate_limited", "is_retryable"}, 60),
        ({"status_code": 502}, None, {"is_server_error", "is_retryable"}, 30),
        ({"status_code": 400}, None, {"is_invalid_request"}, 10),
        (
            {"error_code": "INVALID_NUMBER"},
            None,
            {"is_invalid_number", "is_invalid_request"},
            10,
        ),
        ({}, "Insufficient credits on account", {"is_insufficient_credits"}, 10),
        ({}, "Invalid number supplied", {"is_invalid_number"}, 10),
    ],
)
def test_api_error_classification(kwargs, message, flags, delay) -> None:  # type: ignore[no-untyped-def]
    error = ApiError(message, **kwargs)
    all_flags = {
        "is_authentication_error",
        "is_invalid_number",
        "is_insufficient_credits",
        "is_rate_limited",
        "is_server_error",
        "is_invalid_request",
        "is_retryable",
    }

    assert {name for name in all_flags if getattr(error, name)} == flags
    assert error.suggested_retry_delay == delay
