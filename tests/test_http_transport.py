from __future__ import annotations

import base64
import json

import httpx
import pytest
import respx

from mobilemessage import (
    ApiError,
    AuthenticationError,
    Client,
    InsufficientCreditsError,
    InvalidRequestError,
    NetworkError,
    ParseError,
    RateLimitError,
    ServerError,
    __version__,
)
from mobilemessage.adapters import HttpTransport
from tests.fixtures import api_responses as api

MESSAGES_URL = "https://api.mobilemessage.com.au/v1/messages"
ACCOUNT_URL = "https://api.mobilemessage.com.au/v1/account"


@pytest.fixture()
def transport() -> HttpTransport:
    return HttpTransport("test_user", "test_password")


def test_endpoint_joins_base_url() -> None:
    assert HttpTransport("u", "p", base_url="https://example.test/v2").endpoint("/account") == (
        "https://example.test/v2/account"
    )


@respx.mock
def test_post_sends_json_with_basic_auth(transport: HttpTransport) -> None:
    route = respx.post(MESSAGES_URL).mock(
        return_value=httpx.Response(200, json=api.results_send())
    )

    data = transport.post("messages", {"messages": [{"to": "0412345678"}]})

    assert data["status"] == "complete"
    request = route.calls.last.request
    expected = base64.b64encode(b"test_user:test_password").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"
    assert request.headers["User-Agent"] == f"mobilemessage-python/{__version__}"
    assert request.headers["Accept"] == "application/json"
    assert json.loads(request.content.decode()) == {"messages": [{"to": "0412345678"}]}


@respx.mock
def test_get_sends_query_params(transport: HttpTransport) -> None:
    route = respx.get(MESSAGES_URL).mock(
        return_value=httpx.Response(200, json=api.results_status())
    )

    transport.get("messages", {"custom_ref": "tracking001"})

    assert route.calls.last.request.url.params["custom_ref"] == "tracking001"


@respx.mock
def test_empty_body_is_empty_dict(transport: HttpTransport) -> None:
    respx.delete(MESSAGES_URL).mock(return_value=httpx.Response(204))

    assert transport.delete("messages") == {}


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=["not", "an", "object"]),
    ],
)
@respx.mock
def test_unparseable_success_body(transport: HttpTransport, response: httpx.Response) -> None:
    respx.get(ACCOUNT_URL).mock(return_value=response)

    with pytest.raises(ParseError) as excinfo:
        transport.get("account")
    assert excinfo.value.response == response.text


@respx.mock
def test_401_is_authentication_error(transport: HttpTransport) -> None:
    respx.get(ACCOUNT_URL).mock(return_value=httpx.Response(401))

    with pytest.raises(AuthenticationError, match="Invalid username or password"):
        transport.get("account")


@respx.mock
def test_429_carries_retry_after(transport: HttpTransport) -> None:
    respx.get(ACCOUNT_URL).mock(
        return_value=httpx.Response(429, headers={"Retry-After": "17"})
    )

    with pytest.raises(RateLimitError) as excinfo:
        transport.get("account")
    assert excinfo.value.retry_after == 17
    assert excinfo.value.suggested_retry_delay == 17


@respx.mock
def test_429_without_header_suggests_default_delay(transport: HttpTransport) -> None:
    respx.get(ACCOUNT_URL).mock(return_value=httpx.Response(429))

    with pytest.raises(RateLimitError) as excinfo:
        transport.get("account")
    assert excinfo.value.retry_after is None
    assert excinfo.value.suggested_retry_delay == 60


@respx.mock
def test_400_is_invalid_request_with_field(transport: HttpTransport) -> None:
    respx.post(MESSAGES_URL).mock(
        return_value=httpx.Response(
            400, json={"error": {"message": "Invalid phone number", "field": "to"}}
        )
    )

    with pytest.raises(InvalidRequestError) as excinfo:
        transport.post("messages", {})
    assert excinfo.value.message == "Invalid phone number"
    assert excinfo.value.field == "to"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(402, json={"error": "Payment required"}),
        httpx.Response(400, json={"error": {"message": "Insufficient credits for send"}}),
    ],
)
@respx.mock
def test_insufficient_credits(transport: HttpTransport, response: httpx.Response) -> None:
    respx.post(MESSAGES_URL).mock(return_value=response)

    with pytest.raises(InsufficientCreditsError):
        transport.post("messages", {})


@respx.mock
def test_4xx_without_body_uses_generic_message(transport: HttpTransport) -> None:
    respx.get(ACCOUNT_URL).mock(return_value=httpx.Response(404, text="nope"))

    with pytest.raises(InvalidRequestError, match="Client error: 404"):
        transport.get("account")


@respx.mock
def test_5xx_is_server_error(transport: HttpTransport) -> None:
    respx.get(ACCOUNT_URL).mock(return_value=httpx.Response(503))

    with pytest.raises(ServerError) as excinfo:
        transport.get("account")
    assert excinfo.value.status_code == 503


@respx.mock
def test_unexpected_status_is_api_error(transport: HttpTransport) -> None:
    respx.get(ACCOUNT_URL).mock(return_value=httpx.Response(302))

    with pytest.raises(ApiError) as excinfo:
        transport.get("account")
    assert excinfo.value.status_code == 302


@respx.mock
def test_timeout_is_network_error(transport: HttpTransport) -> None:
    respx.get(ACCOUNT_URL).mock(side_effect=httpx.ConnectTimeout("timed out"))

    with pytest.raises(NetworkError, match="Request timeout") as excinfo:
        transport.get("account")
    assert isinstance(excinfo.value.original_error, httpx.ConnectTimeout)


@respx.mock
def test_connection_failure_is_network_error(transport: HttpTransport) -> None:
    respx.get(ACCOUNT_URL).mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(NetworkError, match="Connection failed"):
        transport.get("account")


@respx.mock
def test_client_retries_server_errors_over_http() -> None:
    route = respx.get(ACCOUNT_URL).mock(
        side_effect=[httpx.Response(500), httpx.Response(200, json=api.results_balance(25))]
    )
    sleeps: list[float] = []
    client = Client(username="test_user", password="test_password", sleep=sleeps.append)

    assert client.get_balance().balance == 25
    assert route.call_count == 2
    assert len(sleeps) == 1
