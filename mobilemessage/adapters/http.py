from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

from mobilemessage.version import __version__
from mobilemessage.errors import (
    ApiError,
    AuthenticationError,
    InsufficientCreditsError,
    InvalidRequestError,
    NetworkError,
    ParseError,
    RateLimitError,
    ServerError,
)
from mobilemessage.types import Transport

if TYPE_CHECKING:
    from mobilemessage.config import Configuration

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.mobilemessage.com.au/v1/"


class HttpTransport(Transport):
    """Live transport for the Mobile Message REST API.

    Notes:
    - Authentication: HTTP Basic with the account username and password.
    - Bodies are JSON in both directions.
    - One short-lived `httpx.Client` per request; nothing is pooled.
    - Non-2xx statuses and httpx failures are mapped onto
      `mobilemessage.errors`; httpx exceptions never escape.
    """

    def __init__(
        self,
        username: str,
        password: str,
        *,
        base_url: str = API_BASE_URL,
        open_timeout: float = 30,
        read_timeout: float = 60,
    ) -> None:
        self.username = username
        self.password = password
        self.base_url = base_url
        self.open_timeout = open_timeout
        self.read_timeout = read_timeout

    @classmethod
    def from_config(cls, config: "Configuration") -> "HttpTransport":
        return cls(
            config.username or "",
            config.password or "",
            base_url=config.base_url,
            open_timeout=config.open_timeout,
            read_timeout=config.read_timeout,
        )

    def endpoint(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": f"mobilemessage-python/{__version__}",
        }

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.read_timeout, connect=self.open_timeout)

    # --- Verbs ---
    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._request("GET", path, params=params)

    def post(self, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._request("POST", path, body=body if body is not None else {})

    def put(self, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._request("PUT", path, body=body if body is not None else {})

    def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._request("DELETE", path, params=params)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = self.endpoint(path)
        try:
            with httpx.Client(timeout=self._timeout()) as client:
                response = client.request(
                    method,
                    url,
                    params=params or None,
                    json=body,
                    headers=self._headers(),
                    auth=(self.username, self.password),
                )
        except httpx.TimeoutException as e:
            raise NetworkError("Request timeout", original_error=e) from e
        except httpx.RequestError as e:
            raise NetworkError(f"Connection failed: {e}", original_error=e) from e

        logger.debug(
            "api response",
            extra={"method": method, "path": path, "status": response.status_code},
        )
        return self._handle_response(response)

    # --- Status mapping ---
    def _handle_response(self, response: httpx.Response) -> Dict[str, Any]:
        code = response.status_code
        if 200 <= code < 300:
            return self._parse_json(response)
        if code == 401:
            raise AuthenticationError(
                "Authentication failed: Invalid username or password", response=response
            )
        if code == 429:
            raise RateLimitError(
                "Rate limit exceeded",
                response=response,
                retry_after=_retry_after(response),
            )
        if 400 <= code < 500:
            error = self._error_body(response)
            message = error.get("message") or f"Client error: {code}"
            if code == 402 or "insufficient credit" in str(message).lower():
                raise InsufficientCreditsError(str(message), response=response)
            raise InvalidRequestError(str(message), response=response, field=error.get("field"))
        if 500 <= code < 600:
            raise ServerError(f"Server error: {code}", response=response, status_code=code)
        raise ApiError(f"Unexpected response: {code}", response=response, status_code=code)

    def _parse_json(self, response: httpx.Response) -> Dict[str, Any]:
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise ParseError("Failed to parse JSON response", response=response.text) from e
        if not isinstance(data, dict):
            raise ParseError("Expected a JSON object in API response", response=response.text)
        return data

    def _error_body(self, response: httpx.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        if not isinstance(data, dict):
            return {}
        error = data.get("error")
        if isinstance(error, dict):
            return error
        if isinstance(error, str):
            return {"message": error}
        return {}


def _retry_after(response: httpx.Response) -> Optional[int]:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
