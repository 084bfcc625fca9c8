"""
HTTP Client Utilities
=====================

Provides the common HTTP client functionality shared by the Naver Cloud
API clients.

Features:
- Thin wrapper around a ``requests.Session`` with a default timeout
- Compact JSON request bodies with the right Content-Type
- multipart/form-data request bodies for file uploads
- Uniform wrapping of transport and JSON decoding failures
- An injectable clock used to timestamp signed requests
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple

import requests

from naverapi import __version__
from naverapi.core.exceptions import ResponseDecodeError, TransportError
from naverapi.core.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30
DEFAULT_USER_AGENT = f"naverapi/{__version__}"

# (file name, content) pairs
FilePart = Tuple[str, bytes]


class Clock(Protocol):
    """Source of the current time used to timestamp signed requests."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Clock backed by the system time, always timezone-aware (UTC)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def encode_json(body: Any) -> bytes:
    """
    Serialize a request body the way the API gateway expects it.

    The output is compact (no whitespace after separators) and keeps
    non-ASCII characters as UTF-8 rather than escaping them.
    """
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class APIClient:
    """
    HTTP client with timeout and error handling.

    Provides a unified interface for building and sending API requests.
    Every request is prepared through the session (so session-level headers
    and adapters apply) and then sent with ``session.send``.

    Args:
        base_url: Base URL which prefixes every endpoint path.
        session: Optional ``requests.Session`` to use. When omitted, a new
            session is created and owned (closed) by this client.
        timeout: Request timeout in seconds (default: 30).
        user_agent: User-Agent header value.

    Example:
        >>> client = APIClient(base_url="https://mail.apigw.ntruss.com")
        >>> response = client.json_request("POST", "/api/v1/mails", {"title": "hi"})
    """

    def __init__(
        self,
        base_url: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def url_for(self, endpoint: str) -> str:
        """Join the base URL and an endpoint path."""
        if not self.base_url:
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _headers(self, headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
        merged = {"User-Agent": self.user_agent}
        if headers:
            merged.update(headers)
        return merged

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[bytes] = None,
        files: Optional[List[Tuple[str, Tuple[str, bytes, str]]]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """
        Prepare and send a request.

        Args:
            method: HTTP method.
            endpoint: API endpoint (appended to base_url).
            params: Query parameters.
            data: Raw request body.
            files: Multipart file fields, in ``requests`` format.
            headers: Extra request headers.

        Returns:
            The raw ``requests.Response``; status codes are not checked here.

        Raises:
            TransportError: If the request could not be performed.
        """
        request = requests.Request(
            method=method.upper(),
            url=self.url_for(endpoint),
            params=params,
            data=data,
            files=files,
            headers=self._headers(headers),
        )
        prepared = self.session.prepare_request(request)

        logger.debug(f"{prepared.method} {prepared.url}")
        try:
            response = self.session.send(prepared, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"could not perform the HTTP request: {e}") from e
        logger.debug(f"{prepared.method} {prepared.path_url} -> {response.status_code}")

        return response

    def get(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Make a GET request with a query string."""
        return self.request("GET", endpoint, params=params, headers=headers)

    def json_request(
        self,
        method: str,
        endpoint: str,
        body: Any,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """
        Make a request carrying a JSON body.

        ``Content-Type: application/json`` is set whenever a body is given.
        """
        merged: Dict[str, str] = dict(headers or {})
        data = None
        if body is not None:
            data = encode_json(body)
            merged["Content-Type"] = "application/json"
        return self.request(method, endpoint, data=data, headers=merged)

    def multipart_request(
        self,
        method: str,
        endpoint: str,
        files: Sequence[FilePart],
        field_name: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """
        Make a request carrying a multipart/form-data body.

        Every file becomes one part of the form under ``field_name``, with the
        file name as the part's filename. The Content-Type header, including
        the multipart boundary, is generated by ``requests``.
        """
        parts = [
            (field_name, (name, content, "application/octet-stream"))
            for name, content in files
        ]
        return self.request(method, endpoint, files=parts, headers=headers)

    @staticmethod
    def decode_json(response: requests.Response) -> Any:
        """
        Decode a response body as JSON.

        Raises:
            ResponseDecodeError: If the body is not valid JSON.
        """
        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"could not decode response body: {e}", body=response.text
            ) from e

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
