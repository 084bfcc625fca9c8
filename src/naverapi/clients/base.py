"""
Base clients for the Naver Cloud APIs.

``BaseClient`` owns the HTTP plumbing shared by every client. Requests to
the APIs behind the Naver Cloud API gateway are further authenticated with
an access key and an HMAC-SHA256 signature of the method, path and
timestamp (see ``naverapi.core.http.signing``), which ``GatewayClient``
adds.
"""

from typing import Any, Dict, Optional

import requests

from naverapi.core.exceptions import APIStatusError, ResponseDecodeError
from naverapi.core.http import APIClient, Clock, SystemClock, ncloud_headers, timestamp_millis
from naverapi.core.http.client import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from naverapi.core.logger import get_logger

logger = get_logger(__name__)


class BaseClient:
    """
    Session, base URL and lifetime handling shared by the API clients.

    Attributes:
        http: Underlying APIClient.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.http = APIClient(
            base_url=base_url, session=session, timeout=timeout, user_agent=user_agent
        )

    @property
    def base_url(self) -> str:
        """Base URL which prefixes every request's URL path."""
        return self.http.base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self.http.base_url = value.rstrip("/")

    def _decode_object(self, response: requests.Response) -> Dict[str, Any]:
        """Decode a response body that must be a JSON object."""
        data = self.http.decode_json(response)
        if not isinstance(data, dict):
            raise ResponseDecodeError(
                f"expected a JSON object but got {type(data).__name__}", body=response.text
            )
        return data

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class GatewayClient(BaseClient):
    """
    Common plumbing of the signed API gateway clients.

    Attributes:
        access_key: Access key (from the portal or a sub account).
        secret_key: Secret key paired with the access key.
        clock: Provides the time used for the ``x-ncp-apigw-timestamp``
            header. Replace it to make signatures reproducible.
        http: Underlying APIClient.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        base_url: str,
        session: Optional[requests.Session] = None,
        clock: Optional[Clock] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        super().__init__(base_url, session=session, timeout=timeout, user_agent=user_agent)
        self.access_key = access_key
        self.secret_key = secret_key
        self.clock: Clock = clock or SystemClock()

    def _signed_headers(self, method: str, endpoint: str) -> Dict[str, str]:
        """Authentication headers for a request to ``endpoint``."""
        timestamp = timestamp_millis(self.clock.now())
        return ncloud_headers(method, endpoint, timestamp, self.access_key, self.secret_key)

    def _check_status(self, response: requests.Response, expected: int) -> None:
        """
        Raise APIStatusError unless the response has the expected status.

        The server's error payload is attached: decoded when it is valid
        JSON, as raw text otherwise.
        """
        if response.status_code == expected:
            return

        try:
            detail = response.json()
        except ValueError:
            detail = response.text or None

        logger.warning(f"{response.url} failed with status {response.status_code}")
        raise APIStatusError(response.status_code, response.reason or "", detail)
