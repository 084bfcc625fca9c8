"""
SENS SMS Client
===============

REST client for Naver Cloud Platform SENS (Simple & Easy Notification
Service) SMS v2.

Example:
    >>> from naverapi.clients.sens import SENSClient
    >>> from naverapi.models.sens import Message, SendSMSRequest, SMSContentType, SMSType
    >>>
    >>> client = SENSClient("access-key", "secret-key", "ncp:sms:kr:123456789012:my-service")
    >>> client.send_sms(SendSMSRequest(
    ...     type=SMSType.SMS,
    ...     content_type=SMSContentType.COMM,
    ...     from_="0212345678",
    ...     content="Your code is 1234",
    ...     messages=[Message(to="01012345678")],
    ... ))
"""

from typing import Optional

import requests

from naverapi.core.exceptions import ConfigurationError, SendSMSFailedError
from naverapi.core.http import Clock
from naverapi.core.http.client import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from naverapi.core.logger import get_logger
from naverapi.models.sens import SENS_API_URL, SendSMSRequest, SendSMSResponse, messages_endpoint

from .base import GatewayClient

logger = get_logger(__name__)

# Send requests are answered with 202 Accepted
EXPECTED_STATUS = 202


class SENSClient(GatewayClient):
    """
    Client for the SENS SMS API.

    Args:
        access_key: Access key (from the portal or a sub account).
        secret_key: Secret key paired with the access key.
        service_id: Id of the SMS service, e.g. "ncp:sms:kr:123456789012:name".
        session: Optional requests session. A new one is used if omitted.
        base_url: API base URL (default: https://sens.apigw.ntruss.com).
        clock: Time source for request timestamps.
        timeout: Request timeout in seconds.

    Raises:
        ConfigurationError: If service_id is empty.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        service_id: str,
        session: Optional[requests.Session] = None,
        base_url: str = SENS_API_URL,
        clock: Optional[Clock] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        if not service_id:
            raise ConfigurationError("a SENS service id is required")
        super().__init__(
            access_key,
            secret_key,
            base_url,
            session=session,
            clock=clock,
            timeout=timeout,
            user_agent=user_agent,
        )
        self.service_id = service_id

    @property
    def messages_endpoint(self) -> str:
        return messages_endpoint(self.service_id)

    def send_sms(self, request: SendSMSRequest) -> SendSMSResponse:
        """
        Send SMS messages.

        Args:
            request: Messages to send.

        Returns:
            The decoded response.

        Raises:
            APIStatusError: If the API does not answer 202 Accepted.
            ResponseDecodeError: If the response body is not JSON.
            SendSMSFailedError: If the response's statusName is not "success".
            TransportError: If the request could not be performed.
        """
        endpoint = self.messages_endpoint
        headers = self._signed_headers("POST", endpoint)
        response = self.http.json_request("POST", endpoint, request.to_payload(), headers)
        self._check_status(response, EXPECTED_STATUS)

        result = SendSMSResponse.from_api_response(self._decode_object(response))
        if not result.succeeded:
            logger.warning(
                f"SMS request {result.request_id} returned status "
                f"{result.status_code} {result.status_name!r}"
            )
            raise SendSMSFailedError(result)

        logger.debug(f"SMS request {result.request_id} accepted for {len(request.messages)} message(s)")
        return result
