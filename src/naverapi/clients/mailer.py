"""
Cloud Outbound Mailer Client
============================

REST client for the Naver Cloud Outbound Mailer API.

Example:
    >>> from naverapi.clients.mailer import CloudOutboundMailerClient
    >>> from naverapi.models.mailer import CreateMailRequest, File, Recipient
    >>>
    >>> client = CloudOutboundMailerClient("access-key", "secret-key")
    >>> uploaded = client.create_files([File.from_path("report.pdf")])
    >>> client.create_mail(CreateMailRequest(
    ...     sender_address="no-reply@example.com",
    ...     sender_name="Example",
    ...     title="Monthly report",
    ...     body="<p>See attachment.</p>",
    ...     recipients=[Recipient(address="someone@example.com", name="Someone")],
    ...     attach_file_ids=uploaded.file_ids,
    ... ))
"""

from typing import Optional, Sequence

import requests

from naverapi.core.http import Clock
from naverapi.core.http.client import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from naverapi.core.logger import get_logger
from naverapi.models.mailer import (
    ENDPOINT_FILES,
    ENDPOINT_MAILS,
    FILES_FIELD_NAME,
    MAILER_API_URL,
    CreateFileResponse,
    CreateMailRequest,
    CreateMailResponse,
    File,
)

from .base import GatewayClient

logger = get_logger(__name__)

# Both endpoints answer 201 Created on success
EXPECTED_STATUS = 201


class CloudOutboundMailerClient(GatewayClient):
    """
    Client for the Cloud Outbound Mailer API.

    Args:
        access_key: Access key (from the portal or a sub account).
        secret_key: Secret key paired with the access key.
        session: Optional requests session. A new one is used if omitted.
        base_url: API base URL (default: https://mail.apigw.ntruss.com).
        clock: Time source for request timestamps.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        session: Optional[requests.Session] = None,
        base_url: str = MAILER_API_URL,
        clock: Optional[Clock] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        super().__init__(
            access_key,
            secret_key,
            base_url,
            session=session,
            clock=clock,
            timeout=timeout,
            user_agent=user_agent,
        )

    def create_mail(self, request: CreateMailRequest) -> CreateMailResponse:
        """
        Send a createMail request.

        Args:
            request: Mail to create.

        Returns:
            The decoded response, with the request id and recipient count.

        Raises:
            APIStatusError: If the API does not answer 201 Created.
            ResponseDecodeError: If the response body is not JSON.
            TransportError: If the request could not be performed.
        """
        headers = self._signed_headers("POST", ENDPOINT_MAILS)
        response = self.http.json_request("POST", ENDPOINT_MAILS, request.to_payload(), headers)
        self._check_status(response, EXPECTED_STATUS)

        result = CreateMailResponse.from_api_response(self._decode_object(response))
        logger.debug(f"Mail request {result.request_id} created for {result.count} recipient(s)")
        return result

    def create_files(self, files: Sequence[File]) -> CreateFileResponse:
        """
        Upload files to attach to mails later.

        Every file is sent as one part of a multipart/form-data body under the
        ``fileList`` field.

        Args:
            files: Files to upload.

        Returns:
            The decoded response, with the id of every uploaded file.

        Raises:
            ValueError: If no file is given.
            APIStatusError: If the API does not answer 201 Created.
            ResponseDecodeError: If the response body is not JSON.
            TransportError: If the request could not be performed.
        """
        if not files:
            raise ValueError("at least one file is required")

        headers = self._signed_headers("POST", ENDPOINT_FILES)
        response = self.http.multipart_request(
            "POST",
            ENDPOINT_FILES,
            [(f.name, f.content) for f in files],
            FILES_FIELD_NAME,
            headers,
        )
        self._check_status(response, EXPECTED_STATUS)

        result = CreateFileResponse.from_api_response(self._decode_object(response))
        logger.debug(f"Uploaded {len(result.files)} file(s) under {result.temp_request_id}")
        return result
