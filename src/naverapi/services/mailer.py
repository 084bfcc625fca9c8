# services/mailer.py
"""
Service for sending mail through the Cloud Outbound Mailer.
"""

from typing import List, Optional, Sequence

from naverapi.clients.mailer import CloudOutboundMailerClient
from naverapi.core.exceptions import NaverAPIError
from naverapi.core.logger import get_logger
from naverapi.models.mailer import (
    CreateFileResponse,
    CreateMailRequest,
    CreateMailResponse,
    File,
    Recipient,
)

from .base import BaseService, ServiceResult

logger = get_logger(__name__)


class MailerService(BaseService):
    """
    Service for mail operations.

    Provides high-level methods for:
    - Uploading local files as attachments
    - Sending a mail to recipients, carbon copies and blind carbon copies

    Args:
        client: Configured CloudOutboundMailerClient.
        sender_address: Default sender address.
        sender_name: Default sender display name.
    """

    def __init__(
        self,
        client: CloudOutboundMailerClient,
        sender_address: Optional[str] = None,
        sender_name: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.client = client
        self.sender_address = sender_address
        self.sender_name = sender_name

    def send_mail(
        self,
        recipients: Sequence[Recipient],
        title: str,
        body: str,
        attach_file_ids: Optional[List[str]] = None,
        sender_address: Optional[str] = None,
        sender_name: Optional[str] = None,
    ) -> ServiceResult[CreateMailResponse]:
        """
        Send a mail.

        Args:
            recipients: Recipients of the mail.
            title: Mail subject.
            body: Mail body.
            attach_file_ids: Ids returned by a previous upload.
            sender_address: Overrides the default sender address.
            sender_name: Overrides the default sender name.

        Returns:
            ServiceResult with the CreateMailResponse on success.
        """
        sender = sender_address or self.sender_address
        if not sender:
            return ServiceResult.fail("A sender address is required")
        if not recipients:
            return ServiceResult.fail("At least one recipient is required")

        request = CreateMailRequest(
            sender_address=sender,
            sender_name=sender_name or self.sender_name or "",
            title=title,
            body=body,
            recipients=list(recipients),
            attach_file_ids=list(attach_file_ids or []),
        )

        try:
            response = self.client.create_mail(request)
        except NaverAPIError as e:
            logger.error(f"Failed to send mail: {e}")
            return ServiceResult.fail(f"Failed to send mail: {e}")

        return ServiceResult.ok(
            data=response,
            message=f"Mail request {response.request_id} accepted for {response.count} recipient(s)",
        )

    def upload_files(self, paths: Sequence[str]) -> ServiceResult[CreateFileResponse]:
        """
        Upload local files to attach to a later mail.

        Args:
            paths: Paths of the files to upload.

        Returns:
            ServiceResult with the CreateFileResponse on success.
        """
        if not paths:
            return ServiceResult.fail("At least one file is required")

        for path in paths:
            error = self._validate_input_path(path)
            if error:
                return ServiceResult.fail(error)

        try:
            files = [File.from_path(path) for path in paths]
        except OSError as e:
            return ServiceResult.fail(f"Failed to read file: {e}")

        try:
            response = self.client.create_files(files)
        except NaverAPIError as e:
            logger.error(f"Failed to upload files: {e}")
            return ServiceResult.fail(f"Failed to upload files: {e}")

        return ServiceResult.ok(
            data=response,
            message=f"Uploaded {len(response.files)} file(s)",
        )
