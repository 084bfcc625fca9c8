# services/sens.py
"""
Service for sending SMS through SENS.
"""

from typing import Optional, Sequence, Union

from naverapi.clients.sens import SENSClient
from naverapi.core.exceptions import NaverAPIError
from naverapi.core.logger import get_logger
from naverapi.models.sens import (
    Message,
    SendSMSRequest,
    SendSMSResponse,
    SMSContentType,
    SMSType,
)

from .base import BaseService, ServiceResult

logger = get_logger(__name__)


class SENSService(BaseService):
    """
    Service for SMS operations.

    Args:
        client: Configured SENSClient.
        from_number: Default registered sender number.
        country_code: Default country calling code.
    """

    def __init__(
        self,
        client: SENSClient,
        from_number: Optional[str] = None,
        country_code: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.client = client
        self.from_number = from_number
        self.country_code = country_code

    def send(
        self,
        to: Sequence[str],
        content: str,
        sms_type: Union[SMSType, str] = SMSType.SMS,
        content_type: Union[SMSContentType, str] = SMSContentType.COMM,
        subject: str = "",
        from_number: Optional[str] = None,
        reserve_time: str = "",
        reserve_time_zone: str = "",
    ) -> ServiceResult[SendSMSResponse]:
        """
        Send the same content to one or more numbers.

        Args:
            to: Recipient phone numbers.
            content: Message content.
            sms_type: SMS, LMS or MMS.
            content_type: COMM or AD.
            subject: Subject (LMS and MMS only).
            from_number: Overrides the default sender number.
            reserve_time: Scheduled send time, "yyyy-MM-dd HH:mm".
            reserve_time_zone: Time zone of reserve_time.

        Returns:
            ServiceResult with the SendSMSResponse on success.
        """
        sender = from_number or self.from_number
        if not sender:
            return ServiceResult.fail("A sender number is required")
        if not to:
            return ServiceResult.fail("At least one recipient number is required")

        try:
            request = SendSMSRequest(
                type=SMSType(sms_type),
                content_type=SMSContentType(content_type),
                from_=sender,
                content=content,
                messages=[Message(to=number) for number in to],
                country_code=self.country_code,
                subject=subject,
                reserve_time=reserve_time,
                reserve_time_zone=reserve_time_zone,
            )
        except ValueError as e:
            return ServiceResult.fail(f"Invalid SMS request: {e}")

        try:
            response = self.client.send_sms(request)
        except NaverAPIError as e:
            logger.error(f"Failed to send SMS: {e}")
            return ServiceResult.fail(f"Failed to send SMS: {e}")

        return ServiceResult.ok(
            data=response,
            message=f"SMS request {response.request_id} accepted for {len(to)} number(s)",
        )
