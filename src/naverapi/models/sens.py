# models/sens.py
"""
Data models for SENS (Simple & Easy Notification Service) SMS operations.

See https://api.ncloud-docs.com/docs/en/ai-application-service-sens-smsv2
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .base import ToDictMixin, enum_value, omit_empty

SENS_API_URL = "https://sens.apigw.ntruss.com"

ENDPOINT_SMS_API = "/sms/v2"

# statusName of an accepted send request
STATUS_SUCCESS = "success"


def messages_endpoint(service_id: str) -> str:
    """Path of the send-messages endpoint of a SENS SMS service."""
    return f"{ENDPOINT_SMS_API}/services/{service_id}/messages"


class SMSType(str, Enum):
    SMS = "SMS"
    LMS = "LMS"
    MMS = "MMS"


class SMSContentType(str, Enum):
    COMM = "COMM"  # normal
    AD = "AD"  # advertising


class SMSCountryCode(str, Enum):
    KOREA = "82"


@dataclass
class Message(ToDictMixin):
    """
    One destination of a send SMS request.

    Attributes:
        to: Recipient phone number.
        subject: Per-recipient subject (LMS and MMS only).
        content: Per-recipient content, overriding the request content.
    """

    to: str
    subject: str = ""
    content: str = ""

    def to_payload(self) -> Dict[str, Any]:
        payload = {"to": self.to, "subject": self.subject, "content": self.content}
        return omit_empty(payload, ["subject", "content"])


@dataclass
class SendSMSRequest(ToDictMixin):
    """
    A send SMS request.

    Attributes:
        type: SMS, LMS or MMS.
        content_type: COMM (normal) or AD (advertising).
        from_: Registered sender number.
        content: Default message content (EUC-KR encodable).
        messages: Destinations, each optionally overriding subject/content.
        country_code: Country calling code (server default: 82).
        subject: Default subject (LMS and MMS only).
        reserve_time: Scheduled send time, "yyyy-MM-dd HH:mm".
        reserve_time_zone: Time zone of reserve_time, e.g. "Asia/Seoul".
        schedule_code: Code of a schedule registered in the console.
    """

    type: Union[SMSType, str]
    content_type: Union[SMSContentType, str]
    from_: str
    content: str
    messages: List[Message] = field(default_factory=list)
    country_code: Union[SMSCountryCode, str, None] = None
    subject: str = ""
    reserve_time: str = ""
    reserve_time_zone: str = ""
    schedule_code: str = ""

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body with the API's field names."""
        payload = {
            "type": enum_value(self.type),
            "contentType": enum_value(self.content_type),
            "countryCode": enum_value(self.country_code),
            "from": self.from_,
            "subject": self.subject,
            "content": self.content,
            "messages": [m.to_payload() for m in self.messages],
            "reserveTime": self.reserve_time,
            "reserveTimeZone": self.reserve_time_zone,
            "scheduleCode": self.schedule_code,
        }
        return omit_empty(
            payload,
            ["countryCode", "subject", "reserveTime", "reserveTimeZone", "scheduleCode"],
        )


@dataclass
class SendSMSResponse(ToDictMixin):
    """Response of a send SMS request."""

    request_id: str = ""
    request_time: str = ""
    status_code: str = ""
    status_name: str = ""

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "SendSMSResponse":
        return cls(
            request_id=data.get("requestId", ""),
            request_time=data.get("requestTime", ""),
            status_code=str(data.get("statusCode", "")),
            status_name=data.get("statusName", ""),
        )

    @property
    def succeeded(self) -> bool:
        return self.status_name == STATUS_SUCCESS
