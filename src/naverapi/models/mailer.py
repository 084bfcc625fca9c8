# models/mailer.py
"""
Data models for Cloud Outbound Mailer operations.

See https://api.ncloud-docs.com/docs/en/ai-application-service-cloudoutboundmailer
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from naverapi.core.exceptions import UnknownRecipientTypeError

from .base import ToDictMixin, enum_value, omit_empty

MAILER_API_URL = "https://mail.apigw.ntruss.com"

ENDPOINT_FILES = "/api/v1/files"
ENDPOINT_MAILS = "/api/v1/mails"

# Form field carrying the uploaded files
FILES_FIELD_NAME = "fileList"


class RecipientType(str, Enum):
    """How a recipient receives a mail."""

    DEFAULT = "R"  # recipient
    CARBON_COPY = "C"
    BLIND_CARBON_COPY = "B"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "RecipientType":
        """
        Parse a recipient type, case-insensitively.

        Raises:
            UnknownRecipientTypeError: If the value is not R, C or B.
        """
        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError) as e:
            raise UnknownRecipientTypeError(str(value)) from e


@dataclass
class Recipient(ToDictMixin):
    """
    A mail recipient.

    Attributes:
        address: Mail address.
        name: Display name.
        type: R (recipient), C (carbon copy) or B (blind carbon copy).
        parameters: Values substituted into the mail template.
    """

    address: str
    name: str = ""
    type: Union[RecipientType, str] = RecipientType.DEFAULT
    parameters: List[str] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        payload = {
            "address": self.address,
            "name": self.name,
            "type": enum_value(self.type),
            "parameters": list(self.parameters),
        }
        return omit_empty(payload, ["parameters"])


@dataclass
class CreateMailRequest(ToDictMixin):
    """
    A createMail request.

    Attributes:
        sender_address: Sender mail address.
        sender_name: Sender display name.
        title: Mail subject.
        body: Mail body (HTML allowed).
        recipients: Recipients of the mail.
        attach_file_ids: Ids of files previously uploaded with createFile.
    """

    sender_address: str
    sender_name: str
    title: str
    body: str
    recipients: List[Recipient] = field(default_factory=list)
    attach_file_ids: List[str] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body with the API's field names."""
        payload = {
            "senderAddress": self.sender_address,
            "senderName": self.sender_name,
            "title": self.title,
            "body": self.body,
            "recipients": [r.to_payload() for r in self.recipients],
            "attachFileIds": list(self.attach_file_ids),
        }
        return omit_empty(payload, ["attachFileIds"])


@dataclass
class MailerErrorDetail(ToDictMixin):
    """Error payload returned by the mailer API."""

    error_code: str = ""
    message: str = ""

    @classmethod
    def from_api_response(cls, data: Optional[Dict[str, Any]]) -> Optional["MailerErrorDetail"]:
        if not data:
            return None
        return cls(error_code=str(data.get("errorCode", "")), message=data.get("message", ""))

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}" if self.error_code else self.message


@dataclass
class CreateMailResponse(ToDictMixin):
    """Response of a createMail request."""

    request_id: str = ""
    count: int = 0
    error: Optional[MailerErrorDetail] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "CreateMailResponse":
        return cls(
            request_id=data.get("requestId", ""),
            count=int(data.get("count") or 0),
            error=MailerErrorDetail.from_api_response(data.get("error")),
        )


@dataclass
class File(ToDictMixin):
    """
    A file to upload as a mail attachment.

    Attributes:
        name: File name shown to the recipients.
        content: Raw file content.
    """

    name: str
    content: bytes = b""

    @classmethod
    def from_path(cls, path: Union[str, Path], name: Optional[str] = None) -> "File":
        """Read a local file into memory."""
        path = Path(path)
        return cls(name=name or path.name, content=path.read_bytes())


@dataclass
class ResponseFileInfo(ToDictMixin):
    """An uploaded file as reported by the API."""

    file_name: str = ""
    file_size: int = 0
    file_id: str = ""

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "ResponseFileInfo":
        return cls(
            file_name=data.get("fileName", ""),
            file_size=int(data.get("fileSize") or 0),
            file_id=data.get("fileId", ""),
        )


@dataclass
class CreateFileResponse(ToDictMixin):
    """
    Response of a createFile request.

    Attributes:
        temp_request_id: Temporary request id grouping the uploaded files.
        files: Uploaded files, in upload order.
        error: Error detail, if the API reported one.
    """

    temp_request_id: str = ""
    files: List[ResponseFileInfo] = field(default_factory=list)
    error: Optional[MailerErrorDetail] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "CreateFileResponse":
        return cls(
            temp_request_id=data.get("tempRequestId", ""),
            files=[ResponseFileInfo.from_api_response(f) for f in data.get("files") or []],
            error=MailerErrorDetail.from_api_response(data.get("error")),
        )

    @property
    def file_ids(self) -> List[str]:
        """Ids to pass as ``attach_file_ids`` of a CreateMailRequest."""
        return [f.file_id for f in self.files]
