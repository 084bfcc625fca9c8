"""Data models for naverapi."""

# Geocode models
from naverapi.models.geocode import (
    Address,
    AddressElement,
    FilterType,
    GeocodeQuery,
    GeocodeResponse,
    Language,
    Meta,
)

# Mailer models
from naverapi.models.mailer import (
    CreateFileResponse,
    CreateMailRequest,
    CreateMailResponse,
    File,
    MailerErrorDetail,
    Recipient,
    RecipientType,
    ResponseFileInfo,
)

# SENS models
from naverapi.models.sens import (
    Message,
    SendSMSRequest,
    SendSMSResponse,
    SMSContentType,
    SMSCountryCode,
    SMSType,
)

__all__ = [
    # Geocode
    "Address",
    "AddressElement",
    "FilterType",
    "GeocodeQuery",
    "GeocodeResponse",
    "Language",
    "Meta",
    # Mailer
    "CreateFileResponse",
    "CreateMailRequest",
    "CreateMailResponse",
    "File",
    "MailerErrorDetail",
    "Recipient",
    "RecipientType",
    "ResponseFileInfo",
    # SENS
    "Message",
    "SendSMSRequest",
    "SendSMSResponse",
    "SMSContentType",
    "SMSCountryCode",
    "SMSType",
]
