"""
naverapi - Naver Cloud Platform API clients
===========================================

Version: 0.1.0
"""

__version__ = "0.1.0"

from naverapi.clients import CloudOutboundMailerClient, GeocodeClient, SENSClient
from naverapi.core.exceptions import (
    APIStatusError,
    ConfigurationError,
    GeocodeError,
    InvalidQueryError,
    NaverAPIError,
    ResponseDecodeError,
    SendSMSFailedError,
    TransportError,
    UnknownRecipientTypeError,
)

__all__ = [
    "__version__",
    # Clients
    "CloudOutboundMailerClient",
    "GeocodeClient",
    "SENSClient",
    # Errors
    "APIStatusError",
    "ConfigurationError",
    "GeocodeError",
    "InvalidQueryError",
    "NaverAPIError",
    "ResponseDecodeError",
    "SendSMSFailedError",
    "TransportError",
    "UnknownRecipientTypeError",
]
