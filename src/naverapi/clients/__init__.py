"""REST clients for the Naver Cloud geocode, outbound mailer and SENS APIs."""

from .geocode import GeocodeClient
from .mailer import CloudOutboundMailerClient
from .sens import SENSClient

__all__ = [
    "CloudOutboundMailerClient",
    "GeocodeClient",
    "SENSClient",
]
