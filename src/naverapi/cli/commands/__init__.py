"""CLI command modules for naverapi."""

from .config import config
from .geocode import geocode
from .mail import mail
from .sms import sms

__all__ = [
    "config",
    "geocode",
    "mail",
    "sms",
]
