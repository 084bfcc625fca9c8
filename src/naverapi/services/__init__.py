"""
Services Package
================

Result-returning wrappers around the API clients, used by the CLI.

Usage:
    from naverapi.services import ServiceFactory

    factory = ServiceFactory(config)
    result = factory.sens.send(["01012345678"], "hello")
    if not result.success:
        print(result.error)
"""

from .base import BaseService, ServiceResult
from .config import ConfigService
from .factory import ServiceFactory
from .geocode import GeocodeService
from .mailer import MailerService
from .sens import SENSService

__all__ = [
    "BaseService",
    "ConfigService",
    "GeocodeService",
    "MailerService",
    "SENSService",
    "ServiceFactory",
    "ServiceResult",
]
