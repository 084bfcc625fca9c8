"""
Service Factory
===============

Reusable factory for instantiating services with proper dependency injection.

This factory lives in the services layer to be reusable across all applications
(CLI, web API, tests, etc.). Clients are built from a Config: credentials come
from the [geocode] and [ncloud] sections (or their environment variables),
defaults such as the mail sender or the SMS sender number from the [mailer]
and [sens] sections.

Usage:
    from naverapi.core.config import load_config
    from naverapi.services.factory import ServiceFactory

    factory = ServiceFactory(load_config("naverapi.toml"))
    result = factory.geocode.lookup("불정로 6")

    # Tests - share one session whose transport is mocked
    factory = ServiceFactory(config, session=mocked_session)
"""

from typing import Any, Dict, Optional

import requests

from naverapi.clients.geocode import GeocodeClient
from naverapi.clients.mailer import CloudOutboundMailerClient
from naverapi.clients.sens import SENSClient
from naverapi.core.config import Config, load_config
from naverapi.core.exceptions import ConfigurationError
from naverapi.core.http.client import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

from .config import ConfigService
from .geocode import GeocodeService
from .mailer import MailerService
from .sens import SENSService


class ServiceFactory:
    """
    Factory for creating service instances with proper dependency injection.

    Services are created on first access and cached, so every service of one
    factory keeps using the same client.

    Attributes:
        config: Configuration the clients are built from.
        session: Optional requests session shared by every client.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the service factory.

        Args:
            config: Configuration to use. If None, it is loaded from the
                standard locations, with credentials from the environment
                taking precedence.
            session: Optional custom requests session for every client.
        """
        self.config = config if config is not None else load_config()
        self.session = session
        self._services: Dict[str, Any] = {}

    def _http_options(self) -> Dict[str, Any]:
        return {
            "session": self.session,
            "timeout": self.config.get("http", "timeout", DEFAULT_TIMEOUT),
            "user_agent": self.config.get("http", "user_agent", DEFAULT_USER_AGENT),
        }

    def _ncloud_credentials(self) -> Dict[str, str]:
        access_key = self.config.get("ncloud", "access_key")
        secret_key = self.config.get("ncloud", "secret_key")
        if not access_key or not secret_key:
            raise ConfigurationError(
                "Naver Cloud credentials are missing. Set [ncloud] access_key and "
                "secret_key, or NCLOUD_ACCESS_KEY and NCLOUD_SECRET_KEY."
            )
        return {"access_key": access_key, "secret_key": secret_key}

    def _cached(self, name: str, create):
        if name not in self._services:
            self._services[name] = create()
        return self._services[name]

    # ========================================================================
    # Service Construction
    # ========================================================================

    def create_geocode_service(self) -> GeocodeService:
        """
        Create GeocodeService from the [geocode] section.

        Raises:
            ConfigurationError: If the client id or secret is missing.
        """
        client_id = self.config.get("geocode", "client_id")
        client_secret = self.config.get("geocode", "client_secret")
        if not client_id or not client_secret:
            raise ConfigurationError(
                "Geocode credentials are missing. Set [geocode] client_id and "
                "client_secret, or NAVER_GEOCODE_CLIENT_ID and NAVER_GEOCODE_CLIENT_SECRET."
            )

        client = GeocodeClient(client_id, client_secret, **self._http_options())
        base_url = self.config.get("geocode", "base_url")
        if base_url:
            client.base_url = base_url
        return GeocodeService(client, language=self.config.get("geocode", "language"))

    def create_mailer_service(self) -> MailerService:
        """
        Create MailerService from the [ncloud] and [mailer] sections.

        Raises:
            ConfigurationError: If the access key or secret key is missing.
        """
        client = CloudOutboundMailerClient(**self._ncloud_credentials(), **self._http_options())
        base_url = self.config.get("mailer", "base_url")
        if base_url:
            client.base_url = base_url
        return MailerService(
            client,
            sender_address=self.config.get("mailer", "sender_address"),
            sender_name=self.config.get("mailer", "sender_name"),
        )

    def create_sens_service(self) -> SENSService:
        """
        Create SENSService from the [ncloud] and [sens] sections.

        Raises:
            ConfigurationError: If the credentials or the service id are missing.
        """
        service_id = self.config.get("sens", "service_id")
        if not service_id:
            raise ConfigurationError(
                "SENS service id is missing. Set [sens] service_id or NCLOUD_SENS_SERVICE_ID."
            )

        client = SENSClient(
            service_id=service_id, **self._ncloud_credentials(), **self._http_options()
        )
        base_url = self.config.get("sens", "base_url")
        if base_url:
            client.base_url = base_url
        return SENSService(
            client,
            from_number=self.config.get("sens", "from_number"),
            country_code=self.config.get("sens", "country_code"),
        )

    def create_config_service(self) -> ConfigService:
        """Create ConfigService for the factory's configuration."""
        return ConfigService(self.config)

    # ========================================================================
    # Property-Based Access (Convenience for CLI and other applications)
    # ========================================================================

    @property
    def geocode(self) -> GeocodeService:
        """Cached result of create_geocode_service()."""
        return self._cached("geocode", self.create_geocode_service)

    @property
    def mailer(self) -> MailerService:
        """Cached result of create_mailer_service()."""
        return self._cached("mailer", self.create_mailer_service)

    @property
    def sens(self) -> SENSService:
        """Cached result of create_sens_service()."""
        return self._cached("sens", self.create_sens_service)

    @property
    def config_service(self) -> ConfigService:
        """Cached result of create_config_service()."""
        return self._cached("config", self.create_config_service)

    def close(self) -> None:
        """Close the clients of every service created so far."""
        for service in self._services.values():
            client = getattr(service, "client", None)
            if client is not None:
                client.close()
        self._services.clear()


__all__ = ["ServiceFactory"]
