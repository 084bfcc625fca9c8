"""
CLI Service Helpers
===================

CLI-specific utilities for working with services and the ServiceFactory.

This module provides convenience functions for CLI commands to:
1. Access a singleton ServiceFactory instance built from the CLI options
2. Handle service result errors consistently
3. Reduce boilerplate in command implementations

Usage:
    from naverapi.cli.service_helpers import services, handle_result

    result = services.geocode.lookup("불정로 6")
    response = handle_result(result)  # Exits with error message if failed
"""

from typing import TYPE_CHECKING, Any, Dict, Optional, TypeVar

import click

from naverapi.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from naverapi.services import ServiceFactory
    from naverapi.services.base import ServiceResult
    from naverapi.services.config import ConfigService
    from naverapi.services.geocode import GeocodeService
    from naverapi.services.mailer import MailerService
    from naverapi.services.sens import SENSService

# Type variable for generic result handling
T = TypeVar("T")


# ============================================================================
# Singleton Factory Instance
# ============================================================================

# Module-level singleton factory for CLI commands
_factory: "ServiceFactory | None" = None

# Global options recorded by the root command
_options: Dict[str, Any] = {"config_path": None, "verbose": False}


def configure(config_path: Optional[str] = None, verbose: bool = False) -> None:
    """
    Record the global CLI options used to build the factory.

    The factory itself is only created on first service access.
    """
    _options["config_path"] = config_path
    _options["verbose"] = verbose


def get_factory() -> "ServiceFactory":
    """
    Get the singleton ServiceFactory instance for CLI.

    This is lazily initialized on first access from the configuration file
    selected by ``--config`` (or the standard locations). For testing, use
    set_factory() to inject a custom instance.

    Returns:
        ServiceFactory: The singleton factory instance

    Raises:
        ConfigurationError: If the configured logging level is unknown.
    """
    global _factory
    if _factory is None:
        from naverapi.core.config import load_config
        from naverapi.core.logger import set_level
        from naverapi.services import ServiceFactory

        config = load_config(_options["config_path"])
        try:
            set_level("DEBUG" if _options["verbose"] else config.get("logging", "level", "WARNING"))
        except ValueError as e:
            raise ConfigurationError(f"Invalid [logging] level: {e}") from e
        _factory = ServiceFactory(config)
    return _factory


def set_factory(factory: "ServiceFactory") -> None:
    """
    Set a custom ServiceFactory instance.

    Args:
        factory: Custom ServiceFactory instance to use

    Example:
        # In tests
        set_factory(ServiceFactory(config, session=mocked_session))
    """
    global _factory
    _factory = factory


class _ServiceAccessor:
    """
    Lazy accessor for services that provides type hints and autocomplete.

    Missing credentials are reported as a CLI error instead of a traceback.
    """

    def _get(self, name: str) -> Any:
        try:
            return getattr(get_factory(), name)
        except ConfigurationError as e:
            exit_with_error(e.message)

    @property
    def geocode(self) -> "GeocodeService":
        """Get GeocodeService instance."""
        return self._get("geocode")

    @property
    def mailer(self) -> "MailerService":
        """Get MailerService instance."""
        return self._get("mailer")

    @property
    def sens(self) -> "SENSService":
        """Get SENSService instance."""
        return self._get("sens")

    @property
    def config(self) -> "ConfigService":
        """Get ConfigService instance."""
        return self._get("config_service")


# Lazy service accessor - factory only created when services are actually accessed
services = _ServiceAccessor()


# ============================================================================
# Result Handling Utilities
# ============================================================================


def handle_result(result: "ServiceResult[T]") -> T:
    """
    Handle a service result, exiting with error if failed.

    Args:
        result: Service result to handle

    Returns:
        The result data if successful

    Raises:
        SystemExit: If result indicates failure (exits with code 1)
    """
    if not result.success:
        exit_with_error(result.error or "Unknown error")
    return result.data


def exit_with_error(message: str, code: int = 1) -> None:
    """
    Print error message and exit.

    Args:
        message: Error message to display
        code: Exit code (default: 1)

    Raises:
        SystemExit: Always exits with specified code
    """
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(code)


def reset_factory() -> None:
    """
    Reset the singleton factory instance and the recorded options.

    This is primarily useful for testing to ensure a clean factory state.
    """
    global _factory
    _factory = None
    configure()


__all__ = [
    "services",
    "configure",
    "get_factory",
    "set_factory",
    "handle_result",
    "exit_with_error",
    "reset_factory",
]
