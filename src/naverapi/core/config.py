"""
Configuration Management
========================

This module provides TOML-based configuration file support for naverapi.

Configuration files are searched in the following order (highest to lowest priority):
1. Path specified via --config option
2. ./naverapi.toml (current directory)
3. ~/.config/naverapi/config.toml (user config)
4. /etc/naverapi/config.toml (system config)
5. Built-in defaults

Credentials can also be supplied through environment variables, which take
precedence over any configuration file:

    NAVER_GEOCODE_CLIENT_ID      -> [geocode] client_id
    NAVER_GEOCODE_CLIENT_SECRET  -> [geocode] client_secret
    NCLOUD_ACCESS_KEY            -> [ncloud] access_key
    NCLOUD_SECRET_KEY            -> [ncloud] secret_key
    NCLOUD_SENS_SERVICE_ID       -> [sens] service_id

Example configuration file (naverapi.toml):

    [http]
    timeout = 30

    [geocode]
    client_id = "my-client-id"
    client_secret = "my-client-secret"
    language = "kor"

    [ncloud]
    access_key = "my-access-key"
    secret_key = "my-secret-key"

    [mailer]
    sender_address = "no-reply@example.com"
    sender_name = "Example"

    [sens]
    service_id = "ncp:sms:kr:123456789012:my-service"
    from_number = "0212345678"
    country_code = "82"

    [logging]
    level = "WARNING"
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from naverapi.core.logger import get_logger

logger = get_logger(__name__)

# Use tomli for Python < 3.11, tomllib for Python >= 3.11
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "http": {
        "timeout": 30,
        "user_agent": None,  # None = "naverapi/<version>"
    },
    "geocode": {
        "client_id": None,
        "client_secret": None,
        "base_url": "https://naveropenapi.apigw.ntruss.com",
        "language": "kor",
    },
    "ncloud": {
        "access_key": None,
        "secret_key": None,
    },
    "mailer": {
        "base_url": "https://mail.apigw.ntruss.com",
        "sender_address": None,
        "sender_name": None,
    },
    "sens": {
        "base_url": "https://sens.apigw.ntruss.com",
        "service_id": None,
        "from_number": None,
        "country_code": "82",
    },
    "logging": {
        "level": "WARNING",
    },
}

# Environment variable -> (section, key)
ENV_OVERRIDES: Dict[str, tuple] = {
    "NAVER_GEOCODE_CLIENT_ID": ("geocode", "client_id"),
    "NAVER_GEOCODE_CLIENT_SECRET": ("geocode", "client_secret"),
    "NCLOUD_ACCESS_KEY": ("ncloud", "access_key"),
    "NCLOUD_SECRET_KEY": ("ncloud", "secret_key"),
    "NCLOUD_SENS_SERVICE_ID": ("sens", "service_id"),
}

# Standard config file locations
CONFIG_LOCATIONS = [
    Path("naverapi.toml"),
    Path("~/.config/naverapi/config.toml").expanduser(),
    Path("/etc/naverapi/config.toml"),
]

SECTIONS = ("http", "geocode", "ncloud", "mailer", "sens", "logging")


@dataclass
class Config:
    """
    Configuration container for naverapi settings.

    Attributes:
        http: Transport settings (timeout, user agent)
        geocode: Geocoding API credentials and defaults
        ncloud: API gateway access key / secret key shared by mailer and SENS
        mailer: Outbound mailer settings (base URL, default sender)
        sens: SENS settings (service id, default sender number)
        logging: Logging settings
        _source: Path to the config file that was loaded
    """

    http: Dict[str, Any] = field(default_factory=dict)
    geocode: Dict[str, Any] = field(default_factory=dict)
    ncloud: Dict[str, Any] = field(default_factory=dict)
    mailer: Dict[str, Any] = field(default_factory=dict)
    sens: Dict[str, Any] = field(default_factory=dict)
    logging: Dict[str, Any] = field(default_factory=dict)
    _source: Optional[str] = None

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        section_dict = getattr(self, section, {})
        if section_dict is None:
            return default
        value = section_dict.get(key, default)
        return default if value is None else value

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a configuration value."""
        section_dict = getattr(self, section, None)
        if section_dict is not None:
            section_dict[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {section: getattr(self, section) for section in SECTIONS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "Config":
        """Create Config from dictionary."""
        return cls(
            http=data.get("http", {}),
            geocode=data.get("geocode", {}),
            ncloud=data.get("ncloud", {}),
            mailer=data.get("mailer", {}),
            sens=data.get("sens", {}),
            logging=data.get("logging", {}),
            _source=source,
        )


def load_toml(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a TOML configuration file.

    Args:
        filepath: Path to the TOML file

    Returns:
        Dictionary with configuration values

    Raises:
        FileNotFoundError: If file doesn't exist
        tomllib.TOMLDecodeError: If the file is not valid TOML
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    with open(path, "rb") as f:
        return tomllib.load(f)


def save_toml(config: Dict[str, Any], filepath: Union[str, Path]) -> str:
    """
    Save configuration to a TOML file.

    Keys whose value is None are written as comments so the generated file
    documents every available setting.

    Args:
        config: Configuration dictionary
        filepath: Path to save the file

    Returns:
        Path to the saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = []
    for section, values in config.items():
        if isinstance(values, dict) and values:
            lines.append(f"[{section}]")
            for key, value in values.items():
                if value is None:
                    lines.append(f'# {key} = ""')
                elif isinstance(value, str):
                    lines.append(f'{key} = "{value}"')
                elif isinstance(value, bool):
                    lines.append(f"{key} = {str(value).lower()}")
                elif isinstance(value, (int, float)):
                    lines.append(f"{key} = {value}")
                elif isinstance(value, list):
                    items = ", ".join(f'"{v}"' if isinstance(v, str) else str(v) for v in value)
                    lines.append(f"{key} = [{items}]")
            lines.append("")

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))

    return str(path)


def find_config_file(config_path: Optional[str] = None) -> Optional[Path]:
    """
    Find the configuration file to use.

    Args:
        config_path: Explicit path to config file (highest priority)

    Returns:
        Path to config file, or None if not found
    """
    if config_path:
        path = Path(config_path)
        if path.exists():
            return path
        logger.warning(f"Specified config file not found: {config_path}")
        return None

    for location in CONFIG_LOCATIONS:
        if location.exists():
            return location

    return None


def apply_env_overrides(
    config_data: Dict[str, Any],
    environ: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """
    Overlay credentials found in environment variables.

    Args:
        config_data: Configuration dictionary, modified in place
        environ: Environment mapping (defaults to os.environ)

    Returns:
        The updated configuration dictionary
    """
    environ = os.environ if environ is None else environ
    for variable, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(variable)
        if value:
            config_data.setdefault(section, {})[key] = value
            logger.debug(f"Using {variable} for [{section}].{key}")
    return config_data


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Config object with merged settings
    """
    config_data = _deep_copy_dict(DEFAULT_CONFIG)
    source = None

    config_file = find_config_file(config_path)
    if config_file:
        try:
            file_config = load_toml(config_file)
            config_data = _merge_dicts(config_data, file_config)
            source = str(config_file)
            logger.info(f"Loaded configuration from {config_file}")
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Error loading config file {config_file}: {e}")

    apply_env_overrides(config_data)
    return Config.from_dict(config_data, source=source)


def get_default_config() -> Config:
    """Get the default configuration."""
    return Config.from_dict(_deep_copy_dict(DEFAULT_CONFIG))


def create_default_config_file(filepath: Optional[str] = None) -> str:
    """
    Create a default configuration file.

    Args:
        filepath: Path to create the file (default: ./naverapi.toml)

    Returns:
        Path to the created file
    """
    if filepath is None:
        filepath = "naverapi.toml"

    return save_toml(DEFAULT_CONFIG, filepath)


def _deep_copy_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    """Create a deep copy of a dictionary."""
    result = {}
    for key, value in d.items():
        if isinstance(value, dict):
            result[key] = _deep_copy_dict(value)
        elif isinstance(value, list):
            result[key] = value.copy()
        else:
            result[key] = value
    return result


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two dictionaries, with override taking precedence."""
    result = _deep_copy_dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def get_config_locations() -> List[Path]:
    """
    Get configuration file search locations in priority order.

    Returns:
        List of paths to search, in priority order (highest first)
    """
    return CONFIG_LOCATIONS.copy()
