# services/config.py
"""
Service for configuration management operations.
"""

from pathlib import Path
from typing import List, Optional

from naverapi.core.config import (
    Config,
    create_default_config_file,
    find_config_file,
    get_config_locations,
)

from .base import BaseService, ServiceResult


class ConfigService(BaseService):
    """
    Service for configuration management operations.

    Provides ServiceResult-wrapped methods for configuration access
    and management.
    """

    def __init__(self, config: Config) -> None:
        super().__init__()
        self.config = config

    def get_config(self) -> ServiceResult[Config]:
        """
        Get the active configuration.

        Returns:
            ServiceResult containing the Config object
        """
        return ServiceResult.ok(
            data=self.config,
            message=f"Loaded config from {self.config._source or 'defaults'}",
        )

    def find_config_file(
        self,
        config_path: Optional[str] = None,
    ) -> ServiceResult[Optional[str]]:
        """
        Find the configuration file to use.

        Args:
            config_path: Explicit path to check first

        Returns:
            ServiceResult containing the config file path or None
        """
        result = find_config_file(config_path)

        if result:
            return ServiceResult.ok(data=str(result), message=f"Found config file: {result}")
        return ServiceResult.ok(data=None, message="No config file found")

    def get_config_locations(self) -> ServiceResult[List[str]]:
        """
        Get configuration file search locations in priority order.

        Returns:
            ServiceResult containing list of path strings
        """
        paths = [str(loc) for loc in get_config_locations()]
        return ServiceResult.ok(data=paths, message=f"Found {len(paths)} config locations")

    def create_default_config(
        self,
        filepath: Optional[str] = None,
        force: bool = False,
    ) -> ServiceResult[str]:
        """
        Create a default configuration file.

        Args:
            filepath: Path to create the file (default: ./naverapi.toml)
            force: Overwrite if file exists

        Returns:
            ServiceResult containing the created file path on success
        """
        path = Path(filepath) if filepath else Path("naverapi.toml")

        if path.exists() and not force:
            return ServiceResult.fail(f"File already exists: {path}. Use force=True to overwrite.")

        try:
            result_path = create_default_config_file(str(path))
        except OSError as e:
            return ServiceResult.fail(f"Failed to create config file: {e}")

        return ServiceResult.ok(data=result_path, message=f"Created config file: {result_path}")
