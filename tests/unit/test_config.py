"""
Unit tests for naverapi.core.config module.
"""

import pytest

from naverapi.core import config as config_module
from naverapi.core.config import (
    DEFAULT_CONFIG,
    ENV_OVERRIDES,
    Config,
    apply_env_overrides,
    create_default_config_file,
    find_config_file,
    get_default_config,
    load_config,
    load_toml,
    save_toml,
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the user's environment and config files out of the tests."""
    for variable in ENV_OVERRIDES:
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.setattr(config_module, "CONFIG_LOCATIONS", [tmp_path / "naverapi.toml"])


class TestConfig:
    """Tests for Config class."""

    def test_default_config(self):
        """Test getting default configuration."""
        config = get_default_config()

        assert isinstance(config, Config)
        assert config.get("http", "timeout") == 30
        assert config.get("geocode", "language") == "kor"
        assert config.get("sens", "country_code") == "82"

    def test_config_get(self):
        """Test Config.get method."""
        config = get_default_config()

        assert config.get("http", "nonexistent", "default") == "default"
        assert config.get("nosection", "key", 1) == 1

    def test_config_get_none_uses_default(self):
        """Test unset (None) values fall back to the default."""
        config = get_default_config()

        assert config.get("ncloud", "access_key") is None
        assert config.get("ncloud", "access_key", "fallback") == "fallback"

    def test_config_set(self):
        """Test Config.set method."""
        config = get_default_config()

        config.set("mailer", "sender_name", "Example")
        assert config.get("mailer", "sender_name") == "Example"

    def test_defaults_are_not_shared(self):
        """Test changing a Config leaves DEFAULT_CONFIG untouched."""
        config = get_default_config()
        config.set("http", "timeout", 5)

        assert DEFAULT_CONFIG["http"]["timeout"] == 30

    def test_config_round_trip_dict(self):
        """Test Config.to_dict and Config.from_dict."""
        config = Config.from_dict({"sens": {"service_id": "svc"}}, source="x.toml")

        assert config.to_dict()["sens"] == {"service_id": "svc"}
        assert config._source == "x.toml"


class TestTomlFiles:
    """Tests for TOML load/save."""

    def test_save_and_load(self, tmp_path):
        """Test saved files load back, with None values left out."""
        path = tmp_path / "config.toml"
        save_toml(
            {"http": {"timeout": 10, "user_agent": None}, "sens": {"service_id": "svc"}},
            path,
        )

        data = load_toml(path)

        assert data == {"http": {"timeout": 10}, "sens": {"service_id": "svc"}}
        assert '# user_agent = ""' in path.read_text()

    def test_load_missing_file(self, tmp_path):
        """Test loading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "missing.toml")

    def test_create_default_config_file(self, tmp_path):
        """Test the default file is valid TOML with the default values."""
        path = create_default_config_file(str(tmp_path / "naverapi.toml"))

        data = load_toml(path)

        assert data["geocode"]["language"] == "kor"
        assert "access_key" not in data["ncloud"]


class TestLoadConfig:
    """Tests for config discovery and loading."""

    def test_find_explicit_path(self, tmp_path):
        """Test an explicit path wins."""
        path = tmp_path / "custom.toml"
        path.write_text("")

        assert find_config_file(str(path)) == path

    def test_find_missing_explicit_path(self, tmp_path):
        """Test a missing explicit path finds nothing."""
        assert find_config_file(str(tmp_path / "missing.toml")) is None

    def test_find_standard_location(self, tmp_path):
        """Test standard locations are searched."""
        path = tmp_path / "naverapi.toml"
        path.write_text("")

        assert find_config_file() == path

    def test_load_defaults(self):
        """Test defaults are used without a file."""
        config = load_config()

        assert config._source is None
        assert config.get("http", "timeout") == 30

    def test_load_merges_file(self, tmp_path):
        """Test file values are merged over the defaults."""
        path = tmp_path / "custom.toml"
        path.write_text('[ncloud]\naccess_key = "file-key"\n\n[http]\ntimeout = 5\n')

        config = load_config(str(path))

        assert config._source == str(path)
        assert config.get("ncloud", "access_key") == "file-key"
        assert config.get("http", "timeout") == 5
        assert config.get("geocode", "language") == "kor"

    def test_load_invalid_file(self, tmp_path):
        """Test an invalid file falls back to the defaults."""
        path = tmp_path / "broken.toml"
        path.write_text("[ncloud\n")

        config = load_config(str(path))

        assert config._source is None
        assert config.get("http", "timeout") == 30

    def test_environment_wins(self, tmp_path, monkeypatch):
        """Test credentials from the environment override the file."""
        path = tmp_path / "custom.toml"
        path.write_text('[ncloud]\naccess_key = "file-key"\n')
        monkeypatch.setenv("NCLOUD_ACCESS_KEY", "env-key")
        monkeypatch.setenv("NCLOUD_SENS_SERVICE_ID", "env-service")

        config = load_config(str(path))

        assert config.get("ncloud", "access_key") == "env-key"
        assert config.get("sens", "service_id") == "env-service"


class TestApplyEnvOverrides:
    """Tests for apply_env_overrides function."""

    def test_mapping(self):
        """Test every variable lands in its section."""
        data = apply_env_overrides(
            {},
            {
                "NAVER_GEOCODE_CLIENT_ID": "id",
                "NAVER_GEOCODE_CLIENT_SECRET": "secret",
                "NCLOUD_ACCESS_KEY": "ak",
                "NCLOUD_SECRET_KEY": "sk",
                "NCLOUD_SENS_SERVICE_ID": "svc",
            },
        )

        assert data == {
            "geocode": {"client_id": "id", "client_secret": "secret"},
            "ncloud": {"access_key": "ak", "secret_key": "sk"},
            "sens": {"service_id": "svc"},
        }

    def test_empty_values_are_ignored(self):
        """Test empty variables do not clear configured values."""
        data = apply_env_overrides({"ncloud": {"access_key": "file"}}, {"NCLOUD_ACCESS_KEY": ""})

        assert data["ncloud"]["access_key"] == "file"
