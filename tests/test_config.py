"""Unit tests for configuration loading."""

import json

import pytest
from config import (
    Config,
    GeneratorConfig,
    ServerConfig,
    LoggingConfig,
    load_config,
)


class TestGeneratorConfig:
    """Tests for GeneratorConfig class."""

    def test_default_values(self):
        """GeneratorConfig defaults to plain IDs and no weak fallback."""
        config = GeneratorConfig()
        assert config.hidden is False
        assert config.allow_insecure_random is False

    def test_custom_values(self):
        """GeneratorConfig accepts custom values."""
        config = GeneratorConfig(hidden=True, allow_insecure_random=True)
        assert config.hidden is True
        assert config.allow_insecure_random is True


class TestServerConfig:
    """Tests for ServerConfig class."""

    def test_default_values(self):
        """ServerConfig has sensible defaults."""
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8080
        assert config.max_batch == 1000

    def test_custom_values(self):
        """ServerConfig accepts custom values."""
        config = ServerConfig(host="0.0.0.0", port=9000, max_batch=10)
        assert config.host == "0.0.0.0"
        assert config.port == 9000
        assert config.max_batch == 10


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_values(self):
        """LoggingConfig has sensible defaults."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.crash_file == "logs/crash.log"

    def test_unknown_field_rejected(self):
        """Unknown keys are a configuration error."""
        with pytest.raises(TypeError):
            LoggingConfig(file="logs/app.log")


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Config creates default sub-configs."""
        config = Config()
        assert isinstance(config.generator, GeneratorConfig)
        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict(self):
        """Config.from_dict parses dictionary."""
        data = {
            "generator": {"hidden": True},
            "server": {"port": 9000},
            "logging": {"level": "DEBUG"}
        }
        config = Config.from_dict(data)
        assert config.generator.hidden is True
        assert config.server.port == 9000
        assert config.logging.level == "DEBUG"

    def test_from_dict_partial(self):
        """Config.from_dict handles partial data."""
        config = Config.from_dict({"generator": {"allow_insecure_random": True}})
        assert config.generator.allow_insecure_random is True
        assert config.server.port == 8080  # Default


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_returns_config(self):
        """load_config returns Config object."""
        config = load_config()
        assert isinstance(config, Config)

    def test_load_config_reads_file(self, tmp_path):
        """load_config reads values from a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"generator": {"hidden": True}, "server": {"max_batch": 5}}))
        config = load_config(path)
        assert config.generator.hidden is True
        assert config.server.max_batch == 5

    def test_load_config_missing_file(self, tmp_path):
        """load_config returns defaults for missing file."""
        config = load_config(tmp_path / "nonexistent.json")
        assert isinstance(config, Config)
        assert config.generator.hidden is False  # Default
