"""
Tests for the configuration loader module.

Tests config loading, parsing, path resolution, and error handling.
"""

import json
import pytest
from pathlib import Path

from book_search.core.config_loader import (
    Config,
    PathsConfig,
    get_config,
    reload_config,
)
from book_search.core.exceptions import ConfigurationError


class TestPathsConfig:
    """Tests for PathsConfig dataclass."""

    def test_paths_config_creation(self, temp_dir: Path):
        """Test creating PathsConfig with valid paths."""
        config = PathsConfig(
            data_directory=temp_dir / "data",
            logs_directory=temp_dir / "logs"
        )

        assert config.data_directory == temp_dir / "data"
        assert config.logs_directory == temp_dir / "logs"


class TestConfigFromFile:
    """Tests for loading config from file."""

    def test_load_valid_config(self, temp_config: Path, reset_config_singleton):
        """Test loading a valid configuration file."""
        config = Config.from_file(temp_config)

        assert config.corpus.primary_backend == "pdfplumber"
        assert config.corpus.fallback_backend == "pypdf"
        assert config.search.allow_empty_term is True
        assert config.search.context_length == 40
        assert config.gui.page_title == "Test Book Search"

    def test_load_missing_config_raises_error(self, temp_dir: Path):
        """Test that loading non-existent config raises ConfigurationError."""
        fake_path = temp_dir / "nonexistent" / "config.json"

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(fake_path)

        assert "not found" in str(exc_info.value.message).lower()

    def test_load_invalid_json_raises_error(self, temp_dir: Path):
        """Test that invalid JSON raises ConfigurationError."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text("{ invalid json }")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(config_path)

        assert "invalid json" in str(exc_info.value.message).lower()

    def test_load_non_object_raises_error(self, temp_dir: Path):
        """Test that a JSON array at top level is rejected."""
        config_path = temp_dir / "config.json"
        config_path.write_text("[1, 2, 3]")

        with pytest.raises(ConfigurationError):
            Config.from_file(config_path)

    def test_config_resolves_relative_paths(self, temp_dir: Path, reset_config_singleton):
        """Test that relative paths are resolved against the project root."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({"paths": {"data_directory": "books"}}))

        config = Config.from_file(config_path)

        assert config.paths.data_directory.is_absolute()
        assert config.paths.data_directory.name == "books"
        assert config.paths.data_directory.parent == temp_dir.resolve()

    def test_config_default_values(self, temp_dir: Path, reset_config_singleton):
        """Test that missing config values get defaults."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({"paths": {}, "search": {}}))

        config = Config.from_file(config_path)

        assert config.corpus.primary_backend == "pypdf"
        assert config.corpus.fallback_backend == "pdfplumber"
        assert config.corpus.supported_extensions == [".json", ".pdf"]
        assert config.search.allow_empty_term is False
        assert config.logging.level == "INFO"


class TestGetConfig:
    """Tests for the get_config singleton function."""

    def test_get_config_returns_same_instance(self, temp_config: Path, reset_config_singleton):
        """Test that get_config returns singleton instance."""
        config1 = get_config(temp_config)
        config2 = get_config()

        assert config1 is config2

    def test_reload_config_creates_new_instance(self, temp_config: Path, reset_config_singleton):
        """Test that reload_config creates a fresh instance."""
        _config1 = get_config(temp_config)  # noqa: F841

        with open(temp_config, "r") as f:
            data = json.load(f)
        data["gui"]["page_title"] = "Modified Title"
        with open(temp_config, "w") as f:
            json.dump(data, f)

        config2 = reload_config(temp_config)

        assert config2.gui.page_title == "Modified Title"

    def test_missing_config_file_raises(self, temp_dir: Path, reset_config_singleton, monkeypatch):
        """Test that searching from a directory without config fails cleanly."""
        monkeypatch.chdir(temp_dir)

        with pytest.raises(ConfigurationError):
            get_config()
