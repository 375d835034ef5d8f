"""
Config file adapter tests.

Loading YAML/JSON config files, fail-fast errors, and the well-known
file-name lookup.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from src.adapters.fs.config_file import (
    CONFIG_FILE_NAMES,
    ConfigFileSource,
    find_config_file,
    load_config_file,
    write_config_file,
)
from src.components.theme_config import ThemeConfigError, load


class TestLoadConfigFile:
    """Loading config files."""

    def test_shipped_config_matches_declared(self, shipped_config_path: Path) -> None:
        """The checked-in YAML file describes the declared record."""
        assert load_config_file(shipped_config_path) == load()

    def test_load_json(self, write_config) -> None:
        path = write_config(
            json.dumps(
                {
                    "content": ["./templates/**/*.html"],
                    "theme": {"extend": {"colors": {"main": "#353a65", "widget": "#3c416e"}}},
                    "plugins": [],
                }
            ),
            name="tailwind.config.json",
        )
        assert load_config_file(path) == load()

    def test_load_nonexistent_file_raises(self) -> None:
        """Loading nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config_file(Path("/nonexistent/tailwind.config.yaml"))

    def test_load_invalid_yaml_raises(self, write_config) -> None:
        """Loading invalid YAML raises ThemeConfigError."""
        path = write_config("content: [")
        with pytest.raises(ThemeConfigError, match="Invalid YAML"):
            load_config_file(path)

    def test_load_invalid_json_raises(self, write_config) -> None:
        path = write_config("{content: ", name="tailwind.config.json")
        with pytest.raises(ThemeConfigError, match="Invalid JSON"):
            load_config_file(path)

    def test_error_is_value_error(self, write_config) -> None:
        """Callers catching ValueError also catch config errors."""
        path = write_config("content: [")
        with pytest.raises(ValueError):
            load_config_file(path)

    @pytest.mark.parametrize("name", ["tailwind.config.yaml", "tailwind.config.json"])
    def test_empty_file_raises(self, write_config, name: str) -> None:
        path = write_config("", name=name)
        with pytest.raises(ThemeConfigError, match="empty"):
            load_config_file(path)

    def test_non_mapping_raises(self, write_config) -> None:
        path = write_config("- ./templates/**/*.html\n")
        with pytest.raises(ThemeConfigError, match="must be a mapping"):
            load_config_file(path)

    def test_schema_error_names_file(self, write_config) -> None:
        path = write_config("content: ./templates\nunknown: 1\n")
        with pytest.raises(ThemeConfigError) as exc_info:
            load_config_file(path)

        assert str(path) in str(exc_info.value)
        assert exc_info.value.source == str(path)
        assert "validation failed" in str(exc_info.value)

    def test_empty_plugins_key_loads_as_empty(self, write_config) -> None:
        """A bare `plugins:` key is an empty list, never None."""
        path = write_config("content:\n  - a.html\nplugins:\n")
        assert load_config_file(path).plugins == ()

    def test_invalid_color_loads(self, write_config) -> None:
        """Token values are not checked at load time."""
        path = write_config(
            "content: [a.html]\ntheme:\n  extend:\n    colors:\n      main: nope\n"
        )
        assert load_config_file(path).theme_extensions["colors"]["main"] == "nope"


class TestConfigFileSource:
    def test_location_is_path(self, tmp_path: Path) -> None:
        source = ConfigFileSource(tmp_path / "tailwind.config.yaml")
        assert source.location == str(tmp_path / "tailwind.config.yaml")

    def test_read_returns_raw_mapping(self, shipped_config_path: Path) -> None:
        data = ConfigFileSource(shipped_config_path).read()
        assert data["content"] == ["./templates/**/*.html"]
        assert data["theme"]["extend"]["colors"]["widget"] == "#3c416e"
        assert data["plugins"] == []

    def test_directory_raises_config_error(self, tmp_path: Path) -> None:
        """A directory at the config path is reported, not read."""
        with pytest.raises(ThemeConfigError, match="not a file") as exc_info:
            ConfigFileSource(tmp_path).read()
        assert exc_info.value.source == str(tmp_path)

    def test_invalid_utf8_raises_config_error(self, tmp_path: Path) -> None:
        path = tmp_path / "tailwind.config.yaml"
        path.write_bytes(b"content: [\xff\xfe]")

        with pytest.raises(ThemeConfigError, match="not valid UTF-8") as exc_info:
            ConfigFileSource(path).read()

        assert str(path) in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestFindConfigFile:
    """Well-known file-name lookup."""

    def test_none_when_missing(self, tmp_path: Path) -> None:
        assert find_config_file(tmp_path) is None

    def test_finds_each_name(self, tmp_path: Path) -> None:
        for name in CONFIG_FILE_NAMES:
            path = tmp_path / name
            path.write_text("content: [a.html]\n")
            assert find_config_file(tmp_path) == path
            path.unlink()

    def test_yaml_preferred_over_json(self, tmp_path: Path) -> None:
        (tmp_path / "tailwind.config.json").write_text("{}")
        (tmp_path / "tailwind.config.yaml").write_text("content: [a.html]\n")
        assert find_config_file(tmp_path) == tmp_path / "tailwind.config.yaml"

    def test_directory_with_config_name_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "tailwind.config.yaml").mkdir()
        assert find_config_file(tmp_path) is None


class TestWriteConfigFile:
    @pytest.mark.parametrize("name", ["out.yaml", "out.yml", "out.json"])
    def test_written_file_reloads_equal(self, tmp_path: Path, name: str) -> None:
        path = write_config_file(load(), tmp_path / "nested" / name)
        assert load_config_file(path) == load()

    def test_yaml_keeps_key_order(self, tmp_path: Path) -> None:
        path = write_config_file(load(), tmp_path / "out.yaml")
        data = yaml.safe_load(path.read_text())
        assert list(data) == ["content", "theme", "plugins"]
        assert list(data["theme"]["extend"]["colors"]) == ["main", "widget"]
