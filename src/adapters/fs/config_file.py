"""
Config file adapter - read theme configs from YAML or JSON files.

Implements ConfigSourcePort for files on disk, plus the well-known
file-name lookup used when no explicit path is given.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from src.components.theme_config import ThemeConfig, ThemeConfigError, read_config

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = (
    "tailwind.config.yaml",
    "tailwind.config.yml",
    "tailwind.config.json",
)
"""Looked up in this order; the first existing file wins."""

YAML_SUFFIXES = (".yaml", ".yml")


class ConfigFileSource:
    """ConfigSourcePort backed by a single YAML or JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def read(self) -> dict[str, Any]:
        """
        Parse the file into a raw mapping.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ThemeConfigError: If the path is not a readable UTF-8 file, the
                syntax is invalid or the file is empty.
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Config file not found: {self.path}")
        if not self.path.is_file():
            raise ThemeConfigError("Config path is not a file", source=self.location)

        try:
            content = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ThemeConfigError(
                f"Config file is not valid UTF-8: {e}", source=self.location
            ) from e
        except OSError as e:
            raise ThemeConfigError(f"Cannot read config file: {e}", source=self.location) from e

        if self.path.suffix.lower() == ".json":
            try:
                data = json.loads(content) if content.strip() else None
            except json.JSONDecodeError as e:
                raise ThemeConfigError(f"Invalid JSON syntax: {e}", source=self.location) from e
        else:
            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError as e:
                raise ThemeConfigError(f"Invalid YAML syntax: {e}", source=self.location) from e

        if data is None:
            raise ThemeConfigError("Config file is empty", source=self.location)

        return data


def find_config_file(directory: Path | str) -> Path | None:
    """
    Find the config file in a directory by the well-known names.

    Returns:
        Path of the first match, or None when no config file exists.
    """
    base = Path(directory)
    for name in CONFIG_FILE_NAMES:
        candidate = base / name
        if candidate.is_file():
            logger.debug("Found theme config %s", candidate)
            return candidate
    return None


def load_config_file(path: Path | str) -> ThemeConfig:
    """
    Load and validate a config file.

    Raises FileNotFoundError if the file is missing.
    Raises ThemeConfigError if the syntax or schema is invalid.
    """
    return read_config(ConfigFileSource(path))


def write_config_file(config: ThemeConfig, path: Path | str) -> Path:
    """Write a config in file shape; the format follows the file suffix."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    data = config.to_file_dict()
    if target.suffix.lower() in YAML_SUFFIXES:
        text = yaml.safe_dump(data, sort_keys=False)
    else:
        text = json.dumps(data, indent=2) + "\n"

    target.write_text(text, encoding="utf-8")
    logger.info("Wrote theme config to %s", target)
    return target
