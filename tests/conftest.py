from pathlib import Path

import pytest

from src.components.theme_config import ThemeConfig, load

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def declared_config() -> ThemeConfig:
    return load()


@pytest.fixture
def shipped_config_path() -> Path:
    """The config file checked in next to the templates."""
    path = PROJECT_ROOT / "ui" / "tailwind.config.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Config not found at {path}")
    return path


@pytest.fixture
def write_config(tmp_path):
    """
    Write raw text to a config file in a temp dir and return its path.
    """

    def _write(text: str, name: str = "tailwind.config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
