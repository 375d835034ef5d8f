"""
Theme config component - Port interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol


class ConfigSourcePort(Protocol):
    """Source of a raw, file-shaped config mapping."""

    @property
    def location(self) -> str:
        """Human-readable location of the source (path, URL, ...)."""
        ...

    def read(self) -> dict[str, Any]:
        """
        Read the raw config mapping.

        Raises FileNotFoundError if the source is missing and
        ThemeConfigError if it cannot be parsed.
        """
        ...
