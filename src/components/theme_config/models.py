"""
Theme config component - Record and input/output models.

ThemeConfig is the configuration record read by the utility-class generator:
content patterns to scan, theme extensions layered over the default theme,
and the plugin list.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    model_validator,
)

if TYPE_CHECKING:
    from .ports import ConfigSourcePort


class ThemeConfigError(ValueError):
    """Raised when a config source cannot be turned into a ThemeConfig."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)


# --- Read-only Mappings ---


class FrozenMap(Mapping[str, Any]):
    """Read-only, hashable mapping. Item assignment raises TypeError."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"FrozenMap({self._data!r})"


def freeze(value: Any) -> Any:
    """Recursively turn dicts into FrozenMaps and lists into tuples."""
    if isinstance(value, Mapping):
        return FrozenMap({k: freeze(v) for k, v in value.items()})
    if isinstance(value, list | tuple):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of freeze: plain dicts and lists, ready for YAML/JSON."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value


FrozenTokenMap = Annotated[
    dict[str, dict[str, str]],
    AfterValidator(freeze),
    PlainSerializer(thaw, return_type=dict[str, dict[str, str]]),
]
"""Validated like a nested dict, stored as nested FrozenMaps."""

FrozenOptions = Annotated[
    dict[str, Any],
    AfterValidator(freeze),
    PlainSerializer(thaw, return_type=dict[str, Any]),
]


# --- Record ---


class PluginDescriptor(BaseModel):
    """
    Opaque plugin registration entry.

    Only the name is interpreted; options are handed to the plugin untouched.
    A bare string in a config file is shorthand for a descriptor with no options.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    options: FrozenOptions = Field(default_factory=FrozenMap)

    @model_validator(mode="before")
    @classmethod
    def _expand_shorthand(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data


TokenMap = dict[str, dict[str, str]]


class ThemeConfig(BaseModel):
    """
    Configuration record.

    Accepts both the Python field names and the config-file shape
    (``content`` / ``theme.extend`` / ``plugins``). Token values are stored as
    given; colors are only checked by the design-system validator.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    content_patterns: tuple[str, ...] = Field(default=(), alias="content")
    theme_extensions: FrozenTokenMap = Field(default_factory=FrozenMap)
    theme_overrides: FrozenTokenMap = Field(default_factory=FrozenMap)
    plugins: tuple[PluginDescriptor, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _unpack_theme_section(cls, data: Any) -> Any:
        """Split a file-shaped ``theme`` section into overrides and extensions."""
        if not isinstance(data, dict) or "theme" not in data:
            return data

        conflicting = [k for k in ("theme_extensions", "theme_overrides") if k in data]
        if conflicting:
            raise ValueError(
                f"'theme' cannot be combined with {', '.join(conflicting)}; use one shape"
            )

        data = dict(data)
        theme = data.pop("theme")
        if theme is None:
            theme = {}
        if not isinstance(theme, dict):
            raise ValueError("'theme' must be a mapping of token categories")

        theme = dict(theme)
        extend = theme.pop("extend", None)
        data["theme_extensions"] = extend or {}
        data["theme_overrides"] = theme
        return data

    @model_validator(mode="before")
    @classmethod
    def _default_missing_plugins(cls, data: Any) -> Any:
        # `plugins:` with no value in YAML parses as None; treat it as empty
        if isinstance(data, dict) and "plugins" in data and data["plugins"] is None:
            data = {k: v for k, v in data.items() if k != "plugins"}
        return data

    def to_file_dict(self) -> dict[str, Any]:
        """Render the record back into the config-file shape."""
        theme: dict[str, Any] = {c: dict(t) for c, t in self.theme_overrides.items()}
        theme["extend"] = {c: dict(t) for c, t in self.theme_extensions.items()}
        return {
            "content": list(self.content_patterns),
            "theme": theme,
            "plugins": [p.model_dump() for p in self.plugins],
        }


# --- Input Models ---


@dataclass(frozen=True)
class LoadConfigInput:
    """Input for loading a config. No source means the declared record."""

    source: ConfigSourcePort | None = None


@dataclass(frozen=True)
class ResolveThemeInput:
    """Input for resolving a config against a default theme."""

    config: ThemeConfig
    default_theme: TokenMap | None = None


@dataclass(frozen=True)
class ValidateConfigInput:
    """Input for validating the tokens of a config."""

    config: ThemeConfig


# --- Output Models ---


@dataclass(frozen=True)
class LoadConfigOutput:
    """Output from loading a config."""

    config: ThemeConfig
    source: str


@dataclass(frozen=True)
class ResolveThemeOutput:
    """Output from resolving a theme."""

    theme: TokenMap
    added: dict[str, tuple[str, ...]] = field(default_factory=dict)
    overridden: dict[str, tuple[str, ...]] = field(default_factory=dict)
    removed: dict[str, tuple[str, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class ValidateConfigOutput:
    """Output from validating a config."""

    is_valid: bool
    violations: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
