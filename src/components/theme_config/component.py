"""
Theme config component - Configuration loading and theme resolution.

Shell Layer - reads config sources, converts parse errors and dispatches
to the functional core.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from src.components.C1_DesignSystemKit.fc import validate_config

from .fc import diff_theme, get_default_theme, load, resolve_theme
from .models import (
    LoadConfigInput,
    LoadConfigOutput,
    ResolveThemeInput,
    ResolveThemeOutput,
    ThemeConfig,
    ThemeConfigError,
    ValidateConfigInput,
    ValidateConfigOutput,
)
from .ports import ConfigSourcePort

logger = logging.getLogger(__name__)

DECLARED_SOURCE = "<declared>"


# --- Source Parsing ---


def parse_config(data: object, location: str | None = None) -> ThemeConfig:
    """
    Validate a raw, file-shaped mapping into a ThemeConfig.

    Raises:
        ThemeConfigError: If the mapping does not match the record schema.
    """
    if data is None:
        raise ThemeConfigError("Config is empty", source=location)
    if not isinstance(data, dict):
        raise ThemeConfigError(
            f"Config must be a mapping, got {type(data).__name__}", source=location
        )

    try:
        return ThemeConfig.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ThemeConfigError(f"Config validation failed:\n{e}", source=location) from e


def read_config(source: ConfigSourcePort) -> ThemeConfig:
    """
    Read and validate a config from a source port.

    Raises:
        FileNotFoundError: If the source does not exist.
        ThemeConfigError: If the source cannot be parsed or validated.
    """
    logger.debug("Reading theme config from %s", source.location)
    config = parse_config(source.read(), location=source.location)
    logger.debug(
        "Loaded theme config from %s: %d content pattern(s), %d extended categories",
        source.location,
        len(config.content_patterns),
        len(config.theme_extensions),
    )
    return config


# --- Component Entry Points ---


def run_load(inp: LoadConfigInput) -> LoadConfigOutput:
    """
    Load a configuration record.

    Without a source the declared record is returned; this never fails.
    With a source, errors from the source propagate unchanged.

    Args:
        inp: Input with an optional config source port.

    Returns:
        LoadConfigOutput with the record and where it came from.
    """
    if inp.source is None:
        return LoadConfigOutput(config=load(), source=DECLARED_SOURCE)

    return LoadConfigOutput(config=read_config(inp.source), source=inp.source.location)


def run_resolve(inp: ResolveThemeInput) -> ResolveThemeOutput:
    """
    Resolve the effective theme of a config.

    Args:
        inp: Config plus an optional default theme; the built-in default
            theme is used when none is given.

    Returns:
        ResolveThemeOutput with the merged theme and the tokens it added,
        changed or dropped relative to the default.
    """
    default = inp.default_theme if inp.default_theme is not None else get_default_theme()
    theme = resolve_theme(default, inp.config)
    added, overridden, removed = diff_theme(default, theme)

    logger.debug(
        "Resolved theme: %d categories, added %s, overridden %s, removed %s",
        len(theme),
        added,
        overridden,
        removed,
    )
    return ResolveThemeOutput(
        theme=theme, added=added, overridden=overridden, removed=removed
    )


def run_validate(inp: ValidateConfigInput) -> ValidateConfigOutput:
    """Report invalid tokens and suspicious content patterns of a config."""
    result = validate_config(inp.config)

    for violation in result.violations:
        logger.warning("Theme config violation: %s", violation)
    for warning in result.warnings:
        logger.info("Theme config warning: %s", warning)

    return ValidateConfigOutput(
        is_valid=result.is_valid,
        violations=tuple(result.violations),
        warnings=tuple(result.warnings),
    )


def run(
    inp: LoadConfigInput | ResolveThemeInput | ValidateConfigInput,
) -> LoadConfigOutput | ResolveThemeOutput | ValidateConfigOutput:
    """
    Main entry point for the theme config component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, LoadConfigInput):
        return run_load(inp)
    elif isinstance(inp, ResolveThemeInput):
        return run_resolve(inp)
    elif isinstance(inp, ValidateConfigInput):
        return run_validate(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
