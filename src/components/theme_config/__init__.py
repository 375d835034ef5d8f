"""
Theme config component - Utility-class generator configuration.

Declares the template files to scan, the color tokens layered over the
default theme, and the (empty) plugin list.
"""

from .component import (
    DECLARED_SOURCE,
    parse_config,
    read_config,
    run,
    run_load,
    run_resolve,
    run_validate,
)
from .fc import (
    COLOR_EXTENSIONS,
    CONTENT_PATTERNS,
    apply_overrides,
    diff_theme,
    get_default_theme,
    load,
    merge_theme,
    resolve_theme,
)
from .models import (
    FrozenMap,
    LoadConfigInput,
    LoadConfigOutput,
    PluginDescriptor,
    ResolveThemeInput,
    ResolveThemeOutput,
    ThemeConfig,
    ThemeConfigError,
    TokenMap,
    ValidateConfigInput,
    ValidateConfigOutput,
)
from .ports import ConfigSourcePort

__all__ = [
    # Entry points
    "run",
    "run_load",
    "run_resolve",
    "run_validate",
    # Record
    "ThemeConfig",
    "PluginDescriptor",
    "FrozenMap",
    "ThemeConfigError",
    "TokenMap",
    # Input models
    "LoadConfigInput",
    "ResolveThemeInput",
    "ValidateConfigInput",
    # Output models
    "LoadConfigOutput",
    "ResolveThemeOutput",
    "ValidateConfigOutput",
    # Ports
    "ConfigSourcePort",
    # Functional core
    "load",
    "merge_theme",
    "apply_overrides",
    "resolve_theme",
    "diff_theme",
    "get_default_theme",
    "parse_config",
    "read_config",
    # Constants
    "CONTENT_PATTERNS",
    "COLOR_EXTENSIONS",
    "DECLARED_SOURCE",
]
