"""
Theme config Functional Core: the declared record and theme merging.

No I/O operations - all functions are pure and deterministic. Inputs are
never mutated; every returned mapping is a fresh copy.
"""

from __future__ import annotations

from collections.abc import Mapping

from src.components.theme_config.models import ThemeConfig, TokenMap

TokenNames = dict[str, tuple[str, ...]]

# ═══════════════════════════════════════════════════════════════════════════
# DECLARED CONFIG
# ═══════════════════════════════════════════════════════════════════════════

CONTENT_PATTERNS = ("./templates/**/*.html",)
"""Template files scanned for class-name usage."""

COLOR_EXTENSIONS = (
    ("main", "#353a65"),
    ("widget", "#3c416e"),
)
"""Colors layered on top of the default palette."""


def load() -> ThemeConfig:
    """
    Return the declared configuration record.

    Deterministic and side-effect free; two calls return equal records.
    """
    return ThemeConfig(
        content_patterns=CONTENT_PATTERNS,
        theme_extensions={"colors": dict(COLOR_EXTENSIONS)},
        theme_overrides={},
        plugins=(),
    )


# ═══════════════════════════════════════════════════════════════════════════
# DEFAULT THEME
# Small built-in default, Tailwind naming
# ═══════════════════════════════════════════════════════════════════════════

_DEFAULT_THEME: dict[str, tuple[tuple[str, str], ...]] = {
    "colors": (
        ("inherit", "inherit"),
        ("current", "currentColor"),
        ("transparent", "transparent"),
        ("black", "#000000"),
        ("white", "#ffffff"),
        ("gray-100", "#f3f4f6"),
        ("gray-300", "#d1d5db"),
        ("gray-500", "#6b7280"),
        ("gray-700", "#374151"),
        ("gray-900", "#111827"),
    ),
    # 4px base unit
    "spacing": (
        ("0", "0px"),
        ("px", "1px"),
        ("0.5", "0.125rem"),
        ("1", "0.25rem"),
        ("2", "0.5rem"),
        ("3", "0.75rem"),
        ("4", "1rem"),
        ("6", "1.5rem"),
        ("8", "2rem"),
        ("12", "3rem"),
        ("16", "4rem"),
        ("24", "6rem"),
    ),
    "fontFamily": (
        ("sans", "ui-sans-serif, system-ui, sans-serif"),
        ("mono", "ui-monospace, monospace"),
    ),
}


def get_default_theme() -> TokenMap:
    """Return a fresh copy of the built-in default theme."""
    return {category: dict(tokens) for category, tokens in _DEFAULT_THEME.items()}


# ═══════════════════════════════════════════════════════════════════════════
# MERGING
# ═══════════════════════════════════════════════════════════════════════════


def merge_theme(
    default: Mapping[str, Mapping[str, str]],
    extensions: Mapping[str, Mapping[str, str]],
) -> TokenMap:
    """
    Layer theme extensions over a default theme.

    Category-scoped shallow override: within each extended category the
    declared tokens win on collision and every other default token is kept.
    Categories only present in the default pass through unchanged. Nested
    values are not merged any deeper than one level.

    Args:
        default: Default theme (category -> token -> value)
        extensions: Declared extensions, same shape

    Returns:
        New merged theme mapping
    """
    result: TokenMap = {category: dict(tokens) for category, tokens in default.items()}

    for category, tokens in extensions.items():
        merged = result.setdefault(category, {})
        for name, value in tokens.items():
            merged[name] = value

    return result


def apply_overrides(
    default: Mapping[str, Mapping[str, str]],
    overrides: Mapping[str, Mapping[str, str]],
) -> TokenMap:
    """
    Replace whole default categories with declared ones.

    Unlike merge_theme, an overridden category keeps none of its default tokens.
    """
    result: TokenMap = {category: dict(tokens) for category, tokens in default.items()}
    for category, tokens in overrides.items():
        result[category] = dict(tokens)
    return result


def resolve_theme(
    default: Mapping[str, Mapping[str, str]],
    config: ThemeConfig,
) -> TokenMap:
    """
    Compute the effective theme of a config.

    Overrides are applied first, then extensions are merged on top.
    """
    base = apply_overrides(default, config.theme_overrides)
    return merge_theme(base, config.theme_extensions)


def diff_theme(
    base: Mapping[str, Mapping[str, str]],
    resolved: Mapping[str, Mapping[str, str]],
) -> tuple[TokenNames, TokenNames, TokenNames]:
    """
    Report which tokens a resolution added, changed and dropped.

    Dropped tokens come from overrides, which replace a whole category.

    Returns:
        (added, overridden, removed), each category -> token names.
        Added and overridden follow resolved order, removed follows base order.
    """
    added: TokenNames = {}
    overridden: TokenNames = {}
    removed: TokenNames = {}

    for category, tokens in resolved.items():
        before = base.get(category, {})
        new = tuple(name for name in tokens if name not in before)
        changed = tuple(
            name for name, value in tokens.items() if name in before and before[name] != value
        )
        if new:
            added[category] = new
        if changed:
            overridden[category] = changed

    for category, tokens in base.items():
        after = resolved.get(category, {})
        gone = tuple(name for name in tokens if name not in after)
        if gone:
            removed[category] = gone

    return added, overridden, removed
