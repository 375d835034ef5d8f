"""
C1-DesignSystemKit Functional Core: Pure validation functions.

No I/O operations - all functions are pure and deterministic.
Validates theme tokens after loading; loading itself never rejects a
token value, so this is where malformed colors are reported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.components.theme_config.models import ThemeConfig


@dataclass
class ValidationResult:
    """Result of a design system validation check."""

    is_valid: bool
    violations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# COLOR SYSTEM
# Accepts hex, rgb()/rgba(), hsl()/hsla(), CSS named colors and keywords
# ═══════════════════════════════════════════════════════════════════════════

HEX_COLOR_PATTERN = re.compile(r"^#([0-9A-Fa-f]{3,4}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")

_NUM = r"[+-]?(?:\d+\.?\d*|\.\d+)"
_ALPHA = rf"{_NUM}%?"

RGB_COLOR_PATTERN = re.compile(
    rf"^rgba?\(\s*{_NUM}%?\s*(?:,\s*{_NUM}%?\s*,\s*{_NUM}%?\s*(?:,\s*{_ALPHA}\s*)?"
    rf"|\s+{_NUM}%?\s+{_NUM}%?\s*(?:/\s*{_ALPHA}\s*)?)\)$",
    re.IGNORECASE,
)

HSL_COLOR_PATTERN = re.compile(
    rf"^hsla?\(\s*{_NUM}(?:deg|rad|turn)?\s*(?:,\s*{_NUM}%\s*,\s*{_NUM}%\s*(?:,\s*{_ALPHA}\s*)?"
    rf"|\s+{_NUM}%\s+{_NUM}%\s*(?:/\s*{_ALPHA}\s*)?)\)$",
    re.IGNORECASE,
)

COLOR_KEYWORDS = ("transparent", "currentcolor", "inherit", "initial", "unset")

NAMED_COLORS = frozenset(
    """
    aliceblue antiquewhite aqua aquamarine azure beige bisque black blanchedalmond
    blue blueviolet brown burlywood cadetblue chartreuse chocolate coral
    cornflowerblue cornsilk crimson cyan darkblue darkcyan darkgoldenrod darkgray
    darkgreen darkgrey darkkhaki darkmagenta darkolivegreen darkorange darkorchid
    darkred darksalmon darkseagreen darkslateblue darkslategray darkslategrey
    darkturquoise darkviolet deeppink deepskyblue dimgray dimgrey dodgerblue
    firebrick floralwhite forestgreen fuchsia gainsboro ghostwhite gold goldenrod
    gray green greenyellow grey honeydew hotpink indianred indigo ivory khaki
    lavender lavenderblush lawngreen lemonchiffon lightblue lightcoral lightcyan
    lightgoldenrodyellow lightgray lightgreen lightgrey lightpink lightsalmon
    lightseagreen lightskyblue lightslategray lightslategrey lightsteelblue
    lightyellow lime limegreen linen magenta maroon mediumaquamarine mediumblue
    mediumorchid mediumpurple mediumseagreen mediumslateblue mediumspringgreen
    mediumturquoise mediumvioletred midnightblue mintcream mistyrose moccasin
    navajowhite navy oldlace olive olivedrab orange orangered orchid palegoldenrod
    palegreen paleturquoise palevioletred papayawhip peachpuff peru pink plum
    powderblue purple rebeccapurple red rosybrown royalblue saddlebrown salmon
    sandybrown seagreen seashell sienna silver skyblue slateblue slategray
    slategrey snow springgreen steelblue tan teal thistle tomato turquoise violet
    wheat white whitesmoke yellow yellowgreen
    """.split()
)
"""CSS Color Module Level 4 named colors."""


def is_color_literal(value: str) -> bool:
    """Return True if value is a syntactically valid color literal."""
    candidate = value.strip()
    lowered = candidate.lower()
    return bool(
        HEX_COLOR_PATTERN.match(candidate)
        or RGB_COLOR_PATTERN.match(candidate)
        or HSL_COLOR_PATTERN.match(candidate)
        or lowered in NAMED_COLORS
        or lowered in COLOR_KEYWORDS
    )


def validate_color_token(value: str) -> ValidationResult:
    """
    Validate a color token value.

    Args:
        value: Color literal (hex, rgb, hsl, named or keyword)

    Returns:
        ValidationResult with violations if the literal is not a color
    """
    if is_color_literal(value):
        return ValidationResult(is_valid=True)

    return ValidationResult(
        is_valid=False,
        violations=[
            f"Invalid color literal: {value!r}. Expected hex, rgb(), hsl() or a named color"
        ],
    )


def _hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert hex color to RGB tuple, ignoring any alpha channel."""
    hex_color = hex_color.lstrip("#")

    if len(hex_color) in (3, 4):
        hex_color = "".join(c * 2 for c in hex_color)

    return (
        int(hex_color[0:2], 16),
        int(hex_color[2:4], 16),
        int(hex_color[4:6], 16),
    )


def _relative_luminance(r: int, g: int, b: int) -> float:
    """
    Calculate relative luminance per WCAG 2.1.

    Formula: L = 0.2126 * R + 0.7152 * G + 0.0722 * B
    Where R, G, B are sRGB values normalized and linearized.
    """

    def linearize(c: int) -> float:
        c_srgb = c / 255
        if c_srgb <= 0.04045:
            return c_srgb / 12.92
        return float(((c_srgb + 0.055) / 1.055) ** 2.4)

    return 0.2126 * linearize(r) + 0.7152 * linearize(g) + 0.0722 * linearize(b)


def calculate_contrast_ratio(fg: str, bg: str) -> float:
    """
    Calculate WCAG contrast ratio between two hex colors.

    Args:
        fg: Foreground color in hex format
        bg: Background color in hex format

    Returns:
        Contrast ratio (1.0 to 21.0)

    Raises:
        ValueError: If either color is not a hex literal
    """
    for color in (fg, bg):
        if not HEX_COLOR_PATTERN.match(color):
            raise ValueError(f"Contrast needs hex colors, got {color!r}")

    l1 = _relative_luminance(*_hex_to_rgb(fg))
    l2 = _relative_luminance(*_hex_to_rgb(bg))

    lighter = max(l1, l2)
    darker = min(l1, l2)

    return (lighter + 0.05) / (darker + 0.05)


def check_wcag_aa_compliance(
    fg: str,
    bg: str,
    is_large_text: bool = False,
) -> ValidationResult:
    """
    Check WCAG 2.1 AA compliance for color contrast.

    Args:
        fg: Foreground color in hex format
        bg: Background color in hex format
        is_large_text: True if text is >= 18pt or >= 14pt bold

    Returns:
        ValidationResult with compliance status
    """
    ratio = calculate_contrast_ratio(fg, bg)
    threshold = 3.0 if is_large_text else 4.5

    if ratio >= threshold:
        return ValidationResult(is_valid=True)

    return ValidationResult(
        is_valid=False,
        violations=[
            f"Contrast ratio {ratio:.2f}:1 does not meet WCAG AA "
            f"({threshold}:1 required for {'large' if is_large_text else 'normal'} text)"
        ],
        warnings=[f"Current contrast: {ratio:.2f}:1, needed: {threshold}:1"],
    )


# ═══════════════════════════════════════════════════════════════════════════
# CONFIG CHECKS
# ═══════════════════════════════════════════════════════════════════════════

COLOR_CATEGORIES = ("colors", "backgroundColor", "textColor", "borderColor")
"""Theme categories whose token values must be color literals."""


def validate_config(config: ThemeConfig) -> ValidationResult:
    """
    Check the tokens and content patterns of a loaded config.

    Invalid color tokens are violations. Empty or duplicated content
    patterns are warnings: they only make the scanner find nothing, or
    read the same files twice.

    Args:
        config: Loaded configuration record

    Returns:
        ValidationResult listing every problem found
    """
    violations: list[str] = []
    warnings: list[str] = []

    sections = (("theme.extend", config.theme_extensions), ("theme", config.theme_overrides))
    for prefix, categories in sections:
        for category in COLOR_CATEGORIES:
            for name, value in categories.get(category, {}).items():
                if not is_color_literal(value):
                    violations.append(
                        f"{prefix}.{category}.{name}: {value!r} is not a valid color literal"
                    )

    if not config.content_patterns:
        warnings.append("No content patterns: the scanner will not find any class names")

    seen: set[str] = set()
    for pattern in config.content_patterns:
        if pattern in seen:
            warnings.append(f"Duplicate content pattern: {pattern!r}")
        seen.add(pattern)

    return ValidationResult(
        is_valid=len(violations) == 0,
        violations=violations,
        warnings=warnings,
    )
