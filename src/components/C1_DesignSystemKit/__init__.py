"""
C1-DesignSystemKit: Design system foundations component.

Provides validation utilities for theme tokens: color literal checks,
WCAG contrast calculations and whole-config token reports.
"""

from src.components.C1_DesignSystemKit.fc import (
    COLOR_CATEGORIES,
    NAMED_COLORS,
    ValidationResult,
    calculate_contrast_ratio,
    check_wcag_aa_compliance,
    is_color_literal,
    validate_color_token,
    validate_config,
)

__all__ = [
    "ValidationResult",
    "is_color_literal",
    "validate_color_token",
    "calculate_contrast_ratio",
    "check_wcag_aa_compliance",
    "validate_config",
    "COLOR_CATEGORIES",
    "NAMED_COLORS",
]
