"""Ingredient-level conversion and display formatting."""

from .formatting import (
    can_convert,
    format_ingredient_for_display,
    format_ingredient_for_display_enhanced,
    format_temperature_for_display,
    get_enhanced_conversion,
    is_descriptive_amount,
    resolve_measurement_system,
)
from .frames import format_ingredient_frame
from .overrides import (
    COOKING_CONVERSIONS,
    CookingEquivalent,
    OverrideEntry,
    get_cooking_equivalents,
    lookup_override,
)
from .toggles import UnitToggles

__all__ = [
    "format_ingredient_for_display",
    "format_ingredient_for_display_enhanced",
    "get_enhanced_conversion",
    "format_temperature_for_display",
    "can_convert",
    "is_descriptive_amount",
    "resolve_measurement_system",
    "format_ingredient_frame",
    "COOKING_CONVERSIONS",
    "CookingEquivalent",
    "OverrideEntry",
    "get_cooking_equivalents",
    "lookup_override",
    "UnitToggles",
]
