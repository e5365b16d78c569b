"""Recipe Units - Parsing, conversion and display of recipe measurements."""

__version__ = "0.1.0"

from . import amounts, ingredients, units
from .amounts import format_amount, parse_amount
from .ingredients import (
    format_ingredient_for_display,
    format_ingredient_for_display_enhanced,
    format_temperature_for_display,
    get_enhanced_conversion,
)
from .units import (
    Measurement,
    MeasurementSystem,
    TemperatureUnit,
    UnitCategory,
    convert_temperature,
    convert_to_canonical,
    get_best_display_unit,
    get_unit_category,
    normalize_unit,
)

__all__ = [
    "amounts",
    "ingredients",
    "units",
    "Measurement",
    "MeasurementSystem",
    "TemperatureUnit",
    "UnitCategory",
    "normalize_unit",
    "parse_amount",
    "get_unit_category",
    "convert_to_canonical",
    "convert_temperature",
    "get_best_display_unit",
    "format_amount",
    "format_ingredient_for_display",
    "format_ingredient_for_display_enhanced",
    "get_enhanced_conversion",
    "format_temperature_for_display",
]
