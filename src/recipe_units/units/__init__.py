"""Unit normalization, categorization and conversion."""

from .conversion import convert_temperature, convert_to_canonical
from .display import DISPLAY_STRATEGIES, get_best_display_unit
from .models import (
    ConversionDirection,
    EnhancedConversion,
    Measurement,
    MeasurementSystem,
    TemperatureUnit,
    UnitCategory,
)
from .normalization import get_unit_category, normalize_unit

__all__ = [
    "ConversionDirection",
    "EnhancedConversion",
    "Measurement",
    "MeasurementSystem",
    "TemperatureUnit",
    "UnitCategory",
    "normalize_unit",
    "get_unit_category",
    "convert_temperature",
    "convert_to_canonical",
    "get_best_display_unit",
    "DISPLAY_STRATEGIES",
]
