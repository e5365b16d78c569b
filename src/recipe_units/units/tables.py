"""Static lookup tables for unit normalization, categorization and conversion.

Every table here is built once at import time and exposed read-only.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

from recipe_units.units.models import MeasurementSystem, UnitCategory

# Spelling variants for each normalized unit token. Variants are matched after
# lowercasing, stripping periods and collapsing whitespace.
UNIT_MAP = {
    # Volume
    "tsp": ["tsp", "t", "teaspoon", "teaspoons", "tsps"],
    "tbsp": ["tbsp", "tbl", "tbs", "tablespoon", "tablespoons", "tbsps"],
    "fl oz": ["fl oz", "floz", "fluid ounce", "fluid ounces"],
    "cup": ["cup", "cups", "c"],
    "pt": ["pt", "pint", "pints"],
    "qt": ["qt", "quart", "quarts"],
    "gal": ["gal", "gallon", "gallons"],
    "ml": ["ml", "milliliter", "milliliters", "millilitre", "millilitres"],
    "l": ["l", "liter", "liters", "litre", "litres"],
    # Weight
    "oz": ["oz", "ounce", "ounces"],
    "lb": ["lb", "lbs", "pound", "pounds", "#"],
    "g": ["g", "gr", "gram", "grams", "gramme", "grammes"],
    "kg": ["kg", "kilo", "kilos", "kilogram", "kilograms"],
    # Temperature
    "°F": ["°f", "f", "fahrenheit", "degrees f", "deg f"],
    "°C": ["°c", "celsius", "centigrade", "degrees c", "deg c"],
}

UNIT_LOOKUP: Mapping[str, str] = MappingProxyType(
    {variant: unit for unit, variants in UNIT_MAP.items() for variant in variants}
)


def _frozen(units) -> FrozenSet[str]:
    return frozenset(units)


# Membership is tested against normalized tokens. Count words keep their
# plural spellings since the normalizer leaves them untouched.
UNIT_CATEGORIES: Mapping[UnitCategory, FrozenSet[str]] = MappingProxyType(
    {
        UnitCategory.VOLUME: _frozen(
            ["tsp", "tbsp", "fl oz", "cup", "pt", "qt", "gal", "ml", "l"]
        ),
        UnitCategory.WEIGHT: _frozen(["oz", "lb", "g", "kg"]),
        UnitCategory.TEMPERATURE: _frozen(["°F", "°C"]),
        UnitCategory.COUNT: _frozen(
            [
                "whole",
                "piece",
                "pieces",
                "item",
                "items",
                "slice",
                "slices",
                "clove",
                "cloves",
                "head",
                "heads",
                "can",
                "cans",
                "package",
                "packages",
                "pkg",
                "pkgs",
                "bunch",
                "bunches",
                "sprig",
                "sprigs",
                "stalk",
                "stalks",
                "small",
                "medium",
                "large",
                "extra large",
                "xl",
            ]
        ),
    }
)

CANONICAL_UNITS: Mapping[UnitCategory, str] = MappingProxyType(
    {
        UnitCategory.VOLUME: "fl oz",
        UnitCategory.WEIGHT: "oz",
        UnitCategory.TEMPERATURE: "°F",
    }
)

# Ratio of each unit to its category's canonical unit
FL_OZ_PER_ML = 0.033814
OZ_PER_GRAM = 0.035274

CONVERSION_FACTORS: Mapping[UnitCategory, Mapping[str, float]] = MappingProxyType(
    {
        UnitCategory.VOLUME: MappingProxyType(
            {
                "tsp": 1 / 6,
                "tbsp": 0.5,
                "fl oz": 1.0,
                "cup": 8.0,
                "pt": 16.0,
                "qt": 32.0,
                "gal": 128.0,
                "ml": FL_OZ_PER_ML,
                "l": FL_OZ_PER_ML * 1000,
            }
        ),
        UnitCategory.WEIGHT: MappingProxyType(
            {
                "oz": 1.0,
                "lb": 16.0,
                "g": OZ_PER_GRAM,
                "kg": OZ_PER_GRAM * 1000,
            }
        ),
    }
)

# Display unit names per system, keyed by magnitude bucket
DISPLAY_UNITS: Mapping[MeasurementSystem, Mapping[UnitCategory, Mapping[str, str]]] = (
    MappingProxyType(
        {
            MeasurementSystem.IMPERIAL: MappingProxyType(
                {
                    UnitCategory.VOLUME: MappingProxyType(
                        {
                            "tiny": "tsp",  # < 0.5 fl oz
                            "small": "tbsp",  # 0.5 - 2 fl oz
                            "medium": "fl oz",  # 2 - 8 fl oz
                            "large": "cup",  # 8 - 32 fl oz
                            "huge": "qt",  # 32+ fl oz
                        }
                    ),
                    UnitCategory.WEIGHT: MappingProxyType(
                        {"small": "oz", "large": "lb"}  # 16 oz
                    ),
                }
            ),
            MeasurementSystem.METRIC: MappingProxyType(
                {
                    UnitCategory.VOLUME: MappingProxyType(
                        {"small": "ml", "large": "l"}  # 1000 ml
                    ),
                    UnitCategory.WEIGHT: MappingProxyType(
                        {"small": "g", "large": "kg"}  # 500 g
                    ),
                }
            ),
        }
    )
)
