"""Hand-picked cooking conversions that take precedence over arithmetic.

Keys are the exact "<amount> <unit>" strings stored with a recipe; they are
not normalized, so "1 cup" matches but "1 Cup" or "1.0 cup" do not.
"""

import dataclasses
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from recipe_units.units.models import (
    ConversionDirection,
    MeasurementSystem,
    UnitCategory,
)

_I2M = ConversionDirection.IMPERIAL_TO_METRIC
_M2I = ConversionDirection.METRIC_TO_IMPERIAL


@dataclasses.dataclass(frozen=True)
class OverrideEntry:
    amount: str
    unit: str


@dataclasses.dataclass(frozen=True)
class CookingEquivalent:
    amount: str
    unit: str
    system: MeasurementSystem


def _entries(pairs) -> Mapping[str, OverrideEntry]:
    return MappingProxyType(
        {key: OverrideEntry(amount, unit) for key, (amount, unit) in pairs.items()}
    )


COOKING_CONVERSIONS: Mapping[
    Tuple[UnitCategory, ConversionDirection], Mapping[str, OverrideEntry]
] = MappingProxyType(
    {
        (UnitCategory.VOLUME, _I2M): _entries(
            {
                "1/4 tsp": ("1.25", "ml"),
                "1/2 tsp": ("2.5", "ml"),
                "1 tsp": ("5", "ml"),
                "2 tsp": ("10", "ml"),
                "1/2 tbsp": ("7.5", "ml"),
                "1 tbsp": ("15", "ml"),
                "2 tbsp": ("30", "ml"),
                "1/4 cup": ("60", "ml"),
                "1/3 cup": ("80", "ml"),
                "1/2 cup": ("125", "ml"),
                "2/3 cup": ("160", "ml"),
                "3/4 cup": ("180", "ml"),
                "1 cup": ("250", "ml"),
                "2 cups": ("500", "ml"),
                "3 cups": ("750", "ml"),
                "4 cups": ("1", "L"),
            }
        ),
        (UnitCategory.VOLUME, _M2I): _entries(
            {
                "5 ml": ("1", "tsp"),
                "15 ml": ("1", "tbsp"),
                "30 ml": ("2", "tbsp"),
                "60 ml": ("1/4", "cup"),
                "125 ml": ("1/2", "cup"),
                "250 ml": ("1", "cup"),
                "500 ml": ("2", "cups"),
                "1 L": ("4", "cups"),
            }
        ),
        (UnitCategory.WEIGHT, _I2M): _entries(
            {
                "1 oz": ("30", "g"),
                "2 oz": ("60", "g"),
                "4 oz": ("125", "g"),
                "8 oz": ("250", "g"),
                "12 oz": ("375", "g"),
                "1 lb": ("450", "g"),
                "2 lbs": ("900", "g"),
                "3 lbs": ("1.4", "kg"),
            }
        ),
        (UnitCategory.WEIGHT, _M2I): _entries(
            {
                "30 g": ("1", "oz"),
                "125 g": ("4", "oz"),
                "250 g": ("8", "oz"),
                "450 g": ("1", "lb"),
                "500 g": ("1.1", "lbs"),
                "1 kg": ("2.2", "lbs"),
            }
        ),
    }
)

COOKING_EQUIVALENTS: Mapping[str, Tuple[CookingEquivalent, ...]] = MappingProxyType(
    {
        "1 tsp": (
            CookingEquivalent("5", "ml", MeasurementSystem.METRIC),
            CookingEquivalent("1/3", "tbsp", MeasurementSystem.IMPERIAL),
        ),
        "1 tbsp": (
            CookingEquivalent("15", "ml", MeasurementSystem.METRIC),
            CookingEquivalent("3", "tsp", MeasurementSystem.IMPERIAL),
        ),
        "1 cup": (
            CookingEquivalent("250", "ml", MeasurementSystem.METRIC),
            CookingEquivalent("16", "tbsp", MeasurementSystem.IMPERIAL),
            CookingEquivalent("8", "fl oz", MeasurementSystem.IMPERIAL),
        ),
        "1 lb": (
            CookingEquivalent("450", "g", MeasurementSystem.METRIC),
            CookingEquivalent("16", "oz", MeasurementSystem.IMPERIAL),
        ),
    }
)


def lookup_override(
    amount: str,
    unit: str,
    category: UnitCategory,
    target_system: MeasurementSystem,
) -> Optional[OverrideEntry]:
    """Find the curated conversion for an exact amount and unit.

    Args:
        amount: Amount text exactly as stored (e.g. "1/2").
        unit: Unit text exactly as stored (e.g. "cup").
        category: Category of ``unit``.
        target_system: System the result should be expressed in.

    Returns:
        The curated OverrideEntry, or None on a miss.
    """
    direction = ConversionDirection.towards(MeasurementSystem(target_system))
    table = COOKING_CONVERSIONS.get((category, direction))
    if table is None:
        return None
    return table.get(f"{amount} {unit}")


def get_cooking_equivalents(amount: str, unit: str) -> List[CookingEquivalent]:
    """Return reference equivalents for a handful of everyday measures."""
    return list(COOKING_EQUIVALENTS.get(f"{amount} {unit}", ()))
