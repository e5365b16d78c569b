"""Conversion into canonical storage units and between temperature scales."""

import logging

from recipe_units.amounts.number_utils import round_half_up
from recipe_units.units.models import Measurement, UnitCategory
from recipe_units.units.normalization import get_unit_category, normalize_unit
from recipe_units.units.tables import CANONICAL_UNITS, CONVERSION_FACTORS

logger = logging.getLogger(__name__)


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a temperature between Fahrenheit and Celsius.

    Args:
        value: Temperature reading.
        from_unit: Unit of ``value`` (any spelling, e.g. "F", "°C", "celsius").
        to_unit: Unit to convert into.

    Returns:
        The converted temperature. Identical units, or any pair other than
        Fahrenheit/Celsius, return ``value`` unchanged.

    Examples:
        >>> convert_temperature(32, "°F", "°C")
        0.0
        >>> convert_temperature(100, "°C", "°F")
        212.0
    """
    source = normalize_unit(from_unit)
    target = normalize_unit(to_unit)

    if source == target:
        return value

    if source == "°F" and target == "°C":
        return (value - 32) * 5 / 9

    if source == "°C" and target == "°F":
        return value * 9 / 5 + 32

    return value


def convert_to_canonical(amount: float, unit: str) -> Measurement:
    """Convert an amount into its category's canonical storage unit.

    Volumes become fluid ounces and weights become ounces, both rounded to
    two decimals. Temperatures become whole degrees Fahrenheit. Count and
    unrecognized units pass through with their normalized spelling.

    Args:
        amount: Numeric amount, typically from parse_amount.
        unit: Unit in any supported spelling.

    Returns:
        A Measurement in the canonical unit.

    Examples:
        >>> convert_to_canonical(1, "cup")
        Measurement(amount=8.0, unit='fl oz')
        >>> convert_to_canonical(1, "lb")
        Measurement(amount=16.0, unit='oz')
    """
    normalized = normalize_unit(unit)
    category = get_unit_category(normalized)

    if category is None or category == UnitCategory.COUNT:
        return Measurement(amount, normalized)

    canonical_unit = CANONICAL_UNITS[category]

    if category == UnitCategory.TEMPERATURE:
        degrees = convert_temperature(amount, normalized, canonical_unit)
        return Measurement(round_half_up(degrees), canonical_unit)

    factor = CONVERSION_FACTORS.get(category, {}).get(normalized)
    if factor is None:
        logger.debug(
            f"No {category.value} conversion factor for '{normalized}', "
            "returning amount unchanged"
        )
        return Measurement(amount, normalized)

    return Measurement(round_half_up(amount * factor, 2), canonical_unit)
