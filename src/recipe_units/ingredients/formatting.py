"""Ingredient and temperature formatting for a reader's preferred units.

This is the entry point used by recipe rendering code: it takes the amount and
unit strings stored with an ingredient and returns the text to show.
"""

import logging
import math
import re
from typing import Optional, Tuple

from recipe_units.amounts import format_amount, parse_amount, round_half_up
from recipe_units.ingredients.overrides import lookup_override
from recipe_units.units import (
    EnhancedConversion,
    MeasurementSystem,
    TemperatureUnit,
    UnitCategory,
    convert_temperature,
    convert_to_canonical,
    get_best_display_unit,
    get_unit_category,
)
from recipe_units.units.tables import FL_OZ_PER_ML, OZ_PER_GRAM

logger = logging.getLogger(__name__)

# Amounts containing these phrases are descriptive, not measurable
NON_MEASURABLE_QUALIFIERS = ("to taste", "for serving", "as needed")

# Size words used as units ("2 large eggs") are never converted
SIZE_WORDS = frozenset({"whole", "small", "medium", "large"})

_TEMPERATURE_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")


def is_descriptive_amount(amount: Optional[str], unit: Optional[str]) -> bool:
    """Check whether an ingredient's amount/unit describe rather than measure.

    Examples:
        >>> is_descriptive_amount("", "to taste")
        True
        >>> is_descriptive_amount("2", "large")
        True
        >>> is_descriptive_amount("1", "cup")
        False
    """
    if not amount:
        return True

    lowered_amount = amount.lower()
    lowered_unit = (unit or "").lower()
    if any(
        qualifier in lowered_amount or qualifier in lowered_unit
        for qualifier in NON_MEASURABLE_QUALIFIERS
    ):
        return True

    return unit in SIZE_WORDS


def can_convert(amount: Optional[str], unit: Optional[str]) -> bool:
    """Check whether switching systems would change how an ingredient reads."""
    if is_descriptive_amount(amount, unit):
        return False
    category = get_unit_category(unit)
    return category is not None and category != UnitCategory.COUNT


def format_ingredient_for_display(
    amount: str, unit: str, target_system: MeasurementSystem
) -> Tuple[str, str]:
    """Convert an ingredient amount arithmetically and format it.

    Runs the full parse -> canonical -> display unit -> format pipeline with
    no curated overrides.

    Args:
        amount: Amount text as stored (e.g. "1 1/2").
        unit: Unit text as stored (e.g. "cups").
        target_system: Measurement system to display in.

    Returns:
        A tuple of (formatted amount, display unit).

    Examples:
        >>> format_ingredient_for_display("1/2", "cup", MeasurementSystem.IMPERIAL)
        ('4', 'fl oz')
        >>> format_ingredient_for_display("2", "cups", MeasurementSystem.METRIC)
        ('473', 'ml')
    """
    numeric_amount = parse_amount(amount)
    canonical = convert_to_canonical(numeric_amount, unit)
    display = get_best_display_unit(canonical.amount, canonical.unit, target_system)
    return format_amount(display.amount), display.unit


def get_enhanced_conversion(
    amount: str, unit: str, target_system: MeasurementSystem
) -> EnhancedConversion:
    """Convert an ingredient, preferring curated cooking-friendly results.

    An exact "<amount> <unit>" match in the override table wins (e.g. "1 cup"
    becomes "250 ml" rather than "237 ml"). Otherwise metric targets get a
    plain ml/L or g/kg conversion, and anything else is returned as given.

    Args:
        amount: Amount text exactly as stored.
        unit: Unit text exactly as stored.
        target_system: Measurement system to display in.

    Returns:
        An EnhancedConversion; ``is_enhanced`` is True only for override hits.
    """
    category = get_unit_category(unit)
    if category is None or category == UnitCategory.COUNT:
        return EnhancedConversion(amount, unit, False)

    override = lookup_override(amount, unit, category, target_system)
    if override is not None:
        return EnhancedConversion(override.amount, override.unit, True)

    logger.debug(f"No curated conversion for '{amount} {unit}', converting exactly")

    if MeasurementSystem(target_system) != MeasurementSystem.METRIC:
        return EnhancedConversion(amount, unit, False)

    canonical = convert_to_canonical(parse_amount(amount), unit)

    if category == UnitCategory.VOLUME:
        ml = canonical.amount / FL_OZ_PER_ML
        if ml >= 1000:
            return EnhancedConversion(format_amount(ml / 1000), "L", False)
        return EnhancedConversion(str(int(round_half_up(ml))), "ml", False)

    if category == UnitCategory.WEIGHT:
        grams = canonical.amount / OZ_PER_GRAM
        if grams >= 1000:
            return EnhancedConversion(format_amount(grams / 1000), "kg", False)
        return EnhancedConversion(str(int(round_half_up(grams))), "g", False)

    return EnhancedConversion(amount, unit, False)


def format_ingredient_for_display_enhanced(
    amount: Optional[str], unit: Optional[str], target_system: MeasurementSystem
) -> EnhancedConversion:
    """Format an ingredient, leaving descriptive amounts untouched.

    Empty amounts, "to taste"/"for serving"/"as needed" and size words such as
    "large" are returned exactly as given. Everything else goes through
    get_enhanced_conversion.
    """
    if is_descriptive_amount(amount, unit):
        return EnhancedConversion(amount or "", unit or "", False)
    return get_enhanced_conversion(amount, unit, target_system)


def format_temperature_for_display(
    temperature: str, preference: TemperatureUnit
) -> str:
    """Format an oven temperature in the reader's preferred scale.

    Bare numbers are read as Fahrenheit; a "C" anywhere in the text marks
    Celsius. Text that does not start with a number is returned unchanged.

    Examples:
        >>> format_temperature_for_display("350°F", TemperatureUnit.CELSIUS)
        '177°C'
        >>> format_temperature_for_display("180", TemperatureUnit.FAHRENHEIT)
        '180°F'
    """
    match = _TEMPERATURE_RE.match(temperature)
    if not match:
        return temperature

    value = float(match.group(1))

    source_unit = "°C" if "C" in temperature else "°F"
    if TemperatureUnit(preference) == TemperatureUnit.FAHRENHEIT:
        target_unit = "°F"
    else:
        target_unit = "°C"

    if source_unit != target_unit:
        value = convert_temperature(value, source_unit, target_unit)
    if not math.isfinite(value):
        return temperature
    return f"{int(round_half_up(value))}{target_unit}"


def resolve_measurement_system(
    weight_preference: Optional[MeasurementSystem] = None,
    volume_preference: Optional[MeasurementSystem] = None,
) -> MeasurementSystem:
    """Collapse separate weight/volume preferences into one display system.

    Metric wins if either preference asks for it; imperial is the default.
    """
    if MeasurementSystem.METRIC in (weight_preference, volume_preference):
        return MeasurementSystem.METRIC
    return MeasurementSystem.IMPERIAL
