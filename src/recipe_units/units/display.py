"""Choose a natural display unit for a canonical amount.

Each (category, system) pair has its own strategy. A strategy receives the
canonical amount (fluid ounces or ounces) and returns the Measurement to show.
The magnitude thresholds are fixed culinary choices and must not drift.
"""

from types import MappingProxyType
from typing import Callable, Mapping, Tuple

from recipe_units.amounts.number_utils import round_half_up
from recipe_units.units.models import Measurement, MeasurementSystem, UnitCategory
from recipe_units.units.normalization import get_unit_category
from recipe_units.units.tables import DISPLAY_UNITS, FL_OZ_PER_ML, OZ_PER_GRAM

DisplayStrategy = Callable[[float], Measurement]

_IMPERIAL = DISPLAY_UNITS[MeasurementSystem.IMPERIAL]
_METRIC = DISPLAY_UNITS[MeasurementSystem.METRIC]


def volume_to_imperial(fl_oz: float) -> Measurement:
    units = _IMPERIAL[UnitCategory.VOLUME]
    if fl_oz >= 32:
        return Measurement(round_half_up(fl_oz / 32, 2), units["huge"])
    if fl_oz >= 8:
        return Measurement(round_half_up(fl_oz / 8, 2), units["large"])
    if fl_oz >= 2:
        return Measurement(fl_oz, units["medium"])
    if fl_oz >= 0.5:
        return Measurement(round_half_up(fl_oz * 2, 2), units["small"])
    return Measurement(round_half_up(fl_oz * 6, 2), units["tiny"])


def volume_to_metric(fl_oz: float) -> Measurement:
    units = _METRIC[UnitCategory.VOLUME]
    ml = fl_oz / FL_OZ_PER_ML
    if ml >= 1000:
        return Measurement(round_half_up(ml / 1000, 2), units["large"])
    return Measurement(round_half_up(ml), units["small"])


def weight_to_imperial(oz: float) -> Measurement:
    units = _IMPERIAL[UnitCategory.WEIGHT]
    if oz >= 16:
        return Measurement(round_half_up(oz / 16, 2), units["large"])
    return Measurement(oz, units["small"])


def weight_to_metric(oz: float) -> Measurement:
    units = _METRIC[UnitCategory.WEIGHT]
    grams = oz / OZ_PER_GRAM
    if grams >= 500:
        return Measurement(round_half_up(grams / 1000, 2), units["large"])
    return Measurement(round_half_up(grams, 1), units["small"])


DISPLAY_STRATEGIES: Mapping[Tuple[UnitCategory, MeasurementSystem], DisplayStrategy] = (
    MappingProxyType(
        {
            (UnitCategory.VOLUME, MeasurementSystem.IMPERIAL): volume_to_imperial,
            (UnitCategory.VOLUME, MeasurementSystem.METRIC): volume_to_metric,
            (UnitCategory.WEIGHT, MeasurementSystem.IMPERIAL): weight_to_imperial,
            (UnitCategory.WEIGHT, MeasurementSystem.METRIC): weight_to_metric,
        }
    )
)


def get_best_display_unit(
    amount: float, canonical_unit: str, target_system: MeasurementSystem
) -> Measurement:
    """Pick the most readable unit for a canonical amount.

    Args:
        amount: Amount in the canonical unit (fl oz for volume, oz for weight).
        canonical_unit: The canonical unit the amount is expressed in.
        target_system: Measurement system the reader prefers.

    Returns:
        The amount re-expressed in the display unit. Temperatures, counts and
        unrecognized units are returned unchanged.

    Examples:
        >>> get_best_display_unit(16, "fl oz", MeasurementSystem.IMPERIAL)
        Measurement(amount=2.0, unit='cup')
        >>> get_best_display_unit(8, "fl oz", MeasurementSystem.METRIC)
        Measurement(amount=237.0, unit='ml')
    """
    category = get_unit_category(canonical_unit)
    strategy = DISPLAY_STRATEGIES.get((category, MeasurementSystem(target_system)))
    if strategy is None:
        return Measurement(amount, canonical_unit)
    return strategy(amount)
