"""Unit spelling normalization and category lookup."""

import logging
import re
from typing import Optional

from recipe_units.units.models import UnitCategory
from recipe_units.units.tables import UNIT_CATEGORIES, UNIT_LOOKUP

logger = logging.getLogger(__name__)


def normalize_unit(unit: Optional[str]) -> str:
    """Normalize a unit string to its standard spelling.

    Trims and lowercases the text, strips periods and collapses repeated
    whitespace before looking the result up in the synonym table. Unknown
    units come back in that cleaned-up form. Applying the function twice
    gives the same result as applying it once.

    Args:
        unit: Raw unit string as typed by a user (may be empty or None).

    Returns:
        Normalized unit token, or an empty string for missing input.

    Examples:
        >>> normalize_unit("Tablespoons")
        'tbsp'
        >>> normalize_unit("fl. oz.")
        'fl oz'
        >>> normalize_unit("°f")
        '°F'
        >>> normalize_unit("Handful")
        'handful'
    """
    if not unit:
        return ""

    cleaned = unit.strip().lower().replace(".", "")
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    return UNIT_LOOKUP.get(cleaned, cleaned)


def get_unit_category(unit: Optional[str]) -> Optional[UnitCategory]:
    """Look up which category a unit belongs to.

    Args:
        unit: Unit string in any supported spelling.

    Returns:
        The matching UnitCategory, or None when the unit is not recognized.
        Callers treat None as "leave the measurement as it is".
    """
    normalized = normalize_unit(unit)
    if not normalized:
        return None

    for category, units in UNIT_CATEGORIES.items():
        if normalized in units:
            return category

    logger.debug(f"Unrecognized unit '{unit}', leaving it unconverted")
    return None
