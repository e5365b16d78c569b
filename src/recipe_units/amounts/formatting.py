"""Rendering of numeric amounts as cook-friendly text."""

import math
import re
from typing import Optional

from recipe_units.amounts.number_utils import format_number, round_half_up

# Common kitchen fractions, matched within FRACTION_TOLERANCE
COMMON_FRACTIONS = (
    (0.125, "⅛"),
    (0.25, "¼"),
    (0.333, "⅓"),
    (0.375, "⅜"),
    (0.5, "½"),
    (0.625, "⅝"),
    (0.667, "⅔"),
    (0.75, "¾"),
    (0.875, "⅞"),
)
FRACTION_TOLERANCE = 0.01


def _match_fraction(value: float) -> Optional[str]:
    for decimal, glyph in COMMON_FRACTIONS:
        if abs(value - decimal) < FRACTION_TOLERANCE:
            return glyph
    return None


def _strip_zeros(text: str) -> str:
    # Whole numbers keep their zeros ("10" must not become "1")
    if "." not in text:
        return text
    return re.sub(r"\.?0+$", "", text)


def format_amount(amount: float) -> str:
    """Format an amount for display, preferring kitchen fractions.

    Args:
        amount: Non-negative amount.

    Returns:
        Text such as "½", "1 ½", "2.25" or "150".

    Examples:
        >>> format_amount(0.5)
        '½'
        >>> format_amount(1.5)
        '1 ½'
        >>> format_amount(12.44)
        '12.4'
    """
    if amount == 0:
        return "0"

    if not math.isfinite(amount):
        return str(amount)

    if amount < 0.01:
        return f"{amount:.3f}"

    if amount < 1:
        glyph = _match_fraction(amount)
        if glyph:
            return glyph
        return _strip_zeros(f"{amount:.2f}")

    if amount > 1 and amount % 1 != 0:
        whole = math.floor(amount)
        glyph = _match_fraction(amount - whole)
        if glyph:
            return f"{whole} {glyph}"

    if amount >= 100:
        return str(int(round_half_up(amount)))
    if amount >= 10:
        return format_number(round_half_up(amount, 1))
    return _strip_zeros(format_number(round_half_up(amount, 2)))
