"""Parsing of free-form recipe quantities."""

import logging
import math
import re
from typing import Optional

from recipe_units.amounts.number_utils import _is_fraction, _is_integer, _parse_fraction

logger = logging.getLogger(__name__)

# --- Constants ---

UNICODE_FRACTIONS = {
    "½": 1 / 2,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅐": 1 / 7,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

_RANGE_RE = re.compile(
    r"^(?P<low>.+?)(?<![eE])\s*(?:-|–|\bto\b)\s*(?P<high>.+)$", flags=re.IGNORECASE
)
_UNICODE_RE = re.compile(
    r"^(?P<whole>\d+)?\s*(?P<glyph>[" + "".join(UNICODE_FRACTIONS) + r"])$"
)
_LEADING_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# --- Functions ---


def parse_amount(text: Optional[str]) -> float:
    """Parse a recipe quantity into a number.

    Handles ranges ("2-3", "2 to 3"), mixed numbers ("1 1/2"), fractions
    ("3/4"), unicode fractions ("¾", "1½") and decimals. Ranges collapse to
    the mean of their two ends.

    Text that cannot be read as a number parses to 0.0. A malformed quantity
    is therefore indistinguishable from "zero of an ingredient"; callers that
    need to tell them apart should check the text themselves.

    Args:
        text: Quantity exactly as written in the recipe.

    Returns:
        The parsed amount as a float.

    Examples:
        >>> parse_amount("1 1/2")
        1.5
        >>> parse_amount("2-3")
        2.5
        >>> parse_amount("¾")
        0.75
        >>> parse_amount("a pinch")
        0.0
    """
    if not text or not text.strip():
        return 0.0

    cleaned = text.strip()

    try:
        # Try different parsing patterns in order of precedence
        for parser in [
            _parse_range,
            _parse_mixed_number,
            _parse_simple_fraction,
            _parse_unicode_fraction,
        ]:
            amount = parser(cleaned)
            if amount is not None:
                break
        else:
            amount = _parse_decimal(cleaned)
    except (ValueError, ZeroDivisionError, OverflowError) as e:
        logger.debug(f"Could not parse amount '{text}': {e}")
        return 0.0

    if not math.isfinite(amount):
        logger.debug(f"Amount '{text}' is out of range, treating it as 0")
        return 0.0
    return amount


def _parse_range(text: str) -> Optional[float]:
    """Parse ranges like '2-3' or '2 to 3' into their mean."""
    match = _RANGE_RE.match(text)
    if not match:
        return None
    low = parse_amount(match.group("low"))
    high = parse_amount(match.group("high"))
    return (low + high) / 2


def _parse_mixed_number(text: str) -> Optional[float]:
    """Parse mixed numbers like '1 1/2'."""
    words = text.split()
    if len(words) != 2 or not _is_integer(words[0]) or not _is_fraction(words[1]):
        return None
    return float(int(words[0]) + _parse_fraction(words[1]))


def _parse_simple_fraction(text: str) -> Optional[float]:
    """Parse simple fractions like '3/4'."""
    if not _is_fraction(text):
        return None
    return float(_parse_fraction(text))


def _parse_unicode_fraction(text: str) -> Optional[float]:
    """Parse unicode fractions with an optional whole part, like '1½'."""
    match = _UNICODE_RE.match(text)
    if not match:
        return None
    whole = int(match.group("whole")) if match.group("whole") else 0
    return whole + UNICODE_FRACTIONS[match.group("glyph")]


def _parse_decimal(text: str) -> float:
    """Parse the leading decimal number of a string, or 0.0 if there is none."""
    match = _LEADING_NUMBER_RE.match(text)
    if not match:
        logger.debug(f"Could not parse amount '{text}', treating it as 0")
        return 0.0
    return float(match.group(0))
