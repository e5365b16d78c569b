import math
from decimal import Decimal


def _is_integer(text: str) -> bool:
    """Check if a string represents a whole number made of digits only."""
    return text.isascii() and text.isdigit()


def _is_fraction(text: str) -> bool:
    """Check if a string represents a valid fraction (e.g., '1/2')."""
    if "/" not in text:
        return False
    parts = text.split("/")
    return len(parts) == 2 and all(_is_integer(part) for part in parts)


def _parse_fraction(text: str) -> Decimal:
    """Parse a fraction string (e.g., '1/2') into a Decimal."""
    if not _is_fraction(text):
        raise ValueError(f"Not a fraction: {text}")

    numerator_str, denominator_str = text.split("/")
    numerator = Decimal(numerator_str)
    denominator = Decimal(denominator_str)

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return numerator / denominator


def round_half_up(value: float, places: int = 0) -> float:
    """Round to ``places`` decimals with halves rounded up (2.5 -> 3, not 2)."""
    scale = 10**places
    if not math.isfinite(value * scale):
        return value
    return math.floor(value * scale + 0.5) / scale


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' for whole values."""
    if value == int(value):
        return str(int(value))
    return repr(float(value))
