"""Parsing and formatting of recipe quantities."""

from .formatting import COMMON_FRACTIONS, format_amount
from .number_utils import format_number, round_half_up
from .parsing import UNICODE_FRACTIONS, parse_amount

__all__ = [
    "parse_amount",
    "format_amount",
    "format_number",
    "round_half_up",
    "COMMON_FRACTIONS",
    "UNICODE_FRACTIONS",
]
