"""Batch formatting of ingredient tables."""

import numpy as np
import pandas as pd

from recipe_units.amounts import parse_amount
from recipe_units.ingredients.formatting import (
    can_convert,
    format_ingredient_for_display,
    format_ingredient_for_display_enhanced,
)
from recipe_units.units import MeasurementSystem, convert_to_canonical

DISPLAY_COLUMNS = [
    "canonical_amount",
    "canonical_unit",
    "display_amount",
    "display_unit",
    "is_enhanced",
]


def _as_text(value) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value)


def _format_row(row: pd.Series, system: MeasurementSystem, enhanced: bool) -> pd.Series:
    amount = _as_text(row["amount"])
    unit = _as_text(row["unit"])

    if can_convert(amount, unit):
        canonical = convert_to_canonical(parse_amount(amount), unit)
        canonical_amount, canonical_unit = canonical.amount, canonical.unit
    else:
        canonical_amount, canonical_unit = np.nan, unit

    if enhanced:
        result = format_ingredient_for_display_enhanced(amount, unit, system)
        display_amount, display_unit, is_enhanced = (
            result.amount,
            result.unit,
            result.is_enhanced,
        )
    elif can_convert(amount, unit):
        display_amount, display_unit = format_ingredient_for_display(
            amount, unit, system
        )
        is_enhanced = False
    else:
        display_amount, display_unit, is_enhanced = amount, unit, False

    return pd.Series(
        [canonical_amount, canonical_unit, display_amount, display_unit, is_enhanced],
        index=DISPLAY_COLUMNS,
    )


def format_ingredient_frame(
    df: pd.DataFrame, system: MeasurementSystem, enhanced: bool = True
) -> pd.DataFrame:
    """Add display columns to a table of ingredient amounts.

    Args:
        df: DataFrame with ``amount`` and ``unit`` columns holding the stored
            text (missing values are treated as empty strings).
        system: Measurement system to display in.
        enhanced: Use curated cooking conversions when available. When False
            every convertible row goes through the arithmetic pipeline.

    Returns:
        A copy of ``df`` with canonical_amount, canonical_unit,
        display_amount, display_unit and is_enhanced columns appended.
        canonical_amount is NaN for rows that cannot be converted.
    """
    result = df.copy()
    if result.empty:
        for column in DISPLAY_COLUMNS:
            result[column] = pd.Series(dtype=object)
        result["canonical_amount"] = result["canonical_amount"].astype(float)
        return result

    display = result.apply(lambda row: _format_row(row, system, enhanced), axis=1)
    for column in DISPLAY_COLUMNS:
        result[column] = display[column]
    result["canonical_amount"] = result["canonical_amount"].astype(float)
    return result
