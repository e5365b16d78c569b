import pytest

from recipe_units.amounts.formatting import format_amount


@pytest.mark.parametrize(
    "amount, expected_text",
    [
        (0, "0"),
        (0.005, "0.005"),
        (0.125, "⅛"),
        (0.25, "¼"),
        (1 / 3, "⅓"),
        (0.5, "½"),
        (2 / 3, "⅔"),
        (0.75, "¾"),
        (0.1, "0.1"),
        (0.45, "0.45"),
        (1, "1"),
        (1.5, "1 ½"),
        (2.25, "2 ¼"),
        (3.33, "3 ⅓"),
        (1.02, "1.02"),
        (2.2, "2.2"),
        (12.0, "12"),
        (12.44, "12.4"),
        (9.999, "10"),
        (150, "150"),
        (236.6, "237"),
    ],
)
def test_format_amount(amount, expected_text):
    """Test that format_amount prefers kitchen fractions over decimals."""
    assert format_amount(amount) == expected_text


def test_format_amount_non_finite():
    assert format_amount(float("inf")) == "inf"


def test_format_amount_fraction_tolerance():
    """Values just inside the tolerance still snap to a glyph, others don't."""
    assert format_amount(0.505) == "½"
    assert format_amount(0.52) == "0.52"
