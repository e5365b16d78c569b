import logging
from types import MappingProxyType

import pytest

from recipe_units.units import (
    Measurement,
    MeasurementSystem,
    UnitCategory,
    convert_temperature,
    convert_to_canonical,
    get_best_display_unit,
    get_unit_category,
    normalize_unit,
)
from recipe_units.units.display import (
    DISPLAY_STRATEGIES,
    volume_to_imperial,
    volume_to_metric,
    weight_to_imperial,
    weight_to_metric,
)
from recipe_units.units.tables import (
    CONVERSION_FACTORS,
    UNIT_CATEGORIES,
    UNIT_LOOKUP,
    UNIT_MAP,
)


@pytest.mark.parametrize(
    "input_unit, expected_unit",
    [
        ("tsp", "tsp"),
        ("T", "tsp"),
        ("Teaspoons", "tsp"),
        ("tbsp.", "tbsp"),
        ("Tablespoon", "tbsp"),
        ("fl. oz.", "fl oz"),
        ("fl  oz", "fl oz"),
        ("Fluid Ounces", "fl oz"),
        ("cups", "cup"),
        ("mL", "ml"),
        ("Litres", "l"),
        ("lbs.", "lb"),
        ("#", "lb"),
        ("Grams", "g"),
        ("kilos", "kg"),
        ("°f", "°F"),
        ("Celsius", "°C"),
        ("  Handful ", "handful"),
        ("pieces", "pieces"),
        ("", ""),
    ],
)
def test_normalize_unit(input_unit, expected_unit):
    """Test unit normalization."""
    assert normalize_unit(input_unit) == expected_unit


@pytest.mark.parametrize(
    "raw",
    ["T", "fl. oz.", "°F", "°C", "Degrees F", "LBS.", "extra  large", "a.b.c", "İ"]
    + [variant for variants in UNIT_MAP.values() for variant in variants],
)
def test_normalize_unit_is_idempotent(raw):
    once = normalize_unit(raw)
    assert normalize_unit(once) == once


def test_every_synonym_target_has_one_category():
    for unit in set(UNIT_LOOKUP.values()):
        matches = [c for c, units in UNIT_CATEGORIES.items() if unit in units]
        assert len(matches) == 1, unit


def test_every_convertible_unit_has_a_factor():
    for category in (UnitCategory.VOLUME, UnitCategory.WEIGHT):
        assert set(UNIT_CATEGORIES[category]) == set(CONVERSION_FACTORS[category])


@pytest.mark.parametrize(
    "unit, expected_category",
    [
        ("cups", UnitCategory.VOLUME),
        ("ml", UnitCategory.VOLUME),
        ("fl oz", UnitCategory.VOLUME),
        ("oz", UnitCategory.WEIGHT),
        ("Pounds", UnitCategory.WEIGHT),
        ("kg", UnitCategory.WEIGHT),
        ("°F", UnitCategory.TEMPERATURE),
        ("celsius", UnitCategory.TEMPERATURE),
        ("cloves", UnitCategory.COUNT),
        ("large", UnitCategory.COUNT),
        ("handful", None),
        ("", None),
        (None, None),
    ],
)
def test_get_unit_category(unit, expected_category):
    assert get_unit_category(unit) == expected_category


@pytest.mark.parametrize(
    "amount, unit, expected",
    [
        (1, "cup", Measurement(8, "fl oz")),
        (1, "lb", Measurement(16, "oz")),
        (16, "oz", Measurement(16, "oz")),
        (3, "tsp", Measurement(0.5, "fl oz")),
        (1, "tsp", Measurement(0.17, "fl oz")),
        (2, "tbsp", Measurement(1, "fl oz")),
        (1, "l", Measurement(33.81, "fl oz")),
        (100, "g", Measurement(3.53, "oz")),
        (1, "kg", Measurement(35.27, "oz")),
        (180, "°C", Measurement(356, "°F")),
        (350, "F", Measurement(350, "°F")),
        (3, "cloves", Measurement(3, "cloves")),
        (2, "Handful", Measurement(2, "handful")),
    ],
)
def test_convert_to_canonical(amount, unit, expected):
    result = convert_to_canonical(amount, unit)
    assert result.unit == expected.unit
    assert result.amount == pytest.approx(expected.amount)


@pytest.mark.parametrize(
    "value, from_unit, to_unit, expected",
    [
        (32, "°F", "°C", 0),
        (212, "°F", "°C", 100),
        (100, "°C", "°F", 212),
        (0, "celsius", "fahrenheit", 32),
        (350, "°F", "°F", 350),
        (-40, "°C", "°F", -40),
        (10, "°F", "cup", 10),
    ],
)
def test_convert_temperature(value, from_unit, to_unit, expected):
    assert convert_temperature(value, from_unit, to_unit) == pytest.approx(expected)


@pytest.mark.parametrize("value", [-12.5, 0, 98.6, 451])
def test_convert_temperature_identity(value):
    assert convert_temperature(value, "°F", "°F") == value


@pytest.mark.parametrize(
    "fl_oz, expected",
    [
        (64, Measurement(2, "qt")),
        (32, Measurement(1, "qt")),
        (12, Measurement(1.5, "cup")),
        (8, Measurement(1, "cup")),
        (4, Measurement(4, "fl oz")),
        (2, Measurement(2, "fl oz")),
        (1, Measurement(2, "tbsp")),
        (0.5, Measurement(1, "tbsp")),
        (0.17, Measurement(1.02, "tsp")),
    ],
)
def test_volume_to_imperial(fl_oz, expected):
    result = volume_to_imperial(fl_oz)
    assert result.unit == expected.unit
    assert result.amount == pytest.approx(expected.amount)


@pytest.mark.parametrize(
    "fl_oz, expected",
    [
        (8, Measurement(237, "ml")),
        (0.5, Measurement(15, "ml")),
        (33.82, Measurement(1, "l")),
        (64, Measurement(1.89, "l")),
    ],
)
def test_volume_to_metric(fl_oz, expected):
    result = volume_to_metric(fl_oz)
    assert result.unit == expected.unit
    assert result.amount == pytest.approx(expected.amount)


@pytest.mark.parametrize(
    "oz, expected",
    [
        (8, Measurement(8, "oz")),
        (16, Measurement(1, "lb")),
        (40, Measurement(2.5, "lb")),
    ],
)
def test_weight_to_imperial(oz, expected):
    result = weight_to_imperial(oz)
    assert result.unit == expected.unit
    assert result.amount == pytest.approx(expected.amount)


@pytest.mark.parametrize(
    "oz, expected",
    [
        (1, Measurement(28.3, "g")),
        (17, Measurement(481.9, "g")),
        (17.64, Measurement(0.5, "kg")),
        (35.27, Measurement(1, "kg")),
    ],
)
def test_weight_to_metric(oz, expected):
    result = weight_to_metric(oz)
    assert result.unit == expected.unit
    assert result.amount == pytest.approx(expected.amount)


@pytest.mark.parametrize(
    "amount, unit, system, expected",
    [
        (16, "fl oz", MeasurementSystem.IMPERIAL, Measurement(2, "cup")),
        (8, "fl oz", MeasurementSystem.METRIC, Measurement(237, "ml")),
        (32, "oz", MeasurementSystem.IMPERIAL, Measurement(2, "lb")),
        (350, "°F", MeasurementSystem.METRIC, Measurement(350, "°F")),
        (3, "cloves", MeasurementSystem.METRIC, Measurement(3, "cloves")),
        (2, "handful", MeasurementSystem.IMPERIAL, Measurement(2, "handful")),
        (16, "fl oz", "imperial", Measurement(2, "cup")),
    ],
)
def test_get_best_display_unit(amount, unit, system, expected):
    result = get_best_display_unit(amount, unit, system)
    assert result.unit == expected.unit
    assert result.amount == pytest.approx(expected.amount)


def test_display_strategies_are_read_only():
    with pytest.raises(TypeError):
        DISPLAY_STRATEGIES[(UnitCategory.VOLUME, MeasurementSystem.METRIC)] = (
            volume_to_imperial
        )


def test_get_unit_category_logs_unrecognized_unit(caplog):
    with caplog.at_level(logging.DEBUG, logger="recipe_units.units.normalization"):
        assert get_unit_category("handful") is None
    assert "Unrecognized unit 'handful'" in caplog.text


def test_convert_to_canonical_without_factor(monkeypatch, caplog):
    """A categorized unit with no factor comes back unchanged instead of failing."""
    volume = {
        unit: factor
        for unit, factor in CONVERSION_FACTORS[UnitCategory.VOLUME].items()
        if unit != "cup"
    }
    factors = MappingProxyType(
        {**CONVERSION_FACTORS, UnitCategory.VOLUME: MappingProxyType(volume)}
    )
    monkeypatch.setattr("recipe_units.units.conversion.CONVERSION_FACTORS", factors)

    with caplog.at_level(logging.DEBUG, logger="recipe_units.units.conversion"):
        assert convert_to_canonical(2, "cup") == Measurement(2, "cup")
    assert "No volume conversion factor for 'cup'" in caplog.text
