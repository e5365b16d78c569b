"""Per-ingredient switching between measurement systems.

A reader can flip a single ingredient (or oven temperature) to the other
system without changing their saved preference. UnitToggles keeps those
overrides for one view; it holds no global state.
"""

import re
from typing import Dict, Optional, Tuple

from recipe_units.ingredients.formatting import (
    can_convert,
    format_ingredient_for_display_enhanced,
    format_temperature_for_display,
)
from recipe_units.units import MeasurementSystem, TemperatureUnit

_DIGITS_RE = re.compile(r"\d+")


def _other_system(system: MeasurementSystem) -> MeasurementSystem:
    if system == MeasurementSystem.IMPERIAL:
        return MeasurementSystem.METRIC
    return MeasurementSystem.IMPERIAL


def _other_scale(unit: TemperatureUnit) -> TemperatureUnit:
    if unit == TemperatureUnit.FAHRENHEIT:
        return TemperatureUnit.CELSIUS
    return TemperatureUnit.FAHRENHEIT


class UnitToggles:
    """Display-system overrides for individual ingredients and temperatures."""

    def __init__(self):
        self.ingredient_toggles: Dict[str, MeasurementSystem] = {}
        self.temperature_toggles: Dict[str, TemperatureUnit] = {}

    def ingredient_display(
        self,
        ingredient_id: str,
        amount: Optional[str],
        unit: Optional[str],
        preference: MeasurementSystem,
    ) -> Tuple[str, str, bool]:
        """Return (amount, unit, is_toggled) for an ingredient.

        Ingredients that cannot be converted are shown as stored and are
        never reported as toggled.
        """
        if not can_convert(amount, unit):
            return amount or "", unit or "", False

        toggled = self.ingredient_toggles.get(ingredient_id)
        system = toggled or preference
        converted = format_ingredient_for_display_enhanced(amount, unit, system)
        is_toggled = toggled is not None and toggled != preference
        return converted.amount, converted.unit, is_toggled

    def toggle_ingredient(
        self, ingredient_id: str, preference: MeasurementSystem
    ) -> MeasurementSystem:
        """Flip an ingredient to the other system and return the new one."""
        current = self.ingredient_toggles.get(ingredient_id, preference)
        new_system = _other_system(current)
        if new_system == preference:
            self.ingredient_toggles.pop(ingredient_id, None)
        else:
            self.ingredient_toggles[ingredient_id] = new_system
        return new_system

    def reset_ingredient(self, ingredient_id: str) -> None:
        self.ingredient_toggles.pop(ingredient_id, None)

    def reset_all_ingredients(self) -> None:
        self.ingredient_toggles.clear()

    def temperature_display(
        self, temperature_id: str, temperature: str, preference: TemperatureUnit
    ) -> Tuple[str, bool]:
        """Return (temperature text, is_toggled) for an oven temperature."""
        if not _DIGITS_RE.search(temperature):
            return temperature, False

        toggled = self.temperature_toggles.get(temperature_id)
        scale = toggled or preference
        is_toggled = toggled is not None and toggled != preference
        return format_temperature_for_display(temperature, scale), is_toggled

    def toggle_temperature(
        self, temperature_id: str, preference: TemperatureUnit
    ) -> TemperatureUnit:
        """Flip a temperature to the other scale and return the new one."""
        current = self.temperature_toggles.get(temperature_id, preference)
        new_scale = _other_scale(current)
        if new_scale == preference:
            self.temperature_toggles.pop(temperature_id, None)
        else:
            self.temperature_toggles[temperature_id] = new_scale
        return new_scale

    def reset_temperature(self, temperature_id: str) -> None:
        self.temperature_toggles.pop(temperature_id, None)

    def reset_all_temperatures(self) -> None:
        self.temperature_toggles.clear()

    def reset_all(self) -> None:
        self.reset_all_ingredients()
        self.reset_all_temperatures()
