"""Enums and value types passed between the conversion stages."""

import dataclasses
import enum


class UnitCategory(str, enum.Enum):
    VOLUME = "volume"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    COUNT = "count"


class MeasurementSystem(str, enum.Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"


class TemperatureUnit(str, enum.Enum):
    FAHRENHEIT = "fahrenheit"
    CELSIUS = "celsius"


class ConversionDirection(str, enum.Enum):
    IMPERIAL_TO_METRIC = "imperial_to_metric"
    METRIC_TO_IMPERIAL = "metric_to_imperial"

    @classmethod
    def towards(cls, target_system: MeasurementSystem) -> "ConversionDirection":
        """Direction of a conversion whose result is shown in ``target_system``."""
        if target_system == MeasurementSystem.METRIC:
            return cls.IMPERIAL_TO_METRIC
        return cls.METRIC_TO_IMPERIAL


@dataclasses.dataclass(frozen=True)
class Measurement:
    amount: float
    unit: str


@dataclasses.dataclass(frozen=True)
class EnhancedConversion:
    amount: str
    unit: str
    is_enhanced: bool
