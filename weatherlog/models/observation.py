"""
Meteorological observation at a specific station at a specific time.

Readings that are faulty or outside the physical range are stored as NaN.
"""

import math
from typing import Any

from pydantic import AwareDatetime, model_validator

from weatherlog.models.base import ValueModel
from weatherlog.models.wigos import WigosStationIdentifier

TEMPERATURE_MIN = -100.0
TEMPERATURE_MAX = 70.0
HUMIDITY_MIN = 0.0
HUMIDITY_MAX = 100.0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Observation(ValueModel):
    """
    One timestamped temperature/humidity reading.

    Temperature is in degrees Celsius, humidity is relative humidity in
    percent. Out-of-range readings never raise; they are replaced by NaN.
    """

    station_id: WigosStationIdentifier
    timestamp: AwareDatetime
    temperature: float
    humidity: float

    @model_validator(mode="before")
    @classmethod
    def mask_out_of_range(cls, data: Any) -> Any:
        """
        Replace out-of-range readings with NaN.

        Note: humidity outside 0-100% invalidates the *temperature* reading.
        The humidity value itself is kept as given.
        """
        if not isinstance(data, dict):
            return data

        temperature = data.get("temperature")
        humidity = data.get("humidity")

        if _is_number(temperature) and (temperature < TEMPERATURE_MIN or temperature > TEMPERATURE_MAX):
            data = {**data, "temperature": math.nan}

        if _is_number(humidity) and (humidity < HUMIDITY_MIN or humidity > HUMIDITY_MAX):
            data = {**data, "temperature": math.nan}

        return data

    def is_invalid(self) -> bool:
        """Return True if all readings are invalid."""
        return math.isnan(self.temperature) and math.isnan(self.humidity)

    def is_partial(self) -> bool:
        """Return True if some, but not all, readings are invalid."""
        return not self.is_valid() and not self.is_invalid()

    def is_valid(self) -> bool:
        """Return True if all readings are valid."""
        return not math.isnan(self.temperature) and not math.isnan(self.humidity)
