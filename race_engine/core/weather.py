"""Weather model for the race strategy simulation engine.

Weather is fixed for the whole race.  Rain intensity runs from 0 (dry)
to 10 (heavy rain) and wind speed is in km/h.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherState:
    """Immutable race-day weather.

    Attributes:
        condition: Condition label (e.g. "Dry", "Wet", "Mixed").
        temperature: Air temperature in Celsius.
        wind_speed: Wind speed in km/h.
        rain_intensity: Rain intensity on a 0-10 scale.
    """

    condition: str
    temperature: int
    wind_speed: int
    rain_intensity: int

    def __post_init__(self) -> None:
        if not self.condition:
            raise ValueError("condition must not be empty.")
        if self.wind_speed < 0:
            raise ValueError("wind_speed must be >= 0.")
        if not 0 <= self.rain_intensity <= 10:
            raise ValueError("rain_intensity must be between 0 and 10.")

    @property
    def is_challenging(self) -> bool:
        """True in heavy rain (> 5) or high wind (> 30 km/h)."""
        return self.rain_intensity > 5 or self.wind_speed > 30


# Pre-defined conditions ------------------------------------------------------

DRY = WeatherState(condition="Dry", temperature=25, wind_speed=10, rain_intensity=0)
WET = WeatherState(condition="Wet", temperature=15, wind_speed=20, rain_intensity=7)
MIXED = WeatherState(condition="Mixed", temperature=20, wind_speed=25, rain_intensity=3)
