"""Base vehicle performance calculations.

All functions are pure: they derive performance figures from a car,
a track and the race-day weather without touching any state.  Inputs
are assumed range-validated upstream, so nothing is re-checked here;
the only guards are against division by zero.

The coarse base lap time is::

    base_lap_time = track.length_km * 25 + acceleration * 2

and seeds the per-lap model in :mod:`race_engine.core.lap`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from race_engine.core.aero import (
    EXTREME_AERO_KIT,
    GROUND_EFFECT_KIT,
    LOW_DRAG_KIT,
    AeroKit,
)
from race_engine.core.car import CarProfile
from race_engine.core.track import HARD, MEDIUM, TrackProfile
from race_engine.core.weather import WeatherState

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Performance:
    """Derived performance figures for a car on a track.

    Attributes:
        top_speed: Top speed in km/h.
        acceleration: 0-100 km/h time proxy in seconds.
        fuel_consumption: Fuel used per lap in litres.
        lap_time: Coarse base lap time in seconds.
        cornering_ability: Cornering score on a 0-10 scale.
    """

    top_speed: int
    acceleration: float
    fuel_consumption: float
    lap_time: float
    cornering_ability: int

    @property
    def overall_rating(self) -> int:
        return int(
            self.top_speed / 10.0
            + self.cornering_ability * 10
            - self.acceleration * 5
        )

    def is_faster_than(self, other: Performance) -> bool:
        """True if this base lap time beats *other*'s."""
        return self.lap_time < other.lap_time


# ---------------------------------------------------------------------------
# Individual figures
# ---------------------------------------------------------------------------


def calculate_top_speed(car: CarProfile) -> int:
    """Top speed in km/h, truncated to an integer."""
    return int(
        car.engine_power * 0.75
        + car.top_speed_impact
        - car.drag_coefficient * 120
    )


def calculate_acceleration(car: CarProfile) -> float:
    """Acceleration proxy ``total_weight / power * 6``; 0.0 without power."""
    if car.engine_power == 0:
        return 0.0
    return car.total_weight / car.engine_power * 6.0


def calculate_fuel_consumption(
    car: CarProfile,
    track: TrackProfile,
    weather: WeatherState,
) -> float:
    """Fuel used per lap.

    Any rain adds 15% and wind above 30 km/h adds a further 5%; the two
    multipliers compose.
    """
    per_km: float = 0.0
    if car.fuel_efficiency > 0.0:
        per_km = track.length_km / car.fuel_efficiency
    consumption: float = per_km + car.drag_coefficient * 2

    if weather.rain_intensity > 0:
        consumption *= 1.15
    if weather.wind_speed > 30:
        consumption *= 1.05

    return consumption


def effective_grip(weather: WeatherState) -> float:
    """Grip multiplier: 0.8 in heavy rain (intensity > 5), else 1.0."""
    if weather.rain_intensity > 5:
        return 0.8
    return 1.0


def calculate_cornering_ability(car: CarProfile, weather: WeatherState) -> int:
    """Cornering score capped at 10."""
    grip: float = (car.front_grip + car.rear_grip) * effective_grip(weather)
    aero_factor: float = car.downforce / 50.0
    return min(10, math.floor(grip * 5 + aero_factor))


def base_lap_time(car: CarProfile, track: TrackProfile) -> float:
    return track.length_km * 25 + calculate_acceleration(car) * 2


def create_car_performance(
    car: CarProfile,
    track: TrackProfile,
    weather: WeatherState,
) -> Performance:
    """Bundle every derived figure into a :class:`Performance` record."""
    return Performance(
        top_speed=calculate_top_speed(car),
        acceleration=calculate_acceleration(car),
        fuel_consumption=calculate_fuel_consumption(car, track, weather),
        lap_time=base_lap_time(car, track),
        cornering_ability=calculate_cornering_ability(car, weather),
    )


# ---------------------------------------------------------------------------
# Aero kit recommendation
# ---------------------------------------------------------------------------


def best_kit_for_track(track: TrackProfile) -> AeroKit:
    """Pick the catalog aero kit that suits *track*.

    Hard or very twisty circuits (> 15 corners) get the Extreme Aero Kit,
    medium circuits with more than 10 corners the Ground Effect Kit, and
    everything else the Low Drag Kit.
    """
    if track.difficulty == HARD or track.corners > 15:
        return EXTREME_AERO_KIT
    if track.difficulty == MEDIUM and track.corners > 10:
        return GROUND_EFFECT_KIT
    return LOW_DRAG_KIT
