"""Per-lap time model for the race strategy simulation engine.

A lap starts from the coarse base lap time produced by
:mod:`race_engine.core.performance` and applies, in order:

    1. Track factors  cf = max(0.6, corners / 15), lf = max(0.7, length / 4.5)
    2. Compound bonus  + bonus * cf**2 / lf
    3. Tyre wear       + wear_penalty(age)
    4. Weather         * 1.10 if rain > 5, * 1.05 if wind > 30
    5. Difficulty      * 1.05 on Hard, * 0.98 on Easy
    6. Fuel load       * (1 - 0.004 cf) Light, * (1 + 0.004 cf) Heavy
    7. Noise           + U(-2, 2), then clamped to ``MIN_LAP_TIME``

Order matters because steps 4-6 scale the running total.  Wear is
linear up to the compound's durability and switches to a steeper slope
(the "cliff") once the tyre is older than that.
"""

from __future__ import annotations

from numpy.random import Generator

from race_engine.core.car import CarProfile
from race_engine.core.performance import base_lap_time
from race_engine.core.strategy import HEAVY, LIGHT
from race_engine.core.track import EASY, HARD, TrackProfile
from race_engine.core.tyre import TyreCompound
from race_engine.core.weather import WeatherState

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PRE_CLIFF_WEAR_SLOPE: float = 3.0
POST_CLIFF_WEAR_SLOPE: float = 8.0
FUEL_EFFECT_PER_CORNER_FACTOR: float = 0.004
NOISE_AMPLITUDE: float = 2.0  # seconds, symmetric
MIN_LAP_TIME: float = 1.0  # seconds

# ---------------------------------------------------------------------------
# Track factors
# ---------------------------------------------------------------------------


def corner_factor(track: TrackProfile) -> float:
    return max(0.6, track.corners / 15.0)


def length_factor(track: TrackProfile) -> float:
    return max(0.7, track.length_km / 4.5)


# ---------------------------------------------------------------------------
# Modifier stages
# ---------------------------------------------------------------------------


def wear_penalty(
    compound: TyreCompound,
    tyre_age: int,
    cf: float = 1.0,
    lf: float = 1.0,
) -> float:
    """Lap-time cost of tyre wear in seconds.

    Args:
        compound: Fitted compound.
        tyre_age: Laps completed on this set (>= 0).
        cf: Corner factor of the track.
        lf: Length factor of the track.

    Returns:
        ``wear_rate * age * 3.0 * cf * lf`` while ``age <= durability``,
        otherwise ``wear_rate * (age - durability) * 8.0 * cf * lf``.
    """
    if tyre_age <= compound.durability:
        return compound.wear_rate * tyre_age * PRE_CLIFF_WEAR_SLOPE * cf * lf
    over: int = tyre_age - compound.durability
    return compound.wear_rate * over * POST_CLIFF_WEAR_SLOPE * cf * lf


def weather_multiplier(weather: WeatherState) -> float:
    multiplier: float = 1.0
    if weather.rain_intensity > 5:
        multiplier *= 1.10
    if weather.wind_speed > 30:
        multiplier *= 1.05
    return multiplier


def difficulty_multiplier(track: TrackProfile) -> float:
    if track.difficulty == HARD:
        return 1.05
    if track.difficulty == EASY:
        return 0.98
    return 1.0


def fuel_multiplier(fuel_load: str, cf: float) -> float:
    """Light fuel speeds the car up and heavy fuel slows it, scaled by cf."""
    if fuel_load == LIGHT:
        return 1.0 - FUEL_EFFECT_PER_CORNER_FACTOR * cf
    if fuel_load == HEAVY:
        return 1.0 + FUEL_EFFECT_PER_CORNER_FACTOR * cf
    return 1.0


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def deterministic_lap_time(
    track: TrackProfile,
    weather: WeatherState,
    compound: TyreCompound,
    tyre_age: int,
    fuel_load: str,
    base_time: float,
) -> float:
    """Lap time after modifier stages 1-6, before noise is added."""
    cf: float = corner_factor(track)
    lf: float = length_factor(track)

    t: float = base_time
    t += compound.base_lap_time_bonus * cf**2 / lf
    t += wear_penalty(compound, tyre_age, cf, lf)
    t *= weather_multiplier(weather)
    t *= difficulty_multiplier(track)
    t *= fuel_multiplier(fuel_load, cf)
    return t


def lap_time(
    track: TrackProfile,
    weather: WeatherState,
    compound: TyreCompound,
    tyre_age: int,
    fuel_load: str,
    base_time: float,
    rng: Generator,
) -> float:
    """Compute one lap's time in seconds, including random noise.

    Noise is drawn fresh from *rng* on every call, uniformly in
    ``[-NOISE_AMPLITUDE, NOISE_AMPLITUDE)``.  The result never drops
    below ``MIN_LAP_TIME``.
    """
    t: float = deterministic_lap_time(
        track, weather, compound, tyre_age, fuel_load, base_time
    )
    t += float(rng.uniform(-NOISE_AMPLITUDE, NOISE_AMPLITUDE))
    return max(MIN_LAP_TIME, t)


def simulate_lap(
    car: CarProfile,
    track: TrackProfile,
    weather: WeatherState,
) -> float:
    """Preview a single representative lap without running a race.

    Uses the base lap time with only the weather and difficulty
    multipliers; tyre, fuel and noise terms are left out so the preview
    is deterministic.
    """
    t: float = base_lap_time(car, track)
    t *= weather_multiplier(weather)
    t *= difficulty_multiplier(track)
    return t
