"""Single-car race simulator for the race strategy simulation engine.

The race is a small state machine over laps.  It starts in
``RUNNING`` on stint 0 with brand-new tyres.  Each lap computes a lap
time via :func:`race_engine.core.lap.lap_time` with the current
compound and tyre age, then ages the tyres.  When a stint's scheduled
lap count is reached and laps remain, the car pits: tyre age resets to
0 and the next stint's compound is fitted before the next lap.  After
the final lap the state becomes ``FINISHED``.

Pit-stop overhead is charged once for the whole race as
``pit_stops * per_stop_seconds(fuel_load)`` and is excluded from the
average lap time.

All randomness comes from a per-call ``numpy.random.Generator``, so a
run is fully reproducible when a seed is supplied.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime

import numpy as np
from numpy.random import Generator

from race_engine.core.car import CarProfile
from race_engine.core.lap import lap_time as compute_lap_time
from race_engine.core.performance import base_lap_time
from race_engine.core.stint import StintSchedule, plan_stints
from race_engine.core.strategy import HEAVY, LIGHT, MEDIUM, StrategyPlan
from race_engine.core.track import TrackProfile
from race_engine.core.tyre import TyreState
from race_engine.core.weather import WeatherState

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PIT_STOP_SECONDS: dict[str, float] = {
    LIGHT: 25.0,
    MEDIUM: 30.0,
    HEAVY: 35.0,
}

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass
class RaceOutcome:
    """Outcome of a single-car race simulation.

    Attributes:
        car_name: Name of the simulated car.
        track_name: Name of the circuit.
        total_time: Race time in minutes, pit stops included.
        average_lap_time: Mean lap time in seconds, pit stops excluded.
        pit_stop_count: Number of pit stops made.
        weather_condition: Weather condition label.
        strategy_name: Classification of the strategy used.
        lap_times: Per-lap times in seconds.
        tyre_ages: Tyre age at the start of each lap.
        compounds: Compound name fitted on each lap.
        timestamp: When the outcome was produced.  Not part of equality.
    """

    car_name: str
    track_name: str
    total_time: float
    average_lap_time: float
    pit_stop_count: int
    weather_condition: str
    strategy_name: str
    lap_times: list[float] = field(default_factory=list)
    tyre_ages: list[int] = field(default_factory=list)
    compounds: list[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now, compare=False)

    def is_winning_time(self, target_time: float) -> bool:
        """True if the race time beats *target_time* (minutes)."""
        return self.total_time < target_time


# ---------------------------------------------------------------------------
# Internal lap-loop state
# ---------------------------------------------------------------------------


class RaceState(enum.Enum):
    RUNNING = "running"
    FINISHED = "finished"


class _LapState:
    """Mutable bookkeeping for one race run."""

    __slots__ = (
        "schedule",
        "stint_index",
        "laps_in_stint",
        "tyre",
        "cumulative_time",
        "state",
    )

    def __init__(self, schedule: StintSchedule) -> None:
        self.schedule: StintSchedule = schedule
        self.stint_index: int = 0
        self.laps_in_stint: int = 0
        self.tyre: TyreState = TyreState(compound=schedule[0].compound)
        self.cumulative_time: float = 0.0
        self.state: RaceState = RaceState.RUNNING

    @property
    def stint_complete(self) -> bool:
        return self.laps_in_stint >= self.schedule[self.stint_index].laps

    def complete_lap(self, t: float) -> None:
        self.cumulative_time += t
        self.laps_in_stint += 1
        self.tyre.increment_age()

    def pit(self) -> None:
        """Move to the next stint on fresh tyres."""
        self.stint_index += 1
        self.laps_in_stint = 0
        self.tyre.reset(self.schedule[self.stint_index].compound)


# ---------------------------------------------------------------------------
# Pit-stop overhead
# ---------------------------------------------------------------------------


def per_stop_seconds(fuel_load: str) -> float:
    """Stationary time per stop; unknown fuel classes count as Medium."""
    return PIT_STOP_SECONDS.get(fuel_load, PIT_STOP_SECONDS[MEDIUM])


def pit_stop_time(strategy: StrategyPlan) -> float:
    return strategy.pit_stops * per_stop_seconds(strategy.fuel_load)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def simulate_race(
    car: CarProfile,
    track: TrackProfile,
    strategy: StrategyPlan,
    weather: WeatherState,
    total_laps: int,
    seed: int | None = None,
    rng: Generator | None = None,
    timestamp: datetime | None = None,
) -> RaceOutcome:
    """Simulate a full race for one car.

    Args:
        car: Car to race.
        track: Circuit to race on.
        strategy: Pit-stop, fuel and tyre plan.
        weather: Race-day weather, fixed for the whole race.
        total_laps: Race length in laps (>= pit stops + 1).
        seed: Seed for a fresh random generator.  Ignored when *rng* is
            given.  ``None`` uses entropy from the OS.
        rng: Caller-owned random generator.
        timestamp: Outcome timestamp; defaults to the current time.

    Returns:
        A :class:`RaceOutcome` with totals and per-lap traces.

    Raises:
        InvalidScheduleError: If the race cannot be split into
            ``strategy.pit_stops + 1`` non-empty stints.
    """
    schedule = plan_stints(total_laps, strategy.pit_stops, strategy.tyre_strategy)
    generator: Generator = rng if rng is not None else np.random.default_rng(seed)
    base_time: float = base_lap_time(car, track)

    ls = _LapState(schedule)
    lap_times: list[float] = []
    tyre_ages: list[int] = []
    compounds: list[str] = []

    # -- Lap loop -------------------------------------------------------------
    for _ in range(total_laps):
        if ls.stint_complete:
            ls.pit()
            logger.debug(
                "Pit stop %d/%d: fitted %s",
                ls.stint_index,
                schedule.pit_stops,
                ls.tyre.compound.name,
            )

        tyre_ages.append(ls.tyre.age)
        compounds.append(ls.tyre.compound.name)

        t: float = compute_lap_time(
            track,
            weather,
            ls.tyre.compound,
            ls.tyre.age,
            strategy.fuel_load,
            base_time,
            generator,
        )
        lap_times.append(t)
        ls.complete_lap(t)

    ls.state = RaceState.FINISHED

    # -- Aggregate ------------------------------------------------------------
    pit_time: float = pit_stop_time(strategy)
    total_minutes: float = (ls.cumulative_time + pit_time) / 60.0
    average_lap: float = ls.cumulative_time / total_laps

    logger.info(
        "%s at %s: %.2f min over %d laps (%d stops, avg lap %.2f s)",
        car.name,
        track.name,
        total_minutes,
        total_laps,
        strategy.pit_stops,
        average_lap,
    )

    return RaceOutcome(
        car_name=car.name,
        track_name=track.name,
        total_time=total_minutes,
        average_lap_time=average_lap,
        pit_stop_count=strategy.pit_stops,
        weather_condition=weather.condition,
        strategy_name=strategy.name,
        lap_times=lap_times,
        tyre_ages=tyre_ages,
        compounds=compounds,
        timestamp=timestamp if timestamp is not None else datetime.now(),
    )


def laps_for_distance(track: TrackProfile, distance_km: float) -> int:
    """Number of laps needed to cover at least *distance_km*."""
    return math.ceil(distance_km / track.length_km)


def simulate_race_distance(
    car: CarProfile,
    track: TrackProfile,
    strategy: StrategyPlan,
    weather: WeatherState,
    distance_km: float,
    seed: int | None = None,
    rng: Generator | None = None,
    timestamp: datetime | None = None,
) -> RaceOutcome:
    """Simulate a race sized by distance instead of lap count."""
    return simulate_race(
        car,
        track,
        strategy,
        weather,
        laps_for_distance(track, distance_km),
        seed=seed,
        rng=rng,
        timestamp=timestamp,
    )
