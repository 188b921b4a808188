"""Core simulation modules for the race strategy engine."""

from race_engine.core.aero import ALL_KITS, AeroKit, kit_by_name, kits_for_track_type
from race_engine.core.analysis import (
    compare_cars,
    compare_strategies,
    faster_car,
    outcomes_to_frame,
    race_rating,
    setup_recommendations,
    strategy_recommendation,
    track_compatibility,
)
from race_engine.core.car import CarProfile
from race_engine.core.engine import STANDARD_ENGINE, TURBO_ENGINE, Engine
from race_engine.core.lap import (
    MIN_LAP_TIME,
    corner_factor,
    deterministic_lap_time,
    lap_time,
    length_factor,
    simulate_lap,
    wear_penalty,
)
from race_engine.core.monte_carlo import simulate_race_monte_carlo
from race_engine.core.performance import (
    Performance,
    base_lap_time,
    best_kit_for_track,
    create_car_performance,
)
from race_engine.core.race import (
    PIT_STOP_SECONDS,
    RaceOutcome,
    RaceState,
    per_stop_seconds,
    pit_stop_time,
    simulate_race,
    simulate_race_distance,
)
from race_engine.core.stint import (
    InvalidScheduleError,
    Stint,
    StintSchedule,
    plan_stints,
    resolve_compounds,
    split_laps,
)
from race_engine.core.strategy import (
    AGGRESSIVE,
    BALANCED,
    CONSERVATIVE,
    FUEL_LOADS,
    StrategyPlan,
)
from race_engine.core.track import DIFFICULTIES, TrackProfile
from race_engine.core.tyre import HARD, MEDIUM, SOFT, TyreCompound, TyreState, compound_by_name
from race_engine.core.weather import DRY, MIXED, WET, WeatherState

__all__ = [
    "AGGRESSIVE",
    "ALL_KITS",
    "AeroKit",
    "BALANCED",
    "CONSERVATIVE",
    "CarProfile",
    "DIFFICULTIES",
    "DRY",
    "Engine",
    "FUEL_LOADS",
    "HARD",
    "InvalidScheduleError",
    "MEDIUM",
    "MIN_LAP_TIME",
    "MIXED",
    "PIT_STOP_SECONDS",
    "Performance",
    "RaceOutcome",
    "RaceState",
    "SOFT",
    "STANDARD_ENGINE",
    "Stint",
    "StintSchedule",
    "StrategyPlan",
    "TURBO_ENGINE",
    "TrackProfile",
    "TyreCompound",
    "TyreState",
    "WET",
    "WeatherState",
    "base_lap_time",
    "best_kit_for_track",
    "compare_cars",
    "compare_strategies",
    "compound_by_name",
    "corner_factor",
    "create_car_performance",
    "deterministic_lap_time",
    "faster_car",
    "kit_by_name",
    "kits_for_track_type",
    "lap_time",
    "length_factor",
    "outcomes_to_frame",
    "per_stop_seconds",
    "pit_stop_time",
    "plan_stints",
    "race_rating",
    "resolve_compounds",
    "setup_recommendations",
    "simulate_lap",
    "simulate_race",
    "simulate_race_distance",
    "simulate_race_monte_carlo",
    "split_laps",
    "strategy_recommendation",
    "track_compatibility",
    "wear_penalty",
]
