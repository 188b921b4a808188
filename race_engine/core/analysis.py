"""Race analysis helpers built on pandas.

These rate finished races, suggest setup changes and turn outcomes into
tabular form so several strategies or cars can be ranked side by side on
the same track and weather.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

import pandas as pd

from race_engine.core.car import CarProfile
from race_engine.core.performance import Performance, create_car_performance
from race_engine.core.race import RaceOutcome, pit_stop_time, simulate_race
from race_engine.core.strategy import StrategyPlan
from race_engine.core.track import TrackProfile
from race_engine.core.weather import WeatherState

OUTCOME_COLUMNS: list[str] = [
    "car",
    "track",
    "strategy",
    "pit_stops",
    "weather",
    "total_time_min",
    "average_lap_s",
    "timestamp",
]

# ---------------------------------------------------------------------------
# Track fit heuristics
# ---------------------------------------------------------------------------


def track_compatibility(track: TrackProfile, strategy: StrategyPlan) -> str:
    """Rate how well a strategy's stop count suits the track length.

    Long tracks (> 6 km) favour stopping, short ones (< 3 km) favour
    running without stops.

    Returns:
        ``"High"``, ``"Medium"`` or ``"Low"``.
    """
    if track.length_km > 6.0 and strategy.pit_stops > 0:
        return "High"
    if track.length_km < 3.0 and strategy.pit_stops == 0:
        return "High"
    if track.length_km > 6.0 and strategy.pit_stops == 0:
        return "Low"
    return "Medium"


def strategy_recommendation(track: TrackProfile) -> str:
    if track.length_km > 6.0:
        return "Medium fuel with 1-2 pit stops recommended for long tracks"
    if track.length_km < 3.0:
        return "Light fuel with minimal pit stops recommended for short tracks"
    return "Balanced approach works well for medium-length tracks"


# ---------------------------------------------------------------------------
# Tabulation
# ---------------------------------------------------------------------------


def outcomes_to_frame(outcomes: Iterable[RaceOutcome]) -> pd.DataFrame:
    """One row per outcome, columns as in ``OUTCOME_COLUMNS``."""
    rows: list[dict[str, object]] = [
        {
            "car": o.car_name,
            "track": o.track_name,
            "strategy": o.strategy_name,
            "pit_stops": o.pit_stop_count,
            "weather": o.weather_condition,
            "total_time_min": o.total_time,
            "average_lap_s": o.average_lap_time,
            "timestamp": o.timestamp,
        }
        for o in outcomes
    ]
    return pd.DataFrame(rows, columns=OUTCOME_COLUMNS)


def compare_strategies(
    car: CarProfile,
    track: TrackProfile,
    weather: WeatherState,
    strategies: Mapping[str, StrategyPlan] | Sequence[StrategyPlan],
    total_laps: int,
    seed: int = 42,
) -> pd.DataFrame:
    """Race each strategy under identical conditions and rank them.

    Every strategy is run with the same *seed*, so differences come from
    the strategies rather than from the noise draw.

    Args:
        car: Car to race.
        track: Circuit to race on.
        weather: Race-day weather.
        strategies: Strategies to compare, either labelled in a mapping
            or as a plain sequence (labelled by ``StrategyPlan.name``).
        total_laps: Race length in laps.
        seed: Seed shared by every run.

    Returns:
        DataFrame sorted by ``total_time_min`` (fastest first) with
        columns ``label``, ``strategy``, ``pit_stops``, ``fuel_load``,
        ``total_time_min``, ``average_lap_s``, ``pit_time_s`` and
        ``compatibility``.
    """
    if isinstance(strategies, Mapping):
        labelled = list(strategies.items())
    else:
        labelled = [(s.name, s) for s in strategies]

    rows: list[dict[str, object]] = []
    for label, strategy in labelled:
        outcome = simulate_race(car, track, strategy, weather, total_laps, seed=seed)
        rows.append(
            {
                "label": label,
                "strategy": strategy.name,
                "pit_stops": strategy.pit_stops,
                "fuel_load": strategy.fuel_load,
                "total_time_min": outcome.total_time,
                "average_lap_s": outcome.average_lap_time,
                "pit_time_s": pit_stop_time(strategy),
                "compatibility": track_compatibility(track, strategy),
            }
        )

    frame = pd.DataFrame(rows)
    if frame.empty:
        return frame
    return frame.sort_values("total_time_min").reset_index(drop=True)


# ---------------------------------------------------------------------------
# Race rating
# ---------------------------------------------------------------------------

# (upper bound in seconds per km, label), checked in order.
RATING_TIERS: tuple[tuple[float, str], ...] = (
    (8.0, "Excellent"),
    (10.0, "Very Good"),
    (12.0, "Good"),
    (15.0, "Average"),
)
LOWEST_RATING: str = "Needs Improvement"


def rating_for_pace(seconds_per_km: float) -> str:
    """Map a lap pace in seconds per km onto a rating label."""
    for bound, label in RATING_TIERS:
        if seconds_per_km < bound:
            return label
    return LOWEST_RATING


def race_rating(outcome: RaceOutcome, track: TrackProfile) -> str:
    """Rate a race by its average lap pace over the track length.

    The pace is ``average_lap_time / length_km`` in seconds per km, so
    pit overhead does not count against the rating.
    """
    return rating_for_pace(outcome.average_lap_time / track.length_km)


# ---------------------------------------------------------------------------
# Setup recommendations
# ---------------------------------------------------------------------------

LOW_TOP_SPEED: int = 180
LOW_CORNERING: int = 5
TECHNICAL_CORNERS: int = 15
HIGH_FUEL_PER_LAP: float = 15.0
SHORT_TRACK_KM: float = 4.0
MAX_STOPS_SHORT_TRACK: int = 2


def setup_recommendations(
    performance: Performance,
    track: TrackProfile,
    strategy: StrategyPlan,
) -> list[str]:
    """Suggest setup changes for a car/track/strategy combination.

    Each rule adds one suggestion.  When no rule fires a single
    "well-optimized" message is returned, so the list is never empty.
    """
    advice: list[str] = []
    if performance.top_speed < LOW_TOP_SPEED:
        advice.append("Consider a lower drag AeroKit for better top speed")
    if performance.cornering_ability < LOW_CORNERING and track.corners > TECHNICAL_CORNERS:
        advice.append(
            "High downforce AeroKit would improve cornering on this technical track"
        )
    if performance.fuel_consumption > HIGH_FUEL_PER_LAP and strategy.pit_stops == 0:
        advice.append("Consider adding a pit stop for fuel efficiency")
    if strategy.pit_stops > MAX_STOPS_SHORT_TRACK and track.length_km < SHORT_TRACK_KM:
        advice.append("Too many pit stops for a short track - consider reducing them")
    if not advice:
        advice.append("Setup looks well-optimized for this track!")
    return advice


# ---------------------------------------------------------------------------
# Car comparison
# ---------------------------------------------------------------------------

# metric name -> True when a higher value is better
COMPARISON_METRICS: dict[str, bool] = {
    "top_speed": True,
    "acceleration": False,
    "fuel_consumption": False,
    "lap_time": False,
    "cornering_ability": True,
}


def faster_car(
    car_a: CarProfile,
    car_b: CarProfile,
    track: TrackProfile,
    weather: WeatherState,
) -> str:
    """Name of the car with the quicker base lap; ties go to *car_b*."""
    perf_a = create_car_performance(car_a, track, weather)
    perf_b = create_car_performance(car_b, track, weather)
    return car_a.name if perf_a.is_faster_than(perf_b) else car_b.name


def compare_cars(
    car_a: CarProfile,
    car_b: CarProfile,
    track: TrackProfile,
    weather: WeatherState,
) -> pd.DataFrame:
    """Compare two cars' performance figures on the same track.

    Returns:
        DataFrame with one row per metric in ``COMPARISON_METRICS`` and
        columns ``metric``, ``car_a``, ``car_b`` and ``better``.  ``better``
        holds the name of the car that wins the metric, or ``"Tie"``.

    Raises:
        ValueError: If both cars share a name.
    """
    if car_a.name == car_b.name:
        raise ValueError(f"Cannot compare two cars both named {car_a.name!r}.")

    perf_a = create_car_performance(car_a, track, weather)
    perf_b = create_car_performance(car_b, track, weather)

    rows: list[dict[str, object]] = []
    for metric, higher_is_better in COMPARISON_METRICS.items():
        a = getattr(perf_a, metric)
        b = getattr(perf_b, metric)
        if a == b:
            better = "Tie"
        elif (a > b) == higher_is_better:
            better = car_a.name
        else:
            better = car_b.name
        rows.append({"metric": metric, "car_a": a, "car_b": b, "better": better})
    return pd.DataFrame(rows, columns=["metric", "car_a", "car_b", "better"])
