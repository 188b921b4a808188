"""Monte Carlo race analytics for the race strategy simulation engine.

Runs many seeded replications of ``simulate_race`` for one car and
strategy and aggregates the spread of race times produced by the
per-lap noise.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from race_engine.core.car import CarProfile
from race_engine.core.race import simulate_race
from race_engine.core.strategy import StrategyPlan
from race_engine.core.track import TrackProfile
from race_engine.core.weather import WeatherState


def simulate_race_monte_carlo(
    car: CarProfile,
    track: TrackProfile,
    strategy: StrategyPlan,
    weather: WeatherState,
    total_laps: int,
    simulations: int,
    base_seed: int = 42,
) -> dict[str, Any]:
    """Run a Monte Carlo ensemble of race simulations.

    Each replication uses ``seed = base_seed + i`` so that:
      - Results are fully reproducible given the same ``base_seed``.
      - No global random state is modified.

    Args:
        car: Car to race.
        track: Circuit to race on.
        strategy: Strategy held fixed across replications.
        weather: Race-day weather.
        total_laps: Race length in laps.
        simulations: Number of replications (>= 1).
        base_seed: Starting seed value.  Replication *i* uses
            ``base_seed + i``.

    Returns:
        Dictionary with keys:
            mean_total_time    -- mean race time in minutes
            std_total_time     -- population std of race time in minutes
            min_total_time     -- fastest race time in minutes
            max_total_time     -- slowest race time in minutes
            mean_average_lap   -- mean of per-run average lap times (s)
            total_times        -- per-replication race times (list[float])

    Raises:
        ValueError: If simulations < 1.
    """
    if simulations < 1:
        raise ValueError("simulations must be >= 1.")

    totals = np.empty(simulations, dtype=float)
    averages = np.empty(simulations, dtype=float)

    for i in range(simulations):
        outcome = simulate_race(
            car, track, strategy, weather, total_laps, seed=base_seed + i
        )
        totals[i] = outcome.total_time
        averages[i] = outcome.average_lap_time

    return {
        "mean_total_time": float(totals.mean()),
        "std_total_time": float(totals.std()),
        "min_total_time": float(totals.min()),
        "max_total_time": float(totals.max()),
        "mean_average_lap": float(averages.mean()),
        "total_times": totals.tolist(),
    }
