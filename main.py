"""CLI entrypoint for the race strategy simulation engine."""

from __future__ import annotations

import sys

from race_engine import __version__
from race_engine.config import configure_logging, load_track_catalog
from race_engine.core.aero import STANDARD_KIT
from race_engine.core.analysis import (
    compare_cars,
    compare_strategies,
    faster_car,
    race_rating,
    setup_recommendations,
    strategy_recommendation,
)
from race_engine.core.car import CarProfile
from race_engine.core.engine import STANDARD_ENGINE, TURBO_ENGINE
from race_engine.core.lap import simulate_lap
from race_engine.core.performance import best_kit_for_track, create_car_performance
from race_engine.core.race import simulate_race
from race_engine.core.strategy import AGGRESSIVE, BALANCED, CONSERVATIVE
from race_engine.core.tyre import MEDIUM
from race_engine.core.weather import DRY


def main() -> None:
    """Run a demonstration race on the first catalog track."""
    configure_logging()
    print(f"Race Strategy Simulation Engine v{__version__}")
    print("=" * 56)

    # -- Load track catalog ---------------------------------------------------
    catalog = load_track_catalog()
    print(f"\nTrack catalog: {len(catalog)} tracks loaded")
    for i, t in enumerate(catalog, start=1):
        print(f"  T{i:02d}: {t.name} ({t.length_km} km, {t.difficulty})")

    # -- Sample car -----------------------------------------------------------
    track = catalog[0]
    car = CarProfile(
        name="Custom Racer",
        chassis_weight=950.0,
        engine=STANDARD_ENGINE,
        front_tyres=MEDIUM,
        rear_tyres=MEDIUM,
        aero_kit=STANDARD_KIT,
    )
    weather = DRY

    perf = create_car_performance(car, track, weather)
    print(f"\nTrack : {track.name}")
    print(f"Car   : {car.name}")
    print(f"Kit   : {best_kit_for_track(track).name} recommended")
    print("-" * 56)
    print(f"  Top speed      {perf.top_speed:>8d} km/h")
    print(f"  Acceleration   {perf.acceleration:>8.2f} s")
    print(f"  Fuel per lap   {perf.fuel_consumption:>8.2f} l")
    print(f"  Cornering      {perf.cornering_ability:>8d} / 10")
    print(f"  Preview lap    {simulate_lap(car, track, weather):>8.2f} s")

    # -- Simulate a race ------------------------------------------------------
    laps = 30
    outcome = simulate_race(car, track, BALANCED, weather, laps, seed=7)
    print(f"\nSimulating {laps}-lap race ({outcome.strategy_name}):\n")
    print(f"  {'Lap':>3}  {'Tyre':>6}  {'Age':>3}  {'Lap Time (s)':>12}")
    print(f"  {'---':>3}  {'------':>6}  {'---':>3}  {'------------':>12}")
    for lap_num, (name, age, t) in enumerate(
        zip(outcome.compounds, outcome.tyre_ages, outcome.lap_times), start=1
    ):
        print(f"  {lap_num:3d}  {name:>6}  {age:3d}  {t:12.3f}")
    print(f"\n  Total time : {outcome.total_time:.2f} min")
    print(f"  Average lap: {outcome.average_lap_time:.2f} s")
    print(f"  Rating     : {race_rating(outcome, track)}")
    for advice in setup_recommendations(perf, track, BALANCED):
        print(f"  * {advice}")

    # -- Compare strategies ---------------------------------------------------
    table = compare_strategies(
        car, track, weather, [AGGRESSIVE, BALANCED, CONSERVATIVE], laps
    )
    print("\nStrategy comparison:\n")
    print(table.to_string(index=False, float_format=lambda v: f"{v:.2f}"))
    print(f"\n{strategy_recommendation(track)}")

    # -- Compare cars ---------------------------------------------------------
    turbo = CarProfile(
        name="Turbo Racer",
        chassis_weight=950.0,
        engine=TURBO_ENGINE,
        front_tyres=MEDIUM,
        rear_tyres=MEDIUM,
        aero_kit=STANDARD_KIT,
    )
    print(f"\n{car.name} vs {turbo.name}:\n")
    print(compare_cars(car, turbo, track, weather).to_string(index=False))
    print(f"\n{faster_car(car, turbo, track, weather)} is faster on this track")


if __name__ == "__main__":
    sys.exit(main() or 0)
