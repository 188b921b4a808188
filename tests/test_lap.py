"""Tests for the per-lap time model."""

import numpy as np
import pytest

from race_engine.core.aero import STANDARD_KIT
from race_engine.core.car import CarProfile
from race_engine.core.engine import STANDARD_ENGINE
from race_engine.core.lap import (
    MIN_LAP_TIME,
    corner_factor,
    deterministic_lap_time,
    lap_time,
    length_factor,
    simulate_lap,
    wear_penalty,
)
from race_engine.core.performance import base_lap_time
from race_engine.core.track import TrackProfile
from race_engine.core.tyre import HARD, MEDIUM, SOFT
from race_engine.core.weather import DRY, WET, WeatherState

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _neutral_track(difficulty: str = "Medium") -> TrackProfile:
    """A track whose corner and length factors are both exactly 1.0."""
    return TrackProfile(name="Neutral", length_km=4.5, corners=15, difficulty=difficulty)


def _sample_car() -> CarProfile:
    return CarProfile(
        name="Test Racer",
        chassis_weight=950.0,
        engine=STANDARD_ENGINE,
        front_tyres=MEDIUM,
        rear_tyres=MEDIUM,
        aero_kit=STANDARD_KIT,
    )


# ---------------------------------------------------------------------------
# Track factors
# ---------------------------------------------------------------------------


def test_neutral_track_factors() -> None:
    track = _neutral_track()
    assert corner_factor(track) == 1.0
    assert length_factor(track) == 1.0


def test_track_factor_floors() -> None:
    """Short, open tracks are floored at cf=0.6 and lf=0.7."""
    track = TrackProfile(name="Oval", length_km=2.0, corners=4, difficulty="Easy")
    assert corner_factor(track) == 0.6
    assert length_factor(track) == 0.7


# ---------------------------------------------------------------------------
# Wear
# ---------------------------------------------------------------------------


def test_wear_before_cliff() -> None:
    """Medium at age 5: 0.05 * 5 * 3.0 = 0.75 s."""
    assert wear_penalty(MEDIUM, 5) == pytest.approx(0.75)


def test_wear_after_cliff() -> None:
    """Medium at age 30: 0.05 * (30 - 25) * 8.0 = 2.0 s."""
    assert wear_penalty(MEDIUM, 30) == pytest.approx(2.0)


def test_wear_fresh_tyre_is_free() -> None:
    assert wear_penalty(SOFT, 0) == 0.0


def test_wear_slope_steeper_after_cliff() -> None:
    """Per-lap wear growth past durability must exceed growth before it."""
    for compound in (SOFT, MEDIUM, HARD):
        d = compound.durability
        pre_slope = wear_penalty(compound, 2) - wear_penalty(compound, 1)
        post_slope = wear_penalty(compound, d + 2) - wear_penalty(compound, d + 1)
        assert post_slope > pre_slope


def test_wear_strictly_increasing_within_each_segment() -> None:
    """Wear grows every lap up to durability and every lap past it."""
    for compound in (SOFT, MEDIUM, HARD):
        d = compound.durability
        for age in range(0, d):
            assert wear_penalty(compound, age + 1) > wear_penalty(compound, age)
        for age in range(d + 1, d + 11):
            assert wear_penalty(compound, age + 1) > wear_penalty(compound, age)


def test_wear_scales_with_track_factors() -> None:
    base = wear_penalty(MEDIUM, 10)
    assert wear_penalty(MEDIUM, 10, cf=1.2, lf=1.5) == pytest.approx(base * 1.2 * 1.5)


# ---------------------------------------------------------------------------
# Deterministic stages
# ---------------------------------------------------------------------------


def test_compound_bonus_applied() -> None:
    """On a neutral track only the compound bonus changes a fresh lap."""
    track = _neutral_track()
    assert deterministic_lap_time(track, DRY, MEDIUM, 0, "Medium", 100.0) == pytest.approx(99.0)
    assert deterministic_lap_time(track, DRY, SOFT, 0, "Medium", 100.0) == pytest.approx(98.0)
    assert deterministic_lap_time(track, DRY, HARD, 0, "Medium", 100.0) == pytest.approx(100.0)


def test_rain_never_faster() -> None:
    """Heavy rain (7) must never beat the same lap in the dry."""
    dry = WeatherState(condition="Dry", temperature=20, wind_speed=10, rain_intensity=0)
    wet = WeatherState(condition="Wet", temperature=20, wind_speed=10, rain_intensity=7)
    for difficulty in ("Easy", "Medium", "Hard"):
        track = _neutral_track(difficulty)
        for age in (0, 10, 30):
            for fuel in ("Light", "Medium", "Heavy"):
                t_dry = deterministic_lap_time(track, dry, MEDIUM, age, fuel, 90.0)
                t_wet = deterministic_lap_time(track, wet, MEDIUM, age, fuel, 90.0)
                assert t_wet >= t_dry


def test_weather_multipliers_stack() -> None:
    """Rain above 5 adds 10% and wind above 30 adds 5%, multiplied."""
    track = _neutral_track()
    storm = WeatherState(condition="Storm", temperature=12, wind_speed=45, rain_intensity=8)
    calm = deterministic_lap_time(track, DRY, HARD, 0, "Medium", 100.0)
    stormy = deterministic_lap_time(track, storm, HARD, 0, "Medium", 100.0)
    assert stormy == pytest.approx(calm * 1.10 * 1.05)


def test_difficulty_multipliers() -> None:
    hard = deterministic_lap_time(_neutral_track("Hard"), DRY, HARD, 0, "Medium", 100.0)
    easy = deterministic_lap_time(_neutral_track("Easy"), DRY, HARD, 0, "Medium", 100.0)
    assert hard == pytest.approx(105.0)
    assert easy == pytest.approx(98.0)


def test_fuel_load_ordering() -> None:
    """Light fuel is quickest, heavy slowest, by 0.4% per unit cf."""
    track = _neutral_track()
    light = deterministic_lap_time(track, DRY, HARD, 0, "Light", 100.0)
    medium = deterministic_lap_time(track, DRY, HARD, 0, "Medium", 100.0)
    heavy = deterministic_lap_time(track, DRY, HARD, 0, "Heavy", 100.0)
    assert light == pytest.approx(99.6)
    assert medium == pytest.approx(100.0)
    assert heavy == pytest.approx(100.4)


# ---------------------------------------------------------------------------
# Noise and clamping
# ---------------------------------------------------------------------------


def test_noise_within_two_seconds() -> None:
    """Every noisy lap stays within +/- 2 s of the deterministic value."""
    track = _neutral_track()
    rng = np.random.default_rng(123)
    expected = deterministic_lap_time(track, DRY, MEDIUM, 5, "Medium", 100.0)
    samples = [lap_time(track, DRY, MEDIUM, 5, "Medium", 100.0, rng) for _ in range(200)]
    for t in samples:
        assert abs(t - expected) <= 2.0
    assert len(set(samples)) > 1, "noise must be drawn fresh per lap"


def test_noise_reproducible_with_seed() -> None:
    track = _neutral_track()
    a = lap_time(track, DRY, MEDIUM, 3, "Light", 100.0, np.random.default_rng(9))
    b = lap_time(track, DRY, MEDIUM, 3, "Light", 100.0, np.random.default_rng(9))
    assert a == b


def test_lap_time_clamped_to_floor() -> None:
    """A pathological base time must clamp to the positive floor."""
    track = _neutral_track()
    rng = np.random.default_rng(0)
    for _ in range(50):
        assert lap_time(track, DRY, SOFT, 0, "Medium", 0.0, rng) == MIN_LAP_TIME


# ---------------------------------------------------------------------------
# Preview lap
# ---------------------------------------------------------------------------


def test_simulate_lap_positive_and_bounded() -> None:
    car = _sample_car()
    track = TrackProfile(name="Monaco", length_km=3.3, corners=19, difficulty="Hard")
    t = simulate_lap(car, track, DRY)
    assert 0.0 < t < 300.0
    assert t == pytest.approx(base_lap_time(car, track) * 1.05)


def test_simulate_lap_weather() -> None:
    """Wet, windy and combined conditions all slow the preview lap."""
    car = _sample_car()
    track = _neutral_track()
    dry = simulate_lap(car, track, DRY)
    windy = WeatherState(condition="Windy", temperature=20, wind_speed=35, rain_intensity=0)
    extreme = WeatherState(condition="Extreme", temperature=15, wind_speed=40, rain_intensity=8)
    assert simulate_lap(car, track, WET) > dry
    assert simulate_lap(car, track, windy) > dry
    assert simulate_lap(car, track, extreme) > dry * 1.15


def test_simulate_lap_deterministic() -> None:
    car = _sample_car()
    track = _neutral_track()
    assert simulate_lap(car, track, WET) == simulate_lap(car, track, WET)
