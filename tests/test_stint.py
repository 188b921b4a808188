"""Tests for stint planning: lap splitting and compound resolution."""

import pytest

from race_engine.core.stint import (
    InvalidScheduleError,
    StintSchedule,
    plan_stints,
    resolve_compounds,
    split_laps,
)
from race_engine.core.tyre import HARD, MEDIUM, SOFT, TyreCompound

# ---------------------------------------------------------------------------
# Lap splitting
# ---------------------------------------------------------------------------


def test_split_laps_remainder_goes_first() -> None:
    """The first ``total % stints`` stints get one extra lap."""
    assert split_laps(10, 2) == [4, 3, 3]
    assert split_laps(11, 2) == [4, 4, 3]
    assert split_laps(12, 2) == [4, 4, 4]


def test_split_laps_no_stops() -> None:
    """Zero pit stops must give a single stint covering every lap."""
    assert split_laps(57, 0) == [57]


def test_split_laps_sum_and_count_invariant() -> None:
    """For every valid (laps, stops) pair the counts sum to the race length."""
    for total_laps in range(1, 61):
        for pit_stops in range(0, 5):
            if pit_stops + 1 > total_laps:
                continue
            counts = split_laps(total_laps, pit_stops)
            assert sum(counts) == total_laps
            assert len(counts) == pit_stops + 1
            assert min(counts) >= 1
            assert max(counts) - min(counts) <= 1


def test_more_stints_than_laps_rejected() -> None:
    """Asking for more stints than laps must fail fast."""
    with pytest.raises(InvalidScheduleError, match="pit stops"):
        split_laps(3, 3)


def test_zero_laps_rejected() -> None:
    with pytest.raises(InvalidScheduleError):
        split_laps(0, 0)


def test_negative_pit_stops_rejected() -> None:
    with pytest.raises(InvalidScheduleError):
        split_laps(10, -1)


def test_invalid_schedule_error_is_value_error() -> None:
    """Callers catching ValueError must also catch schedule errors."""
    assert issubclass(InvalidScheduleError, ValueError)


# ---------------------------------------------------------------------------
# Compound resolution
# ---------------------------------------------------------------------------


def test_empty_descriptor_defaults_to_medium() -> None:
    assert resolve_compounds("", 3) == [MEDIUM, MEDIUM, MEDIUM]
    assert resolve_compounds("   ", 2) == [MEDIUM, MEDIUM]
    assert resolve_compounds([], 2) == [MEDIUM, MEDIUM]


def test_short_descriptor_repeats_last() -> None:
    """Missing stints reuse the last named compound."""
    assert resolve_compounds("Soft-Medium", 4) == [SOFT, MEDIUM, MEDIUM, MEDIUM]


def test_long_descriptor_truncated() -> None:
    assert resolve_compounds("Soft-Hard-Medium-Soft", 2) == [SOFT, HARD]


def test_names_case_insensitive_with_fallback() -> None:
    """Names ignore case and whitespace; unknown names become Medium."""
    assert resolve_compounds(" soft - HARD ", 2) == [SOFT, HARD]
    assert resolve_compounds("Ultrasoft-Hard", 2) == [MEDIUM, HARD]


def test_sequence_descriptor_with_custom_compound() -> None:
    """TyreCompound instances in a sequence pass through unchanged."""
    custom = TyreCompound(
        name="Qualifier",
        grip_level=1.0,
        durability=5,
        wear_rate=0.2,
        base_lap_time_bonus=-3.0,
    )
    assert resolve_compounds([custom, "hard"], 3) == [custom, HARD, HARD]


# ---------------------------------------------------------------------------
# Schedule
# ---------------------------------------------------------------------------


def test_plan_stints_schedule() -> None:
    """The schedule pairs each stint length with its compound."""
    schedule = plan_stints(10, 2, "Soft-Medium-Hard")
    assert isinstance(schedule, StintSchedule)
    assert schedule.lap_counts == [4, 3, 3]
    assert schedule.compounds == [SOFT, MEDIUM, HARD]
    assert schedule.total_laps == 10
    assert schedule.pit_stops == 2
    assert len(schedule) == 3
    assert schedule[0].compound is SOFT


def test_plan_stints_default_descriptor() -> None:
    schedule = plan_stints(20, 1)
    assert schedule.compounds == [MEDIUM, MEDIUM]
