"""Stint planning for the race strategy simulation engine.

The planner splits the race distance into ``pit_stops + 1`` stints of
near-equal length (earlier stints absorb the remainder) and assigns one
tyre compound to each stint from the strategy's compound descriptor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from race_engine.core.strategy import CompoundDescriptor
from race_engine.core.tyre import MEDIUM, TyreCompound, compound_by_name

logger = logging.getLogger(__name__)

COMPOUND_SEPARATOR: str = "-"


class InvalidScheduleError(ValueError):
    """Raised when a race cannot be split into non-empty stints."""


# ---------------------------------------------------------------------------
# Schedule containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Stint:
    """A contiguous run of laps on one compound.

    Attributes:
        laps: Number of laps in the stint (>= 1).
        compound: Compound fitted for the stint.
    """

    laps: int
    compound: TyreCompound


@dataclass(frozen=True)
class StintSchedule:
    """Ordered stints covering a whole race.

    Invariants: ``total_laps`` equals the sum of stint lengths and
    ``len(stints)`` equals the pit-stop count plus one.
    """

    stints: tuple[Stint, ...]

    def __len__(self) -> int:
        return len(self.stints)

    def __getitem__(self, index: int) -> Stint:
        return self.stints[index]

    @property
    def total_laps(self) -> int:
        return sum(s.laps for s in self.stints)

    @property
    def pit_stops(self) -> int:
        return len(self.stints) - 1

    @property
    def lap_counts(self) -> list[int]:
        return [s.laps for s in self.stints]

    @property
    def compounds(self) -> list[TyreCompound]:
        return [s.compound for s in self.stints]


# ---------------------------------------------------------------------------
# Planner
# ---------------------------------------------------------------------------


def split_laps(total_laps: int, pit_stops: int) -> list[int]:
    """Split *total_laps* into ``pit_stops + 1`` stint lengths.

    The first ``total_laps % stints`` stints receive one extra lap.

    Raises:
        InvalidScheduleError: If ``total_laps < 1``, ``pit_stops < 0`` or
            there are more stints than laps.
    """
    if total_laps < 1:
        raise InvalidScheduleError(f"total_laps must be >= 1, got {total_laps}.")
    if pit_stops < 0:
        raise InvalidScheduleError(f"pit_stops must be >= 0, got {pit_stops}.")
    stints = pit_stops + 1
    if stints > total_laps:
        raise InvalidScheduleError(
            f"{pit_stops} pit stops need at least {stints} laps, "
            f"but the race is only {total_laps} laps long."
        )

    base, extra = divmod(total_laps, stints)
    return [base + 1 if i < extra else base for i in range(stints)]


def resolve_compounds(
    descriptor: CompoundDescriptor,
    stints: int,
) -> list[TyreCompound]:
    """Resolve a compound descriptor into exactly *stints* compounds.

    Args:
        descriptor: ``"-"``-separated compound names, or a sequence of
            names and/or :class:`TyreCompound` instances.  Names match
            case-insensitively; unknown names become Medium.
        stints: Number of stints to cover (>= 1).

    Returns:
        One compound per stint.  An empty descriptor yields Medium for
        every stint; a short one repeats its last entry; a long one is
        truncated.
    """
    if isinstance(descriptor, str):
        tokens: list[str | TyreCompound] = (
            [t.strip() for t in descriptor.split(COMPOUND_SEPARATOR)]
            if descriptor.strip()
            else []
        )
    else:
        tokens = list(descriptor)

    if not tokens:
        return [MEDIUM] * stints

    compounds: list[TyreCompound] = [
        t if isinstance(t, TyreCompound) else compound_by_name(t) for t in tokens
    ]
    while len(compounds) < stints:
        compounds.append(compounds[-1])
    return compounds[:stints]


def plan_stints(
    total_laps: int,
    pit_stops: int,
    descriptor: CompoundDescriptor = "",
) -> StintSchedule:
    """Build the stint schedule for a race.

    Raises:
        InvalidScheduleError: See :func:`split_laps`.
    """
    lap_counts = split_laps(total_laps, pit_stops)
    compounds = resolve_compounds(descriptor, len(lap_counts))
    schedule = StintSchedule(
        stints=tuple(Stint(laps=n, compound=c) for n, c in zip(lap_counts, compounds))
    )
    logger.debug(
        "Planned %d stints over %d laps: %s",
        len(schedule),
        total_laps,
        ", ".join(f"{s.compound.name} x{s.laps}" for s in schedule.stints),
    )
    return schedule
