"""Tyre compound and tyre state models for the race strategy engine.

Each compound defines a grip level, a durability window (laps before the
wear cliff), a wear rate and a base lap-time bonus (negative = faster).
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Tyre compound model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TyreCompound:
    """Immutable description of a tyre compound.

    Attributes:
        name: Human-readable compound label (e.g. "Soft").
        grip_level: Grip coefficient (0.0-1.0).
        durability: Laps the compound lasts before the wear cliff.
        wear_rate: Per-lap wear coefficient in seconds.
        base_lap_time_bonus: Additive lap-time offset in seconds.
            Negative values make the compound faster.
        optimal_temperature: Best operating temperature in Celsius.
    """

    name: str
    grip_level: float
    durability: int
    wear_rate: float
    base_lap_time_bonus: float
    optimal_temperature: int = 90

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Compound name must be non-empty.")
        if self.grip_level < 0.0:
            raise ValueError("grip_level must be >= 0.")
        if self.durability < 0:
            raise ValueError("durability must be >= 0.")
        if self.wear_rate < 0.0:
            raise ValueError("wear_rate must be >= 0.")

    @property
    def performance_rating(self) -> int:
        """Grip level as an integer percentage."""
        return int(self.grip_level * 100)


# Pre-defined compounds -------------------------------------------------------

SOFT = TyreCompound(
    name="Soft",
    grip_level=0.95,
    durability=15,
    wear_rate=0.08,
    base_lap_time_bonus=-2.0,
    optimal_temperature=100,
)
MEDIUM = TyreCompound(
    name="Medium",
    grip_level=0.85,
    durability=25,
    wear_rate=0.05,
    base_lap_time_bonus=-1.0,
    optimal_temperature=90,
)
HARD = TyreCompound(
    name="Hard",
    grip_level=0.75,
    durability=35,
    wear_rate=0.03,
    base_lap_time_bonus=0.0,
    optimal_temperature=80,
)

_CANONICAL: dict[str, TyreCompound] = {
    c.name.lower(): c for c in (SOFT, MEDIUM, HARD)
}


def compound_by_name(name: str) -> TyreCompound:
    """Resolve a canonical compound name, case-insensitively.

    Unrecognised names fall back to ``MEDIUM``.
    """
    return _CANONICAL.get(name.strip().lower(), MEDIUM)


# ---------------------------------------------------------------------------
# Tyre state tracker
# ---------------------------------------------------------------------------


class TyreState:
    """Tracks the fitted compound and its age over a stint.

    Attributes:
        age: Number of laps completed on the current set of tyres.
        compound: The tyre compound currently fitted.
    """

    __slots__ = ("age", "compound")

    def __init__(self, compound: TyreCompound | None = None, age: int = 0):
        if age < 0:
            raise ValueError("age must be >= 0.")
        self.age: int = age
        self.compound: TyreCompound = compound if compound is not None else MEDIUM

    def increment_age(self) -> None:
        """Advance tyre age by one lap."""
        self.age += 1

    def reset(self, compound: TyreCompound | None = None) -> None:
        """Reset tyre age to zero after a pit stop.

        Args:
            compound: New compound to fit.  If ``None``, the current compound
                is retained.
        """
        self.age = 0
        if compound is not None:
            self.compound = compound
