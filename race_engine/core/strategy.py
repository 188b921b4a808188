"""Race strategy model for the race strategy simulation engine.

A strategy fixes the number of pit stops, the fuel-load class and the
tyre compound sequence.  The compound sequence is either a
``"-"``-separated string (``"Soft-Medium-Hard"``) or a sequence whose
items are compound names or :class:`TyreCompound` instances; it is
resolved against the stint count by :mod:`race_engine.core.stint`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from race_engine.core.tyre import TyreCompound

LIGHT: str = "Light"
MEDIUM: str = "Medium"
HEAVY: str = "Heavy"

FUEL_LOADS: tuple[str, ...] = (LIGHT, MEDIUM, HEAVY)

CompoundDescriptor = Union[str, Sequence[Union[str, TyreCompound]]]


@dataclass(frozen=True)
class StrategyPlan:
    """Pit-stop, fuel and tyre plan for a race.

    Attributes:
        pit_stops: Number of pit stops (>= 0).
        fuel_load: Fuel-load class, one of ``FUEL_LOADS``.
        tyre_strategy: Compound sequence descriptor, one nominal compound
            per stint.  Padded or truncated to the stint count.
        estimated_race_time: Planner's own estimate in minutes.
    """

    pit_stops: int
    fuel_load: str = MEDIUM
    tyre_strategy: CompoundDescriptor = ""
    estimated_race_time: float = 0.0

    def __post_init__(self) -> None:
        """Validate strategy parameters."""
        if self.pit_stops < 0:
            raise ValueError("pit_stops must be >= 0.")
        if self.fuel_load not in FUEL_LOADS:
            raise ValueError(
                f"fuel_load must be one of {FUEL_LOADS}, got {self.fuel_load!r}."
            )
        if not isinstance(self.tyre_strategy, str):
            # Sequence descriptors are stored as tuples.
            object.__setattr__(self, "tyre_strategy", tuple(self.tyre_strategy))

    @property
    def stints(self) -> int:
        return self.pit_stops + 1

    @property
    def is_conservative(self) -> bool:
        """One stop or fewer on a heavy fuel load."""
        return self.pit_stops <= 1 and self.fuel_load == HEAVY

    @property
    def is_aggressive(self) -> bool:
        """Three stops or more on a light fuel load."""
        return self.pit_stops >= 3 and self.fuel_load == LIGHT

    @property
    def name(self) -> str:
        if self.is_aggressive:
            return "Aggressive Strategy"
        if self.is_conservative:
            return "Conservative Strategy"
        return "Balanced Strategy"


# Pre-defined strategies ------------------------------------------------------

AGGRESSIVE = StrategyPlan(
    pit_stops=3, fuel_load=LIGHT, tyre_strategy="Soft-Medium", estimated_race_time=90.0
)
BALANCED = StrategyPlan(
    pit_stops=2, fuel_load=MEDIUM, tyre_strategy="Medium-Hard", estimated_race_time=95.0
)
CONSERVATIVE = StrategyPlan(
    pit_stops=1, fuel_load=HEAVY, tyre_strategy="Medium-Hard", estimated_race_time=100.0
)
