"""Engine model for the race strategy simulation engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Engine:
    """Immutable description of a power unit.

    Attributes:
        engine_type: Engine label (e.g. "Standard").
        power: Engine power in horsepower.
        fuel_efficiency: Fuel efficiency in km per litre.
        weight: Engine weight in kilograms.
    """

    engine_type: str
    power: int
    fuel_efficiency: float
    weight: float

    def __post_init__(self) -> None:
        """Validate engine parameters."""
        if not self.engine_type:
            raise ValueError("engine_type must not be empty.")
        if self.power < 0:
            raise ValueError("power must be >= 0.")
        if self.fuel_efficiency < 0.0:
            raise ValueError("fuel_efficiency must be >= 0.0.")
        if self.weight < 0.0:
            raise ValueError("weight must be >= 0.0.")

    @property
    def power_to_weight(self) -> float:
        """Horsepower per kilogram, or 0.0 for a weightless engine."""
        if self.weight == 0.0:
            return 0.0
        return self.power / self.weight


# Pre-defined engines ----------------------------------------------------------

STANDARD_ENGINE = Engine(
    engine_type="Standard", power=200, fuel_efficiency=12.0, weight=150.0
)
TURBO_ENGINE = Engine(
    engine_type="Turbocharged", power=300, fuel_efficiency=9.0, weight=180.0
)
