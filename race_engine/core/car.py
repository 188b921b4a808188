"""Car model for the race strategy simulation engine."""

from dataclasses import dataclass

from race_engine.core.aero import AeroKit
from race_engine.core.engine import Engine
from race_engine.core.tyre import TyreCompound


@dataclass(frozen=True)
class CarProfile:
    """Immutable representation of a configured race car.

    Attributes:
        name: Car name, echoed into race outcomes.
        chassis_weight: Chassis weight in kilograms (engine excluded).
        engine: Fitted power unit.
        front_tyres: Compound fitted to the front axle.
        rear_tyres: Compound fitted to the rear axle.
        aero_kit: Fitted aerodynamic kit.
    """

    name: str
    chassis_weight: float
    engine: Engine
    front_tyres: TyreCompound
    rear_tyres: TyreCompound
    aero_kit: AeroKit

    def __post_init__(self) -> None:
        """Validate car parameters."""
        if not self.name:
            raise ValueError("name must not be empty.")
        if self.chassis_weight < 0.0:
            raise ValueError("chassis_weight must be >= 0.0.")

    @property
    def total_weight(self) -> float:
        return self.chassis_weight + self.engine.weight

    @property
    def engine_power(self) -> int:
        return self.engine.power

    @property
    def fuel_efficiency(self) -> float:
        return self.engine.fuel_efficiency

    @property
    def front_grip(self) -> float:
        return self.front_tyres.grip_level

    @property
    def rear_grip(self) -> float:
        return self.rear_tyres.grip_level

    @property
    def drag_coefficient(self) -> float:
        return self.aero_kit.drag_coefficient

    @property
    def downforce(self) -> int:
        return self.aero_kit.downforce

    @property
    def top_speed_impact(self) -> int:
        return self.aero_kit.top_speed_impact
