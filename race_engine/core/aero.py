"""Aerodynamic kit model and kit catalog."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AeroKit:
    """Immutable aerodynamic configuration.

    Attributes:
        name: Kit name, unique within the catalog.
        drag_coefficient: Aerodynamic drag coefficient.
        downforce: Downforce rating.
        top_speed_impact: Top-speed contribution in km/h.
    """

    name: str
    drag_coefficient: float
    downforce: int
    top_speed_impact: int

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("AeroKit name must not be empty.")
        if self.drag_coefficient < 0.0:
            raise ValueError("drag_coefficient must be >= 0.0.")
        if self.downforce < 0:
            raise ValueError("downforce must be >= 0.")

    @property
    def aero_rating(self) -> int:
        """Downforce net of drag as a single integer score."""
        return int(self.downforce - self.drag_coefficient * 100)

    @property
    def kit_type(self) -> str:
        """Classify the kit as "High Speed", "High Downforce" or "Balanced"."""
        if self.drag_coefficient <= 0.28 and self.top_speed_impact >= 270:
            return "High Speed"
        if self.downforce >= 400:
            return "High Downforce"
        return "Balanced"


# Kit catalog ------------------------------------------------------------------

STANDARD_KIT = AeroKit("Standard Kit", 0.30, 200, 250)
HIGH_DOWNFORCE_KIT = AeroKit("High Downforce Kit", 0.35, 350, 220)
LOW_DRAG_KIT = AeroKit("Low Drag Kit", 0.25, 150, 280)
ADJUSTABLE_KIT = AeroKit("Adjustable Kit", 0.30, 250, 240)
GROUND_EFFECT_KIT = AeroKit("Ground Effect Kit", 0.27, 400, 240)
EXTREME_AERO_KIT = AeroKit("Extreme Aero Kit", 0.40, 500, 200)

ALL_KITS: tuple[AeroKit, ...] = (
    STANDARD_KIT,
    HIGH_DOWNFORCE_KIT,
    LOW_DRAG_KIT,
    ADJUSTABLE_KIT,
    GROUND_EFFECT_KIT,
    EXTREME_AERO_KIT,
)


def kit_by_name(name: str) -> AeroKit | None:
    """Return the catalog kit called *name* (case-insensitive), if any."""
    wanted = name.strip().lower()
    for kit in ALL_KITS:
        if kit.name.lower() == wanted:
            return kit
    return None


def kits_for_track_type(track_type: str) -> list[AeroKit]:
    """Recommend two kits for a track character.

    Args:
        track_type: ``"highspeed"``, ``"technical"`` or ``"balanced"``.
            Unknown values are treated as ``"balanced"``.

    Returns:
        Recommended kits, best first.
    """
    key = track_type.strip().lower()
    if key == "highspeed":
        return [LOW_DRAG_KIT, STANDARD_KIT]
    if key == "technical":
        return [HIGH_DOWNFORCE_KIT, GROUND_EFFECT_KIT]
    return [ADJUSTABLE_KIT, STANDARD_KIT]
