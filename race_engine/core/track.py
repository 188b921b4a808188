"""Track model for the race strategy simulation engine."""

from dataclasses import dataclass

EASY: str = "Easy"
MEDIUM: str = "Medium"
HARD: str = "Hard"

DIFFICULTIES: tuple[str, ...] = (EASY, MEDIUM, HARD)


@dataclass(frozen=True)
class TrackProfile:
    """Immutable representation of a circuit.

    Attributes:
        name: Circuit name.
        length_km: Lap length in kilometres.
        corners: Number of corners per lap.
        difficulty: Difficulty tier, one of ``DIFFICULTIES``.
        surface: Surface descriptor (e.g. "Smooth", "Rough").
    """

    name: str
    length_km: float
    corners: int
    difficulty: str = MEDIUM
    surface: str = "Smooth"

    def __post_init__(self) -> None:
        """Validate track parameters."""
        if not self.name:
            raise ValueError("Track name must not be empty.")
        if self.length_km <= 0.0:
            raise ValueError("length_km must be > 0.0.")
        if self.corners < 0:
            raise ValueError("corners must be >= 0.")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(
                f"difficulty must be one of {DIFFICULTIES}, got {self.difficulty!r}."
            )

    @property
    def track_rating(self) -> float:
        """Corner count times lap length; a rough technicality score."""
        return self.corners * self.length_km
