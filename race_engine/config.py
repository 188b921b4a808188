"""Configuration loader for the race strategy simulation engine."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from race_engine.core.track import DIFFICULTIES, TrackProfile

DATA_DIR: Path = Path(__file__).resolve().parent / "data"
TRACKS_PATH: Path = DATA_DIR / "tracks.yaml"

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

_REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "length_km",
    "corners",
    "difficulty",
)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Install a root handler with the project's log format."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def load_track_catalog(path: Path | None = None) -> list[TrackProfile]:
    """Load the track catalog from a YAML file.

    Each entry is validated and converted into a :class:`TrackProfile`.

    Args:
        path: Optional override for the catalog file path.

    Returns:
        List of :class:`TrackProfile` objects in file order.

    Raises:
        FileNotFoundError: If the catalog file does not exist.
        ValueError: If the file has no ``tracks`` list, or an entry is
            missing fields or has mistyped values.
    """
    catalog_path = path or TRACKS_PATH
    if not catalog_path.exists():
        raise FileNotFoundError(f"Track catalog not found: {catalog_path}")

    with open(catalog_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict) or not isinstance(data.get("tracks"), list):
        raise ValueError(f"{catalog_path} must contain a 'tracks' list")

    entries: list[dict] = data["tracks"]
    tracks: list[TrackProfile] = []

    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Track entry {idx} must be a mapping")
        label = entry.get("name", "<unknown>")

        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Track entry {idx} ({label}) is missing required field '{field}'"
                )

        # --- Validate types ---
        length = entry["length_km"]
        if isinstance(length, bool) or not isinstance(length, (int, float)):
            raise ValueError(
                f"Track entry {idx} ({label}): "
                f"'length_km' must be numeric, got {type(length).__name__}"
            )
        corners = entry["corners"]
        if isinstance(corners, bool) or not isinstance(corners, int):
            raise ValueError(
                f"Track entry {idx} ({label}): "
                f"'corners' must be an integer, got {type(corners).__name__}"
            )
        if entry["difficulty"] not in DIFFICULTIES:
            raise ValueError(
                f"Track entry {idx} ({label}): "
                f"'difficulty' must be one of {DIFFICULTIES}, got {entry['difficulty']!r}"
            )

        tracks.append(
            TrackProfile(
                name=str(entry["name"]),
                length_km=float(length),
                corners=corners,
                difficulty=entry["difficulty"],
                surface=str(entry.get("surface", "Smooth")),
            )
        )

    return tracks


def get_track(name: str, path: Path | None = None) -> TrackProfile:
    """Look up a catalog track by name, case-insensitively.

    Raises:
        KeyError: If no track has that name.
    """
    wanted = name.strip().lower()
    for track in load_track_catalog(path):
        if track.name.lower() == wanted:
            return track
    raise KeyError(f"Unknown track: {name!r}")
