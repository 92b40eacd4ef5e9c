"""Configuration loader for the RU Racing simulation engine."""

from pathlib import Path

import yaml

from ru_racing.core.track import Track

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
TRACKS_PATH: Path = DATA_DIR / "tracks.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = ("name", "length")


def load_tracks(path: Path | None = None) -> list[Track]:
    """Load the configured race tracks from a YAML file.

    Each entry is validated and converted into a :class:`Track` instance.

    Args:
        path: Optional override for the track file path.

    Returns:
        List of :class:`Track` objects in file order.

    Raises:
        FileNotFoundError: If the track file does not exist.
        ValueError: If the file has no ``tracks`` list, an entry is missing
            fields or has an invalid length, or two tracks share a name.
    """
    tracks_path = Path(path) if path is not None else TRACKS_PATH
    if not tracks_path.exists():
        raise FileNotFoundError(f"Track file not found: {tracks_path}")

    with open(tracks_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict) or not isinstance(data.get("tracks"), list):
        raise ValueError(f"{tracks_path} must define a 'tracks' list.")

    entries: list[dict] = data["tracks"]
    tracks: list[Track] = []
    seen: set[str] = set()

    for idx, entry in enumerate(entries):
        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Track entry {idx} ({entry.get('name', '<unknown>')}) "
                    f"is missing required field '{field}'"
                )

        name = str(entry["name"])
        length = entry["length"]
        if isinstance(length, bool) or not isinstance(length, int):
            raise ValueError(
                f"Track entry {idx} ({name}): "
                f"'length' must be an integer, got {type(length).__name__}"
            )
        if length < 1:
            raise ValueError(
                f"Track entry {idx} ({name}): 'length' must be >= 1, got {length}"
            )
        if name in seen:
            raise ValueError(f"Track entry {idx}: duplicate track name '{name}'")
        seen.add(name)

        tracks.append(Track(length=length, name=name))

    return tracks
