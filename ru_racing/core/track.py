"""Track model for the RU Racing simulation engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Track:
    """Immutable lap around a Rutgers campus.

    The simulation core only ever reads ``length``; the name exists so that
    configured tracks can be told apart in reports.

    Attributes:
        length: Total lap length in steps (> 0).
        name: Human-readable track label.
    """

    length: int
    name: str = "Track"

    def __post_init__(self) -> None:
        """Validate track parameters."""
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValueError("Track length must be an integer.")
        if self.length <= 0:
            raise ValueError("Track length must be > 0.")
        if not self.name:
            raise ValueError("Track name must not be empty.")
