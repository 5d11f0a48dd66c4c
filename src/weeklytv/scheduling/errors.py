from __future__ import annotations


class InvalidDurationError(ValueError):
    """Raised when a catalog item has a negative or non-finite duration."""

    def __init__(self, title: str, duration_seconds: float) -> None:
        super().__init__(
            f"Invalid duration {duration_seconds!r} for catalog item '{title}': "
            "durations must be finite and non-negative"
        )
        self.title = title
        self.duration_seconds = duration_seconds
