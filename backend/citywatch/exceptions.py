"""Exceptions raised by the CityWatch core."""

from pathlib import Path


class CityWatchError(Exception):
    """Base exception for CityWatch errors."""

    pass


class LoadFailure(CityWatchError):
    """
    The raw incident table could not be obtained.

    Raised only at the top level (file missing, unreadable, not CSV).
    Individual malformed rows never raise.
    """

    def __init__(self, source: str | Path, reason: str):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"Could not load incidents from {self.source}: {reason}")
