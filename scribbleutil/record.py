"""A description of one played song."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class Record:
    artist: str = ""
    track: str = ""
    album: str = ""
    number: str = ""
    mbid: str = ""
    time: str = ""
    length: timedelta = timedelta(0)
    love: bool = False
    source: str = "P"

    def is_defined(self) -> bool:
        """Does this record have a usable value (artist and track)?"""
        return bool(self.artist) and bool(self.track)