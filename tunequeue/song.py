"""The song record shared by every part of the player."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Song:
    """One track in the library."""

    id: str
    title: str
    artist: str
    duration: int
    rating: int
    added_order: int = 0

    def __str__(self) -> str:
        return (
            f"ID: {self.id}\n"
            f"Title: {self.title}\n"
            f"Artist: {self.artist}\n"
            f"Duration: {self.duration} sec\n"
            f"Rating: {self.rating}\n"
            f"Added Order: {self.added_order}\n"
        )