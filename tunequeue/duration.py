"""Total playtime with the shortest and longest songs of a collection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .song import Song


@dataclass(frozen=True)
class DurationSummary:
    """Total playtime and the extreme songs of a collection."""

    total: int
    shortest: Song
    longest: Song

    def render(self) -> str:
        """Return the summary as printed text."""
        return (
            "Special Use Case Summarizer:"
            f"Playtime: {self.total} sec\n"
            f"Shortest Song: {self.shortest.title}: {self.shortest.duration} sec\n"
            f"Longest Song: {self.longest.title} : {self.longest.duration} sec\n"
        )


def summarize(songs: Iterable[Song]) -> DurationSummary | None:
    """Summarize the songs' durations; None when there are no songs."""
    items = list(songs)
    if not items:
        return None
    by_duration = lambda song: song.duration  # noqa: E731
    return DurationSummary(
        total=sum(song.duration for song in items),
        shortest=min(items, key=by_duration),
        longest=max(items, key=by_duration),
    )