"""Quicksort of playlists by title, duration or recency."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from .song import Song


class _SortablePlaylist(Protocol):
    def get_all_songs(self) -> list[Song]: ...

    def rebuild_from_list(self, songs: Iterable[Song]) -> None: ...


def _before(a: Song, b: Song, criteria: str, ascending: bool) -> bool:
    if criteria == "title":
        return a.title < b.title if ascending else a.title > b.title
    if criteria == "duration":
        return a.duration < b.duration if ascending else a.duration > b.duration
    if criteria == "recent":
        return a.id < b.id if ascending else a.added_order > b.added_order
    return False


def _partition(items: list[Song], low: int, high: int, criteria: str, ascending: bool) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if _before(items[j], pivot, criteria, ascending):
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(songs: Iterable[Song], criteria: str, ascending: bool) -> list[Song]:
    """Return the songs ordered by quicksort on the given criteria.

    "title" and "duration" order by that field; "recent" orders by ID when
    ascending and by newest added first otherwise. Any other criteria
    compares nothing as smaller.
    """
    items = list(songs)
    ranges = [(0, len(items) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            pivot = _partition(items, low, high, criteria, ascending)
            ranges.append((pivot + 1, high))
            ranges.append((low, pivot - 1))
    return items


class PlaylistSorter:
    """Sorts playlists and keeps the last ordering it produced."""

    def __init__(self) -> None:
        self._songs: list[Song] = []

    @property
    def songs(self) -> list[Song]:
        return list(self._songs)

    def add_song(self, song: Song) -> None:
        self._songs.append(song)

    def sort_playlist(self, playlist: _SortablePlaylist, criteria: str, ascending: bool) -> None:
        """Sort the playlist's songs and rebuild the playlist in that order."""
        self._songs = quick_sort(playlist.get_all_songs(), criteria, ascending)
        playlist.rebuild_from_list(self._songs)

    def display_playlist(self) -> None:
        for song in self._songs:
            print(f"{song.title} ({song.duration} sec, rating {song.rating})")

    def clear(self) -> None:
        self._songs.clear()