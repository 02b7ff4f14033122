"""Lookup of songs by their identifier."""

from __future__ import annotations

from .song import Song


class SongSearch:
    """An index of songs keyed by ID; later songs replace earlier ones."""

    def __init__(self) -> None:
        self._songs: dict[str, Song] = {}

    def add_song(self, song: Song) -> None:
        self._songs[song.id] = song

    def search_song(self, song_id: str) -> Song | None:
        """Return the song with this ID, or None when there is none."""
        return self._songs.get(song_id)

    def delete_song(self, song_id: str) -> None:
        """Forget the song with this ID; unknown IDs are ignored."""
        self._songs.pop(song_id, None)

    def clear(self) -> None:
        self._songs.clear()

    def __contains__(self, song_id: object) -> bool:
        return song_id in self._songs

    def __len__(self) -> int:
        return len(self._songs)