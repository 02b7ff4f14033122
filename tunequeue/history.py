"""The stack of songs that have been played."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .song import Song

if TYPE_CHECKING:
    from .playlist import Playlist


class PlaybackHistory:
    """Played songs, the most recent on top."""

    def __init__(self) -> None:
        self._stack: list[Song] = []

    def play_song(self, song: Song) -> None:
        print(f"Playing {song.title}")
        self._stack.append(song)

    def undo_last_play(self, playlist: Playlist) -> Song | None:
        """Take the last played song off the history and add it to the playlist."""
        if not self._stack:
            return None
        song = self._stack.pop()
        playlist.add_song(song)
        print(f"Song{song.title}re-added to history!!")
        return song

    def is_empty(self) -> bool:
        return not self._stack

    def get_recent_songs(self, count: int) -> list[Song]:
        """Return up to ``count`` songs, most recent first; a negative count means all."""
        recent = self._stack[::-1]
        return recent if count < 0 else recent[:count]

    def __len__(self) -> int:
        return len(self._stack)