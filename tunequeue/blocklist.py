"""A set of artists whose songs may not be added to a playlist."""

from __future__ import annotations

from collections.abc import Iterator


class Blocklist:
    """Artists that are refused when songs are added."""

    def __init__(self) -> None:
        self._blocked: set[str] = set()

    def block(self, artist: str) -> None:
        """Block an artist."""
        self._blocked.add(artist)
        print(f"Blocked artist: {artist}")

    def unblock(self, artist: str) -> bool:
        """Unblock an artist; return whether the artist had been blocked."""
        if artist in self._blocked:
            self._blocked.remove(artist)
            print(f"Unblocked artist: {artist}")
            return True
        print("Artist not blocked.")
        return False

    def is_blocked(self, artist: str) -> bool:
        return artist in self._blocked

    def display_blocked(self) -> None:
        """Print every blocked artist."""
        print("Blocked Artists:")
        for artist in self._blocked:
            print(artist)

    def __contains__(self, artist: object) -> bool:
        return artist in self._blocked

    def __iter__(self) -> Iterator[str]:
        return iter(self._blocked)

    def __len__(self) -> int:
        return len(self._blocked)