"""An ordered playlist that keeps the search, rating and sort helpers in sync."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .blocklist import Blocklist
from .rating import SongRatingTree
from .search import SongSearch
from .song import Song
from .sorter import PlaylistSorter


class Playlist:
    """Songs in play order, with an artist blocklist.

    Songs added through :meth:`add_song` are also handed to the attached
    search index, rating tree and sorter, when those are set.
    """

    def __init__(
        self,
        searcher: SongSearch | None = None,
        rating_tree: SongRatingTree | None = None,
        sorter: PlaylistSorter | None = None,
    ) -> None:
        self._songs: list[Song] = []
        self._blocklist = Blocklist()
        self.searcher = searcher
        self.rating_tree = rating_tree
        self.sorter = sorter

    def set_modules(
        self,
        searcher: SongSearch | None,
        rating_tree: SongRatingTree | None,
        sorter: PlaylistSorter | None,
    ) -> None:
        """Attach the helpers that new songs are passed on to."""
        self.searcher = searcher
        self.rating_tree = rating_tree
        self.sorter = sorter

    def add_song(self, song: Song) -> bool:
        """Append a song unless its artist is blocked; return whether it was added."""
        if self._blocklist.is_blocked(song.artist):
            print(f"Can't add song, Artist {song.artist} blocked.")
            return False
        self._songs.append(song)
        if self.searcher is not None:
            self.searcher.add_song(song)
        if self.rating_tree is not None:
            self.rating_tree.insert_song(song)
        if self.sorter is not None:
            self.sorter.add_song(song)
        return True

    def raw_add_song(self, song: Song) -> None:
        """Append a song without the blocklist check or helper updates."""
        self._songs.append(song)

    def delete_song(self, index: int) -> Song | None:
        """Remove and return the song at this index; out-of-range indexes are ignored."""
        if not 0 <= index < len(self._songs):
            return None
        return self._songs.pop(index)

    def move_song(self, src: int, dst: int) -> None:
        """Move the song at ``src`` towards position ``dst``.

        The first song may only be moved to the end, and the last song only to
        the front. A song moved forward by more than one place lands just
        before the song that was at ``dst``. Moves that the list cannot make
        raise IndexError.
        """
        count = len(self._songs)
        if count <= 1 or src == dst:
            return
        if not (0 <= src < count and 0 <= dst < count):
            raise IndexError(f"positions {src} and {dst} are out of range")
        if src == 0 and dst == count - 1:
            self._songs.append(self._songs.pop(0))
            return
        if src == count - 1 and dst == 0:
            self._songs.insert(0, self._songs.pop())
            return
        if src == 0 or src == count - 1:
            raise IndexError(f"cannot move the song at position {src} to {dst}")
        if dst == src + 1:
            if dst == count - 1:
                raise IndexError(f"cannot move the song at position {src} to {dst}")
            self._songs[src], self._songs[dst] = self._songs[dst], self._songs[src]
            return
        if src < dst:
            dst -= 1
        if dst == 0:
            raise IndexError(f"cannot move the song at position {src} to the front")
        song = self._songs.pop(src)
        self._songs.insert(dst, song)

    def reverse_playlist(self) -> None:
        self._songs.reverse()

    def display_playlist(self) -> None:
        """Print every song in play order."""
        for song in self._songs:
            print(song)

    def get_all_songs(self) -> list[Song]:
        return list(self._songs)

    def rebuild_from_list(self, songs: Iterable[Song]) -> None:
        """Replace the contents with these songs, without any checks."""
        self._songs = list(songs)

    def block_artist(self, artist: str) -> None:
        self._blocklist.block(artist)

    def unblock_artist(self, artist: str) -> bool:
        return self._blocklist.unblock(artist)

    def is_artist_blocked(self, artist: str) -> bool:
        return self._blocklist.is_blocked(artist)

    def display_blocked_artists(self) -> None:
        self._blocklist.display_blocked()

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(list(self._songs))