"""A binary search tree grouping songs by rating."""

from __future__ import annotations

from dataclasses import dataclass, field

from .song import Song


@dataclass
class _RatingNode:
    rating: int
    songs: list[Song] = field(default_factory=list)
    left: _RatingNode | None = None
    right: _RatingNode | None = None


def _find_min(node: _RatingNode) -> _RatingNode:
    while node.left is not None:
        node = node.left
    return node


class SongRatingTree:
    """Songs kept in a search tree ordered by rating."""

    def __init__(self) -> None:
        self._root: _RatingNode | None = None

    def insert_song(self, song: Song) -> None:
        self._root = self._insert(self._root, song)

    def _insert(self, node: _RatingNode | None, song: Song) -> _RatingNode:
        if node is None:
            return _RatingNode(song.rating, [song])
        if song.rating < node.rating:
            node.left = self._insert(node.left, song)
        elif song.rating > node.rating:
            node.right = self._insert(node.right, song)
        else:
            node.songs.append(song)
        return node

    def _search(self, rating: int) -> _RatingNode | None:
        node = self._root
        while node is not None and node.rating != rating:
            node = node.left if rating < node.rating else node.right
        return node

    def songs_with_rating(self, rating: int) -> list[Song]:
        """Return the songs with this rating, in insertion order."""
        node = self._search(rating)
        return list(node.songs) if node is not None else []

    def search_by_rating(self, rating: int) -> None:
        """Print the titles of the songs with this rating."""
        node = self._search(rating)
        if node is None:
            print(f"No songs for rating {rating}")
            return
        print("".join(f"{song.title} " for song in node.songs))

    def delete_song(self, song: Song) -> None:
        """Remove the song with this song's ID from its rating group."""
        self._root = self._delete(self._root, song)

    def _delete(self, node: _RatingNode | None, song: Song) -> _RatingNode | None:
        if node is None:
            return None
        if song.rating < node.rating:
            node.left = self._delete(node.left, song)
        elif song.rating > node.rating:
            node.right = self._delete(node.right, song)
        else:
            for position, kept in enumerate(node.songs):
                if kept.id == song.id:
                    del node.songs[position]
                    break
            if not node.songs:
                if node.left is None:
                    return node.right
                if node.right is None:
                    return node.left
                successor = _find_min(node.right)
                node.rating = successor.rating
                node.songs = list(successor.songs)
                node.right = self._delete(node.right, successor.songs[0])
        return node

    def get_song_count_map(self) -> dict[int, int]:
        """Return how many songs the tree holds for each rating."""
        counts: dict[int, int] = {}
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            counts[node.rating] = counts.get(node.rating, 0) + len(node.songs)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return counts

    def clear(self) -> None:
        self._root = None