"""A printed overview of the playlist, the play history and the ratings."""

from __future__ import annotations

from .duration import summarize
from .history import PlaybackHistory
from .playlist import Playlist
from .rating import SongRatingTree
from .song import Song


class SystemSnapshot:
    """Gathers and prints statistics about the player's state."""

    def top_5_longest(self, playlist: Playlist) -> list[Song]:
        """Return at most five songs, longest first."""
        ordered = sorted(playlist.get_all_songs(), key=lambda song: song.duration, reverse=True)
        return ordered[:5]

    def recently_played(self, history: PlaybackHistory, count: int) -> list[Song]:
        return history.get_recent_songs(count)

    def song_count_by_rating(self, rating_tree: SongRatingTree) -> dict[int, int]:
        return rating_tree.get_song_count_map()

    def export_snapshot(
        self, playlist: Playlist, history: PlaybackHistory, rating_tree: SongRatingTree
    ) -> None:
        """Print the longest songs, recent plays, rating counts and durations."""
        print("\nTop 5 Longest Songs:")
        for song in self.top_5_longest(playlist):
            print(f"{song.title} ({song.duration} sec)")

        print("\nRecently Played Songs:")
        for song in self.recently_played(history, 5):
            print(song.title)

        print("\nSong Count by Rating:")
        for rating, count in self.song_count_by_rating(rating_tree).items():
            print(f"{rating} : {count} songs")

        summary = summarize(playlist.get_all_songs())
        if summary is None:
            print("Playlist is empty.")
        else:
            print(summary.render(), end="")