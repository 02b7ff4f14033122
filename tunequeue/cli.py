"""Interactive menu for managing a playlist."""

from __future__ import annotations

from .history import PlaybackHistory
from .playlist import Playlist
from .rating import SongRatingTree
from .search import SongSearch
from .snapshot import SystemSnapshot
from .song import Song
from .sorter import PlaylistSorter

_SAMPLE_SONGS = (
    Song("S101", "Song A", "Artist W", 200, 5, 0),
    Song("S102", "Song B", "Artist X", 150, 4, 1),
    Song("S103", "Song C", "Artist Y", 220, 5, 2),
    Song("S104", "Song D", "Artist Z", 90, 1, 2),
)

_MAIN_MENU = (
    "1. Playlist Operations\n"
    "2. Search Song by ID\n"
    "3. Show Songs by Rating\n"
    "4. Play a Song\n"
    "5. Undo Last Play\n"
    "6. Sort Playlist\n"
    "7. Export System Snapshot\n"
    "0. Exit"
)

_PLAYLIST_MENU = (
    "1. Display Playlist\n"
    "2. Add Song\n"
    "3. Delete Song\n"
    "4. Move Song\n"
    "5. Reverse Playlist\n"
    "0. Main Menu"
)


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


class _App:
    def __init__(self) -> None:
        self.searcher = SongSearch()
        self.rating_tree = SongRatingTree()
        self.sorter = PlaylistSorter()
        self.playlist = Playlist(self.searcher, self.rating_tree, self.sorter)
        self.history = PlaybackHistory()
        self.snapshot = SystemSnapshot()
        for song in _SAMPLE_SONGS:
            self.playlist.add_song(song)

    def run(self) -> None:
        while True:
            print(_MAIN_MENU)
            choice = _read_int("Choice: ")
            if choice == 0:
                print("Exiting program...")
                return
            action = {
                1: self.playlist_menu,
                2: self.search,
                3: self.show_rating,
                4: self.play,
                5: self.undo,
                6: self.sort,
                7: self.export,
            }.get(choice)
            if action is None:
                print("Invalid choice! Try again.")
            else:
                action()

    def playlist_menu(self) -> None:
        while True:
            print(_PLAYLIST_MENU)
            choice = _read_int("Choice: ")
            if choice == 0:
                print("Returning to Main Menu...")
                return
            if choice == 1:
                self.playlist.display_playlist()
            elif choice == 2:
                self.add_song()
            elif choice == 3:
                index = _read_int("Enter Song at index to Delete: ")
                if index is not None:
                    self.playlist.delete_song(index)
            elif choice == 4:
                self.move_song()
            elif choice == 5:
                self.playlist.reverse_playlist()
                print("Playlist reversed successfully!")
            else:
                print("Invalid choice! Try again.")

    def add_song(self) -> None:
        song_id = input("Enter Song ID: ").strip()
        title = input("Enter Song Title: ").strip()
        artist = input("Enter Artist Name: ").strip()
        duration = _read_int("Enter Duration (seconds): ")
        rating = _read_int("Enter Rating (1-5): ")
        if duration is None or rating is None:
            print("Invalid number! Song not added.")
            return
        added_order = len(self.playlist.get_all_songs()) + 1
        self.playlist.add_song(Song(song_id, title, artist, duration, rating, added_order))
        print("Song added successfully!")

    def move_song(self) -> None:
        src = _read_int("Enter Current Position: ")
        dst = _read_int("Enter New Position: ")
        if src is None or dst is None:
            print("Invalid positions!")
            return
        try:
            self.playlist.move_song(src, dst)
        except IndexError:
            print("Invalid positions!")

    def search(self) -> None:
        song = self.searcher.search_song(input("Enter Song ID: ").strip())
        if song is None:
            print("Song not found.")
        else:
            print(song, end="")

    def show_rating(self) -> None:
        rating = _read_int("Enter Rating (1-5): ")
        if rating is not None:
            self.rating_tree.search_by_rating(rating)

    def play(self) -> None:
        song = self.searcher.search_song(input("Enter Song ID to Play: ").strip())
        if song is None:
            print("Song not found.")
            print("Song not found!")
        else:
            self.history.play_song(song)

    def undo(self) -> None:
        self.history.undo_last_play(self.playlist)

    def sort(self) -> None:
        criteria = input("Sort by (title/duration/recent): ").strip()
        ascending = bool(_read_int("Ascending? (1=Yes, 0=No): "))
        self.sorter.sort_playlist(self.playlist, criteria, ascending)
        self.playlist.display_playlist()

    def export(self) -> None:
        self.snapshot.export_snapshot(self.playlist, self.history, self.rating_tree)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu until the user exits or input ends."""
    app = _App()
    try:
        app.run()
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())