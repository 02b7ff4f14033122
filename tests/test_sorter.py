from collections import Counter

import pytest

from tunequeue.song import Song
from tunequeue.sorter import PlaylistSorter, quick_sort

S1 = Song("S103", "Song C", "Artist Y", 220, 5, 2)
S2 = Song("S101", "Song A", "Artist W", 200, 5, 0)
S3 = Song("S104", "Song D", "Artist Z", 90, 1, 3)
S4 = Song("S102", "Song B", "Artist X", 150, 4, 1)
ALL = [S1, S2, S3, S4]


class _FakePlaylist:
    def __init__(self, songs):
        self.songs = list(songs)

    def get_all_songs(self):
        return list(self.songs)

    def rebuild_from_list(self, songs):
        self.songs = list(songs)


@pytest.mark.parametrize("ascending", [True, False])
def test_title_order(ascending):
    result = quick_sort(ALL, "title", ascending)
    assert [s.title for s in result] == sorted((s.title for s in ALL), reverse=not ascending)


@pytest.mark.parametrize("ascending", [True, False])
def test_duration_order(ascending):
    result = quick_sort(ALL, "duration", ascending)
    assert [s.duration for s in result] == sorted((s.duration for s in ALL), reverse=not ascending)


def test_recent_ascending_orders_by_id():
    result = quick_sort(ALL, "recent", True)
    assert [s.id for s in result] == sorted(s.id for s in ALL)


def test_recent_descending_orders_newest_first():
    result = quick_sort(ALL, "recent", False)
    assert [s.added_order for s in result] == sorted((s.added_order for s in ALL), reverse=True)


def test_unknown_criteria_keeps_same_songs():
    result = quick_sort(ALL, "mood", True)
    assert Counter(result) == Counter(ALL)


def test_input_is_not_mutated():
    original = list(ALL)
    quick_sort(ALL, "title", True)
    assert ALL == original


def test_empty_and_single():
    assert quick_sort([], "title", True) == []
    assert quick_sort([S1], "duration", False) == [S1]


def test_sort_playlist_rebuilds_playlist():
    playlist = _FakePlaylist(ALL)
    sorter = PlaylistSorter()
    sorter.sort_playlist(playlist, "duration", True)
    assert [s.duration for s in playlist.songs] == sorted(s.duration for s in ALL)
    assert sorter.songs == playlist.songs


def test_add_song_and_clear():
    sorter = PlaylistSorter()
    sorter.add_song(S1)
    sorter.add_song(S2)
    assert sorter.songs == [S1, S2]
    sorter.clear()
    assert sorter.songs == []


def test_display_playlist(capsys):
    sorter = PlaylistSorter()
    sorter.add_song(S2)
    sorter.display_playlist()
    assert capsys.readouterr().out == "Song A (200 sec, rating 5)\n"