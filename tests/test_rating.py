from collections import Counter

from tunequeue.rating import SongRatingTree
from tunequeue.song import Song

S1 = Song("S101", "Song A", "Artist W", 200, 5, 0)
S2 = Song("S102", "Song B", "Artist X", 150, 4, 1)
S3 = Song("S103", "Song C", "Artist Y", 220, 5, 2)
S4 = Song("S104", "Song D", "Artist Z", 90, 1, 2)
ALL = [S1, S2, S3, S4]


def _tree(songs):
    tree = SongRatingTree()
    for song in songs:
        tree.insert_song(song)
    return tree


def test_empty_tree_has_no_counts():
    assert SongRatingTree().get_song_count_map() == {}


def test_counts_match_ratings():
    tree = _tree(ALL)
    assert tree.get_song_count_map() == dict(Counter(s.rating for s in ALL))


def test_songs_grouped_in_insertion_order():
    tree = _tree(ALL)
    assert tree.songs_with_rating(5) == [S1, S3]
    assert tree.songs_with_rating(3) == []


def test_search_by_rating_prints_titles(capsys):
    tree = _tree(ALL)
    tree.search_by_rating(5)
    assert capsys.readouterr().out == f"{S1.title} {S3.title} \n"


def test_search_by_missing_rating(capsys):
    tree = _tree(ALL)
    tree.search_by_rating(7)
    assert capsys.readouterr().out == "No songs for rating 7\n"


def test_delete_one_of_group():
    tree = _tree(ALL)
    tree.delete_song(S1)
    assert tree.songs_with_rating(5) == [S3]


def test_delete_last_in_leaf_removes_rating():
    tree = _tree(ALL)
    tree.delete_song(S4)
    assert 1 not in tree.get_song_count_map()
    assert tree.songs_with_rating(1) == []


def test_delete_node_with_two_children():
    a = Song("a", "A", "X", 10, 3, 0)
    b = Song("b", "B", "X", 10, 1, 1)
    c = Song("c", "C", "X", 10, 5, 2)
    d = Song("d", "D", "X", 10, 4, 3)
    tree = _tree([a, b, c, d])
    tree.delete_song(a)
    assert tree.songs_with_rating(3) == []
    assert tree.songs_with_rating(4) == [d]
    assert tree.songs_with_rating(5) == [c]
    assert tree.songs_with_rating(1) == [b]
    assert tree.get_song_count_map() == dict(Counter(s.rating for s in [b, c, d]))


def test_delete_matches_by_id_within_rating():
    tree = _tree(ALL)
    wrong_rating = Song(S1.id, S1.title, S1.artist, S1.duration, 2, 0)
    tree.delete_song(wrong_rating)
    assert tree.songs_with_rating(5) == [S1, S3]


def test_delete_unknown_song_keeps_tree():
    tree = _tree(ALL)
    tree.delete_song(Song("S999", "Ghost", "None", 1, 5, 0))
    assert tree.get_song_count_map() == dict(Counter(s.rating for s in ALL))


def test_clear():
    tree = _tree(ALL)
    tree.clear()
    assert tree.get_song_count_map() == {}
    assert tree.songs_with_rating(5) == []