# tunequeue

tunequeue is a small interactive playlist manager that runs in the terminal.
It keeps songs in play order. Next to the playlist it keeps these structures:

- `SongSearch`, an index that looks songs up by ID.
- `SongRatingTree`, a binary search tree that groups songs by rating.
- `PlaylistSorter`, which sorts a playlist by title, duration or recency.
- `PlaybackHistory`, a stack of played songs with undo.
- A `Blocklist` of artists. The playlist refuses songs by a blocked artist.

## Installation

```
pip install .
```

## Running

```
tunequeue
```

The program starts with four sample songs and shows this numbered menu:

```
1. Playlist Operations
2. Search Song by ID
3. Show Songs by Rating
4. Play a Song
5. Undo Last Play
6. Sort Playlist
7. Export System Snapshot
0. Exit
```

What each option does:

- **Playlist Operations** opens a submenu. From it you can:
  - display the playlist,
  - add a song,
  - delete the song at an index,
  - move a song from one position to another,
  - reverse the playlist.

  Positions count from 0. A move the playlist cannot make prints
  `Invalid positions!`. The first song can only move to the end, and the last
  song can only move to the front.
- **Show Songs by Rating** prints the titles of the songs with that rating.
- **Play a Song** looks the song up by ID and pushes it onto the history.
- **Undo Last Play** pops the most recent play and adds that song to the end of
  the playlist. The blocklist check applies to this add as well.
- **Sort Playlist** asks for a criterion and a direction:
  - `title` and `duration` sort by that field.
  - `recent` sorts by ID when ascending, and newest-added first when descending.
- **Export System Snapshot** prints:
  - the five longest songs,
  - the five most recent plays,
  - the number of songs at each rating,
  - the total playtime, the shortest song and the longest song.

The program exits on `0` or at the end of input.

## Library use

You can also use the components from Python:

```python
from tunequeue.song import Song
from tunequeue.search import SongSearch
from tunequeue.rating import SongRatingTree
from tunequeue.sorter import PlaylistSorter, quick_sort
from tunequeue.playlist import Playlist
from tunequeue.history import PlaybackHistory
from tunequeue.snapshot import SystemSnapshot
from tunequeue.duration import summarize

searcher, ratings, sorter = SongSearch(), SongRatingTree(), PlaylistSorter()
playlist = Playlist(searcher, ratings, sorter)
playlist.add_song(Song("S101", "Song A", "Artist W", 200, 5, 0))
playlist.add_song(Song("S102", "Song B", "Artist X", 150, 4, 1))

sorter.sort_playlist(playlist, "duration", True)
print([s.title for s in playlist.get_all_songs()])   # ['Song B', 'Song A']

print(ratings.songs_with_rating(5))
print(ratings.get_song_count_map())                  # {5: 1, 4: 1}

history = PlaybackHistory()
history.play_song(searcher.search_song("S101"))
print(history.get_recent_songs(5))

summary = summarize(playlist.get_all_songs())
print(summary.total, summary.shortest.title, summary.longest.title)

SystemSnapshot().export_snapshot(playlist, history, ratings)
```

`Playlist.add_song` returns `False` when the song's artist is blocked. To manage
the blocklist, use `block_artist`, `unblock_artist` and `is_artist_blocked`.

## What it does not do

- It plays no audio. "Playing" a song only records it in the history.
- Nothing is saved. Every run starts again from the four sample songs.
- The menu has no options for the artist blocklist. The blocklist is reachable
  only from Python.
- Deleting a song from the playlist removes it only from the playlist. It stays
  in the ID index and in the rating tree.

## Tests

```
pip install .[test]
pytest
```