# spotplay

`spotplay` holds the application state of a terminal music player client:
the data model for tracks, albums, artists and playlists, the TTL caches and
the user's library, the player's playback state, the state of the UI's pages
and popups, and a hook command run on player events. It has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `spotplay.utils`: `format_duration` (a `timedelta` as `minutes:seconds`),
  `map_join`, `parse_uri` (turns `spotify:user:{user}:{type}:{id}` into
  `spotify:{type}:{id}`), `get_track_album_image_url` (first album image of an
  API track object), and the selection holders `ListState` and `TableState`
  with `new_list_state()` / `new_table_state()`, which start with the first
  item selected.
- `spotplay.model`: the ids `TrackId`, `AlbumId`, `ArtistId`, `PlaylistId`,
  `UserId` (each with `from_uri` and a `uri` property) and `TracksId`; the items
  `Track`, `Album`, `Artist`, `Playlist`, `Category`, `Device`, built from API
  objects (dicts) with `from_api`, `Track.from_simplified_track` and
  `Track.from_full_track`; the contexts `PlaylistContext`, `AlbumContext`,
  `ArtistContext`, `TracksContext` with `description()`; `TrackOrder.compare`;
  `SimplifiedPlayback`, `SearchResults`; and the playback requests
  `ContextPlayback` and `UrisPlayback`. `UrisPlayback.uri_offset(uri, limit)`
  keeps at most `limit` tracks around the given track. The constants
  `USER_TOP_TRACKS_ID`, `USER_RECENTLY_PLAYED_TRACKS_ID` and
  `USER_LIKED_TRACKS_ID` name the built-in track lists.
- `spotplay.data`: `TtlCache` (bounded, per-entry time to live; when full it
  drops expired entries first, then the oldest), `User`, `UserData` with
  `modifiable_playlists()` and `is_liked_track()`, `Caches`, `BrowseData`, and
  `AppData.get_tracks_by_id()`. `CACHE_DURATION` is three hours.
- `spotplay.player`: `PlaybackDevice`, `PlaybackContext`, `CurrentPlayback` and
  `PlayerState`, which estimates the current playback and its progress from the
  last update time and overlays the buffered playback metadata. The clock is
  injectable.
- `spotplay.streaming`: the player events `ChangedEvent`, `PlayingEvent`,
  `PausedEvent` and `EndOfTrackEvent`, `HookCommand`, `HookCommandError`,
  `volume_percent_to_native` and `execute_player_event_hook_command`.
- `spotplay.ui_page`: page states (`LibraryPage`, `ContextPage`, `SearchPage`,
  `LyricPage`, `BrowsePage`), their window states, focus cycling with
  `next()` / `previous()`, and selection in the focused window.
- `spotplay.ui_popup`: popup states, `ActionListItem`, and the helpers
  `list_state`, `list_selected` and `list_select`.
- `spotplay.ui_state`: `UIState` with its page history, popup and
  `search_filtered_items()`, which keeps the items whose text contains every
  space-separated word of the search popup's query, case-insensitively.

## Example

```python
from datetime import timedelta

from spotplay.model import Artist, ArtistId, Track, TrackId
from spotplay.utils import format_duration

track = Track(
    id=TrackId.from_uri("spotify:track:abc123"),
    name="Song",
    artists=[Artist(id=ArtistId.from_uri("spotify:artist:xyz"), name="Band")],
    album=None,
    duration=timedelta(seconds=215),
)
print(track)                            # Song • Band ▎
print(format_duration(track.duration))  # 3:35
```

## Player event hooks

A `HookCommand` names a program and its leading arguments.
`execute_player_event_hook_command(command, event)` runs the program with the
event's arguments appended:

- `Changed <old track uri> <new track uri>`
- `Playing <track uri> <position ms> <duration ms>`
- `Paused <track uri> <position ms> <duration ms>`
- `EndOfTrack <track uri>`

A non-zero exit status raises `HookCommandError`, whose `stderr` holds the
program's standard error.

`volume_percent_to_native` converts a 0–100 volume (values above 100 are
clamped) to the 0–65535 scale, rounding to the nearest integer; a negative
volume raises `ValueError`.

## What it does not do

The package holds state only. It does not draw a terminal interface, talk to
the Spotify Web API, fetch authentication tokens, read configuration or theme
files, or stream and play audio; it has no command-line entry point.