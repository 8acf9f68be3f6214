"""Data model for tracks, albums, artists, playlists and playback contexts."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, ClassVar, Union

from spotplay.utils import format_duration, map_join


class ItemType(enum.Enum):
    """Kinds of items addressed by a Spotify URI."""

    TRACK = "track"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    USER = "user"
    SHOW = "show"
    EPISODE = "episode"


class RepeatState(enum.Enum):
    """Playback repeat mode."""

    OFF = "off"
    TRACK = "track"
    CONTEXT = "context"


@dataclass(frozen=True)
class SpotifyId:
    """An identifier of a Spotify item of a fixed type."""

    id: str
    item_type: ClassVar[ItemType]

    def __post_init__(self) -> None:
        if not self._is_valid(self.id):
            raise ValueError(f"invalid {self.item_type.value} id: {self.id!r}")

    @staticmethod
    def _is_valid(value: str) -> bool:
        return bool(value) and value.isascii() and value.isalnum()

    @property
    def uri(self) -> str:
        return f"spotify:{self.item_type.value}:{self.id}"

    def __str__(self) -> str:
        return self.uri

    @classmethod
    def from_uri(cls, uri: str) -> SpotifyId:
        """Parse a ``spotify:{type}:{id}`` URI into an id of this class."""
        parts = uri.split(":", 2)
        if len(parts) != 3 or parts[0] != "spotify":
            raise ValueError(f"invalid URI: {uri!r}")
        _, kind, ident = parts
        if kind != cls.item_type.value:
            raise ValueError(f"expected a {cls.item_type.value} URI, got {uri!r}")
        return cls(ident)


@dataclass(frozen=True)
class TrackId(SpotifyId):
    item_type: ClassVar[ItemType] = ItemType.TRACK


@dataclass(frozen=True)
class AlbumId(SpotifyId):
    item_type: ClassVar[ItemType] = ItemType.ALBUM


@dataclass(frozen=True)
class ArtistId(SpotifyId):
    item_type: ClassVar[ItemType] = ItemType.ARTIST


@dataclass(frozen=True)
class PlaylistId(SpotifyId):
    item_type: ClassVar[ItemType] = ItemType.PLAYLIST


@dataclass(frozen=True)
class UserId(SpotifyId):
    item_type: ClassVar[ItemType] = ItemType.USER

    @staticmethod
    def _is_valid(value: str) -> bool:
        return bool(value)


@dataclass(frozen=True)
class TracksId:
    """Identifier of a pseudo-context holding a plain list of tracks."""

    uri: str
    kind: str


ContextId = Union[PlaylistId, AlbumId, ArtistId, TracksId]


@dataclass
class Artist:
    """A Spotify artist."""

    id: ArtistId
    name: str

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Artist | None:
        """Build from an API artist object; ``None`` if it has no id."""
        ident = data.get("id")
        if ident is None:
            return None
        return cls(id=ArtistId(ident), name=data["name"])

    def __str__(self) -> str:
        return self.name


def _artists_from_api(items: list[Mapping[str, Any]] | None) -> list[Artist]:
    return [a for a in map(Artist.from_api, items or []) if a is not None]


@dataclass
class Album:
    """A Spotify album."""

    id: AlbumId
    release_date: str
    name: str
    artists: list[Artist] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Album | None:
        """Build from an API album object; ``None`` if it has no id."""
        ident = data.get("id")
        if ident is None:
            return None
        return cls(
            id=AlbumId(ident),
            release_date=data.get("release_date") or "",
            name=data["name"],
            artists=_artists_from_api(data.get("artists")),
        )

    def __str__(self) -> str:
        return f"{self.name} • {map_join(self.artists, lambda a: a.name, ', ')}"


@dataclass
class Track:
    """A Spotify track."""

    id: TrackId
    name: str
    artists: list[Artist]
    album: Album | None
    duration: timedelta
    added_at: int = 0

    def artists_info(self) -> str:
        return map_join(self.artists, lambda a: a.name, ", ")

    def album_info(self) -> str:
        return self.album.name if self.album is not None else ""

    @property
    def formatted_duration(self) -> str:
        return format_duration(self.duration)

    @classmethod
    def from_simplified_track(cls, data: Mapping[str, Any]) -> Track | None:
        """Build from a simplified API track; ``None`` if unplayable or without id."""
        if data.get("is_playable") is False or data.get("id") is None:
            return None
        return cls(
            id=TrackId(data["id"]),
            name=data["name"],
            artists=_artists_from_api(data.get("artists")),
            album=None,
            duration=timedelta(milliseconds=data["duration_ms"]),
        )

    @classmethod
    def from_full_track(cls, data: Mapping[str, Any]) -> Track | None:
        """Build from a full API track; ``None`` if unplayable or without id."""
        if data.get("is_playable") is False or data.get("id") is None:
            return None
        album = data.get("album")
        return cls(
            id=TrackId(data["id"]),
            name=data["name"],
            artists=_artists_from_api(data.get("artists")),
            album=Album.from_api(album) if album is not None else None,
            duration=timedelta(milliseconds=data["duration_ms"]),
        )

    def __str__(self) -> str:
        return f"{self.name} • {self.artists_info()} ▎ {self.album_info()}"


@dataclass
class Playlist:
    """A Spotify playlist; ``owner`` is a (display name, user id) pair."""

    id: PlaylistId
    collaborative: bool
    name: str
    owner: tuple[str, UserId]

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Playlist:
        owner = data["owner"]
        return cls(
            id=PlaylistId(data["id"]),
            collaborative=bool(data.get("collaborative", False)),
            name=data["name"],
            owner=(owner.get("display_name") or "", UserId(owner["id"])),
        )

    def __str__(self) -> str:
        return f"{self.name} • {self.owner[0]}"


@dataclass
class Category:
    """A browse category."""

    id: str
    name: str

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Category:
        return cls(id=data["id"], name=data["name"])

    def __str__(self) -> str:
        return self.name


@dataclass
class Device:
    """A Spotify Connect device."""

    id: str
    name: str

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Device | None:
        """Build from an API device object; ``None`` if it has no id."""
        ident = data.get("id")
        if ident is None:
            return None
        return cls(id=ident, name=data["name"])


@dataclass
class SimplifiedPlayback:
    """The playback metadata kept locally for quick feedback."""

    device_name: str
    device_id: str | None
    volume: int | None
    is_playing: bool
    repeat_state: RepeatState
    shuffle_state: bool


@dataclass
class SearchResults:
    """Results of a search query."""

    tracks: list[Track] = field(default_factory=list)
    artists: list[Artist] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)
    playlists: list[Playlist] = field(default_factory=list)


class TrackOrder(enum.Enum):
    """Orders in which tracks can be sorted."""

    ADDED_AT = "added_at"
    TRACK_NAME = "track_name"
    ALBUM = "album"
    ARTISTS = "artists"
    DURATION = "duration"

    def _key(self, track: Track) -> Any:
        if self is TrackOrder.ADDED_AT:
            return track.added_at
        if self is TrackOrder.TRACK_NAME:
            return track.name
        if self is TrackOrder.ALBUM:
            return track.album_info()
        if self is TrackOrder.ARTISTS:
            return track.artists_info()
        return track.duration

    def compare(self, x: Track, y: Track) -> int:
        """Return -1, 0 or 1 as ``x`` sorts before, with or after ``y``."""
        a, b = self._key(x), self._key(y)
        return (a > b) - (a < b)


@dataclass
class PlaylistContext:
    playlist: Playlist
    tracks: list[Track]

    def description(self) -> str:
        return f"{self.playlist.name} | {self.playlist.owner[0]} | {len(self.tracks)} songs"


@dataclass
class AlbumContext:
    album: Album
    tracks: list[Track]

    def description(self) -> str:
        return f"{self.album.name} | {self.album.release_date} | {len(self.tracks)} songs"


@dataclass
class ArtistContext:
    artist: Artist
    top_tracks: list[Track]
    albums: list[Album]
    related_artists: list[Artist]

    def description(self) -> str:
        return self.artist.name


@dataclass
class TracksContext:
    tracks: list[Track]
    desc: str

    def description(self) -> str:
        return f"{self.desc} | {len(self.tracks)} songs"


Context = Union[PlaylistContext, AlbumContext, ArtistContext, TracksContext]

# An offset is either a track URI (str) or an absolute position (int).
Offset = Union[str, int]


@dataclass
class ContextPlayback:
    """Start playback of a context, optionally at an offset."""

    context_id: ContextId
    offset: Offset | None = None

    def uri_offset(self, uri: str, limit: int) -> ContextPlayback:
        return ContextPlayback(self.context_id, uri)


@dataclass
class UrisPlayback:
    """Start playback of a list of tracks, optionally at an offset."""

    track_ids: list[TrackId]
    offset: Offset | None = None

    def uri_offset(self, uri: str, limit: int) -> UrisPlayback:
        """Start at ``uri``, keeping at most ``limit`` tracks around it."""
        ids = self.track_ids
        if len(ids) < limit:
            return UrisPlayback(list(ids), uri)
        pos = next((i for i, t in enumerate(ids) if t.uri == uri), 0)
        left = max(pos - limit // 2, 0)
        right = min(left + limit, len(ids))
        return UrisPlayback(ids[left:right], uri)


Playback = Union[ContextPlayback, UrisPlayback]

USER_TOP_TRACKS_ID = TracksId("tracks:user-top-tracks", "Top Tracks")
USER_RECENTLY_PLAYED_TRACKS_ID = TracksId(
    "tracks:user-recently-played-tracks", "Recently Played Tracks"
)
USER_LIKED_TRACKS_ID = TracksId("tracks:user-liked-tracks", "Liked Tracks")