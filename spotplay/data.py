"""Application data: the current user's library, browse data and TTL caches."""

from __future__ import annotations

import time
from collections import OrderedDict
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Generic, TypeVar

from spotplay.model import (
    Album,
    Artist,
    ArtistContext,
    Category,
    ContextId,
    Playlist,
    SearchResults,
    Track,
    UserId,
)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

CACHE_DURATION = timedelta(hours=3)
"""How long cached entries stay valid."""

CACHE_CAPACITY = 64


def _seconds(ttl: timedelta | float) -> float:
    return ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)


class TtlCache(Generic[K, V]):
    """A bounded mapping whose entries expire after a per-entry time to live.

    When the cache is full, expired entries are dropped first; if it is still
    full, the entry inserted longest ago is evicted.
    """

    def __init__(
        self, capacity: int, clock: Callable[[], float] = time.monotonic
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._clock = clock
        self._entries: OrderedDict[K, tuple[V, float]] = OrderedDict()

    def _expired(self, deadline: float) -> bool:
        return self._clock() >= deadline

    def _purge_expired(self) -> None:
        for key in [k for k, (_, d) in self._entries.items() if self._expired(d)]:
            del self._entries[key]

    def get(self, key: K) -> V | None:
        """Return the live value stored under ``key``, or ``None``."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, deadline = entry
        if self._expired(deadline):
            del self._entries[key]
            return None
        return value

    def insert(self, key: K, value: V, ttl: timedelta | float) -> V | None:
        """Store ``value`` for ``ttl``; return the previous live value, if any."""
        previous = self.remove(key)
        if self.capacity == 0:
            return previous
        if len(self._entries) >= self.capacity:
            self._purge_expired()
        while len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = (value, self._clock() + _seconds(ttl))
        return previous

    def remove(self, key: K) -> V | None:
        """Remove ``key``; return its value if it had not expired."""
        entry = self._entries.pop(key, None)
        if entry is None:
            return None
        value, deadline = entry
        return None if self._expired(deadline) else value

    def __contains__(self, key: object) -> bool:
        return self.get(key) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        self._purge_expired()
        return len(self._entries)


@dataclass
class User:
    """The signed-in user."""

    id: UserId
    display_name: str | None = None


@dataclass
class UserData:
    """The current user's library."""

    user: User | None = None
    playlists: list[Playlist] = field(default_factory=list)
    followed_artists: list[Artist] = field(default_factory=list)
    saved_albums: list[Album] = field(default_factory=list)
    saved_tracks: dict[str, Track] = field(default_factory=dict)

    def modifiable_playlists(self) -> list[Playlist]:
        """Return the playlists the user can **possibly** modify."""
        if self.user is None:
            return []
        return [
            p
            for p in self.playlists
            if p.owner[1] == self.user.id or p.collaborative
        ]

    def is_liked_track(self, track: Track) -> bool:
        """Whether ``track`` is among the user's saved tracks."""
        return track.id.uri in self.saved_tracks


@dataclass
class Caches:
    """The application's caches."""

    context: TtlCache[str, Any] = field(
        default_factory=lambda: TtlCache(CACHE_CAPACITY)
    )
    search: TtlCache[str, SearchResults] = field(
        default_factory=lambda: TtlCache(CACHE_CAPACITY)
    )
    lyrics: TtlCache[str, Any] = field(
        default_factory=lambda: TtlCache(CACHE_CAPACITY)
    )
    images: TtlCache[str, Any] = field(
        default_factory=lambda: TtlCache(CACHE_CAPACITY)
    )


@dataclass
class BrowseData:
    """Data of the browse page."""

    categories: list[Category] = field(default_factory=list)
    category_playlists: dict[str, list[Playlist]] = field(default_factory=dict)


@dataclass
class AppData:
    """All data held by the application."""

    user_data: UserData = field(default_factory=UserData)
    caches: Caches = field(default_factory=Caches)
    browse: BrowseData = field(default_factory=BrowseData)

    def get_tracks_by_id(self, context_id: ContextId) -> list[Track] | None:
        """Return the (mutable) track list of a cached context, if cached."""
        context = self.caches.context.get(context_id.uri)
        if context is None:
            return None
        if isinstance(context, ArtistContext):
            return context.top_tracks
        return context.tracks