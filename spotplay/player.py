"""State of the player: devices, playback, queue and mute state."""

from __future__ import annotations

import dataclasses
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from spotplay.model import (
    AlbumId,
    ArtistId,
    ContextId,
    Device,
    ItemType,
    PlaylistId,
    RepeatState,
    SimplifiedPlayback,
)
from spotplay.utils import parse_uri

_CONTEXT_ID_TYPES = {
    ItemType.PLAYLIST: PlaylistId,
    ItemType.ALBUM: AlbumId,
    ItemType.ARTIST: ArtistId,
}


@dataclass
class PlaybackDevice:
    """The device a playback runs on."""

    id: str | None
    name: str
    volume_percent: int | None = None


@dataclass
class PlaybackContext:
    """The context (playlist, album, artist, ...) a playback plays from."""

    uri: str
    kind: ItemType


@dataclass
class CurrentPlayback:
    """The current playback as reported by the API.

    ``item`` is an API track or episode object, told apart by its ``type`` key.
    """

    device: PlaybackDevice
    is_playing: bool
    repeat_state: RepeatState = RepeatState.OFF
    shuffle_state: bool = False
    progress: timedelta | None = None
    item: Mapping[str, Any] | None = None
    context: PlaybackContext | None = None


@dataclass
class PlayerState:
    """Player state, with a buffered copy of the playback metadata."""

    devices: list[Device] = field(default_factory=list)
    playback: CurrentPlayback | None = None
    playback_last_updated_time: float | None = None
    buffered_playback: SimplifiedPlayback | None = None
    queue: Mapping[str, Any] | None = None
    mute_state: int | None = None
    clock: Callable[[], float] = field(
        default=time.monotonic, repr=False, compare=False
    )

    def _elapsed(self) -> timedelta:
        if self.playback_last_updated_time is None:
            return timedelta(0)
        return timedelta(seconds=self.clock() - self.playback_last_updated_time)

    def current_playback(self) -> CurrentPlayback | None:
        """Estimate the current playback from the cached and buffered data."""
        if self.playback is None:
            return None
        playback = dataclasses.replace(
            self.playback, device=dataclasses.replace(self.playback.device)
        )
        if playback.progress is not None and playback.is_playing:
            playback.progress = playback.progress + self._elapsed()

        buffered = self.buffered_playback
        if buffered is not None:
            playback.device.name = buffered.device_name
            playback.device.id = buffered.device_id
            playback.device.volume_percent = buffered.volume
            playback.is_playing = buffered.is_playing
            playback.repeat_state = buffered.repeat_state
            playback.shuffle_state = buffered.shuffle_state
        return playback

    def current_playing_track(self) -> Mapping[str, Any] | None:
        """Return the playing API track object, if a track is playing."""
        if self.playback is None or self.playback.item is None:
            return None
        item = self.playback.item
        return item if item.get("type", "track") == "track" else None

    def playback_progress(self) -> timedelta | None:
        """Estimate the current playback progress."""
        if self.playback is None or self.playback.progress is None:
            return None
        progress = self.playback.progress
        if self.playback.is_playing:
            progress += self._elapsed()
        return progress

    def playing_context_id(self) -> ContextId | None:
        """Return the id of the playing context, if it is a playlist, album or artist."""
        if self.playback is None or self.playback.context is None:
            return None
        context = self.playback.context
        id_type = _CONTEXT_ID_TYPES.get(context.kind)
        if id_type is None:
            return None
        try:
            return id_type.from_uri(parse_uri(context.uri))
        except ValueError:
            return None