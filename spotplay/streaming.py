"""Player events of the integrated streaming player and their hook command."""

from __future__ import annotations

import math
import subprocess
from dataclasses import dataclass, field
from typing import Union

from spotplay.model import TrackId

MAX_NATIVE_VOLUME = 65535


@dataclass
class HookCommand:
    """A command run on every player event, with the event's arguments appended."""

    command: str
    args: list[str] = field(default_factory=list)


class HookCommandError(Exception):
    """The player event hook command exited unsuccessfully."""

    def __init__(self, stderr: str) -> None:
        super().__init__(stderr)
        self.stderr = stderr


@dataclass(frozen=True)
class ChangedEvent:
    old_track_id: TrackId
    new_track_id: TrackId

    def args(self) -> list[str]:
        return ["Changed", str(self.old_track_id), str(self.new_track_id)]


@dataclass(frozen=True)
class PlayingEvent:
    track_id: TrackId
    position_ms: int
    duration_ms: int

    def args(self) -> list[str]:
        return [
            "Playing",
            str(self.track_id),
            str(self.position_ms),
            str(self.duration_ms),
        ]


@dataclass(frozen=True)
class PausedEvent:
    track_id: TrackId
    position_ms: int
    duration_ms: int

    def args(self) -> list[str]:
        return [
            "Paused",
            str(self.track_id),
            str(self.position_ms),
            str(self.duration_ms),
        ]


@dataclass(frozen=True)
class EndOfTrackEvent:
    track_id: TrackId

    def args(self) -> list[str]:
        return ["EndOfTrack", str(self.track_id)]


PlayerEvent = Union[ChangedEvent, PlayingEvent, PausedEvent, EndOfTrackEvent]


def volume_percent_to_native(percent: int) -> int:
    """Convert a 0-100 volume percentage (clamped at 100) to the 0-65535 scale."""
    if percent < 0:
        raise ValueError(f"volume must not be negative: {percent}")
    return math.floor(min(percent, 100) / 100 * MAX_NATIVE_VOLUME + 0.5)


def execute_player_event_hook_command(command: HookCommand, event: PlayerEvent) -> None:
    """Run the hook command for ``event``; raise HookCommandError on failure."""
    result = subprocess.run(
        [command.command, *command.args, *event.args()],
        capture_output=True,
        check=False,
    )
    if result.returncode != 0:
        raise HookCommandError(result.stderr.decode("utf-8"))