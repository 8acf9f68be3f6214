"""General helpers shared across the application."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass
class ListState:
    """Selection state of a list window."""

    selected: int | None = None
    offset: int = 0

    def select(self, index: int | None) -> None:
        """Select the item at ``index``, or clear the selection with ``None``."""
        self.selected = index
        if index is None:
            self.offset = 0


@dataclass
class TableState:
    """Selection state of a table window."""

    selected: int | None = None
    offset: int = 0

    def select(self, index: int | None) -> None:
        """Select the row at ``index``, or clear the selection with ``None``."""
        self.selected = index
        if index is None:
            self.offset = 0


def format_duration(duration: timedelta) -> str:
    """Format a duration as ``minutes:seconds``, truncating sub-second parts."""
    total = duration.days * 86400 + duration.seconds
    if total < 0 and duration.microseconds:
        total += 1
    minutes, seconds = divmod(abs(total), 60)
    if total < 0:
        minutes, seconds = -minutes, -seconds
    return f"{minutes}:{seconds:02}"


def new_list_state() -> ListState:
    """Create a list state with the first item selected."""
    return ListState(selected=0)


def new_table_state() -> TableState:
    """Create a table state with the first item selected."""
    return TableState(selected=0)


def map_join(items: Iterable[T], key: Callable[[T], str], sep: str) -> str:
    """Join the strings that ``key`` maps each item to, separated by ``sep``.

    A separator is only added once the accumulated text is non-empty.
    """
    return functools.reduce(
        lambda acc, s: acc + s if not acc else acc + sep + s,
        map(key, items),
        "",
    )


def get_track_album_image_url(track: Mapping[str, Any]) -> str | None:
    """Return the URL of the first album image of an API track object."""
    images = (track.get("album") or {}).get("images") or []
    return images[0]["url"] if images else None


def parse_uri(uri: str) -> str:
    """Normalise a ``spotify:user:{user}:{type}:{id}`` URI to ``spotify:{type}:{id}``."""
    parts = uri.split(":")
    if len(parts) == 5:
        return ":".join((parts[0], parts[3], parts[4]))
    return uri