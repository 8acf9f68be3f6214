"""UI state of popups."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Union

from spotplay.model import Album, Artist, Playlist, Track, TrackId
from spotplay.utils import ListState, new_list_state


class ArtistPopupAction(enum.Enum):
    """What to do with an artist chosen from an artist popup."""

    BROWSE = "browse"
    GO_TO_RADIO = "go_to_radio"


@dataclass(frozen=True)
class BrowsePlaylistAction:
    """Browse the playlist chosen from a playlist popup."""


@dataclass(frozen=True)
class AddTrackPlaylistAction:
    """Add a track to the playlist chosen from a playlist popup."""

    track_id: TrackId


PlaylistPopupAction = Union[BrowsePlaylistAction, AddTrackPlaylistAction]


def _action_desc(action: Any) -> str:
    return action.name if isinstance(action, enum.Enum) else str(action)


@dataclass
class ActionListItem:
    """An item together with the actions that can be applied to it."""

    item: Union[Track, Artist, Album, Playlist]
    actions: list[Any] = field(default_factory=list)

    def n_actions(self) -> int:
        return len(self.actions)

    def name(self) -> str:
        return self.item.name

    def actions_desc(self) -> list[str]:
        return [_action_desc(a) for a in self.actions]


@dataclass
class CommandHelpPopup:
    scroll_offset: int = 0


@dataclass
class SearchPopup:
    query: str = ""


@dataclass
class QueuePopup:
    scroll_offset: int = 0


@dataclass
class UserPlaylistListPopup:
    action: PlaylistPopupAction
    list_state: ListState = field(default_factory=new_list_state)


@dataclass
class UserFollowedArtistListPopup:
    list_state: ListState = field(default_factory=new_list_state)


@dataclass
class UserSavedAlbumListPopup:
    list_state: ListState = field(default_factory=new_list_state)


@dataclass
class DeviceListPopup:
    list_state: ListState = field(default_factory=new_list_state)


@dataclass
class ArtistListPopup:
    action: ArtistPopupAction
    artists: list[Artist]
    list_state: ListState = field(default_factory=new_list_state)


@dataclass
class ThemeListPopup:
    themes: list[Any]
    list_state: ListState = field(default_factory=new_list_state)


@dataclass
class ActionListPopup:
    item: ActionListItem
    list_state: ListState = field(default_factory=new_list_state)


ListPopup = Union[
    UserPlaylistListPopup,
    UserFollowedArtistListPopup,
    UserSavedAlbumListPopup,
    DeviceListPopup,
    ArtistListPopup,
    ThemeListPopup,
    ActionListPopup,
]

PopupState = Union[ListPopup, CommandHelpPopup, SearchPopup, QueuePopup]

_LIST_POPUPS = (
    UserPlaylistListPopup,
    UserFollowedArtistListPopup,
    UserSavedAlbumListPopup,
    DeviceListPopup,
    ArtistListPopup,
    ThemeListPopup,
    ActionListPopup,
)


def list_state(popup: PopupState) -> ListState | None:
    """Return the list state of a list popup, or ``None`` for other popups."""
    return popup.list_state if isinstance(popup, _LIST_POPUPS) else None


def list_selected(popup: PopupState) -> int | None:
    """Return the selected position of a list popup, if any."""
    state = list_state(popup)
    return state.selected if state is not None else None


def list_select(popup: PopupState, index: int | None) -> None:
    """Select a position in a list popup; other popups are left unchanged."""
    state = list_state(popup)
    if state is not None:
        state.select(index)