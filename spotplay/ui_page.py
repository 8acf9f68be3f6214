"""UI state of the application's pages and of their focusable windows."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, TypeVar, Union

from spotplay.model import AlbumId, ArtistId, Category, ContextId, PlaylistId, TracksId
from spotplay.utils import ListState, TableState, new_list_state, new_table_state

WindowState = Union[ListState, TableState]

_E = TypeVar("_E", bound=enum.Enum)


class PageType(enum.Enum):
    """Kinds of pages."""

    LIBRARY = "library"
    CONTEXT = "context"
    SEARCH = "search"
    BROWSE = "browse"
    LYRIC = "lyric"


def _cycle(member: _E, step: int) -> _E:
    """Step through an enum's members in definition order, wrapping around."""
    members = list(type(member))
    return members[(members.index(member) + step) % len(members)]


class LibraryFocusState(enum.Enum):
    PLAYLISTS = "playlists"
    SAVED_ALBUMS = "saved_albums"
    FOLLOWED_ARTISTS = "followed_artists"

    def next(self) -> LibraryFocusState:
        """Return the window focused after this one."""
        return _cycle(self, 1)

    def previous(self) -> LibraryFocusState:
        """Return the window focused before this one."""
        return _cycle(self, -1)


class ArtistFocusState(enum.Enum):
    TOP_TRACKS = "top_tracks"
    ALBUMS = "albums"
    RELATED_ARTISTS = "related_artists"

    def next(self) -> ArtistFocusState:
        """Return the window focused after this one."""
        return _cycle(self, 1)

    def previous(self) -> ArtistFocusState:
        """Return the window focused before this one."""
        return _cycle(self, -1)


class SearchFocusState(enum.Enum):
    INPUT = "input"
    TRACKS = "tracks"
    ALBUMS = "albums"
    ARTISTS = "artists"
    PLAYLISTS = "playlists"

    def next(self) -> SearchFocusState:
        """Return the window focused after this one."""
        return _cycle(self, 1)

    def previous(self) -> SearchFocusState:
        """Return the window focused before this one."""
        return _cycle(self, -1)


@dataclass
class LibraryPageUIState:
    playlist_list: ListState = field(default_factory=new_list_state)
    saved_album_list: ListState = field(default_factory=new_list_state)
    followed_artist_list: ListState = field(default_factory=new_list_state)
    focus: LibraryFocusState = LibraryFocusState.PLAYLISTS


@dataclass
class SearchPageUIState:
    track_list: ListState = field(default_factory=new_list_state)
    album_list: ListState = field(default_factory=new_list_state)
    artist_list: ListState = field(default_factory=new_list_state)
    playlist_list: ListState = field(default_factory=new_list_state)
    focus: SearchFocusState = SearchFocusState.INPUT


@dataclass
class PlaylistContextUIState:
    track_table: TableState = field(default_factory=new_table_state)


@dataclass
class AlbumContextUIState:
    track_table: TableState = field(default_factory=new_table_state)


@dataclass
class ArtistContextUIState:
    top_track_table: TableState = field(default_factory=new_table_state)
    album_list: ListState = field(default_factory=new_list_state)
    related_artist_list: ListState = field(default_factory=new_list_state)
    focus: ArtistFocusState = ArtistFocusState.TOP_TRACKS


@dataclass
class TracksContextUIState:
    track_table: TableState = field(default_factory=new_table_state)


ContextPageUIState = Union[
    PlaylistContextUIState, AlbumContextUIState, ArtistContextUIState, TracksContextUIState
]


@dataclass
class CategoryListUIState:
    state: ListState = field(default_factory=new_list_state)


@dataclass
class CategoryPlaylistListUIState:
    category: Category
    state: ListState = field(default_factory=new_list_state)


BrowsePageUIState = Union[CategoryListUIState, CategoryPlaylistListUIState]


@dataclass(frozen=True)
class CurrentPlayingPageType:
    """A context page showing the currently playing context."""

    def title(self) -> str:
        return "Current Playing"


@dataclass(frozen=True)
class BrowsingPageType:
    """A context page browsing a given context."""

    id: ContextId

    def title(self) -> str:
        if isinstance(self.id, PlaylistId):
            return "Playlist"
        if isinstance(self.id, AlbumId):
            return "Album"
        if isinstance(self.id, ArtistId):
            return "Artist"
        if isinstance(self.id, TracksId):
            return self.id.kind
        raise TypeError(f"unsupported context id: {self.id!r}")


ContextPageType = Union[CurrentPlayingPageType, BrowsingPageType]


def _select_in(state: WindowState | None, index: int) -> None:
    if state is not None:
        state.select(index)


def _selected_in(state: WindowState | None) -> int | None:
    return state.selected if state is not None else None


class _Page:
    """Behaviour shared by every page: selection in the focused window."""

    def focus_window_state(self) -> WindowState | None:
        """Return the page's ``state`` if it is itself a window, else ``None``."""
        state = getattr(self, "state", None)
        return state if isinstance(state, (ListState, TableState)) else None

    def select(self, index: int) -> None:
        """Select the ``index``-th item of the focused window, if any."""
        _select_in(self.focus_window_state(), index)

    def selected(self) -> int | None:
        """Return the selected position in the focused window, if any."""
        return _selected_in(self.focus_window_state())


@dataclass
class LibraryPage(_Page):
    page_type: ClassVar[PageType] = PageType.LIBRARY

    state: LibraryPageUIState = field(default_factory=LibraryPageUIState)

    def focus_window_state(self) -> WindowState | None:
        s = self.state
        return {
            LibraryFocusState.PLAYLISTS: s.playlist_list,
            LibraryFocusState.SAVED_ALBUMS: s.saved_album_list,
            LibraryFocusState.FOLLOWED_ARTISTS: s.followed_artist_list,
        }[s.focus]

    def select(self, index: int) -> None:
        """Select the ``index``-th item of the focused window."""
        _select_in(self.focus_window_state(), index)

    def selected(self) -> int | None:
        """Return the selected position in the focused window."""
        return _selected_in(self.focus_window_state())

    def next(self) -> None:
        self.state.focus = self.state.focus.next()
        self.select(0)

    def previous(self) -> None:
        self.state.focus = self.state.focus.previous()
        self.select(0)


@dataclass
class ContextPage(_Page):
    page_type: ClassVar[PageType] = PageType.CONTEXT

    id: ContextId | None = None
    context_page_type: ContextPageType = field(default_factory=CurrentPlayingPageType)
    state: ContextPageUIState | None = None

    def focus_window_state(self) -> WindowState | None:
        s = self.state
        if s is None:
            return None
        if isinstance(s, ArtistContextUIState):
            return {
                ArtistFocusState.TOP_TRACKS: s.top_track_table,
                ArtistFocusState.ALBUMS: s.album_list,
                ArtistFocusState.RELATED_ARTISTS: s.related_artist_list,
            }[s.focus]
        return s.track_table

    def select(self, index: int) -> None:
        """Select the ``index``-th item of the focused window, if any."""
        _select_in(self.focus_window_state(), index)

    def selected(self) -> int | None:
        """Return the selected position in the focused window, if any."""
        return _selected_in(self.focus_window_state())

    def next(self) -> None:
        if isinstance(self.state, ArtistContextUIState):
            self.state.focus = self.state.focus.next()
        self.select(0)

    def previous(self) -> None:
        if isinstance(self.state, ArtistContextUIState):
            self.state.focus = self.state.focus.previous()
        self.select(0)


@dataclass
class SearchPage(_Page):
    page_type: ClassVar[PageType] = PageType.SEARCH

    input: str = ""
    current_query: str = ""
    state: SearchPageUIState = field(default_factory=SearchPageUIState)

    def focus_window_state(self) -> WindowState | None:
        s = self.state
        return {
            SearchFocusState.INPUT: None,
            SearchFocusState.TRACKS: s.track_list,
            SearchFocusState.ALBUMS: s.album_list,
            SearchFocusState.ARTISTS: s.artist_list,
            SearchFocusState.PLAYLISTS: s.playlist_list,
        }[s.focus]

    def select(self, index: int) -> None:
        """Select the ``index``-th item of the focused window, if any."""
        _select_in(self.focus_window_state(), index)

    def selected(self) -> int | None:
        """Return the selected position in the focused window, if any."""
        return _selected_in(self.focus_window_state())

    def next(self) -> None:
        self.state.focus = self.state.focus.next()
        self.select(0)

    def previous(self) -> None:
        self.state.focus = self.state.focus.previous()
        self.select(0)


@dataclass
class LyricPage(_Page):
    """A lyric page; it holds no selectable window, so nothing is ever focused."""

    page_type: ClassVar[PageType] = PageType.LYRIC

    track: str
    artists: str
    scroll_offset: int = 0

    def focus_window_state(self) -> WindowState | None:
        """A lyric page has no focusable window."""
        return None


@dataclass
class BrowsePage(_Page):
    page_type: ClassVar[PageType] = PageType.BROWSE

    state: BrowsePageUIState = field(default_factory=CategoryListUIState)

    def focus_window_state(self) -> WindowState | None:
        return self.state.state

    def select(self, index: int) -> None:
        """Select the ``index``-th item of the browse list."""
        _select_in(self.focus_window_state(), index)

    def selected(self) -> int | None:
        """Return the selected position in the browse list."""
        return _selected_in(self.focus_window_state())


PageState = Union[LibraryPage, ContextPage, SearchPage, LyricPage, BrowsePage]