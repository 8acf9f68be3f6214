import pytest

from spotplay.model import AlbumId, ArtistId, Category, PlaylistId, TracksId
from spotplay.ui_page import (
    AlbumContextUIState,
    ArtistContextUIState,
    ArtistFocusState,
    BrowsePage,
    BrowsingPageType,
    CategoryListUIState,
    CategoryPlaylistListUIState,
    ContextPage,
    CurrentPlayingPageType,
    LibraryFocusState,
    LibraryPage,
    LyricPage,
    PageType,
    PlaylistContextUIState,
    SearchFocusState,
    SearchPage,
    TracksContextUIState,
)


@pytest.mark.parametrize("enum_cls", [LibraryFocusState, ArtistFocusState, SearchFocusState])
def test_previous_undoes_next(enum_cls):
    for member in enum_cls:
        assert member.next().previous() is member
        assert member.previous().next() is member


@pytest.mark.parametrize("enum_cls", [LibraryFocusState, ArtistFocusState, SearchFocusState])
def test_next_cycles_through_all_members(enum_cls):
    start = next(iter(enum_cls))
    seen = []
    cur = start
    for _ in enum_cls:
        seen.append(cur)
        cur = cur.next()
    assert cur is start
    assert seen == list(enum_cls)


def test_focus_order_matches_source():
    assert LibraryFocusState.PLAYLISTS.next() is LibraryFocusState.SAVED_ALBUMS
    assert LibraryFocusState.PLAYLISTS.previous() is LibraryFocusState.FOLLOWED_ARTISTS
    assert SearchFocusState.INPUT.next() is SearchFocusState.TRACKS
    assert SearchFocusState.INPUT.previous() is SearchFocusState.PLAYLISTS
    assert ArtistFocusState.RELATED_ARTISTS.next() is ArtistFocusState.TOP_TRACKS


def test_library_page_defaults_and_select():
    page = LibraryPage()
    assert page.focus_window_state() is page.state.playlist_list
    assert page.selected() == 0
    page.select(3)
    assert page.selected() == 3
    assert page.state.playlist_list.selected == 3


def test_library_page_next_resets_new_focus_window():
    page = LibraryPage()
    page.select(5)
    page.state.saved_album_list.select(4)
    page.next()
    assert page.state.focus is LibraryFocusState.SAVED_ALBUMS
    assert page.selected() == 0
    assert page.state.playlist_list.selected == 5
    page.previous()
    assert page.state.focus is LibraryFocusState.PLAYLISTS
    assert page.state.playlist_list.selected == 0


def test_search_page_input_has_no_window():
    page = SearchPage()
    assert page.focus_window_state() is None
    assert page.selected() is None
    page.select(2)
    assert [page.state.track_list.selected, page.state.album_list.selected] == [0, 0]
    page.next()
    assert page.focus_window_state() is page.state.track_list


def test_context_page_without_state():
    page = ContextPage()
    assert page.focus_window_state() is None
    page.next()
    assert page.selected() is None
    assert page.state is None


@pytest.mark.parametrize(
    "ui_state", [PlaylistContextUIState(), AlbumContextUIState(), TracksContextUIState()]
)
def test_context_page_track_table(ui_state):
    page = ContextPage(state=ui_state)
    assert page.focus_window_state() is ui_state.track_table
    page.select(7)
    assert ui_state.track_table.selected == 7


def test_context_page_artist_focus():
    ui_state = ArtistContextUIState()
    page = ContextPage(state=ui_state)
    assert page.focus_window_state() is ui_state.top_track_table
    ui_state.album_list.select(3)
    page.next()
    assert ui_state.focus is ArtistFocusState.ALBUMS
    assert page.focus_window_state() is ui_state.album_list
    assert ui_state.album_list.selected == 0
    page.previous()
    assert page.focus_window_state() is ui_state.top_track_table


def test_browse_page_windows():
    page = BrowsePage()
    assert isinstance(page.state, CategoryListUIState)
    page.select(2)
    assert page.state.state.selected == 2
    inner = CategoryPlaylistListUIState(Category(id="pop", name="Pop"))
    page = BrowsePage(state=inner)
    assert page.focus_window_state() is inner.state
    assert page.selected() == 0


def test_lyric_page_has_no_window():
    page = LyricPage(track="Song", artists="Band")
    assert page.focus_window_state() is None
    assert page.selected() is None


def test_page_types():
    assert LibraryPage.page_type is PageType.LIBRARY
    assert ContextPage().page_type is PageType.CONTEXT
    assert SearchPage().page_type is PageType.SEARCH
    assert BrowsePage().page_type is PageType.BROWSE
    assert LyricPage("a", "b").page_type is PageType.LYRIC


def test_titles():
    assert CurrentPlayingPageType().title() == "Current Playing"
    assert BrowsingPageType(PlaylistId("abc123")).title() == "Playlist"
    assert BrowsingPageType(AlbumId("abc123")).title() == "Album"
    assert BrowsingPageType(ArtistId("abc123")).title() == "Artist"
    tracks_id = TracksId("tracks:user-top-tracks", "Top Tracks")
    assert BrowsingPageType(tracks_id).title() == tracks_id.kind