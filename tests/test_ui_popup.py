import enum
from datetime import timedelta

import pytest

from spotplay.model import Artist, ArtistId, Playlist, PlaylistId, Track, TrackId, UserId
from spotplay.ui_popup import (
    ActionListItem,
    ActionListPopup,
    AddTrackPlaylistAction,
    ArtistListPopup,
    ArtistPopupAction,
    BrowsePlaylistAction,
    CommandHelpPopup,
    DeviceListPopup,
    QueuePopup,
    SearchPopup,
    ThemeListPopup,
    UserFollowedArtistListPopup,
    UserPlaylistListPopup,
    UserSavedAlbumListPopup,
    list_select,
    list_selected,
    list_state,
)


class TrackAction(enum.Enum):
    AddToQueue = 1
    BrowseAlbum = 2


def _track():
    return Track(
        id=TrackId("t1"), name="Song", artists=[], album=None, duration=timedelta(seconds=1)
    )


def _list_popups():
    artist = Artist(ArtistId("a1"), "Band")
    return [
        UserPlaylistListPopup(BrowsePlaylistAction()),
        UserPlaylistListPopup(AddTrackPlaylistAction(TrackId("t1"))),
        UserFollowedArtistListPopup(),
        UserSavedAlbumListPopup(),
        DeviceListPopup(),
        ArtistListPopup(ArtistPopupAction.GO_TO_RADIO, [artist]),
        ThemeListPopup(["dark"]),
        ActionListPopup(ActionListItem(_track(), [TrackAction.AddToQueue])),
    ]


@pytest.mark.parametrize("popup", _list_popups())
def test_list_popups_expose_list_state(popup):
    assert list_state(popup) is popup.list_state
    assert list_selected(popup) == 0
    list_select(popup, 4)
    assert list_selected(popup) == 4
    list_select(popup, None)
    assert list_selected(popup) is None


@pytest.mark.parametrize("popup", [CommandHelpPopup(), SearchPopup("q"), QueuePopup()])
def test_non_list_popups(popup):
    assert list_state(popup) is None
    list_select(popup, 3)
    assert list_selected(popup) is None


def test_action_list_item_track():
    track = _track()
    item = ActionListItem(track, [TrackAction.AddToQueue, TrackAction.BrowseAlbum])
    assert item.n_actions() == 2
    assert item.name() == track.name
    assert item.actions_desc() == ["AddToQueue", "BrowseAlbum"]


def test_action_list_item_playlist_without_actions():
    playlist = Playlist(PlaylistId("p1"), False, "Mix", ("Owner", UserId("u1")))
    item = ActionListItem(playlist)
    assert item.n_actions() == 0
    assert item.name() == "Mix"
    assert item.actions_desc() == []