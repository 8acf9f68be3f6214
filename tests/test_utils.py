from datetime import timedelta

import pytest

from spotplay.utils import (
    ListState,
    TableState,
    format_duration,
    get_track_album_image_url,
    map_join,
    new_list_state,
    new_table_state,
    parse_uri,
)


@pytest.mark.parametrize("total", [0, 5, 59, 60, 65, 600, 3599, 3600, 7265])
def test_format_duration_round_trips_seconds(total):
    text = format_duration(timedelta(seconds=total))
    minutes, seconds = text.split(":")
    assert len(seconds) == 2
    assert int(minutes) * 60 + int(seconds) == total


def test_format_duration_truncates_milliseconds():
    assert format_duration(timedelta(seconds=61, milliseconds=999)) == format_duration(
        timedelta(seconds=61)
    )


def test_format_duration_pinned():
    assert format_duration(timedelta(seconds=65)) == "1:05"


def test_new_states_select_first_item():
    assert new_list_state().selected == 0
    assert new_table_state().selected == 0


def test_select_and_clear():
    state = ListState(selected=3, offset=2)
    state.select(5)
    assert state.selected == 5
    assert state.offset == 2
    state.select(None)
    assert state.selected is None
    assert state.offset == 0


def test_list_and_table_states_differ():
    assert ListState(selected=0) != TableState(selected=0)
    assert ListState(selected=1) == ListState(selected=1)


def test_map_join_matches_plain_join():
    names = ["alpha", "beta", "gamma"]
    items = [{"name": n} for n in names]
    assert map_join(items, lambda i: i["name"], ", ") == ", ".join(names)


def test_map_join_empty():
    assert map_join([], str, ", ") == ""


def test_map_join_skips_separator_after_leading_empties():
    assert map_join(["", "", "x"], str, "-") == "x"
    assert map_join(["x", ""], str, "-") == "x-"


def test_album_image_url_first():
    track = {"album": {"images": [{"url": "first.png"}, {"url": "second.png"}]}}
    assert get_track_album_image_url(track) == "first.png"


def test_album_image_url_missing():
    assert get_track_album_image_url({"album": {"images": []}}) is None


def test_parse_uri_user_form():
    assert parse_uri("spotify:user:someone:playlist:abc123") == "spotify:playlist:abc123"


@pytest.mark.parametrize("uri", ["spotify:playlist:abc123", "spotify:track:x", "a:b:c:d"])
def test_parse_uri_keeps_other_forms(uri):
    assert parse_uri(uri) == uri