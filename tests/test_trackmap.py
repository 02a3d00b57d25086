import pytest

from merkeldecks.decks.trackinfo import TrackInfo
from merkeldecks.decks.tracksettings import TrackSettings
from merkeldecks.decks.trackmap import (
    DEFAULT_SCALE,
    TrackMap,
    scale_ticks,
    track_bar,
)


def _track(title, duration=30.0, start=0.0, speed=1.0):
    return TrackInfo(
        file_path=f"/music/{title}",
        title=title,
        duration=duration,
        start_time=start,
        speed=speed,
    )


def _map():
    tracks = [TrackInfo.header(), _track("a.wav"), _track("b.wav")]
    settings = TrackSettings()
    return TrackMap(tracks, settings), tracks, settings


def test_scale_ticks_cover_width():
    ticks = scale_ticks(100, 20, DEFAULT_SCALE)
    assert len(ticks) * DEFAULT_SCALE <= 100 < (len(ticks) + 1) * DEFAULT_SCALE
    assert all(tick.x % DEFAULT_SCALE == 0 for tick in ticks)


def test_scale_ticks_every_fifth_is_tall():
    ticks = scale_ticks(60, 20, DEFAULT_SCALE)
    assert ticks[0].height > ticks[1].height
    assert ticks[5].height == ticks[0].height
    assert ticks[1].height == ticks[4].height


def test_scale_ticks_narrower_than_scale():
    assert scale_ticks(2, 20, DEFAULT_SCALE) == []


def test_track_bar_pinned():
    bar = track_bar(_track("a.wav", duration=20.0, start=10.0, speed=2.0), 40, 3)
    assert (bar.x, bar.width) == (30, 30)


def test_track_bar_stays_in_row():
    bar = track_bar(_track("a.wav"), 40)
    assert 0 <= bar.y
    assert bar.y + bar.height <= 40


def test_track_bar_faster_is_shorter():
    slow = track_bar(_track("a.wav", duration=40.0, speed=1.0), 40)
    fast = track_bar(_track("a.wav", duration=40.0, speed=2.0), 40)
    assert fast.width * 2 == slow.width


def test_update_map_moves_playhead():
    track_map, _, _ = _map()
    track_map.update_map(5.0)
    assert track_map.playhead_x() == 5.0 * DEFAULT_SCALE


def test_update_map_ignores_negative():
    track_map, _, _ = _map()
    track_map.update_map(4.0)
    before = track_map.playhead_x()
    track_map.update_map(-1)
    assert track_map.playhead_x() == before


def test_select_row_binds_settings():
    track_map, tracks, settings = _map()
    track_map.select_row(2)
    assert settings.selected_track is tracks[2]
    assert settings.track_name == "b.wav"


def test_select_row_out_of_range_selects_header():
    track_map, tracks, settings = _map()
    track_map.select_row(7)
    assert settings.selected_track is tracks[0]


def test_select_row_on_empty_map_raises():
    track_map = TrackMap([], TrackSettings())
    with pytest.raises(IndexError):
        track_map.select_row(0)


def test_remove_selected_track():
    track_map, tracks, _ = _map()
    second = tracks[1]
    track_map.select_row(1)
    assert track_map.remove_selected() is second
    assert second not in tracks
    assert track_map.selected_row is None


def test_header_cannot_be_removed():
    track_map, tracks, _ = _map()
    track_map.select_row(0)
    assert track_map.remove_selected() is None
    assert len(tracks) == 3


def test_remove_without_selection():
    track_map, tracks, _ = _map()
    assert track_map.remove_selected() is None
    assert len(tracks) == 3