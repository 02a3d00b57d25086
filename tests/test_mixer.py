import pytest

from merkeldecks.decks.mixer import TrackMixer
from merkeldecks.decks.player import DJAudioPlayer
from merkeldecks.decks.trackinfo import TrackInfo


def _players(count=8, length=10.0):
    return [DJAudioPlayer(reader=lambda path: length) for _ in range(count)]


def _track(name, duration=1.0, start=0.0, gain=0.5, speed=1.0):
    return TrackInfo(
        file_path=f"/music/{name}.wav",
        title=f"{name}.wav",
        duration=duration,
        start_time=start,
        gain=gain,
        speed=speed,
    )


def test_new_mixer_has_header_only():
    mixer = TrackMixer(_players())
    assert len(mixer.active_tracks) == 1
    assert mixer.active_tracks[0].is_null
    assert mixer.active_tracks[0].title == "Tracks"
    assert mixer.is_playing is False


def test_default_players_bank():
    mixer = TrackMixer()
    assert len(mixer.players) == 8


def test_toggle_copies_active_tracks():
    mixer = TrackMixer(_players())
    mixer.active_tracks.append(_track("a"))
    assert mixer.toggle_play() is True
    assert [t.title for t in mixer.playing_tracks] == ["a.wav"]
    assert mixer.playing_tracks[0] is not mixer.active_tracks[1]


def test_only_as_many_tracks_as_players():
    mixer = TrackMixer(_players())
    mixer.active_tracks.extend(_track(f"t{i}") for i in range(9))
    mixer.toggle_play()
    assert len(mixer.playing_tracks) == len(mixer.players)


def test_track_starts_after_start_time_and_stops_after_duration():
    players = _players()
    mixer = TrackMixer(players)
    mixer.active_tracks.append(_track("a", duration=1.0))
    mixer.toggle_play()

    mixer.tick(0.5)
    assert players[0].is_playing is False
    mixer.tick(0.5)
    assert players[0].is_playing is True
    assert mixer.playing_tracks[0].has_started
    mixer.tick(0.5)
    assert players[0].is_playing is True
    mixer.tick(0.5)
    assert players[0].is_playing is False
    assert mixer.playing_tracks[0].has_ended
    assert mixer.active_tracks[1].has_started is False


def test_start_applies_gain_and_speed():
    players = _players()
    mixer = TrackMixer(players)
    mixer.active_tracks.append(_track("a", gain=0.8, speed=2.0))
    mixer.toggle_play()
    mixer.tick(0.5)
    mixer.tick(0.5)
    assert players[0].gain == pytest.approx(0.8)
    assert players[0].speed == pytest.approx(2.0)
    assert players[0].has_track()


def test_stop_rewinds_and_clears():
    players = _players()
    mixer = TrackMixer(players)
    mixer.active_tracks.append(_track("a", duration=5.0))
    mixer.toggle_play()
    mixer.tick(0.5)
    mixer.tick(0.5)
    assert mixer.toggle_play() is False
    assert mixer.time == 0.0
    assert mixer.playing_tracks == []
    assert players[0].is_playing is False


def test_tick_moves_track_map_only_while_playing():
    mixer = TrackMixer(_players())
    mixer.tick(0.5)
    assert mixer.time == 0.0
    assert mixer.track_map.time == 0.0
    mixer.toggle_play()
    mixer.tick(0.5)
    assert mixer.time == pytest.approx(0.5)
    assert mixer.track_map.time == pytest.approx(0.5)


def test_later_start_time_delays_player():
    players = _players()
    mixer = TrackMixer(players)
    mixer.active_tracks.append(_track("a", duration=1.0, start=1.0))
    mixer.active_tracks.append(_track("b", duration=1.0, start=0.0))
    mixer.toggle_play()
    mixer.tick(0.5)
    mixer.tick(0.5)
    assert players[0].is_playing is False
    assert players[1].is_playing is True