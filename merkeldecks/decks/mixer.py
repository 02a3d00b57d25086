"""The track mixer: tracks laid out in time and played on a bank of decks."""

from dataclasses import replace

from merkeldecks.decks.player import DJAudioPlayer
from merkeldecks.decks.trackinfo import TrackInfo
from merkeldecks.decks.trackmap import TrackMap
from merkeldecks.decks.tracksettings import TrackSettings

PLAYER_COUNT = 8
TICK_SECONDS = 0.01


class TrackMixer:
    """Plays the active tracks, each starting at its own start time.

    active_tracks begins with the header track that carries the time
    scale; real tracks follow it. While playing, each track in
    playing_tracks is bound to the player at the same position.
    """

    def __init__(self, players=None):
        if players is None:
            players = [DJAudioPlayer() for _ in range(PLAYER_COUNT)]
        self.players = list(players)
        self.active_tracks = [TrackInfo.header()]
        self.playing_tracks = []
        self.settings = TrackSettings()
        self.track_map = TrackMap(self.active_tracks, self.settings)
        self.is_playing = False
        self.time = 0.0

    def toggle_play(self):
        """Start playing the active tracks, or stop and rewind if already playing.

        Return True if the mixer is now playing.
        """
        if self.is_playing:
            self.is_playing = False
            self.time = 0.0
            for slot in range(min(len(self.playing_tracks), len(self.players))):
                self.players[slot].stop()
            self.playing_tracks.clear()
        else:
            self.is_playing = True
            for track in self.active_tracks[1:1 + len(self.players)]:
                self.playing_tracks.append(replace(track))
        return self.is_playing

    def tick(self, seconds=TICK_SECONDS):
        """Let seconds pass: start and stop tracks, then move the play head."""
        if self.is_playing:
            self.check_tracks_playing()
            for player in self.players:
                player.advance(seconds)
            self.time += seconds
        self.track_map.update_map(self.time)

    def check_tracks_playing(self):
        """Start tracks whose start time has passed and stop those that have finished."""
        for slot, track in enumerate(self.playing_tracks[: len(self.players)]):
            if self.time > track.start_time and not track.has_started:
                track.has_started = True
                self._start_player(slot, track)
            if (
                self.time > track.start_time + track.duration / track.speed
                and not track.has_ended
            ):
                track.has_ended = True
                self.players[slot].stop()

    def _start_player(self, slot, track):
        player = self.players[slot]
        player.load(track.file_path)
        player.set_gain(track.gain)
        player.set_speed(track.speed)
        player.play()