"""A simulated audio deck: transport position, gain and speed."""

import logging

from merkeldecks.decks.trackinfo import read_duration

_log = logging.getLogger(__name__)

MAX_SPEED = 100.0


class DJAudioPlayer:
    """Plays one track with adjustable gain, speed and position.

    Audio output is not produced; advance() moves the play head as
    playback would.
    """

    def __init__(self, reader=read_duration):
        self._reader = reader
        self._length = None
        self._position = 0.0
        self._playing = False
        self._gain = 1.0
        self._speed = 1.0

    @property
    def gain(self):
        return self._gain

    @property
    def speed(self):
        return self._speed

    @property
    def position(self):
        """Play head position in seconds."""
        return self._position

    @property
    def is_playing(self):
        return self._playing

    def load(self, path):
        """Load a track; return False, keeping the current one, if it cannot be read."""
        length = self._reader(path)
        if length is None:
            return False
        self._length = length
        self._position = 0.0
        self._playing = False
        return True

    def play(self):
        """Start the track from the beginning."""
        self._position = 0.0
        self._playing = self.has_track()

    def stop(self):
        """Stop playback, leaving the play head where it is."""
        self._playing = False

    def has_track(self):
        """Return True if a track is loaded."""
        return self._length is not None

    def track_length(self):
        """Return the loaded track's length in seconds, or 0 without a track."""
        return self._length if self.has_track() else 0

    def position_relative(self):
        """Return the play head as a fraction of the track length (0 when empty)."""
        length = self.track_length()
        if not length:
            return 0.0
        return self._position / length

    def set_gain(self, gain):
        """Set the gain; values outside 0..1 are ignored."""
        if gain < 0 or gain > 1:
            _log.debug("Set gain of %s is outside of range 0 to 1", gain)
            return
        self._gain = gain

    def set_position(self, seconds):
        """Move the play head; positions outside the track are ignored."""
        length = self.track_length()
        if seconds < 0 or seconds > length:
            _log.debug(
                "warning set position %s greater than length %s", seconds, length
            )
            return
        self._position = seconds

    def set_position_relative(self, pos):
        """Move the play head to a fraction 0..1 of the track."""
        self.set_position(pos * self.track_length())

    def set_speed(self, ratio):
        """Set the playback speed ratio; values outside 0..100 are ignored."""
        if ratio < 0 or ratio > MAX_SPEED:
            _log.debug("Set speed of %s is outside of range 0 to 100", ratio)
            return
        self._speed = ratio

    def advance(self, seconds):
        """Let seconds of wall time pass; playback stops at the end of the track."""
        if not self._playing:
            return
        length = self.track_length()
        self._position += seconds * self._speed
        if self._position >= length:
            self._position = length
            self._playing = False