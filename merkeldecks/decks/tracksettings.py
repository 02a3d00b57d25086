"""Editing the start time, speed and volume of the selected track."""

import math
from dataclasses import dataclass

NO_TRACK = "No Track Selected"


@dataclass(frozen=True)
class SliderRange:
    """A slider's range and step."""

    minimum: float
    maximum: float
    interval: float

    def constrain(self, value):
        """Snap value to the step and clamp it to the range."""
        if self.interval > 0:
            steps = math.floor((value - self.minimum) / self.interval + 0.5)
            value = self.minimum + self.interval * steps
        return min(self.maximum, max(self.minimum, value))


START_RANGE = SliderRange(0.0, 500.0, 0.01)
VOLUME_RANGE = SliderRange(0.0, 1.0, 0.01)
SPEED_RANGE = SliderRange(0.1, 10.0, 0.01)


@dataclass(frozen=True)
class SettingsView:
    """What the settings panel shows."""

    name: str
    volume: float
    speed: float
    start_time: float


class TrackSettings:
    """Controls bound to the currently selected track."""

    def __init__(self):
        self.selected_track = None
        self.track_name = "Unknown"
        self.volume = VOLUME_RANGE.constrain(0.0)
        self.speed = SPEED_RANGE.constrain(0.0)
        self.start_time = START_RANGE.constrain(0.0)

    def _view(self):
        return SettingsView(self.track_name, self.volume, self.speed, self.start_time)

    def select(self, track):
        """Bind the controls to track (or None) and refresh them."""
        self.selected_track = track
        return self.display()

    def display(self):
        """Refresh the controls from the selected track and return what they show."""
        track = self.selected_track
        if track is None or track.is_null:
            self.track_name = NO_TRACK
            self.volume = VOLUME_RANGE.constrain(0.5)
            self.speed = SPEED_RANGE.constrain(1.0)
            self.start_time = START_RANGE.constrain(0.0)
        else:
            self.track_name = track.title
            self.volume = VOLUME_RANGE.constrain(track.gain)
            self.speed = SPEED_RANGE.constrain(track.speed)
            self.start_time = START_RANGE.constrain(track.start_time)
        return self._view()

    def set_volume(self, value):
        """Move the volume control, updating the selected track's gain."""
        self.volume = VOLUME_RANGE.constrain(value)
        if self.selected_track is not None:
            self.selected_track.gain = self.volume

    def set_speed(self, value):
        """Move the speed control, updating the selected track's speed."""
        self.speed = SPEED_RANGE.constrain(value)
        if self.selected_track is not None:
            self.selected_track.speed = self.speed

    def set_start_time(self, value):
        """Move the start control, updating the selected track's start time."""
        self.start_time = START_RANGE.constrain(value)
        if self.selected_track is not None:
            self.selected_track.start_time = self.start_time