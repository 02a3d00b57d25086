"""The track map: a time scale and one bar per track on it."""

from typing import NamedTuple

DEFAULT_SCALE = 3


class Tick(NamedTuple):
    """A mark on the time scale: x position and line height."""

    x: int
    height: int


class Bar(NamedTuple):
    """The rectangle a track occupies in its row."""

    x: int
    y: int
    width: int
    height: int


def scale_ticks(width, height, scale=DEFAULT_SCALE):
    """Return one tick per second across width; every fifth tick is taller."""
    return [
        Tick(i * scale, height // 2 if i % 5 == 0 else height // 4)
        for i in range(width // scale)
    ]


def track_bar(track, height, scale=DEFAULT_SCALE):
    """Return the bar for track in a row of the given height."""
    return Bar(
        int(track.start_time * scale),
        height // 4,
        int(track.duration * scale / track.speed),
        height // 2,
    )


class TrackMap:
    """Tracks laid out on a time line, with row selection bound to settings.

    Row 0 is the header track that carries the time scale.
    """

    def __init__(self, tracks, settings):
        self.tracks = tracks
        self.settings = settings
        self.scale = DEFAULT_SCALE
        self.time = 0.0
        self.selected_row = None

    def update_map(self, new_time):
        """Move the play head to new_time; negative times leave it in place."""
        if new_time >= 0:
            self.time = new_time

    def select_row(self, row):
        """Select a row and show its track in the settings.

        A row outside the map selects the header track.
        """
        self.selected_row = row
        if 0 <= row < len(self.tracks):
            track = self.tracks[row]
        else:
            track = self.tracks[0]
        self.settings.select(track)

    def remove_selected(self):
        """Deselect and remove the selected track; the header row stays.

        Return the removed track, or None if nothing was removed.
        """
        index = self.selected_row
        self.selected_row = None
        if index is not None and 0 < index < len(self.tracks):
            return self.tracks.pop(index)
        return None

    def playhead_x(self):
        """Return the x position of the play head line."""
        return self.time * self.scale