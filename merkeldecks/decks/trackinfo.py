"""Information about a track loaded into the decks."""

import random
import wave
from dataclasses import dataclass

HEADER_TITLE = "Tracks"


def file_name(path):
    """Return the part of path after its last '/' or '\\'."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1:]


def read_duration(path):
    """Return the length of an audio file in seconds, or None if it cannot be read."""
    try:
        with wave.open(str(path), "rb") as audio:
            rate = audio.getframerate()
            frames = audio.getnframes()
    except (OSError, EOFError, wave.Error):
        return None
    if rate <= 0:
        return None
    return frames / rate


@dataclass
class TrackInfo:
    """A sound file and the settings it is mixed with.

    A null track (is_null) stands for no real audio: the header row of
    the track map, or a path with no file name.
    """

    file_path: str
    title: str = ""
    duration: float = 0.0
    start_time: float = 0.0
    gain: float = 0.5
    speed: float = 1.0
    colour: int = 0
    is_null: bool = False
    has_started: bool = False
    has_ended: bool = False

    @classmethod
    def header(cls):
        """Return the placeholder track used for the time scale row."""
        return cls(file_path=HEADER_TITLE, title=HEADER_TITLE, is_null=True)

    @classmethod
    def from_path(cls, path):
        """Describe the file at path, reading its duration when possible."""
        if path == HEADER_TITLE:
            return cls.header()
        title = file_name(path)
        track = cls(file_path=path, title=title, colour=random.getrandbits(32))
        if not title:
            track.is_null = True
            return track
        duration = read_duration(path)
        if duration is not None:
            track.duration = duration
        return track