"""The playlist: every loaded track, sent to the preview decks or the mixer."""

import logging
from dataclasses import replace

from merkeldecks.decks.trackinfo import TrackInfo

_log = logging.getLogger(__name__)


class Playlist:
    """Tracks loaded into the application.

    tracks and active_tracks are shared lists; active_tracks feeds the
    track mixer. The decks are players with a load(path) method.
    """

    def __init__(self, tracks, active_tracks, deck1, deck2):
        self.tracks = tracks
        self.active_tracks = active_tracks
        self._decks = {1: deck1, 2: deck2}

    def __len__(self):
        return len(self.tracks)

    def add_files(self, paths):
        """Add a track for each path; return the tracks added."""
        added = [TrackInfo.from_path(str(path)) for path in paths]
        self.tracks.extend(added)
        return added

    def to_player(self, deck_number, index):
        """Load the track at index into preview deck 1 or 2; return the deck's result."""
        try:
            deck = self._decks[deck_number]
        except KeyError:
            raise ValueError(f"no deck {deck_number}") from None
        path = self.tracks[index].file_path
        _log.debug("loading %s into deck %s", path, deck_number)
        return deck.load(path)

    def to_main_track(self, index):
        """Add a copy of the track at index to the mixer's tracks and return it."""
        track = replace(self.tracks[index])
        self.active_tracks.append(track)
        return track

    def remove(self, index):
        """Remove the track at index from the playlist and return it."""
        return self.tracks.pop(index)