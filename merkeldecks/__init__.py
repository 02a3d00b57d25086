"""A simulated currency exchange and a DJ track-mixing model."""

__version__ = "1.0.0"