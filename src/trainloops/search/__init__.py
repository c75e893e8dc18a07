"""Closed-layout search engine and streaming helpers."""

from trainloops.search.engine import find_tracks, validate_inventory
from trainloops.search.stream import TrackStream

__all__ = ["TrackStream", "find_tracks", "validate_inventory"]
