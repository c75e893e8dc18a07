"""Numerical constants shared across the library."""

CLOSURE_TOLERANCE: float = 1e-2
PRUNE_SLACK: float = 1.0
DEFAULT_STREAM_BUFFER_SIZE: int = 1
