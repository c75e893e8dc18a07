"""Utility helpers."""

from trainloops.utils.constants import CLOSURE_TOLERANCE, PRUNE_SLACK
from trainloops.utils.logging import configure_logging

__all__ = ["CLOSURE_TOLERANCE", "PRUNE_SLACK", "configure_logging"]
