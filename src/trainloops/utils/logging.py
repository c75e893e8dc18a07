"""Logging setup for the enumeration scripts and examples.

Library modules only log at debug level: the search reports its inventory,
placement count, pruned branches and cancellation, and the stream reports
producer failures. Scripts print letter codes to stdout and log summaries.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Route ``trainloops`` log records to stderr.

    Pass ``logging.DEBUG`` to see search statistics for every run.

    Args:
        level: Root logger level passed to :func:`logging.basicConfig`.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
