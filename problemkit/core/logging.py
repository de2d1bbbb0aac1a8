"""
Logging setup: one stdout handler on the root logger.

The `problemkit.problems` channel (one line per error response, written by
ProblemLogger) can run at its own level, e.g. WARNING to drop 4xx lines.
"""
import logging
import sys
from typing import Optional

PROBLEM_LOGGER_NAME = "problemkit.problems"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(level: str = "INFO", problem_level: Optional[str] = None) -> None:
    """
    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR).
        problem_level: Level of the problem channel. Empty or None inherits `level`.
    """
    logging.basicConfig(level=_level(level), format=LOG_FORMAT, stream=sys.stdout, force=True)
    logging.getLogger(PROBLEM_LOGGER_NAME).setLevel(
        _level(problem_level) if problem_level else logging.NOTSET
    )
