import logging
import sys
from typing import Optional, TextIO

DEFAULT_LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below ``limit``."""

    def __init__(self, limit: int) -> None:
        super().__init__()
        self._limit = limit

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._limit


def _stream_handler(
    stream: TextIO,
    formatter: logging.Formatter,
    level: int,
    below: Optional[int] = None,
) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    if below is not None:
        handler.addFilter(_BelowLevelFilter(below))
    return handler


def configure_split_stream_logging(
    *,
    level: int = logging.WARNING,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    stderr_only: bool = False,
) -> None:
    """Configure root logging for the linter CLI.

    Records below ``stderr_level`` go to stdout and the rest to stderr. With
    ``stderr_only`` every record goes to stderr, leaving stdout to the lint
    report.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    formatter = formatter or logging.Formatter(DEFAULT_LOG_FORMAT)
    stderr_level = max(stderr_level, logging.DEBUG)

    if stderr_only:
        root.addHandler(_stream_handler(sys.stderr, formatter, logging.DEBUG))
        return

    root.addHandler(_stream_handler(sys.stdout, formatter, logging.DEBUG, below=stderr_level))
    root.addHandler(_stream_handler(sys.stderr, formatter, stderr_level))
