"""Logging configuration."""

import logging
import sys
from logging import Formatter, LogRecord, StreamHandler
from typing import Dict, NoReturn, Optional, TextIO, Tuple

# FATAL and CRITICAL are the same. I prefer the label FATAL.
logging.addLevelName(logging.FATAL, "FATAL")


class ColorFormatter(Formatter):

    """Log formatter that prints bold, colorized level names."""

    COLORS = {
        logging.FATAL: 31,  # red
        logging.ERROR: 31,  # red
        logging.WARNING: 33,  # yellow
        logging.INFO: 32,  # green
        logging.DEBUG: 35,  # magenta
    }

    def __init__(self, use_color: bool):  # pylint: disable=super-init-not-called
        self.default = Formatter("%(levelname)s: %(message)s")
        self.formatters: Dict[int, Formatter] = {}
        if use_color:
            self.formatters = {
                level: Formatter(f"\x1b[{code};1m%(levelname)s:\x1b[0m %(message)s")
                for level, code in self.COLORS.items()
            }

    def format(self, record: LogRecord) -> str:
        return self.formatters.get(record.levelno, self.default).format(record)


class ExitStreamHandler(StreamHandler):

    """Stream handler that exits with status 1 after records at exit_level."""

    def __init__(self, stream: Optional[TextIO] = None, exit_level: int = logging.FATAL):
        super().__init__(stream)
        self.exit_level = exit_level

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def levels(verbose: int, keep_going: bool) -> Tuple[int, int]:
    """Return (log_level, exit_level) for command-line flags.

    Each -v lowers the log level one step from WARNING. Errors end the program
    unless keep_going is set, in which case only fatal logs do.
    """
    log_level = max(logging.DEBUG, logging.WARNING - 10 * verbose)
    exit_level = logging.FATAL if keep_going else logging.ERROR
    return log_level, exit_level


def setup_logging(stream: TextIO, verbose: int = 0, keep_going: bool = False):
    """Send root logger output to stream, replacing any earlier setup.

    Uses color if the stream is a TTY.
    """
    log_level, exit_level = levels(verbose, keep_going)
    logger = logging.getLogger()
    logger.setLevel(log_level)
    for old in [h for h in logger.handlers if isinstance(h, ExitStreamHandler)]:
        logger.removeHandler(old)
    handler = ExitStreamHandler(stream, exit_level)
    handler.setFormatter(ColorFormatter(use_color=stream.isatty()))
    logger.addHandler(handler)


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """Log at FATAL level and exit, even if keep_going was set."""
    logging.fatal(msg, *args, **kwargs)
    sys.exit(1)
