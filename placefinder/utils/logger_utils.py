# logger_utils.py -  logging setup for the package and timing of code blocks

import logging
import sys
import time
from typing import Optional, TextIO

from colorama import Fore, Style, just_fix_windows_console

LOGGER_NAME = "placefinder"

FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Formatter that colours whole lines by level (only when writing to a tty)."""
    COLORS = {
        "DEBUG": Style.DIM,          # gray
        "INFO": Fore.BLUE,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def __init__(self, use_color: bool = True):
        super().__init__(fmt=FORMAT, datefmt=DATE_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = self.COLORS.get(record.levelname)
        if self.use_color and color:
            return f"{color}{line}{Style.RESET_ALL}"
        return line


def setup_logging(level: str = "WARNING", stream: Optional[TextIO] = None,
                  use_color: Optional[bool] = None) -> logging.Logger:
    """
    Configure the package logger once per call site.
    - level: string level (e.g. INFO, DEBUG); unknown names fall back to WARNING
    - stream: where to write (stderr by default, stdout stays clean for output)
    - use_color: force colour on/off; by default only when stream is a tty
    Repeated calls replace the handler instead of stacking duplicates.
    """
    stream = stream or sys.stderr
    if use_color is None:
        use_color = hasattr(stream, "isatty") and stream.isatty()
    if use_color:
        # Windows consoles need VT processing turned on for the ANSI codes; no-op elsewhere
        just_fix_windows_console()

    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    if logger.handlers:
        logger.handlers.clear()

    lvl = getattr(logging, str(level).upper(), None)
    if not isinstance(lvl, int):
        lvl = logging.WARNING
    logger.setLevel(lvl)

    handler = logging.StreamHandler(stream)
    handler.setLevel(lvl)
    handler.setFormatter(ColorFormatter(use_color=use_color))
    logger.addHandler(handler)
    return logger


class Log:
    """Small helpers shared by modules that want timings in the log."""

    @staticmethod
    def time_block(label: str, logger: Optional[logging.Logger] = None):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("city index build"):
                do_some_work()
        It logs how long the block took at INFO level.
        """
        return _Timer(label, logger or logging.getLogger(LOGGER_NAME))


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label: str, logger: logging.Logger):
        self.label = label
        self.logger = logger
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """On exit record the duration; failures are logged but not swallowed."""
        self.elapsed = time.perf_counter() - self.start
        if exc_type is None:
            self.logger.info("%s done: %.3fs", self.label, self.elapsed)
        else:
            self.logger.error("%s failed after %.3fs: %s", self.label, self.elapsed, exc)
        return False
