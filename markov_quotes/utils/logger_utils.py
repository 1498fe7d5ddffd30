# logger_utils.py -  logging setup plus timing metrics for training and generation

import logging
import os
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Directory used when a log file is requested without a directory part
LOG_DIR = "logs"
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "markov_quotes.log")

PACKAGE_LOGGER = "markov_quotes"
_metrics = logging.getLogger(f"{PACKAGE_LOGGER}.metrics")

_FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(
    verbose: bool = False,
    log_path: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Attach handlers to the package logger:
     - a RichHandler on stderr (INFO, or DEBUG when verbose)
     - a plain file handler when log_path is given
    Calling it again replaces the handlers instead of stacking them.
    """
    pkg = logging.getLogger(PACKAGE_LOGGER)
    level = logging.DEBUG if verbose else logging.INFO
    pkg.setLevel(level)
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
        h.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    rich_handler.setLevel(level if verbose else logging.WARNING)
    pkg.addHandler(rich_handler)

    if log_path:
        folder = os.path.dirname(log_path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))
        pkg.addHandler(fh)

    pkg.propagate = False
    return pkg


class Log:
    """Metric helpers; records go through the package logger."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timings, counts).
        Example: training done: 0.123s
        """
        _metrics.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Measure how long a block takes.
        To use:
            with Log.time_block("training"):
                trainer.train_lines(lines)
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.duration = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.duration = round(time.perf_counter() - self.start, 3)
        # only report blocks that finished
        if exc_type is None:
            Log.metric(f"{self.label} done", self.duration, "s")
