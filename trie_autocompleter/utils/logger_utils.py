# logger_utils.py -  logging setup and timing helpers

import logging
import time
from contextlib import contextmanager

from rich.console import Console
from rich.logging import RichHandler

# file entries are written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "trie_autocompleter"


def configure_logging(level="WARNING", log_file=None, use_color=True):
    """
    Attach handlers to the package logger.
    Console output goes to stderr through rich, so stdout stays reserved for
    command results. Calling it again replaces the previous handlers.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    console = Console(stderr=True, no_color=not use_color)
    rich_handler = RichHandler(console=console, show_path=False, markup=False)
    rich_handler.setLevel(level)
    logger.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


@contextmanager
def time_block(label, metrics=None):
    """
    Measure how long the block takes.
        with time_block("INSERT", metrics):
            engine.insert(word)
    The duration is logged at DEBUG and, if given, recorded in `metrics`.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        dur = time.perf_counter() - start
        logging.getLogger(ROOT_LOGGER).debug("%s done in %.6fs", label, dur)
        if metrics is not None:
            metrics.record(label, dur)
