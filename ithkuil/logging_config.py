"""
Logging setup for the ithkuil command-line tool.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once per run, by ``setup_logging``.
"""
import logging
import os
import sys
from datetime import datetime

LOG_LEVEL_ENV = "ITHKUIL_LOG_LEVEL"

PLAIN_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'

CONTEXT_VALUE_LIMIT = 200


class ProgressLogger:
    """
    Log lines standing in for a progress bar in ``ithkuil batch --no-progress``.

    A line is written each time the share of words done crosses another
    multiple of ``step`` percent, and once more for the last word.
    """
    def __init__(self, total, desc="Glossing words", logger=None, step=10):
        self.total = total
        self.desc = desc
        self.logger = logger or logging.getLogger()
        self.step = step
        self.current = 0
        self.start_time = datetime.now()
        self.reported_steps = 0

    def percent(self):
        if self.total <= 0:
            return 0
        return int(self.current * 100 / self.total)

    def update(self, n=1):
        self.current += n
        steps = self.percent() // self.step
        done = self.current >= self.total
        if steps > self.reported_steps or done:
            self.reported_steps = steps
            self.logger.info(self._message(done))

    def _message(self, done):
        message = f"{self.desc}: {self.current}/{self.total} ({self.percent()}%)"
        if done:
            return message

        elapsed = (datetime.now() - self.start_time).total_seconds()
        if elapsed <= 0 or self.current <= 0:
            return message
        remaining = (self.total - self.current) * elapsed / self.current
        return f"{message} [ETA: {int(remaining)}s]"

    def close(self):
        """Report the batch as finished if the last update did not."""
        if self.current < self.total:
            self.current = self.total
            self.update(0)


def level_from_env(default=logging.WARNING):
    """Read a level name such as "DEBUG" from ITHKUIL_LOG_LEVEL."""
    name = os.environ.get(LOG_LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in {LOG_LEVEL_ENV}: {name}")
    return level


def setup_logging(log_file='ithkuil.log', level=logging.INFO, debug=False):
    """
    Route log records to the console and, optionally, a log file.

    Args:
        log_file: File to append to, or None for console output only.
        level: Level for the root logger and every handler.
        debug: Force DEBUG and include the logger name, file and line.
    """
    if debug:
        level = logging.DEBUG
    formatter = logging.Formatter(DEBUG_FORMAT if debug else PLAIN_FORMAT)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.setLevel(level)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file, mode='a', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # Separates runs appended to the same log file
    banner = "=" * 80
    logging.info(banner)
    logging.info(f"ithkuil run started {datetime.now():%Y-%m-%d %H:%M:%S} "
                 f"(level {logging.getLevelName(level)})")
    logging.info(banner)


def _shorten(value):
    text = str(value)
    if len(text) > CONTEXT_VALUE_LIMIT:
        return text[:CONTEXT_VALUE_LIMIT] + "..."
    return text


def log_with_context(message, context=None, level=logging.DEBUG):
    """
    Log ``message``, then one DEBUG line per ``context`` entry.

    ``parse_word`` uses this to record the tokens of a word that no
    interpretation accepted. Context lines are only built when DEBUG is on.
    """
    logger = logging.getLogger()
    logger.log(level, message)

    if not context or not logger.isEnabledFor(logging.DEBUG):
        return
    for key, value in context.items():
        logger.debug(f"    {key}: {_shorten(value)}")
