"""
Logging setup for picsort.
"""

import logging
import sys

from picsort.models import AppConfig, colorize, colors

LEVEL_COLORS = {
    logging.DEBUG: colors.magenta,
    logging.INFO: colors.green,
    logging.WARNING: colors.yellow,
    logging.ERROR: colors.red,
    logging.CRITICAL: colors.red,
}


class ColorFormatter(logging.Formatter):
    """Formatter that colors the level name."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno, colors.reset)
        return f"{colorize(f'{record.levelname:<7}', color)} {message}"


def get_log_level(cfg: AppConfig) -> int:
    if cfg.quiet:
        return logging.WARNING
    if cfg.verbose:
        return logging.DEBUG
    return logging.INFO


def setup_logging(cfg: AppConfig) -> logging.Logger:
    """Configure the package logger and return it."""
    logger = logging.getLogger("picsort")
    logger.setLevel(get_log_level(cfg))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ColorFormatter(f"{cfg.indent}%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
