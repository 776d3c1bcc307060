"""Logging for Language Changer.

Everything is logged under the "language_changer" logger. The log file
records each discovery stage (shortcut, drives, picker), the settings file
that was read, and every locale change written to it.
"""

import logging
import sys

from .config.paths import GamePaths

ROOT_LOGGER = "language_changer"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Start logging to %APPDATA%/LanguageChanger/language_changer.log.

    Called once from main() before the window is created. With --debug the
    same records are echoed to stdout, which helps when discovery picks an
    unexpected folder.

    Args:
        debug: Also log to stdout

    Returns:
        The application logger
    """
    GamePaths.ensure_config_dir()

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG)

    # Repeated calls must not stack handlers
    logger.handlers.clear()

    file_handler = logging.FileHandler(GamePaths.LOG_FILE, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    if debug:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for one module, e.g. get_logger("path_resolver")."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
