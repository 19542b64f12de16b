# storefront/config/logging_config.py

"""Logging setup shared by the TUI and the headless CLI.

Every run writes DEBUG+ records from all ``storefront.*`` loggers to its
own file, ``logs/run_YYYYMMDD_HHMMSS.log``. Only the headless CLI also
echoes WARNING+ to stderr; under the TUI, Textual owns the terminal and
anything written to stderr would land on top of the screen.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from storefront.config.settings import Settings

LOGGER_NAME = "storefront"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_STDERR_FORMAT = "%(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _active_log_file(logger: logging.Logger) -> Path | None:
    """Return the run file an earlier call attached, if any."""
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)
    return None


def setup_logging(console: bool = True) -> Path:
    """Attach the per-run file handler (and optionally stderr) once.

    Args:
        console: also log WARNING+ to stderr. Pass ``False`` for the TUI.

    Returns:
        The log file in use for this process.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    existing = _active_log_file(logger)
    if existing is not None:
        return existing

    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    log_file = (
        Settings.LOGS_DIR
        / f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    )

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )
    logger.addHandler(file_handler)

    if console:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.WARNING)
        stderr_handler.setFormatter(logging.Formatter(_STDERR_FORMAT))
        logger.addHandler(stderr_handler)

    logger.info(
        "Logging to %s (stderr echo %s)",
        log_file,
        "on" if console else "off",
    )
    return log_file
