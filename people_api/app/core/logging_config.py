"""
Logging setup for the People API.

Application modules log through ``logging.getLogger(__name__)``; this
module gives the root logger its handlers and keeps the MongoDB driver
quiet unless the API itself runs at ``DEBUG``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Driver loggers emitting per-command records at INFO/DEBUG.
DRIVER_LOGGERS = ("pymongo", "motor")


def tune_driver_loggers(level: int) -> None:
    """Follow ``level`` for driver loggers at DEBUG, else cap them at WARNING."""
    driver_level = level if level <= logging.DEBUG else logging.WARNING
    for name in DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(driver_level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the API process.

    ``level`` is a level name, case insensitive, with ``INFO`` used for
    unknown names.  ``logfile`` adds a file handler next to the console
    one.  Handlers are attached only when the root logger has none yet,
    so repeated ``create_app`` calls do not duplicate output.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    tune_driver_loggers(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
