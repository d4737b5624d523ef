"""
Logging setup for the ZIP Weather API.

Console output always; rotating files under ``LOG_DIR`` unless
``LOG_TO_FILE`` is off. Errors are also written to a separate file so
provider failures can be found without reading request chatter.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

from zipweather.config import settings

DEV_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
PROD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "httpx", "httpcore")


def _rotating_handler(path: Path, level: int, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: Optional[Union[str, int]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    debug: Optional[bool] = None,
    to_file: Optional[bool] = None,
) -> logging.Logger:
    """
    Configure the root logger.

    Arguments default to the corresponding settings (``LOG_LEVEL``,
    ``LOG_DIR``, ``DEBUG``, ``LOG_TO_FILE``). Calling it again replaces
    the previously installed handlers.

    Returns:
        The root logger
    """
    level = level if level is not None else settings.LOG_LEVEL
    debug = settings.DEBUG if debug is None else debug
    to_file = settings.LOG_TO_FILE if to_file is None else to_file

    formatter = logging.Formatter(
        fmt=DEV_FORMAT if debug else PROD_FORMAT,
        datefmt=DATE_FORMAT,
    )

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.DEBUG if debug else logging.INFO)
    console.setFormatter(formatter)
    root.addHandler(console)

    if to_file:
        directory = Path(log_dir if log_dir is not None else settings.LOG_DIR)
        directory.mkdir(parents=True, exist_ok=True)
        root.addHandler(_rotating_handler(directory / "zipweather.log", logging.INFO, formatter))
        root.addHandler(_rotating_handler(directory / "zipweather_errors.log", logging.ERROR, formatter))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root.info(
        f"Logging initialized (level={logging.getLevelName(root.level)}, "
        f"debug={debug}, files={'on' if to_file else 'off'})"
    )
    return root


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass ``__name__``."""
    return logging.getLogger(name)
