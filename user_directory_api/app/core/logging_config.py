"""
Logging configuration for the service and its scripts.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called.  Handlers are
named so later calls recognise them; repeated calls only adjust the
level of the package logger, so building several applications in one
process, as the tests do, never duplicates output.  Handlers installed
by other tools (pytest, uvicorn) are left in place.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "user_directory_api"
CONSOLE_HANDLER_NAME = f"{PACKAGE_LOGGER}.console"
FILE_HANDLER_NAME = f"{PACKAGE_LOGGER}.file"


def own_handlers(logger: logging.Logger) -> list:
    """Return the handlers on ``logger`` that ``setup_logging`` installed."""
    names = {CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME}
    return [h for h in logger.handlers if h.get_name() in names]


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the process.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives a copy of every record.  Relative
        paths are resolved against the current working directory.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    root = logging.getLogger()
    if own_handlers(root):
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    handlers = [console_handler]
    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        handlers.append(file_handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
