"""
Logging configuration for the Student Registry API.

``setup_logging`` attaches a console handler and, when ``LOG_FILE`` is
set, a file handler to the root logger.  Relative log file paths are
resolved against the package root, like ``DATABASE_URL``.  The handlers
are named so that repeated calls (one per ``create_app``) recognise
them and do not stack duplicates, while handlers installed by someone
else (uvicorn, pytest) do not prevent ours from being added.
"""

import logging
from typing import Optional

from .config import resolve_project_path


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "student_registry.console"
FILE_HANDLER_NAME = "student_registry.file"


def _installed(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the application.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.  Only applied the first time handlers are added.
    logfile : Optional[str]
        Log file path; relative paths are resolved against the package
        root.  Omit to log to the console only.
    """
    root = logging.getLogger()
    if _installed(root, CONSOLE_HANDLER_NAME):
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(resolve_project_path(logfile), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
