from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from student_registry_api.app.core.config import resolve_project_path
from student_registry_api.app.core.logging_config import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    setup_logging,
)


@contextmanager
def _bare_root_logger() -> Iterator[logging.Logger]:
    """Temporarily strip the root logger, including pytest's capture handlers."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def _names(root: logging.Logger) -> list:
    return [handler.get_name() for handler in root.handlers]


def test_setup_logging_adds_console_and_file_handlers(tmp_path: Path) -> None:
    logfile = tmp_path / "app.log"

    with _bare_root_logger() as root:
        setup_logging("debug", str(logfile))
        logging.getLogger("student_registry_api.test").info("hello")
        level, names = root.level, _names(root)
        for handler in root.handlers:
            handler.flush()

    assert level == logging.DEBUG
    assert names == [CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME]
    assert "[INFO] student_registry_api.test: hello" in logfile.read_text(encoding="utf-8")


def test_setup_logging_configures_once() -> None:
    with _bare_root_logger() as root:
        setup_logging("INFO")
        setup_logging("DEBUG")
        level, names = root.level, _names(root)

    assert names == [CONSOLE_HANDLER_NAME]
    assert level == logging.INFO


def test_foreign_handlers_do_not_block_setup() -> None:
    foreign = logging.NullHandler()

    with _bare_root_logger() as root:
        root.addHandler(foreign)
        setup_logging("WARNING")
        level, handlers = root.level, root.handlers[:]

    assert foreign in handlers
    assert CONSOLE_HANDLER_NAME in [handler.get_name() for handler in handlers]
    assert level == logging.WARNING


def test_unknown_level_falls_back_to_info() -> None:
    with _bare_root_logger() as root:
        setup_logging("chatty")
        level = root.level

    assert level == logging.INFO


def test_relative_log_path_resolves_against_package_root(tmp_path: Path) -> None:
    package_root = Path(resolve_project_path(".")).resolve()

    assert Path(resolve_project_path("logs/app.log")) == package_root / "logs" / "app.log"
    assert package_root.name == "student_registry_api"
    assert resolve_project_path(str(tmp_path / "app.log")) == str(tmp_path / "app.log")
