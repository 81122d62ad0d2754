# tests/test_logging_setup.py

from __future__ import annotations

import logging

import pytest

from iforgor.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "passes"),
    [
        ("iforgor", logging.DEBUG, True),
        ("iforgor.todo.store", logging.INFO, True),
        ("iforgorish", logging.WARNING, False),
        ("py.warnings", logging.WARNING, False),
        ("py.warnings", logging.ERROR, True),
        ("urllib3", logging.WARNING, False),
        ("urllib3", logging.CRITICAL, True),
    ],
)
def test_console_filter_keeps_app_logs_and_quiets_the_rest(name: str, level: int, passes: bool) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is passes
