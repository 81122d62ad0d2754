# src/iforgor/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injectable, defaults to get_settings()),
- wires the readline editor and the JSON store,
- loads history and todos into a fresh Session.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..connectors.line_editor import ReadlineEditor
from ..core.ports import LineEditor
from ..core.session import Session
from ..todo.store import TodoStore

logger = logging.getLogger(__name__)


def create_session(
    *,
    settings: Settings | None = None,
    editor: LineEditor | None = None,
) -> Session:
    """
    Build a Session from the provided settings.

    Store errors (unreadable dir, malformed JSON, ...) propagate to the caller.
    """
    if settings is None:
        settings = get_settings()

    store = TodoStore(settings.todos_path)
    todos = store.load()

    if editor is None:
        editor = ReadlineEditor(settings.history_path)
    editor.load_history()

    logger.debug("Session wired: todos=%s history=%s", settings.todos_path, settings.history_path)
    return Session(store=store, editor=editor, todos=todos)
