# src/iforgor/connectors/line_editor.py

from __future__ import annotations

import logging
from pathlib import Path

# readline is missing on some platforms (e.g. Windows); input() still works there.
try:
    import readline
    HAS_READLINE = True
except ImportError:
    HAS_READLINE = False

logger = logging.getLogger(__name__)


class ReadlineEditor:
    """
    LineEditor backed by GNU readline / libedit.

    Automatic history is disabled: the command parser decides which lines
    are recorded, so sub-prompt answers (name, description, id) stay out.
    """

    def __init__(self, history_path: str | Path) -> None:
        self._history_path = Path(history_path)
        if HAS_READLINE:
            readline.set_auto_history(False)

    def read_line(self, prompt: str) -> str:
        return input(prompt)

    def add_history(self, line: str) -> None:
        if HAS_READLINE and line.strip():
            readline.add_history(line)

    def clear_history(self) -> None:
        if HAS_READLINE:
            readline.clear_history()
        logger.debug("History cleared.")

    def load_history(self) -> None:
        """Read the history file, creating an empty one if it is missing."""
        if not HAS_READLINE:
            return
        if self._history_path.exists():
            readline.read_history_file(str(self._history_path))
            logger.debug(
                "Loaded %d history entries from %s",
                readline.get_current_history_length(),
                self._history_path,
            )
            return
        self.save_history()

    def save_history(self) -> None:
        if not HAS_READLINE:
            return
        self._history_path.parent.mkdir(parents=True, exist_ok=True)
        readline.write_history_file(str(self._history_path))
        logger.debug("Saved history to %s", self._history_path)
