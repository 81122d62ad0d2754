# src/iforgor/core/session.py

"""
Interactive session: owns the todo list and drives the REPL.

Lifecycle:
- Running: read line -> parse -> dispatch, repeated
- Terminated: reached by `exit`, EOF (Ctrl+D) or KeyboardInterrupt (Ctrl+C)

All three ways out go through shutdown(), which saves todos and history once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..cli.commands import Command, CommandKind, CommandParser
from ..todo.models import Todo
from ..todo.store import TodoStore
from .ports import LineEditor

Emit = Callable[[str], None]

PROMPT = "iforgor 💀> "
NOT_FOUND_MESSAGE = "Such todo doesn't exist"

logger = logging.getLogger(__name__)


class Session:
    def __init__(
        self,
        *,
        store: TodoStore,
        editor: LineEditor,
        todos: Iterable[Todo] = (),
        parser: CommandParser | None = None,
        emit: Emit = print,
    ) -> None:
        self.todos: list[Todo] = list(todos)
        self._store = store
        self._editor = editor
        self._emit = emit
        self._parser = parser if parser is not None else CommandParser(editor, emit=emit)
        self._running = True
        self._saved = False

        self._handlers: dict[CommandKind, Callable[[Command], None]] = {
            CommandKind.EXIT: self._cmd_exit,
            CommandKind.NOTHING: self._cmd_nothing,
            CommandKind.LIST: self._cmd_list,
            CommandKind.CREATE: self._cmd_create,
            CommandKind.UNKNOWN: self._cmd_unknown,
            CommandKind.DONE: self._cmd_done,
            CommandKind.DELETE: self._cmd_delete,
            CommandKind.DETAILS: self._cmd_details,
        }

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        logger.info("Session started with %d todos.", len(self.todos))

        while self._running:
            try:
                line = self._editor.read_line(PROMPT)
                self.dispatch(self._parser.parse(line))
            except EOFError:
                logger.info("EOF received, exiting.")
                self._emit("")
                self._running = False
            except KeyboardInterrupt:
                logger.info("KeyboardInterrupt received, exiting.")
                self._emit("")
                self._running = False

        self.shutdown()
        logger.info("Session finished.")

    def dispatch(self, command: Command) -> None:
        logger.debug("Dispatching %s (index=%s)", command.kind, command.index)
        self._handlers[command.kind](command)

    def shutdown(self) -> None:
        """Persist todos, then history. Safe to call more than once; saves only the first time."""
        self._running = False
        if self._saved:
            return
        self._saved = True
        self._store.save(self.todos)
        self._editor.save_history()

    # ---- index translation ----

    def _resolve(self, index: int | None) -> int | None:
        """Map a 1-based user index to a list position; None (with a message) if there is none."""
        if index is None or index == 0 or index - 1 >= len(self.todos):
            self._emit(NOT_FOUND_MESSAGE)
            return None
        return index - 1

    # ---- command handlers ----

    def _cmd_exit(self, command: Command) -> None:
        logger.info("Exit command received.")
        self._running = False

    def _cmd_nothing(self, command: Command) -> None:
        return

    def _cmd_list(self, command: Command) -> None:
        for i, todo in enumerate(self.todos, start=1):
            self._emit(f"{i}. {todo.render()}")

    def _cmd_create(self, command: Command) -> None:
        todo = Todo.create_interactive(self._editor.read_line, emit=self._emit)
        self.todos.append(todo)
        logger.debug("Created todo %r (total=%d)", todo.name, len(self.todos))

    def _cmd_unknown(self, command: Command) -> None:
        self._emit("Unknown")

    def _cmd_done(self, command: Command) -> None:
        pos = self._resolve(command.index)
        if pos is None:
            return
        self.todos[pos].toggle_done()

    def _cmd_delete(self, command: Command) -> None:
        pos = self._resolve(command.index)
        if pos is None:
            return
        removed = self.todos.pop(pos)
        logger.debug("Deleted todo %r (total=%d)", removed.name, len(self.todos))

    def _cmd_details(self, command: Command) -> None:
        pos = self._resolve(command.index)
        if pos is None:
            return
        self._emit(self.todos[pos].render_details())
