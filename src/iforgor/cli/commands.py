# src/iforgor/cli/commands.py

"""
Free-text command grammar.

A line is matched against COMMAND_RULES top to bottom; the first rule wins.
Exact rules compare the whole trimmed line, prefix rules use str.startswith,
so "done" is only reached when no earlier prefix ("show", "details",
"delete", "remove") matched.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..core.ports import LineEditor

Prompt = Callable[[str], str]
Emit = Callable[[str], None]

ID_PROMPT = "(id) "

_ID_PATTERN = re.compile(r"\+?[0-9]+")

logger = logging.getLogger(__name__)


class CommandKind(StrEnum):
    EXIT = "exit"
    NOTHING = "nothing"
    LIST = "list"
    CREATE = "create"
    UNKNOWN = "unknown"
    DONE = "done"
    DELETE = "delete"
    DETAILS = "details"


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    # 1-based position for DONE/DELETE/DETAILS; None when the id could not be parsed.
    index: int | None = None


@dataclass(frozen=True, slots=True)
class CommandRule:
    kind: CommandKind
    words: tuple[str, ...]
    prefix: bool = False
    takes_id: bool = False
    record_history: bool = True
    clears_history: bool = False

    def matches(self, line: str) -> bool:
        if self.prefix:
            return any(line.startswith(w) for w in self.words)
        return line in self.words


COMMAND_RULES: tuple[CommandRule, ...] = (
    CommandRule(CommandKind.EXIT, ("exit",), record_history=False),
    CommandRule(CommandKind.LIST, ("list", "ls")),
    CommandRule(
        CommandKind.NOTHING,
        ("clear_history",),
        record_history=False,
        clears_history=True,
    ),
    CommandRule(CommandKind.CREATE, ("create", "add")),
    CommandRule(CommandKind.DETAILS, ("show", "details"), prefix=True, takes_id=True),
    CommandRule(CommandKind.DELETE, ("delete", "remove"), prefix=True, takes_id=True),
    CommandRule(CommandKind.DONE, ("done",), prefix=True, takes_id=True),
)


def parse_index(token: str) -> int | None:
    """Parse a non-negative base-10 integer; None if the token is not one."""
    token = token.strip()
    if not _ID_PATTERN.fullmatch(token):
        return None
    return int(token)


class CommandParser:
    """
    Classifies one raw input line into a Command.

    The parser owns two side effects:
    - recording lines into the editor's history (everything but exit / clear_history)
    - asking for a missing id through the prompt capability
    """

    def __init__(
        self,
        editor: LineEditor,
        *,
        prompt: Prompt | None = None,
        emit: Emit = print,
        rules: tuple[CommandRule, ...] = COMMAND_RULES,
    ) -> None:
        self._editor = editor
        self._prompt = prompt if prompt is not None else editor.read_line
        self._emit = emit
        self._rules = rules

    def parse(self, raw_line: str) -> Command:
        line = raw_line.strip()
        rule = self._match(line)

        if rule is None:
            if line:
                self._editor.add_history(line)
            return Command(CommandKind.UNKNOWN)

        if rule.record_history:
            self._editor.add_history(line)

        if rule.clears_history:
            self._editor.clear_history()
            self._editor.save_history()

        if not rule.takes_id:
            return Command(rule.kind)

        return Command(rule.kind, self._read_index(line))

    def _match(self, line: str) -> CommandRule | None:
        for rule in self._rules:
            if rule.matches(line):
                return rule
        return None

    def _read_index(self, line: str) -> int | None:
        arguments = line.split(" ")
        if len(arguments) == 1:
            token = self._prompt(ID_PROMPT)
        else:
            token = arguments[-1]

        index = parse_index(token)
        if index is None:
            logger.debug("Unparseable id %r in %r", token, line)
            self._emit("Unable to parse the id")
        return index
