# tests/test_commands.py

from __future__ import annotations

import pytest

from iforgor.cli.commands import Command, CommandKind, CommandParser, parse_index

from .fakes import FakeLineEditor


def _parser(editor: FakeLineEditor, messages: list[str] | None = None) -> CommandParser:
    sink = messages if messages is not None else []
    return CommandParser(editor, emit=sink.append)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("exit", Command(CommandKind.EXIT)),
        ("  exit  ", Command(CommandKind.EXIT)),
        ("list", Command(CommandKind.LIST)),
        ("ls", Command(CommandKind.LIST)),
        ("create", Command(CommandKind.CREATE)),
        ("add", Command(CommandKind.CREATE)),
        ("clear_history", Command(CommandKind.NOTHING)),
        ("done 3", Command(CommandKind.DONE, 3)),
        ("show 2", Command(CommandKind.DETAILS, 2)),
        ("details 7", Command(CommandKind.DETAILS, 7)),
        ("delete 1", Command(CommandKind.DELETE, 1)),
        ("remove 4", Command(CommandKind.DELETE, 4)),
        ("done 0", Command(CommandKind.DONE, 0)),
        ("done with it 5", Command(CommandKind.DONE, 5)),
        ("frobnicate", Command(CommandKind.UNKNOWN)),
        ("EXIT", Command(CommandKind.UNKNOWN)),
        ("list all", Command(CommandKind.UNKNOWN)),
        ("", Command(CommandKind.UNKNOWN)),
    ],
)
def test_parse_inline_forms(line: str, expected: Command) -> None:
    assert _parser(FakeLineEditor()).parse(line) == expected


def test_parse_prompts_for_missing_id() -> None:
    editor = FakeLineEditor([" 3 "])
    assert _parser(editor).parse("done") == Command(CommandKind.DONE, 3)
    assert editor.prompts == ["(id) "]


def test_parse_uses_injected_prompt() -> None:
    asked: list[str] = []

    def prompt(text: str) -> str:
        asked.append(text)
        return "2"

    parser = CommandParser(FakeLineEditor(), prompt=prompt, emit=lambda _: None)
    assert parser.parse("remove") == Command(CommandKind.DELETE, 2)
    assert asked == ["(id) "]


@pytest.mark.parametrize("line", ["done abc", "show -1", "delete 1.5", "done ٣"])
def test_unparseable_id_reports_and_yields_none(line: str) -> None:
    messages: list[str] = []
    command = _parser(FakeLineEditor(), messages).parse(line)
    assert command.index is None
    assert messages == ["Unable to parse the id"]


def test_earlier_prefix_rules_win() -> None:
    # "showdone" starts with "show", so it is a details command, not done.
    editor = FakeLineEditor(["1"])
    assert _parser(editor).parse("showdone") == Command(CommandKind.DETAILS, 1)


def test_history_records_everything_but_exit_and_clear() -> None:
    editor = FakeLineEditor()
    parser = _parser(editor)
    for line in ["ls", "done 1", "frobnicate", "exit", "", "add"]:
        parser.parse(line)
    assert editor.history == ["ls", "done 1", "frobnicate", "add"]


def test_clear_history_clears_and_persists() -> None:
    editor = FakeLineEditor()
    editor.history = ["ls", "add"]
    assert _parser(editor).parse("clear_history") == Command(CommandKind.NOTHING)
    assert editor.history == []
    assert editor.saved_histories == [[]]


@pytest.mark.parametrize(
    ("token", "expected"),
    [("3", 3), (" 12 ", 12), ("+4", 4), ("0", 0), ("", None), ("-1", None), ("1_000", None), ("x", None)],
)
def test_parse_index(token: str, expected: int | None) -> None:
    assert parse_index(token) == expected
