# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from iforgor.config import Settings
from iforgor.core.session import Session
from iforgor.todo.store import TodoStore

from .fakes import FakeLineEditor


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a per-test config dir (not created yet)."""
    return Settings.for_config_dir(tmp_path / "config" / "iforgor")


@pytest.fixture()
def store(settings: Settings) -> TodoStore:
    return TodoStore(settings.todos_path)


@pytest.fixture()
def editor() -> FakeLineEditor:
    return FakeLineEditor()


@pytest.fixture()
def session(store: TodoStore, editor: FakeLineEditor) -> Session:
    """Session over an empty list; feed input via editor.script before run()."""
    return Session(store=store, editor=editor, todos=store.load())
