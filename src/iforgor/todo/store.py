# src/iforgor/todo/store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .models import Todo

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    pass


class TodoStore:
    """
    JSON file todo store.

    The whole list lives in one document (a JSON array of records).
    The store keeps no reference to the list between calls:
    - load() builds fresh Todo objects
    - save() only reads the sequence it is given

    Any I/O or format problem raises StoreError; there is no partial recovery.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Todo]:
        config_dir = self._path.parent
        if not config_dir.exists():
            try:
                config_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StoreError(f"Unable to set up config path {config_dir}: {e}") from e
            logger.info("Created config dir %s", config_dir)

        if not self._path.exists():
            try:
                self._path.write_text("[]", "utf-8")
            except OSError as e:
                raise StoreError(f"Unable to create the todos file {self._path}: {e}") from e
            logger.info("Created empty todos file %s", self._path)
            return []

        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Error reading todos data from {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreError(f"Malformed todos file {self._path}: {e}") from e

        if not isinstance(data, list):
            raise StoreError(f"Malformed todos file {self._path}: expected a JSON array")

        todos: list[Todo] = []
        for i, record in enumerate(data):
            try:
                todos.append(Todo.from_dict(record))
            except ValueError as e:
                raise StoreError(f"Malformed todo #{i + 1} in {self._path}: {e}") from e

        logger.info("Loaded %d todos from %s", len(todos), self._path)
        return todos

    def save(self, todos: Sequence[Todo]) -> None:
        payload = json.dumps([t.to_dict() for t in todos], ensure_ascii=False, indent=2)
        tmp = self._path.with_suffix(".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StoreError(f"Error when writing todos to {self._path}: {e}") from e
        logger.info("Saved %d todos to %s", len(todos), self._path)
