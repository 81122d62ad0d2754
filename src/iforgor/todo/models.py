# src/iforgor/todo/models.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Prompt = Callable[[str], str]
Emit = Callable[[str], None]

DONE_MARK = "✔"
NOT_DONE_MARK = " "


@dataclass(slots=True)
class Todo:
    """
    A single todo item.

    There is no id field: a todo is referenced by its 1-based position
    in the session's list.
    """

    name: str
    description: str = ""
    done: bool = False

    @classmethod
    def create_interactive(cls, prompt: Prompt, emit: Emit = print) -> Todo:
        """Ask for a name (until non-empty) and a description (may be empty)."""
        while True:
            name = prompt("(name) ").strip()
            if name:
                break
            emit("Name cannot be empty!")

        description = prompt("(description) ").strip()
        return cls(name=name, description=description, done=False)

    def toggle_done(self) -> None:
        self.done = not self.done

    def render(self) -> str:
        mark = DONE_MARK if self.done else NOT_DONE_MARK
        return f"[{mark}] {self.name}"

    def render_details(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Description: {self.description or '(none)'}\n"
            f"Done: {'yes' if self.done else 'no'}"
        )

    # ---- JSON records ----

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description, "done": self.done}

    @classmethod
    def from_dict(cls, raw: Any) -> Todo:
        if not isinstance(raw, dict):
            raise ValueError(f"todo record must be an object, got {type(raw).__name__}")

        name = raw.get("name")
        description = raw.get("description")
        done = raw.get("done")
        if not isinstance(name, str):
            raise ValueError("todo record field 'name' must be a string")
        if not isinstance(description, str):
            raise ValueError("todo record field 'description' must be a string")
        if not isinstance(done, bool):
            raise ValueError("todo record field 'done' must be a boolean")

        return cls(name=name, description=description, done=done)
