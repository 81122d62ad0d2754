# src/iforgor/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The session and the parser depend on Protocols instead of the readline adapter.
This keeps the terminal swappable and makes testing easier.
"""

from typing import Protocol


class LineEditor(Protocol):
    """
    Line input with a history side-channel.

    read_line() lets EOFError / KeyboardInterrupt propagate to the caller.
    """

    def read_line(self, prompt: str) -> str: ...
    def add_history(self, line: str) -> None: ...
    def clear_history(self) -> None: ...
    def load_history(self) -> None: ...
    def save_history(self) -> None: ...
