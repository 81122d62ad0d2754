# src/iforgor/config.py

"""Centralized settings resolved from the environment.

Only two variables are consulted:
- XDG_CONFIG_HOME (preferred base directory),
- HOME (fallback: ~/.config).

Everything the app writes lives under <config_dir>.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

APP_NAME = "iforgor"

TODOS_FILE_NAME = "todos.json"
HISTORY_FILE_NAME = "history"
LOG_FILE_NAME = "iforgor.log"


class ConfigError(RuntimeError):
    pass


def _non_blank(env: Mapping[str, str], name: str) -> str | None:
    v = env.get(name)
    if v is None or v.strip() == "":
        return None
    return v


def resolve_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return $XDG_CONFIG_HOME/iforgor, else $HOME/.config/iforgor."""
    if env is None:
        env = os.environ

    xdg = _non_blank(env, "XDG_CONFIG_HOME")
    if xdg is not None:
        return Path(xdg).expanduser() / APP_NAME

    home = _non_blank(env, "HOME")
    if home is None:
        raise ConfigError("Neither XDG_CONFIG_HOME nor HOME is set; cannot locate config dir")
    return Path(home).expanduser() / ".config" / APP_NAME


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths ----
    config_dir: Path
    todos_path: Path
    history_path: Path
    log_path: Path

    @staticmethod
    def for_config_dir(config_dir: Path, *, log_level: str = "WARNING") -> "Settings":
        return Settings(
            app_name=APP_NAME,
            log_level=log_level,
            config_dir=config_dir,
            todos_path=config_dir / TODOS_FILE_NAME,
            history_path=config_dir / HISTORY_FILE_NAME,
            log_path=config_dir / LOG_FILE_NAME,
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> "Settings":
        return Settings.for_config_dir(resolve_config_dir(env))


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
