"""Settings loaded from environment variables.

Every setting has a default, so the CLI works with no configuration at
all. Command-line options take precedence over these values.

Variables
---------
TODO_FILE
    Path of the snapshot file. Defaults to ``tasks.json`` in the working
    directory. A ``.yaml``/``.yml`` suffix stores the snapshot as YAML.
TODO_OWNER
    Owner name used when a new list is created. Defaults to the login
    name of the invoking user.
TODO_LOG_LEVEL
    Level name for stderr logging (``DEBUG``, ``INFO``...). Defaults to
    ``WARNING``.
"""
from __future__ import annotations

import getpass
import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODO"

DEFAULT_STORE_FILE = "tasks.json"
DEFAULT_OWNER = "user"
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def current_user() -> str:
    """Return the login name of the invoking user, or a placeholder."""
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return DEFAULT_OWNER


@dataclass(frozen=True, slots=True)
class Settings:
    store_path: Path
    owner_name: str
    log_level: str


def get_settings() -> Settings:
    """Build ``Settings`` from the current environment."""
    return Settings(
        store_path=_env_path(_k("FILE"), Path(DEFAULT_STORE_FILE)),
        owner_name=_env(_k("OWNER"), "") or current_user(),
        log_level=_env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).upper(),
    )
