"""Location of the SQLite database holding nodes and the created-node ledger."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

APP_DIR_NAME: Final[str] = "gqlsource"
DEFAULT_DB_FILENAME: Final[str] = "gqlsource.db"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    """One database for the ``nodes`` table and the ``CREATED_NODE_IDS`` entry.

    Both live together so a run commits them in a single transaction.
    ``data_dir`` is ``None`` when ``DATABASE_URI`` overrides the location.
    """

    uri: str
    data_dir: Path | None = None


def default_data_dir() -> Path:
    override = optional_env_var("GQLSOURCE_DATA_DIR")
    if override is not None:
        return Path(override).expanduser().resolve()
    xdg_home = optional_env_var("XDG_DATA_HOME")
    base = Path(xdg_home) if xdg_home else Path.home() / ".local" / "share"
    return (base / APP_DIR_NAME).expanduser().resolve()


def get_database_config() -> DatabaseConfig:
    env_uri = optional_env_var("DATABASE_URI")
    if env_uri is not None:
        return DatabaseConfig(uri=env_uri)

    data_dir = default_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return DatabaseConfig(
        uri=f"sqlite+pysqlite:///{data_dir / DEFAULT_DB_FILENAME}",
        data_dir=data_dir,
    )
