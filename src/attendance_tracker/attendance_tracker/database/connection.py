from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

MEMORY_PATH = ":memory:"


@dataclass(frozen=True)
class DBConfig:
    path: str


class DatabaseConnection:
    """Engine factory for the local SQLite file, one instance per path.

    Note: the engine is created lazily so building the container never touches disk.
    """

    _instances: ClassVar[dict[str, "DatabaseConnection"]] = {}

    def __init__(self, config: DBConfig):
        self._config = config
        self._engine: Optional[Engine] = None

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if config.path not in cls._instances:
            cls._instances[config.path] = DatabaseConnection(config)
        return cls._instances[config.path]

    @property
    def config(self) -> DBConfig:
        return self._config

    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        if self._config.path == MEMORY_PATH:
            # One shared connection, otherwise every checkout sees a fresh empty database.
            return create_engine(
                "sqlite://",
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )

        db_file = Path(self._config.path).expanduser()
        db_file.parent.mkdir(parents=True, exist_ok=True)
        return create_engine(f"sqlite:///{db_file}")

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
