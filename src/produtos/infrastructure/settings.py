"""Runtime configuration, read from the environment and a local .env file.

Every setting can be overridden with a ``PRODUTOS_``-prefixed variable,
e.g. ``PRODUTOS_BACKEND=sql`` or ``PRODUTOS_DATABASE_URL=postgresql+psycopg://...``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    backend: Literal["memory", "json", "sql"] = Field(default="json")
    data_dir: Path = Field(default=_DATA_DIR)
    database_url: Optional[str] = None
    echo_sql: bool = Field(default=False)
    log_level: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_prefix="PRODUTOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.data_dir / 'produtos.db'}"


def load_settings(**overrides) -> Settings:
    return Settings(**overrides)
