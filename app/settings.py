# app/settings.py
"""Runtime configuration read from the environment (and an optional .env file)."""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import os

from dotenv import load_dotenv

STORAGE_BACKENDS = ("memory", "sql")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    low = raw.strip().lower()
    if low in _TRUE:
        return True
    if low in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {raw!r}")


def _parse_positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name}: expected an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name}: must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    storage_backend: str = "memory"
    database_url: str = "sqlite:///data/research_match.db"
    top_n: int = 5
    seed_researchers: bool = True
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Settings":
        env_path = env_file or Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)

        backend = os.getenv("STORAGE_BACKEND", cls.storage_backend).strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(f"STORAGE_BACKEND: expected one of {STORAGE_BACKENDS}, got {backend!r}")

        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            storage_backend=backend,
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            top_n=_parse_positive_int("MATCH_TOP_N", os.getenv("MATCH_TOP_N", str(cls.top_n))),
            seed_researchers=_parse_bool("SEED_RESEARCHERS", os.getenv("SEED_RESEARCHERS", "true")),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).strip().upper(),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )
