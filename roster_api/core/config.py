"""
Configuration helpers for the Roster API.

Routers/services never read os.environ directly; they go through get_settings().
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: Path
    teams_file: Path
    players_file: Path
    storage_backend: str
    database_url: str
    log_level: str
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _path(value: str | None, default: Path) -> Path:
        if not value or not value.strip():
            return default
        return Path(value.strip()).expanduser()

    def _list(value: str | None) -> tuple[str, ...]:
        if not value:
            return ()
        return tuple(item.strip().rstrip("/") for item in value.split(",") if item.strip())

    data_dir = _path(os.getenv("DATA_DIR"), ROOT / "data")
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_dir=data_dir,
        teams_file=_path(os.getenv("TEAMS_FILE"), data_dir / "teams.json"),
        players_file=_path(os.getenv("PLAYERS_FILE"), data_dir / "players.json"),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "json").strip().lower(),
        database_url=os.getenv("DATABASE_URL", ""),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
    )
