"""One-off migration script: JSON collection files -> SQL backend."""
from __future__ import annotations

import sys
from pathlib import Path

# make the package importable when run from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster_api.core.config import get_settings  # noqa: E402
from roster_api.db.schema import ensure_schema  # noqa: E402
from roster_api.repositories import json_storage  # noqa: E402
from roster_api.repositories.sql_repository import SqlCollection  # noqa: E402


def migrate() -> dict[str, int]:
    """Copy both collections, replacing whatever the SQL side held."""
    settings = get_settings()
    ensure_schema()
    sources = {"teams": settings.teams_file, "players": settings.players_file}
    return {name: SqlCollection(name).replace_all(json_storage.load(path)) for name, path in sources.items()}


if __name__ == "__main__":
    counts = migrate()
    print(f"JSON data migrated ({counts['teams']} teams, {counts['players']} players).")
