"""
Persistence adapters.

Both backends expose the same collection operations, all addressed by the
numeric record id:

- ``read()``: the whole collection, in stored order
- ``get(id)``: one record or None
- ``insert(values)``: assign ``1 + max(id)``, store, return the new record
- ``update(id, prepare)``: call ``prepare(current)`` for the changes to merge,
  store, return the merged record (None when the id is absent; prepare is then
  never called)
- ``delete(id)``: True when a record was removed

Writes are serialized per collection, so concurrent requests cannot lose each
other's updates.
"""
from __future__ import annotations

from roster_api.core.config import Settings

COLLECTIONS = ("teams", "players")


def open_collection(name: str, settings: Settings):
    """Build the collection adapter selected by STORAGE_BACKEND."""
    if name not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {name}")
    backend = settings.storage_backend
    if backend == "json":
        from roster_api.repositories.json_storage import JsonCollection

        path = settings.teams_file if name == "teams" else settings.players_file
        return JsonCollection(path, name=name)
    if backend == "sql":
        from roster_api.repositories.sql_repository import SqlCollection

        return SqlCollection(name)
    raise ValueError(f"Unsupported STORAGE_BACKEND: {backend!r} (expected 'json' or 'sql')")
