"""SQL backend: one row per record, keyed by (collection, record_id)."""

from .session import Base, get_engine, reset_engine, session_scope

__all__ = ["Base", "get_engine", "reset_engine", "session_scope"]
