"""
Create (or recreate) the SQL schema.

Usage:
  python -m roster_api.db.schema [--reset]
"""
from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers tables on Base.metadata

logger = logging.getLogger(__name__)


def ensure_schema(reset: bool = False) -> None:
    engine = get_engine()
    if reset:
        logger.warning("Dropping roster tables on %s", engine.url.render_as_string(hide_password=True))
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Create the roster SQL schema")
    ap.add_argument("--reset", action="store_true", help="drop existing tables first")
    args = ap.parse_args(argv)
    try:
        ensure_schema(reset=args.reset)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print("Schema ready.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
