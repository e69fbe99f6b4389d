"""SQLAlchemy model for records of every collection."""
from __future__ import annotations

from sqlalchemy import BigInteger, Column, JSON, String

from .session import Base


class RosterRecord(Base):
    """A team or player; ``data`` holds the full record, id included."""

    __tablename__ = "roster_records"

    collection = Column(String(32), primary_key=True)
    record_id = Column(BigInteger, primary_key=True, autoincrement=False)
    data = Column(JSON, nullable=False)
