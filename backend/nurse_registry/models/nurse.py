"""Nurse ORM — one row per nurse in the `nurses` table.

Invariants:
    - id is an INTEGER AUTOINCREMENT primary key (never reused after delete)
    - license_number is UNIQUE — violations surface as IntegrityError, mapped by the store
    - dob is the ISO 8601 date string as submitted; age is stored independently
    - created_at set once; updated_at refreshed by the store on every update

Design Decisions:
    - dob as String(10), not Date: the API round-trips the exact submitted text
    - sqlite_autoincrement: SQLite otherwise may reuse the highest deleted rowid
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from nurse_registry.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Nurse(Base):
    """Nurse personnel record."""
    __tablename__ = "nurses"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    license_number: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True,
    )
    dob: Mapped[str] = mapped_column(String(10), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
