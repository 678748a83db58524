"""User ORM: persists the single user resource.

Invariants:
    - id is an autoincrement integer primary key (assigned by the database)
    - name is non-nullable; emptiness is rejected before it reaches the ORM
    - ids are never reused, SQLite included (sqlite_autoincrement)
    - ids live in USER_ID_MIN..USER_ID_MAX (32-bit signed)
    - email is nullable and unique: multiple NULLs allowed, duplicates rejected
      by the database (surfaced as IntegrityError)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from user_api.db.base import Base

# INTEGER is int4 on PostgreSQL; no row can hold an id outside this range
USER_ID_MIN = -(2 ** 31)
USER_ID_MAX = 2 ** 31 - 1


class User(Base):
    """User entity."""
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(
        String(255), nullable=True, unique=True,
    )
