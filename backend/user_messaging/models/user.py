"""User ORM — a registered participant, addressed by its generated userid.

Invariants:
    - id is the internal autoincrement key, never exposed over HTTP
    - userid is unique and non-null; generated server-side (core.domain_types)
    - username is non-null but NOT unique
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from user_messaging.db.base import Base


class User(Base):
    """User entity — created once, never updated or deleted."""
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    userid: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    username: Mapped[str] = mapped_column(Text, nullable=False)
