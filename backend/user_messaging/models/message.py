"""Message ORM — free-text message from one userid to another.

Invariants:
    - sender/receiver declare FKs to users.userid; the API never checks existence
    - SQLite only enforces the FKs when PRAGMA foreign_keys is on (see settings)

Design Decisions:
    - No relationship() to User: rows are always read flat, by receiver or unfiltered
"""

from sqlalchemy import Integer, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from user_messaging.db.base import Base


class Message(Base):
    """Message entity — created once, never updated or deleted."""
    __tablename__ = "messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    sender: Mapped[str] = mapped_column(
        Text, ForeignKey("users.userid"), nullable=False,
    )
    receiver: Mapped[str] = mapped_column(
        Text, ForeignKey("users.userid"), nullable=False,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
