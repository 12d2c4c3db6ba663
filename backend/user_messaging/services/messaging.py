"""Messaging Service — the five store operations of the API.

Invariants:
    - userid is generated here, never taken from the request
    - No existence check on sender/receiver; no emptiness or length checks
    - Listings are unpaginated and ordered by row id (insertion order)
    - list_all_messages() performs no authorization check

Design Decisions:
    - Plain async functions over a class: each operation is stateless and independent
    - Session injected per call so tests can substitute an in-memory store
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from user_messaging.core.domain_types import MessageId, UserId, generate_userid
from user_messaging.infrastructure.database import translate_db_errors
from user_messaging.models.message import Message
from user_messaging.models.user import User

logger = logging.getLogger(__name__)


async def list_users(db: AsyncSession) -> list[dict]:
    """Return every user as {userid, username}."""
    async with translate_db_errors(db, "list_users"):
        result = await db.execute(
            select(User.userid, User.username).order_by(User.id),
        )
        return [
            {"userid": row.userid, "username": row.username}
            for row in result
        ]


async def create_user(db: AsyncSession, username: str | None) -> UserId:
    """Insert a user under a freshly generated userid and return it."""
    userid = generate_userid()
    async with translate_db_errors(db, "create_user"):
        db.add(User(userid=userid, username=username))
        await db.commit()
    logger.info("User created", extra={"userid": userid})
    return userid


async def send_message(
    db: AsyncSession,
    sender: str | None,
    receiver: str | None,
    message: str | None,
) -> MessageId:
    """Insert a message row and return its id."""
    row = Message(sender=sender, receiver=receiver, message=message)
    async with translate_db_errors(db, "send_message"):
        db.add(row)
        await db.commit()
    logger.info("Message stored", extra={"message_id": row.id})
    return MessageId(row.id)


async def list_messages_for(db: AsyncSession, userid: str) -> list[Message]:
    """Messages whose receiver equals userid exactly."""
    async with translate_db_errors(db, "list_messages_for"):
        result = await db.execute(
            select(Message)
            .where(Message.receiver == userid)
            .order_by(Message.id),
        )
        return list(result.scalars().all())


async def list_all_messages(db: AsyncSession) -> list[Message]:
    """Every message ever stored, unfiltered."""
    async with translate_db_errors(db, "list_all_messages"):
        result = await db.execute(select(Message).order_by(Message.id))
        return list(result.scalars().all())
