"""Message Routes — send, per-receiver listing, and the administrative listing.

Invariants:
    - POST /messages answers 200 {message, id}; sender/receiver never checked
    - GET /messages/{userid} returns [] for a receiver with no messages
    - GET /super/messages is unauthenticated (no super-user check exists yet)
"""

import logging

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_messaging.infrastructure.database import get_db
from user_messaging.schemas.message import MessageCreate, MessageRead, MessageSent
from user_messaging.services import messaging

logger = logging.getLogger(__name__)
router = APIRouter(tags=["messages"])


@router.post(
    "/messages",
    response_model=MessageSent,
    summary="Send a message to a user",
    description="Send a message to a specific user identified by their userid.",
    responses={500: {"description": "Internal server error."}},
)
async def send_message(
    body: MessageCreate | None = Body(default=None),
    db: AsyncSession = Depends(get_db),
):
    if body is None:
        body = MessageCreate()
    message_id = await messaging.send_message(
        db, body.sender, body.receiver, body.message,
    )
    return MessageSent(id=message_id)


@router.get(
    "/messages/{userid}",
    response_model=list[MessageRead],
    summary="Retrieve messages for a user",
    description=(
        "Get all messages sent to a specific user identified by their userid."
    ),
    responses={500: {"description": "Internal server error."}},
)
async def list_messages(userid: str, db: AsyncSession = Depends(get_db)):
    return await messaging.list_messages_for(db, userid)


@router.get(
    "/super/messages",
    response_model=list[MessageRead],
    summary="View all messages",
    description=(
        "Super user view of every message. No authentication or "
        "authorization is performed on this endpoint."
    ),
    responses={500: {"description": "Internal server error."}},
)
async def list_all_messages(db: AsyncSession = Depends(get_db)):
    # TODO: gate behind super-user authentication once user credentials exist
    return await messaging.list_all_messages(db)
