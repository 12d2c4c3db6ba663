"""User Routes — list and register users.

Invariants:
    - POST /users answers 200 (not 201) with only {userid}
    - A missing body is treated as {} and reaches the store
    - GET /users never exposes the internal row id
"""

import logging

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_messaging.infrastructure.database import get_db
from user_messaging.schemas.user import UserCreate, UserCreated, UserSummary
from user_messaging.services import messaging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=list[UserSummary],
    summary="Get a list of all users",
    description="Retrieve a list of all users with their userids and usernames.",
    responses={500: {"description": "Internal server error."}},
)
async def list_users(db: AsyncSession = Depends(get_db)):
    return await messaging.list_users(db)


@router.post(
    "",
    response_model=UserCreated,
    summary="Create a new user",
    description=(
        "Create a new user with a provided username. A random userid will "
        "be generated and returned in the response."
    ),
    responses={500: {"description": "Internal server error."}},
)
async def create_user(
    body: UserCreate | None = Body(default=None),
    db: AsyncSession = Depends(get_db),
):
    if body is None:
        body = UserCreate()
    userid = await messaging.create_user(db, body.username)
    return UserCreated(userid=userid)
