"""User Schemas — request and response shapes for /users.

Invariants:
    - UserCreate.username is optional: a missing value reaches the store as NULL
      and is rejected there (NOT NULL), not here
    - Numeric and boolean usernames are stored as text
"""

from pydantic import BaseModel

from user_messaging.schemas.body import BoundText, PermissiveBody


class UserCreate(PermissiveBody):
    """POST /users body."""
    username: BoundText = None


class UserCreated(BaseModel):
    """POST /users response — only the generated userid."""
    userid: str


class UserSummary(BaseModel):
    """GET /users item — internal id is never exposed."""
    userid: str
    username: str
