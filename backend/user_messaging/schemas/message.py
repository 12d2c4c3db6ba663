"""Message Schemas — request and response shapes for /messages.

Invariants:
    - MessageCreate fields are optional and unchecked: empty strings, unknown
      userids and unbounded text all pass through to the store
    - MessageRead mirrors the full messages row
"""

from pydantic import BaseModel, ConfigDict

from user_messaging.schemas.body import BoundText, PermissiveBody

MESSAGE_SENT = "Message sent successfully"


class MessageCreate(PermissiveBody):
    """POST /messages body."""
    sender: BoundText = None
    receiver: BoundText = None
    message: BoundText = None


class MessageSent(BaseModel):
    """POST /messages response."""
    message: str = MESSAGE_SENT
    id: int


class MessageRead(BaseModel):
    """Full message row as returned by the listing endpoints."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    sender: str
    receiver: str
    message: str
