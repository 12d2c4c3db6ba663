"""Domain Types — identifier wrappers and userid generation.

Invariants:
    - UserId is an opaque string (UUID-v4 text), never supplied by clients
    - MessageId is the store's autoincrement row id
    - generate_userid() ignores all input and never checks for collisions
"""

import uuid
from typing import NewType

UserId = NewType("UserId", str)
MessageId = NewType("MessageId", int)


def generate_userid() -> UserId:
    """Return a fresh random UUID-v4 string."""
    return UserId(str(uuid.uuid4()))
