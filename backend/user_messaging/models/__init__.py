"""ORM Models — SQLAlchemy declarative models for users and messages.

Design Decisions:
    - All models imported here so Base.metadata holds both tables before create_all
"""

from user_messaging.models.user import User  # noqa: F401
from user_messaging.models.message import Message  # noqa: F401
