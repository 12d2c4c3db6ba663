"""Permissive Request Bodies — bind whatever JSON arrives, let the store decide.

Invariants:
    - A body that is not a JSON object validates as an empty model (all fields None)
    - JSON scalars become text the way SQLite stores them in a TEXT column
      (numbers as their literal, booleans as "1"/"0")
    - Arrays and objects in a field cannot be bound and become None, so the
      NOT NULL constraint rejects them as a store error
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, model_validator


def bind_as_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return None


BoundText = Annotated[str | None, BeforeValidator(bind_as_text)]


class PermissiveBody(BaseModel):
    """Base for request bodies: never rejects a parsed JSON document."""

    @model_validator(mode="before")
    @classmethod
    def non_object_as_empty(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {}
        return data
