"""Store failures — every endpoint maps store errors to a fixed 500 body.

Invariants:
    - Body is exactly {"error": "Internal server error"}
    - Internal error text (table names, SQL) never reaches the client
"""

import pytest

from user_messaging.db.base import Base

GENERIC = {"error": "Internal server error"}


@pytest.fixture
async def broken_store(test_engine):
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("GET", "/users", None),
        ("POST", "/users", {"username": "alice"}),
        ("POST", "/messages", {"sender": "a", "receiver": "b", "message": "m"}),
        ("GET", "/messages/someone", None),
        ("GET", "/super/messages", None),
    ],
)
async def test_store_error_is_generic_500(client, broken_store, method, path, body):
    res = await client.request(method, path, json=body)

    assert res.status_code == 500
    assert res.json() == GENERIC
    assert "no such table" not in res.text
