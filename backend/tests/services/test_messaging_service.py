"""Messaging service — store operations against an injected session."""

import pytest

from user_messaging.core.errors import DatabaseError
from user_messaging.services import messaging


async def test_create_and_list_users(test_db):
    userid = await messaging.create_user(test_db, "carol")

    users = await messaging.list_users(test_db)

    assert users == [{"userid": userid, "username": "carol"}]


async def test_send_returns_row_id(test_db):
    first = await messaging.send_message(test_db, "a", "b", "one")
    second = await messaging.send_message(test_db, "a", "b", "two")

    assert (first, second) == (1, 2)


async def test_list_messages_for_filters_on_receiver(test_db):
    await messaging.send_message(test_db, "a", "b", "for b")
    await messaging.send_message(test_db, "b", "a", "for a")

    rows = await messaging.list_messages_for(test_db, "b")

    assert [(r.sender, r.receiver, r.message) for r in rows] == [("a", "b", "for b")]


async def test_list_all_messages_is_unfiltered(test_db):
    await messaging.send_message(test_db, "a", "b", "1")
    await messaging.send_message(test_db, "c", "d", "2")

    rows = await messaging.list_all_messages(test_db)

    assert [r.message for r in rows] == ["1", "2"]


async def test_null_username_raises_database_error(test_db):
    with pytest.raises(DatabaseError) as exc_info:
        await messaging.create_user(test_db, None)

    assert exc_info.value.operation == "create_user"
    assert exc_info.value.http_status == 500


async def test_session_usable_after_failure(test_db):
    with pytest.raises(DatabaseError):
        await messaging.send_message(test_db, None, "b", "m")

    assert await messaging.send_message(test_db, "a", "b", "m") == 1
