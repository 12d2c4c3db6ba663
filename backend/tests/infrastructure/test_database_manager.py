"""Database session manager — engine setup, idempotent schema, health check."""

from sqlalchemy import inspect
from sqlalchemy.pool import AsyncAdaptedQueuePool

from user_messaging.infrastructure.database import DatabaseSessionManager
from user_messaging.services import messaging


async def test_create_all_is_idempotent():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    await manager.create_all()

    async with manager.engine.connect() as conn:
        tables = await conn.run_sync(lambda c: inspect(c).get_table_names())

    assert set(tables) == {"users", "messages"}
    await manager.dispose()


async def test_file_store_with_single_connection_pool(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'user_messages.sqlite'}"
    manager = DatabaseSessionManager(url, pool_size=1, max_overflow=0)
    await manager.create_all()

    async with manager.session() as db:
        userid = await messaging.create_user(db, "dora")
    async with manager.session() as db:
        users = await messaging.list_users(db)

    assert users == [{"userid": userid, "username": "dora"}]
    assert await manager.health_check() is True
    await manager.dispose()


async def test_health_check_false_on_unreachable_store(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'missing-dir' / 'db.sqlite'}"
    manager = DatabaseSessionManager(url)

    assert await manager.health_check() is False
    await manager.dispose()


def test_file_store_uses_single_connection_queue_pool(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'pool.sqlite'}"
    manager = DatabaseSessionManager(url, pool_size=1, max_overflow=0)

    assert isinstance(manager.engine.pool, AsyncAdaptedQueuePool)
    assert manager.engine.pool.size() == 1
    assert manager.engine.pool._max_overflow == 0
