"""Settings — defaults reproduce the service's fixed constants."""

from user_messaging.config import Settings


def test_defaults(monkeypatch):
    for var in ("DATABASE_URL", "PORT", "SQLITE_FOREIGN_KEYS"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite+aiosqlite:///user_messages.sqlite"
    assert settings.port == 3000
    assert settings.database_pool_size == 1
    assert settings.database_max_overflow == 0
    assert settings.sqlite_foreign_keys is False


def test_plain_sqlite_url_gets_async_driver():
    settings = Settings(_env_file=None, database_url="sqlite:///other.db")

    assert settings.database_url == "sqlite+aiosqlite:///other.db"


def test_env_override(monkeypatch):
    monkeypatch.setenv("SQLITE_FOREIGN_KEYS", "true")

    assert Settings(_env_file=None).sqlite_foreign_keys is True
