"""Root conftest — shared test configuration."""

import os

# Keep tests away from the on-disk user_messages.sqlite
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
