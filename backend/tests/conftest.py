"""Root conftest - shared test configuration."""

import os

# Never point tests at a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
