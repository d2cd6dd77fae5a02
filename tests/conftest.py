"""Shared fixtures: a throwaway SQLite database and authenticated callers."""

from __future__ import annotations

import os
import sqlite3
import sys
import tempfile
from pathlib import Path
from uuid import uuid4

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / f"healthhub-inbox-test-{os.getpid()}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

# WAL lets the app sessions write while a test session keeps a read open.
with sqlite3.connect(TEST_DB_PATH) as _connection:
    _connection.execute("PRAGMA journal_mode=WAL")
_connection.close()

OWNER_ID = "owner-1"
OTHER_OWNER_ID = "owner-2"


@pytest.fixture()
def session():
    """Yield a session bound to a freshly created schema."""

    from app.infrastructure import database, models  # noqa: F401

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def _remove_database_file():
    yield
    from app.infrastructure import database

    database.engine.dispose()
    for suffix in ("", "-wal", "-shm"):
        Path(f"{TEST_DB_PATH}{suffix}").unlink(missing_ok=True)


@pytest.fixture()
def profile(session):
    from app.domain.entities import Profile
    from app.infrastructure.repositories import ProfileRepository

    return ProfileRepository(session).create(
        Profile(id=uuid4(), owner_user_id=OWNER_ID, name="Alex")
    )


@pytest.fixture()
def foreign_profile(session):
    from app.domain.entities import Profile
    from app.infrastructure.repositories import ProfileRepository

    return ProfileRepository(session).create(
        Profile(id=uuid4(), owner_user_id=OTHER_OWNER_ID, name="Sam")
    )


@pytest.fixture()
def auth_headers():
    from app.infrastructure.security import create_owner_token

    return {"Authorization": f"Bearer {create_owner_token(OWNER_ID)}"}


@pytest.fixture()
def client(session):
    """Return a test client bound to a clean application instance."""

    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
