"""
Shared fixtures for the property rooms API tests.

- in-memory SQLite database (StaticPool, one connection shared across threads)
- FakeStorage standing in for S3
- TestClient with dependency overrides
- JWT helper to mint bearer tokens
"""

from __future__ import annotations

import asyncio
import os
from datetime import datetime, timedelta, timezone

# settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key-for-property-rooms-api"
os.environ["REDIS_URL"] = ""
os.environ["S3_BUCKET"] = ""

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import get_db
from app.main import app
from app.models import Base
from app.services.storage import StorageError, get_optional_storage


class FakeStorage:
    """Records uploads; `delays` (by filename) lets tests reorder completions."""

    def __init__(self, delays: dict[str, float] | None = None, fail_on: str | None = None):
        self.delays = delays or {}
        self.fail_on = fail_on
        self.calls: list[dict] = []
        self.completed: list[str] = []

    async def upload(self, content, original_name, category, content_type=None):
        self.calls.append({
            "content": content,
            "original_name": original_name,
            "category": category,
            "content_type": content_type,
        })
        await asyncio.sleep(self.delays.get(original_name, 0))
        if original_name == self.fail_on:
            raise StorageError(f"Failed to upload {original_name!r}")
        self.completed.append(original_name)
        return f"https://cdn.test/{category}/{original_name}"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def client(session_factory, storage):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_optional_storage] = lambda: storage
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def make_token(user_id: str | None = "user-1", expires_in: int = 3600, **claims) -> str:
    payload = {"exp": datetime.now(timezone.utc) + timedelta(seconds=expires_in), **claims}
    if user_id is not None:
        payload["sub"] = user_id
    return jwt.encode(payload, "test-secret-key-for-property-rooms-api", algorithm="HS256")


@pytest.fixture
def auth_headers():
    def _headers(user_id: str = "user-1") -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(user_id)}"}

    return _headers
