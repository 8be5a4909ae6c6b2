"""Tests for event emission and the persistence service."""

import json
from datetime import date

import pytest

import app.redis_client as redis_module
from app.schemas.property_rooms import PropertyRoomCreate
from app.services.events import EVENTS_QUEUE, emit_event
from app.services.property_rooms import PropertyRoomsService


class FakeRedis:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.lists: dict[str, list[str]] = {}

    def rpush(self, key, value):
        if self.fail:
            raise ConnectionError("redis down")
        self.lists.setdefault(key, []).append(value)
        return len(self.lists[key])


@pytest.fixture
def fake_redis(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(redis_module, "redis_client", fake)
    return fake


class TestEmitEvent:
    def test_pushes_json_event(self, fake_redis):
        emit_event("property_room_created", {"room_id": 7, "user_id": "u1"})

        [raw] = fake_redis.lists[EVENTS_QUEUE]
        event = json.loads(raw)
        assert event["type"] == "property_room_created"
        assert event["room_id"] == 7
        assert event["user_id"] == "u1"
        assert isinstance(event["ts"], int)

    def test_noop_without_redis(self, monkeypatch):
        monkeypatch.setattr(redis_module, "redis_client", None)

        emit_event("property_room_created", {"room_id": 1})

    def test_redis_failure_is_logged_not_raised(self, monkeypatch, caplog):
        monkeypatch.setattr(redis_module, "redis_client", FakeRedis(fail=True))

        emit_event("property_room_created", {"room_id": 1})

        assert "Failed to emit event property_room_created" in caplog.text


class TestPropertyRoomsService:
    def test_create_stores_row_and_emits_event(self, db_session, fake_redis):
        service = PropertyRoomsService(db_session)
        data = PropertyRoomCreate(
            room_type_name="Family",
            max_occupancy=5,
            amenities=["Crib"],
            availability_start=date(2026, 12, 1),
        )

        room = service.create("owner-1", data, ["https://cdn.test/a.jpg"])

        assert room.id is not None
        assert room.user_id == "owner-1"
        assert room.max_occupancy == 5
        assert room.amenities == ["Crib"]
        assert room.room_images == ["https://cdn.test/a.jpg"]
        assert room.availability_start == date(2026, 12, 1)
        assert room.created_at is not None

        [raw] = fake_redis.lists[EVENTS_QUEUE]
        assert json.loads(raw)["room_id"] == room.id

    def test_find_all_by_user(self, db_session):
        service = PropertyRoomsService(db_session)
        first = service.create("a", PropertyRoomCreate(room_type_name="One"), [])
        service.create("b", PropertyRoomCreate(room_type_name="Two"), [])
        third = service.create("a", PropertyRoomCreate(room_type_name="Three"), [])

        rooms = service.find_all_by_user("a")

        assert [r.id for r in rooms] == [first.id, third.id]
        assert service.find_all_by_user("nobody") == []
