"""
Shared pytest fixtures: an in-memory Supabase double wired into the app.
"""

import pytest
from fastapi.testclient import TestClient

from teamhub.database.supabase_client import get_supabase, get_service_supabase
from teamhub.main import app
from teamhub.modules.project_data.schemas import (
    COLLECTION_FIELDS, DEFAULT_WIDGET_ORDER, DEFAULT_HOLIDAY_SETTINGS
)

from fake_supabase import FakeSupabase, FakeTable


def build_tables():
    """Tables with the keys and column defaults documented in the models modules."""
    project_data_defaults = {field: [] for field in COLLECTION_FIELDS}
    project_data_defaults["widget_order"] = list(DEFAULT_WIDGET_ORDER)
    project_data_defaults["holiday_settings"] = dict(DEFAULT_HOLIDAY_SETTINGS)

    return [
        FakeTable("users", defaults={"status": "offline", "provider": "email"}),
        FakeTable("dm_chats"),
        FakeTable("group_chats", defaults={"members": []}),
        FakeTable("messages", serial=True, defaults={"reactions": [], "reply_to": None, "is_edited": False}),
        FakeTable("projects", defaults={"linked_chats": [], "project_members": [], "game_settings": None}),
        FakeTable("project_data", serial=True, unique=(("id",), ("project_id",)), defaults=project_data_defaults),
        FakeTable("friend_requests", serial=True, unique=(("id",), ("from_user_id", "to_user_id")),
                  defaults={"status": "pending"}),
        FakeTable("friends", serial=True, unique=(("id",), ("user_id", "friend_id"))),
        FakeTable("attendance", serial=True, unique=(("id",), ("user_id", "date")),
                  defaults={"clock_in": None, "clock_out": None, "break_minutes": 0, "status": None}),
    ]


@pytest.fixture
def supabase() -> FakeSupabase:
    """Fresh in-memory store per test"""
    return FakeSupabase(build_tables())


@pytest.fixture
def client(supabase):
    """TestClient whose Supabase dependencies resolve to the in-memory store"""
    app.dependency_overrides[get_supabase] = lambda: supabase
    app.dependency_overrides[get_service_supabase] = lambda: supabase
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        app.state.event_suggester = None


@pytest.fixture
def register(client):
    """Register (or log in) a user by name and return the user dict"""

    def _register(name: str, **extra) -> dict:
        response = client.post("/api/v1/users", json={"name": name, **extra})
        assert response.status_code == 200, response.text
        return response.json()["user"]

    return _register
