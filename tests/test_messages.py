"""
Tests for /api/v1/messages: append, tail reads, cursor polling and bulk replace.
"""

import pytest

from teamhub.config.settings import settings


def send(client, chat_id, content, sender_id="u1", sender_name="Alice", **extra):
    response = client.post("/api/v1/messages", json={
        "chat_id": chat_id, "sender_id": sender_id, "sender_name": sender_name, "content": content, **extra
    })
    assert response.status_code == 201, response.text
    return response.json()


class TestSendMessage:
    """Tests for POST /messages."""

    def test_returns_materialized_message(self, client):
        message = send(client, "dm_u1_u2", "hello")
        assert message["chat_id"] == "dm_u1_u2"
        assert message["user_id"] == "u1"
        assert message["user_name"] == "Alice"
        assert message["avatar"] == "A"
        assert message["content"] == "hello"
        assert message["reactions"] == []
        assert message["mentions"] == []
        assert message["is_edited"] is False
        assert message["is_read"] is True
        assert message["reply_to"] is None
        assert len(message["timestamp"]) == 5

    def test_ids_increase(self, client):
        ids = [int(send(client, "dm_u1_u2", f"m{i}")["id"]) for i in range(5)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    def test_reply_reference(self, client):
        original = send(client, "group_1", "question")
        reply = send(client, "group_1", "answer", reply_to=original["id"])
        assert reply["reply_to"] == {"id": original["id"]}

    @pytest.mark.parametrize("field", ["chat_id", "sender_id", "sender_name", "content"])
    def test_empty_required_field_is_rejected(self, client, supabase, field):
        payload = {"chat_id": "c", "sender_id": "u1", "sender_name": "Alice", "content": "hi", field: ""}
        response = client.post("/api/v1/messages", json=payload)
        assert response.status_code == 400
        assert field in response.json()["message"]
        assert supabase.rows("messages") == []


class TestListMessages:
    """Tests for GET /messages."""

    def test_since_cursor_returns_only_newer_messages(self, client):
        sent = [send(client, "dm_u1_u2", f"m{i}") for i in range(1, 11)]
        send(client, "dm_u1_u3", "elsewhere")
        cursor = sent[3]["id"]
        messages = client.get("/api/v1/messages", params={"chat_id": "dm_u1_u2", "after": cursor}).json()["messages"]
        assert [m["content"] for m in messages] == [f"m{i}" for i in range(5, 11)]

    def test_polling_sees_each_message_once(self, client):
        seen = []
        cursor = None
        for batch in (["a", "b"], [], ["c"], ["d", "e", "f"]):
            for content in batch:
                send(client, "group_1", content)
            params = {"chat_id": "group_1"}
            if cursor:
                params["after"] = cursor
            messages = client.get("/api/v1/messages", params=params).json()["messages"]
            seen.extend(m["content"] for m in messages)
            if messages:
                cursor = messages[-1]["id"]
        assert seen == ["a", "b", "c", "d", "e", "f"]

    def test_without_cursor_returns_tail_oldest_first(self, client, monkeypatch):
        monkeypatch.setattr(settings, "message_history_limit", 3)
        for i in range(6):
            send(client, "group_1", f"m{i}")
        messages = client.get("/api/v1/messages", params={"chat_id": "group_1"}).json()["messages"]
        assert [m["content"] for m in messages] == ["m3", "m4", "m5"]

    def test_display_fields_use_display_timezone(self, client, supabase):
        client.put("/api/v1/messages/group_1", json={"messages": [
            {"sender_id": "u1", "sender_name": "Alice", "content": "hi", "timestamp": "2025-01-04T15:05:00+00:00"}
        ]})
        message = client.get("/api/v1/messages", params={"chat_id": "group_1"}).json()["messages"][0]
        assert message["timestamp"] == "00:05"
        assert message["date"] == "2025年1月5日"

    def test_chat_id_is_required(self, client):
        response = client.get("/api/v1/messages")
        assert response.status_code == 400
        assert response.json()["kind"] == "ValidationError"

    def test_non_numeric_cursor_is_rejected(self, client):
        response = client.get("/api/v1/messages", params={"chat_id": "group_1", "after": "latest"})
        assert response.status_code == 400


class TestReplaceMessages:
    """Tests for PUT /messages/{chat_id}."""

    def test_replaces_history_and_normalizes_defaults(self, client, supabase):
        send(client, "group_1", "old")
        send(client, "group_2", "untouched")
        response = client.put("/api/v1/messages/group_1", json={"messages": [
            {"content": "first"},
            {"sender_id": "u2", "sender_name": "Bob", "content": "second", "reactions": [{"emoji": "👍"}]},
        ]})
        assert response.status_code == 200
        assert response.json() == {"chat_id": "group_1", "deleted": 1, "inserted": 2}

        messages = client.get("/api/v1/messages", params={"chat_id": "group_1"}).json()["messages"]
        assert [m["content"] for m in messages] == ["first", "second"]
        assert messages[0]["user_id"] == "unknown"
        assert messages[0]["user_name"] == "Unknown"
        assert messages[0]["reactions"] == []
        assert messages[1]["reactions"] == [{"emoji": "👍"}]
        assert len(client.get("/api/v1/messages", params={"chat_id": "group_2"}).json()["messages"]) == 1

    def test_empty_list_clears_history(self, client):
        send(client, "group_1", "old")
        client.put("/api/v1/messages/group_1", json={"messages": []})
        assert client.get("/api/v1/messages", params={"chat_id": "group_1"}).json()["messages"] == []

    def test_failure_midway_leaves_partial_history(self, client, supabase):
        send(client, "group_1", "old")
        supabase.fail("messages", "insert", after=1)
        response = client.put("/api/v1/messages/group_1", json={"messages": [
            {"content": "one"}, {"content": "two"}, {"content": "three"}
        ]})
        assert response.status_code == 503
        body = response.json()
        assert body["kind"] == "StorageError"
        assert "1 of 3" in body["message"]
        assert [r["content"] for r in supabase.rows("messages")] == ["one"]

    def test_reply_references_are_dropped(self, client, supabase):
        response = client.put("/api/v1/messages/group_1", json={"messages": [
            {"content": "question"}, {"content": "answer", "reply_to": 1}
        ]})
        assert response.status_code == 200
        messages = client.get("/api/v1/messages", params={"chat_id": "group_1"}).json()["messages"]
        assert [m["reply_to"] for m in messages] == [None, None]
        assert all(r["reply_to"] is None for r in supabase.rows("messages"))
