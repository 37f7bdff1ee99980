"""
Tests for /api/v1/projects: create, list by membership, partial update and cascading delete.
"""

import pytest


@pytest.fixture
def project(client):
    response = client.post("/api/v1/projects", json={
        "name": "Space Shooter",
        "creator_id": "u1",
        "project_members": [{"id": "u2", "name": "Bob", "permission": "member"}],
        "linked_chats": [{"id": "group_1", "name": "Dev", "type": "group"}],
    })
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateProject:
    """Tests for POST /projects."""

    def test_defaults(self, client):
        project = client.post("/api/v1/projects", json={"name": "Puzzle"}).json()
        assert project["id"].startswith("project_")
        assert project["icon"] == "🎮"
        assert project["description"] == ""
        assert project["linked_chats"] == []
        assert project["project_members"] == []
        assert project["game_settings"] is None

    def test_caller_supplied_id_is_kept(self, client):
        project = client.post("/api/v1/projects", json={"id": "proj-42", "name": "RPG"}).json()
        assert project["id"] == "proj-42"

    def test_same_id_replaces_whole_document(self, client, supabase):
        client.post("/api/v1/projects", json={"id": "proj-42", "name": "RPG", "description": "old"})
        project = client.post("/api/v1/projects", json={"id": "proj-42", "name": "RPG 2"}).json()
        assert project["name"] == "RPG 2"
        assert project["description"] == ""
        assert len(supabase.rows("projects")) == 1

    def test_name_is_required(self, client, supabase):
        response = client.post("/api/v1/projects", json={"name": " "})
        assert response.status_code == 400
        assert supabase.rows("projects") == []


class TestListProjects:
    """Tests for GET /projects."""

    def test_lists_all_without_user(self, client, project):
        client.post("/api/v1/projects", json={"name": "Other"})
        assert len(client.get("/api/v1/projects").json()["projects"]) == 2

    def test_creator_sees_project(self, client, project):
        projects = client.get("/api/v1/projects", params={"user_id": "u1"}).json()["projects"]
        assert [p["id"] for p in projects] == [project["id"]]

    def test_member_sees_project(self, client, project):
        projects = client.get("/api/v1/projects", params={"user_id": "u2"}).json()["projects"]
        assert [p["id"] for p in projects] == [project["id"]]

    def test_outsider_sees_nothing(self, client, project):
        assert client.get("/api/v1/projects", params={"user_id": "u3"}).json()["projects"] == []


class TestUpdateProject:
    """Tests for PUT /projects/{id}."""

    def test_only_supplied_fields_change(self, client, project):
        response = client.put(f"/api/v1/projects/{project['id']}", json={
            "game_settings": {"title": "Space Shooter", "platforms": ["PC"]}
        })
        assert response.status_code == 200
        updated = response.json()
        assert updated["game_settings"] == {"title": "Space Shooter", "platforms": ["PC"]}
        assert updated["name"] == "Space Shooter"
        assert updated["project_members"] == project["project_members"]
        assert updated["linked_chats"] == project["linked_chats"]

    def test_explicit_empty_collection_replaces(self, client, project):
        updated = client.put(f"/api/v1/projects/{project['id']}", json={"linked_chats": []}).json()
        assert updated["linked_chats"] == []

    def test_empty_update_returns_project(self, client, project):
        response = client.put(f"/api/v1/projects/{project['id']}", json={})
        assert response.status_code == 200
        assert response.json()["id"] == project["id"]

    def test_unknown_project_is_not_found(self, client, supabase):
        response = client.put("/api/v1/projects/nope", json={"name": "x"})
        assert response.status_code == 404
        assert response.json()["kind"] == "NotFoundError"
        assert supabase.rows("projects") == []


class TestDeleteProject:
    """Tests for DELETE /projects/{id}."""

    def test_delete_cascades_to_project_data(self, client, project):
        client.put(f"/api/v1/project-data/{project['id']}", json={"todo_items": [{"id": 1, "text": "ship"}]})

        response = client.delete(f"/api/v1/projects/{project['id']}")
        assert response.status_code == 204

        data = client.get(f"/api/v1/project-data/{project['id']}").json()
        assert data["todo_items"] == []
        assert data["updated_at"] is None
        assert client.get(f"/api/v1/projects/{project['id']}").status_code == 404

    def test_unknown_project_is_not_found(self, client):
        response = client.delete("/api/v1/projects/nope")
        assert response.status_code == 404

    def test_failed_data_delete_keeps_project_for_retry(self, client, supabase):
        client.post("/api/v1/projects", json={"id": "p1", "name": "Space Shooter"})
        client.put("/api/v1/project-data/p1", json={"todo_items": [{"id": "old"}]})

        supabase.fail("project_data", "delete")
        response = client.delete("/api/v1/projects/p1")
        assert response.status_code == 503
        assert client.get("/api/v1/projects/p1").status_code == 200

        supabase.heal("project_data", "delete")
        assert client.delete("/api/v1/projects/p1").status_code == 204

        client.post("/api/v1/projects", json={"id": "p1", "name": "Space Shooter"})
        assert client.get("/api/v1/project-data/p1").json()["todo_items"] == []

    def test_stale_data_without_project_is_removed(self, client, supabase):
        client.put("/api/v1/project-data/ghost", json={"todo_items": [{"id": "old"}]})
        response = client.delete("/api/v1/projects/ghost")
        assert response.status_code == 404
        assert supabase.rows("project_data") == []
