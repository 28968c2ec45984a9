"""
Test comment and follow-up endpoints
"""

from fastapi.testclient import TestClient


def test_post_and_list_comment(client: TestClient):
    lead_id = client.post("/api/leads", json={"name": "Acme", "owner_id": 1}).json()["id"]

    response = client.post("/api/comments", json={
        "entity_type": "leads",
        "entity_id": lead_id,
        "user_id": 1,
        "content": "hi"
    })
    assert response.status_code == 200
    comment_id = response.json()["id"]

    response = client.get(f"/api/comments/leads/{lead_id}")
    assert response.status_code == 200

    comments = response.json()
    assert len(comments) == 1
    assert comments[0]["id"] == comment_id
    assert comments[0]["content"] == "hi"
    assert comments[0]["username"] == "admin"


def test_reply_to_missing_parent(client: TestClient):
    response = client.post("/api/comments", json={
        "entity_type": "leads",
        "entity_id": 1,
        "user_id": 1,
        "content": "reply",
        "parent_id": 12345
    })
    assert response.status_code == 404
    assert response.json()["error_code"] == "NOT_FOUND"


def test_comment_requires_content(client: TestClient):
    response = client.post("/api/comments", json={"entity_type": "leads", "entity_id": 1, "user_id": 1})
    assert response.status_code == 422


def test_comment_invalid_module(client: TestClient):
    response = client.get("/api/comments/users/1")
    assert response.status_code == 404
    assert response.json()["error_code"] == "INVALID_MODULE"


def test_follow_ups(client: TestClient):
    response = client.post("/api/follow-ups", json={
        "entity_type": "customers",
        "entity_id": 1,
        "user_id": 1,
        "method": "电话",
        "result": "续约意向",
        "content": "Renewal call",
        "next_step_time": "2026-11-01T10:00:00"
    })
    assert response.status_code == 200
    follow_up_id = response.json()["id"]

    response = client.get("/api/follow-ups/customers/1")
    assert response.status_code == 200

    follow_ups = response.json()
    assert [follow_up["id"] for follow_up in follow_ups] == [follow_up_id]
    assert follow_ups[0]["username"] == "admin"
    assert follow_ups[0]["next_step_time"].startswith("2026-11-01T10:00:00")


def test_comment_on_singular_module_name(client: TestClient):
    """Test comments are keyed by the plural module route name."""
    response = client.post("/api/comments", json={
        "entity_type": "lead",
        "entity_id": 1,
        "user_id": 1,
        "content": "hi"
    })
    assert response.status_code == 404
    assert response.json()["error_code"] == "INVALID_MODULE"

    schema = client.get("/openapi.json").json()["components"]["schemas"]["PostCommentRequest"]
    assert "leads" in schema["properties"]["entity_type"]["description"]


def test_follow_up_next_step_time_is_stored_as_utc(client: TestClient):
    response = client.post("/api/follow-ups", json={
        "entity_type": "leads",
        "entity_id": 1,
        "user_id": 1,
        "method": "电话",
        "next_step_time": "2026-03-01T10:00:00+08:00"
    })
    assert response.status_code == 200

    follow_ups = client.get("/api/follow-ups/leads/1").json()
    assert follow_ups[0]["next_step_time"].startswith("2026-03-01T02:00:00")
