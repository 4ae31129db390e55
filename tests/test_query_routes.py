from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError

from app.api.routes import query_routes
from app.services.database.query_database_services import mask_identifier


def save(client: TestClient, **overrides) -> None:
    payload = {
        "userId": None,
        "userContext": "30 years old",
        "problem": "I can't sleep",
        "personality": "anxious",
        "style": "friendly",
        "language": "en",
        "answer": "Try a wind-down routine.",
        "images": [],
        "isPublic": True,
    }
    payload.update(overrides)
    response = client.post("/api/save-query", json=payload)
    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_history_round_trips_images(client: TestClient, user: dict):
    save(client, userId=user["id"], images=["x", "y"])

    response = client.get(f"/api/history/{user['id']}")
    assert response.status_code == 200
    history = response.json()
    assert len(history) == 1
    assert history[0]["images"] == ["x", "y"]
    assert history[0]["problem"] == "I can't sleep"
    assert history[0]["user_context"] == "30 years old"
    assert history[0]["is_public"] == 1


def test_history_is_newest_first_and_per_user(client: TestClient, user: dict):
    other = client.post("/api/login", json={"identifier": "09351112233"}).json()
    save(client, userId=user["id"], problem="first")
    save(client, userId=user["id"], problem="second")
    save(client, userId=other["id"], problem="not mine")

    history = client.get(f"/api/history/{user['id']}").json()
    assert [q["problem"] for q in history] == ["second", "first"]


def test_missing_images_and_visibility_defaults(client: TestClient, user: dict):
    response = client.post(
        "/api/save-query",
        json={"userId": user["id"], "problem": "p", "answer": "a"},
    )
    assert response.status_code == 200

    entry = client.get(f"/api/history/{user['id']}").json()[0]
    assert entry["images"] == []
    assert entry["is_public"] == 0


def test_save_for_unknown_user_is_a_server_error(client: TestClient):
    response = client.post(
        "/api/save-query",
        json={"userId": 987654, "problem": "p", "answer": "a"},
    )
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to save query"


def test_public_feed_masks_identifiers(client: TestClient):
    john = client.post("/api/login", json={"identifier": "john@example.com"}).json()
    phone = client.post("/api/login", json={"identifier": "09121234567"}).json()
    save(client, userId=john["id"], problem="email user")
    save(client, userId=phone["id"], problem="phone user")
    save(client, userId=phone["id"], problem="private", isPublic=False)
    save(client, userId=None, problem="anonymous")

    feed = client.get("/api/public-feed").json()

    assert [q["problem"] for q in feed] == ["phone user", "email user"]
    assert feed[0]["user_id_text"] == "0912****567"
    assert feed[1]["user_id_text"] == "joh***@example.com"
    assert feed[1]["images"] == []


def test_public_feed_is_capped(client: TestClient, user: dict):
    for i in range(55):
        save(client, userId=user["id"], problem=f"q{i}")

    feed = client.get("/api/public-feed").json()
    assert len(feed) == 50
    assert feed[0]["problem"] == "q54"


def test_mask_identifier():
    assert mask_identifier("john@example.com") == "joh***@example.com"
    assert mask_identifier("jo@x.org") == "jo***@x.org"
    assert mask_identifier("09121234567") == "0912****567"
    assert mask_identifier("12345") == "1234****"


def test_history_database_error(client: TestClient, monkeypatch):
    def broken(db, user_id):
        raise SQLAlchemyError("database is locked")

    monkeypatch.setattr(query_routes, "get_user_history", broken)

    response = client.get("/api/history/1")
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to fetch history"


def test_public_feed_database_error(client: TestClient, monkeypatch):
    def broken(db):
        raise SQLAlchemyError("database is locked")

    monkeypatch.setattr(query_routes, "get_public_feed", broken)

    response = client.get("/api/public-feed")
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to fetch public feed"
