from __future__ import annotations

from datetime import datetime, timezone

from core.db import DatabaseError, WriteResult
from tests.support import api_test_client


def _bookmark(bookmark_id: int, *, user_id: int = 1, article_id: int = 5) -> dict:
    return {
        "id": bookmark_id,
        "user_id": user_id,
        "article_id": article_id,
        "created_at": datetime(2026, 4, 1, 12, bookmark_id, tzinfo=timezone.utc),
    }


def test_list_bookmarks_defaults_to_user_one(fake_db) -> None:
    fake_db.queue("fetch_all", [_bookmark(2), _bookmark(1)])

    with api_test_client(fake_db) as client:
        response = client.get("/bookmarks")

    assert response.status_code == 200
    assert [b["id"] for b in response.json()] == [2, 1]
    _, sql, args = fake_db.calls[0]
    assert "WHERE user_id = $1" in sql
    assert "ORDER BY created_at DESC" in sql
    assert args == (1,)


def test_list_bookmarks_for_given_user(fake_db) -> None:
    with api_test_client(fake_db) as client:
        response = client.get("/bookmarks", params={"user_id": 7})

    assert response.status_code == 200
    assert response.json() == []
    assert fake_db.calls[0][2] == (7,)


def test_list_bookmarks_database_failure_is_500(fake_db) -> None:
    fake_db.queue("fetch_all", DatabaseError("timeout"))

    with api_test_client(fake_db) as client:
        response = client.get("/bookmarks")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch bookmarks"}


def test_add_bookmark_defaults_user_and_returns_201(fake_db) -> None:
    fake_db.queue("insert", WriteResult(affected_rows=1, inserted_id=11))

    with api_test_client(fake_db) as client:
        response = client.post("/bookmarks", json={"article_id": 5})

    assert response.status_code == 201
    assert response.json() == {"message": "Bookmark added successfully", "id": 11}
    method, sql, args = fake_db.calls[0]
    assert method == "insert"
    assert "ON CONFLICT (user_id, article_id) DO NOTHING" in sql
    assert args == (1, 5)


def test_add_bookmark_requires_article_id(fake_db) -> None:
    with api_test_client(fake_db) as client:
        missing = client.post("/bookmarks", json={"user_id": 2})
        no_body = client.post("/bookmarks")

    for response in (missing, no_body):
        assert response.status_code == 400
        assert response.json() == {"error": "article_id is required"}
    assert fake_db.calls == []


def test_add_duplicate_bookmark_is_400(fake_db) -> None:
    fake_db.queue(
        "insert",
        WriteResult(affected_rows=1, inserted_id=11),
        WriteResult(affected_rows=0),
    )

    with api_test_client(fake_db) as client:
        first = client.post("/bookmarks", json={"user_id": 3, "article_id": 5})
        second = client.post("/bookmarks", json={"user_id": 3, "article_id": 5})

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json() == {"error": "Article already bookmarked"}


def test_add_bookmark_rejects_non_integer_article_id(fake_db) -> None:
    with api_test_client(fake_db) as client:
        response = client.post("/bookmarks", json={"article_id": "five"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request."


def test_add_bookmark_database_failure_is_500(fake_db) -> None:
    fake_db.queue("insert", DatabaseError("connection refused"))

    with api_test_client(fake_db) as client:
        response = client.post("/bookmarks", json={"article_id": 5})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to add bookmark"}


def test_delete_missing_bookmark_is_404(fake_db) -> None:
    fake_db.queue("execute", WriteResult(affected_rows=0))

    with api_test_client(fake_db) as client:
        response = client.delete("/bookmarks/999")

    assert response.status_code == 404
    assert response.json() == {"error": "Bookmark not found"}
    assert fake_db.calls[0][2] == (999,)


def test_delete_bookmark_then_list_excludes_it(fake_db) -> None:
    fake_db.queue("execute", WriteResult(affected_rows=1))
    fake_db.queue("fetch_all", [_bookmark(2)])

    with api_test_client(fake_db) as client:
        deleted = client.delete("/bookmarks/3")
        remaining = client.get("/bookmarks")

    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Bookmark removed successfully"}
    assert 3 not in [b["id"] for b in remaining.json()]
    assert fake_db.calls[0][1] == "DELETE FROM bookmarks WHERE id = $1"


def test_delete_bookmark_database_failure_is_500(fake_db) -> None:
    fake_db.queue("execute", DatabaseError("lost connection"))

    with api_test_client(fake_db) as client:
        response = client.delete("/bookmarks/3")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete bookmark"}


def test_delete_bookmark_id_beyond_bigint_is_404(fake_db) -> None:
    with api_test_client(fake_db) as client:
        response = client.delete("/bookmarks/99999999999999999999")

    assert response.status_code == 404
    assert response.json() == {"error": "Bookmark not found"}
    assert fake_db.calls == []


def test_list_bookmarks_user_beyond_bigint_is_empty(fake_db) -> None:
    with api_test_client(fake_db) as client:
        response = client.get("/bookmarks", params={"user_id": "99999999999999999999"})

    assert response.status_code == 200
    assert response.json() == []
    assert fake_db.calls == []


def test_add_bookmark_article_beyond_bigint_is_400(fake_db) -> None:
    with api_test_client(fake_db) as client:
        response = client.post("/bookmarks", json={"article_id": 2**63})

    assert response.status_code == 400
    assert response.json() == {"error": "article_id is out of range"}
    assert fake_db.calls == []
