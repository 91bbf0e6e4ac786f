"""
Tests for the HTTP surface.
"""
import pytest

from tests.conftest import ADMIN_HEADERS, USER_HEADERS

JOB_ENTRY = "I am so happy and excited about my new job! Great opportunities ahead."


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "journal-analyzer"}


# ---------------------------
# /api/ai-analysis
# ---------------------------

def test_analysis_requires_token(client):
    response = client.post("/api/ai-analysis", json={"content": JOB_ENTRY})
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_analysis_rejects_unknown_token(client):
    response = client.post(
        "/api/ai-analysis",
        json={"content": JOB_ENTRY},
        headers={"Authorization": "Bearer wrong"},
    )
    assert response.status_code == 401


def test_analysis_checks_auth_before_body(client):
    response = client.post("/api/ai-analysis", json={})
    assert response.status_code == 401


@pytest.mark.parametrize("body", [{}, {"content": ""}, {"content": "   \n "}, {"content": None}])
def test_analysis_rejects_empty_content(client, body):
    response = client.post("/api/ai-analysis", json=body, headers=USER_HEADERS)
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid input"


def test_analysis_result(client):
    response = client.post("/api/ai-analysis", json={"content": JOB_ENTRY}, headers=USER_HEADERS)
    assert response.status_code == 200

    data = response.json()
    assert set(data) == {"sentiment", "categoryRecommendations", "themes", "wordCount", "insight"}
    assert data["sentiment"]["mood"] in ("Positive", "Very Positive")
    assert data["categoryRecommendations"][0]["id"] == "cat-work"
    assert data["categoryRecommendations"][0]["name"] == "Work"
    assert data["categoryRecommendations"][0]["relevance"] > 0
    assert "opportunities" in data["themes"]
    assert data["wordCount"] == 13
    assert data["insight"].startswith("Based on your entry, ")


def test_analysis_uses_current_catalog(client, repo):
    repo.create_category("Gardening")
    response = client.post(
        "/api/ai-analysis",
        json={"content": "A long morning of gardening."},
        headers=USER_HEADERS,
    )
    recs = response.json()["categoryRecommendations"]
    assert [r["name"] for r in recs] == ["Gardening"]
    assert recs[0]["relevance"] == 0.5


def test_analysis_is_repeatable(client):
    first = client.post("/api/ai-analysis", json={"content": JOB_ENTRY}, headers=USER_HEADERS)
    second = client.post("/api/ai-analysis", json={"content": JOB_ENTRY}, headers=USER_HEADERS)
    assert first.content == second.content


# ---------------------------
# /api/categories
# ---------------------------

def test_list_categories(client):
    response = client.get("/api/categories", headers=USER_HEADERS)
    assert response.status_code == 200
    names = [c["name"] for c in response.json()]
    assert names == sorted(names)
    assert len(names) == 10


def test_get_category(client):
    assert client.get("/api/categories/cat-travel", headers=USER_HEADERS).json()["name"] == "Travel"
    missing = client.get("/api/categories/nope", headers=USER_HEADERS)
    assert missing.status_code == 404
    assert missing.json() == {"error": "Category not found"}


def test_create_category_requires_admin(client):
    response = client.post("/api/categories", json={"name": "Dreams"}, headers=USER_HEADERS)
    assert response.status_code == 403
    assert response.json() == {"error": "Forbidden"}


def test_create_category(client):
    response = client.post(
        "/api/categories",
        json={"name": "Dreams", "color": "#abcdef"},
        headers=ADMIN_HEADERS,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Dreams"
    assert body["color"] == "#abcdef"

    listed = client.get("/api/categories", headers=USER_HEADERS).json()
    assert "Dreams" in [c["name"] for c in listed]


@pytest.mark.parametrize(
    "body",
    [{"name": "Work"}, {"name": "Dreams", "color": "red"}, {"name": ""}, {"name": "   "}],
)
def test_create_category_rejects_bad_input(client, body):
    response = client.post("/api/categories", json=body, headers=ADMIN_HEADERS)
    assert response.status_code == 400
    assert "error" in response.json()


def test_update_and_delete_category(client):
    updated = client.put(
        "/api/categories/cat-work",
        json={"name": "Career"},
        headers=ADMIN_HEADERS,
    )
    assert updated.status_code == 200
    assert updated.json()["name"] == "Career"

    assert client.put("/api/categories/nope", json={"name": "X"}, headers=ADMIN_HEADERS).status_code == 404
    assert client.put(
        "/api/categories/cat-work", json={"name": "Family"}, headers=ADMIN_HEADERS
    ).status_code == 400

    deleted = client.delete("/api/categories/cat-work", headers=ADMIN_HEADERS)
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Category deleted successfully"}
    assert client.delete("/api/categories/cat-work", headers=ADMIN_HEADERS).status_code == 404


# ---------------------------
# /api/journals/summary
# ---------------------------

def test_summary(client):
    body = {
        "entries": [
            {"id": "1", "content": "Gym then work", "date": "2024-05-01T07:15:00", "categoryId": "cat-health"},
            {"id": "2", "content": "Long day at work", "date": "2024-05-02T18:40:00", "categoryId": "cat-work"},
            {"id": "3", "content": "Old entry", "date": "2023-12-31T10:00:00"},
        ],
        "startDate": "2024-01-01T00:00:00",
    }
    response = client.post("/api/journals/summary", json=body, headers=USER_HEADERS)
    assert response.status_code == 200

    data = response.json()
    assert data["totalCount"] == 2
    assert data["monthlyCountData"] == [{"month": "May 2024", "count": 2}]
    counts = {row["name"]: row["count"] for row in data["categoryCounts"]}
    assert counts["Health"] == 1
    assert counts["Work"] == 1
    assert counts["Travel"] == 0
    assert "Uncategorized" not in counts


def test_summary_empty(client):
    response = client.post("/api/journals/summary", json={}, headers=USER_HEADERS)
    assert response.status_code == 200
    assert response.json()["totalCount"] == 0


def test_summary_rejects_inverted_range(client):
    response = client.post(
        "/api/journals/summary",
        json={"startDate": "2024-02-01T00:00:00", "endDate": "2024-01-01T00:00:00"},
        headers=USER_HEADERS,
    )
    assert response.status_code == 400


def test_summary_requires_token(client):
    assert client.post("/api/journals/summary", json={}).status_code == 401
