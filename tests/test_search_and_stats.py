from __future__ import annotations


def _create(client, headers, path: str, payload: dict) -> dict:
    r = client.post(path, json=payload, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_search_across_collections(client, admin_headers, user_headers) -> None:
    _create(client, admin_headers, "/api/subjects", {"name": "Computer Studies"})
    _create(client, admin_headers, "/api/programs", {"name": "Computer Science"})
    _create(client, admin_headers, "/api/jobs", {"title": "Computer Technician"})
    _create(client, admin_headers, "/api/schools", {"name": "Hilltop", "level": "O-Level"})

    r = client.get("/api/search", params={"q": "computer"}, headers=user_headers)
    assert r.status_code == 200
    body = r.json()
    assert [s["name"] for s in body["subjects"]] == ["Computer Studies"]
    assert [p["name"] for p in body["programs"]] == ["Computer Science"]
    assert [j["title"] for j in body["jobs"]] == ["Computer Technician"]
    assert body["schools"] == []
    assert body["combinations"] == []


def test_search_blank_query_returns_empty(client, admin_headers) -> None:
    _create(client, admin_headers, "/api/subjects", {"name": "Physics"})
    body = client.get("/api/search", params={"q": ""}, headers=admin_headers).json()
    assert body == {"subjects": [], "combinations": [], "programs": [], "schools": [], "jobs": []}


def test_search_requires_auth(client) -> None:
    assert client.get("/api/search", params={"q": "x"}).status_code == 401


def test_admin_stats_counts(client, admin_headers, user_headers) -> None:
    _create(client, admin_headers, "/api/subjects", {"name": "Physics"})
    _create(client, admin_headers, "/api/subjects", {"name": "Chemistry"})
    _create(client, admin_headers, "/api/jobs", {"title": "Engineer"})

    r = client.get("/api/admin/stats", headers=admin_headers)
    assert r.status_code == 200
    body = r.json()
    assert "generatedAt" in body
    assert body["counts"] == {
        "subjects": 2,
        "combinations": 0,
        "programs": 0,
        "schools": 0,
        "jobs": 1,
        "users": 2,
    }


def test_admin_stats_requires_admin(client, user_headers) -> None:
    r = client.get("/api/admin/stats", headers=user_headers)
    assert r.status_code == 403
