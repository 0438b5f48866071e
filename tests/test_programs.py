from __future__ import annotations


def _create(client, headers, path: str, payload: dict) -> dict:
    r = client.post(path, json=payload, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_program_keeps_free_text_lists(client, admin_headers) -> None:
    created = _create(
        client,
        admin_headers,
        "/api/programs",
        {"name": "Medicine", "schools": ["University of Rwanda"], "jobs": ["Doctor", "Surgeon"]},
    )
    assert created["schools"] == ["University of Rwanda"]
    assert created["jobs"] == ["Doctor", "Surgeon"]
    assert created["combinations"] == []


def test_program_reverse_lookup_when_combinations_empty(client, admin_headers, user_headers) -> None:
    eng = _create(client, admin_headers, "/api/programs", {"name": "Engineering"})
    pcm = _create(client, admin_headers, "/api/combinations", {"name": "PCM", "programs": [eng["id"]]})
    _create(client, admin_headers, "/api/combinations", {"name": "HEG"})

    body = client.get(f"/api/programs/{eng['id']}", headers=user_headers).json()
    assert [c["id"] for c in body["combinations"]] == [pcm["id"]]
    assert body["combinations"][0]["programs"] == [{"id": eng["id"], "name": "Engineering"}]


def test_program_search_and_crud(client, admin_headers, user_headers) -> None:
    eng = _create(client, admin_headers, "/api/programs", {"name": "Software Engineering", "description": "Build software"})
    _create(client, admin_headers, "/api/programs", {"name": "Law"})

    r = client.get("/api/programs", params={"q": "SOFTWARE"}, headers=user_headers)
    assert [p["name"] for p in r.json()] == ["Software Engineering"]

    r = client.put(f"/api/programs/{eng['id']}", json={"jobs": ["Developer"]}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["jobs"] == ["Developer"]
    assert r.json()["description"] == "Build software"

    assert client.delete(f"/api/programs/{eng['id']}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/programs/{eng['id']}", headers=user_headers).status_code == 404
