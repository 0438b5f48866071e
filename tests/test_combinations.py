from __future__ import annotations


def _create(client, headers, path: str, payload: dict) -> dict:
    r = client.post(path, json=payload, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_combination_resolves_subjects_and_programs(client, admin_headers, user_headers) -> None:
    physics = _create(client, admin_headers, "/api/subjects", {"name": "Physics"})
    maths = _create(client, admin_headers, "/api/subjects", {"name": "Mathematics"})
    eng = _create(client, admin_headers, "/api/programs", {"name": "Engineering"})

    created = _create(
        client,
        admin_headers,
        "/api/combinations",
        {"name": "PCM", "description": "Physics, Chemistry, Maths", "subjects": [physics["id"], maths["id"]], "programs": [eng["id"]]},
    )
    assert created["subjects"] == [
        {"id": physics["id"], "name": "Physics"},
        {"id": maths["id"], "name": "Mathematics"},
    ]

    r = client.get(f"/api/combinations/{created['id']}", headers=user_headers)
    assert r.status_code == 200
    assert r.json()["programs"] == [{"id": eng["id"], "name": "Engineering"}]


def test_combination_write_does_not_touch_subject_array(client, admin_headers) -> None:
    physics = _create(client, admin_headers, "/api/subjects", {"name": "Physics"})
    _create(client, admin_headers, "/api/combinations", {"name": "PCM", "subjects": [physics["id"]]})

    listed = client.get("/api/subjects", headers=admin_headers).json()
    assert listed[0]["combinations"] == []


def test_filter_by_subject_id_and_query(client, admin_headers, user_headers) -> None:
    physics = _create(client, admin_headers, "/api/subjects", {"name": "Physics"})
    history = _create(client, admin_headers, "/api/subjects", {"name": "History"})
    _create(client, admin_headers, "/api/combinations", {"name": "PCM", "subjects": [physics["id"]]})
    _create(client, admin_headers, "/api/combinations", {"name": "PCB", "subjects": [physics["id"]]})
    _create(client, admin_headers, "/api/combinations", {"name": "HEG", "subjects": [history["id"]]})

    r = client.get("/api/combinations", params={"subjectId": physics["id"]}, headers=user_headers)
    assert r.status_code == 200
    assert [c["name"] for c in r.json()] == ["PCM", "PCB"]

    r = client.get("/api/combinations", params={"subjectId": physics["id"], "q": "pcb"}, headers=user_headers)
    assert [c["name"] for c in r.json()] == ["PCB"]

    r = client.get("/api/combinations", params={"subjectId": "ffffffffffffffffffffffff"}, headers=user_headers)
    assert r.json() == []

    r = client.get("/api/combinations", headers=user_headers)
    assert len(r.json()) == 3


def test_update_and_delete_combination(client, admin_headers) -> None:
    physics = _create(client, admin_headers, "/api/subjects", {"name": "Physics"})
    combo = _create(client, admin_headers, "/api/combinations", {"name": "PCM", "description": "Sciences"})

    r = client.put(f"/api/combinations/{combo['id']}", json={"subjects": [physics["id"]]}, headers=admin_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["description"] == "Sciences"
    assert body["subjects"] == [{"id": physics["id"], "name": "Physics"}]

    r = client.delete(f"/api/combinations/{combo['id']}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "Combination deleted successfully"}
    assert client.delete(f"/api/combinations/{combo['id']}", headers=admin_headers).status_code == 404
