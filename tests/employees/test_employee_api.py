from __future__ import annotations


def test_create_then_list(client):
    res = client.post("/api/employees", json={"name": "Anna", "allowance": 30})

    assert res.status_code == 201
    body = res.get_json()
    assert body["success"] is True
    assert body["employee"]["remaining"] == 30

    listed = client.get("/api/employees").get_json()
    assert [e["name"] for e in listed] == ["Anna"]


def test_create_with_invalid_allowance_returns_400(client):
    res = client.post("/api/employees", json={"name": "Anna", "allowance": 0})

    assert res.status_code == 400
    assert res.get_json()["success"] is False
    assert client.get("/api/employees").get_json() == []


def test_create_without_json_body_returns_400(client):
    res = client.post("/api/employees", data="name=Anna")
    assert res.status_code == 400


def test_bulk_replace(client):
    res = client.put("/api/employees", json=[{"id": "x1", "name": "X", "allowance": 12, "used": 2, "remaining": 10}])

    assert res.status_code == 200
    assert res.get_json() == {"success": True}
    assert client.get("/api/employees/x1").get_json()["remaining"] == 10


def test_bulk_replace_with_object_body_returns_400(client):
    res = client.put("/api/employees", json={"id": "x1"})
    assert res.status_code == 400


def test_get_and_patch_employee(client):
    created = client.post("/api/employees", json={"name": "Anna", "allowance": 30}).get_json()["employee"]

    res = client.patch(f"/api/employees/{created['id']}", json={"allowance": 25})
    assert res.status_code == 200
    assert res.get_json()["employee"]["remaining"] == 25

    assert client.get("/api/employees/nope").status_code == 404
    assert client.patch("/api/employees/nope", json={"name": "X"}).status_code == 404
    assert client.patch(f"/api/employees/{created['id']}", json={"allowance": 99}).status_code == 400


def test_list_failure_returns_500(monkeypatch, client, container):
    def boom():
        raise RuntimeError("db down")

    monkeypatch.setattr(container.employees_repo, "list_all", boom)

    res = client.get("/api/employees")
    assert res.status_code == 500
    assert res.get_json()["error"] == "Failed to load employees"


def test_create_with_unusable_color_returns_400(client):
    res = client.post("/api/employees", json={"name": "Anna", "allowance": 30, "color": ["#fff"]})

    assert res.status_code == 400
    assert res.get_json()["success"] is False
    assert client.get("/api/employees").get_json() == []


def test_create_with_control_characters_in_name_returns_400(client):
    res = client.post("/api/employees", json={"name": "Anna\u0001", "allowance": 30})
    assert res.status_code == 400
