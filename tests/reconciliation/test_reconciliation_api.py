from __future__ import annotations


def test_reconcile_endpoint_updates_balances(client):
    emp = client.post("/api/employees", json={"name": "Anna", "allowance": 30}).get_json()["employee"]
    client.post(
        "/api/vacations",
        json={"employee_id": emp["id"], "start_date": "2024-03-01", "end_date": "2024-03-05", "working_days": 5},
    )

    summary = client.get("/api/employees/summary?year=2024").get_json()
    assert summary["data"][0]["used"] == 5
    assert client.get(f"/api/employees/{emp['id']}").get_json()["used"] == 0

    res = client.post("/api/reconcile?year=2024")
    assert res.status_code == 200
    body = res.get_json()
    assert body["year"] == 2024
    assert body["employees"][0]["remaining"] == 25
    assert client.get(f"/api/employees/{emp['id']}").get_json()["remaining"] == 25


def test_reconcile_with_bad_year_returns_400(client):
    assert client.post("/api/reconcile?year=abc").status_code == 400
    assert client.get("/api/employees/summary?year=99999").status_code == 400
