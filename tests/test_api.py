from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from app.main import app

from helpers import CATALOG_SIZE, PASSWORD, TEMPLATE, default_list_id, neet, orders, record, signup


def test_signup_creates_default_list(client):
    headers = signup(client, "ada@example.com")
    resp = client.get("/lists", headers=headers)
    assert resp.status_code == 200
    lists = resp.json()
    assert len(lists) == 1
    assert lists[0]["name"] == "NeetCode 250"
    assert lists[0]["templateVersion"] == TEMPLATE
    assert lists[0]["deprecated"] is False

    me = client.get("/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["email"] == "ada@example.com"


def test_signup_defaults_timezone(client):
    resp = client.post("/auth/signup", json={"email": "tz@example.com", "password": PASSWORD})
    assert resp.status_code == 200
    assert resp.json()["timezone"] == "America/Chicago"


@pytest.mark.parametrize("tz", ["America", "Not/AZone"])
def test_signup_rejects_unknown_timezone(client, tz):
    resp = client.post("/auth/signup", json={"email": "zone@example.com", "password": PASSWORD, "timezone": tz})
    assert resp.status_code == 400
    login = client.post("/auth/login", json={"email": "zone@example.com", "password": PASSWORD})
    assert login.status_code == 401


def test_duplicate_signup_and_bad_login(client):
    signup(client, "grace@example.com")
    dup = client.post("/auth/signup", json={"email": "Grace@example.com", "password": PASSWORD})
    assert dup.status_code == 400

    bad = client.post("/auth/login", json={"email": "grace@example.com", "password": "wrong-password"})
    assert bad.status_code == 401
    good = client.post("/auth/login", json={"email": "grace@example.com", "password": PASSWORD})
    assert good.status_code == 200
    assert good.json()["tokenType"] == "bearer"


def test_dashboard_requires_token(client):
    fresh = TestClient(app)
    assert fresh.get("/dashboard").status_code == 401
    assert fresh.get("/dashboard", headers={"Authorization": "Bearer not-a-jwt"}).status_code == 401


def test_scenario_a(client):
    headers = signup(client, "a@example.com")
    list_id = default_list_id(client, headers)
    record(client, headers, list_id, 2, solved=True)
    record(client, headers, list_id, 3, solved=False)

    resp = client.get("/dashboard", params={"scope": "list", "listId": list_id}, headers=headers)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["farthestSolved"]["orderIndex"] == 2
    assert body["farthestSolved"]["neet250Id"] == neet(2)
    assert orders(body["latestSolvedPanel"]) == [2]
    assert orders(body["nextUnsolvedPanel"]) == [3, 4, 5, 6]
    assert body["listId"] == list_id
    assert body["resolvedListId"] == list_id


def test_scenario_b(client):
    headers = signup(client, "b@example.com")
    list_id = default_list_id(client, headers)
    record(client, headers, list_id, 2, solved=True)
    record(client, headers, list_id, 5, solved=True)
    record(client, headers, list_id, 3, solved=False)

    body = client.get("/dashboard", headers=headers).json()
    assert body["scope"] == "latest"
    assert body["latestListId"] == list_id
    assert body["farthestSolved"]["orderIndex"] == 5
    assert orders(body["latestSolvedPanel"]) == [5, 2]
    assert orders(body["nextUnsolvedPanel"]) == [6, 7, 8, 9]
    assert body["totalSolved"] == 2
    assert sum(c["totalInCategory"] for c in body["perCategory"]) == CATALOG_SIZE


def test_scope_all_and_case_insensitive(client):
    headers = signup(client, "all@example.com")
    first = default_list_id(client, headers)
    created = client.post("/lists", json={"name": "Second pass", "templateVersion": TEMPLATE}, headers=headers)
    assert created.status_code == 200
    second = created.json()["id"]

    record(client, headers, first, 1, solved=True)
    record(client, headers, second, 2, solved=True)

    body = client.get("/dashboard", params={"scope": "ALL"}, headers=headers).json()
    assert body["scope"] == "all"
    assert body["totalSolved"] == 2
    assert body["resolvedListId"] is None


def test_dashboard_errors(client):
    headers = signup(client, "err@example.com")
    other = signup(client, "other@example.com")
    other_list = default_list_id(client, other)

    assert client.get("/dashboard", params={"scope": "weekly"}, headers=headers).status_code == 400
    assert client.get("/dashboard", params={"scope": "list"}, headers=headers).status_code == 400
    foreign = client.get("/dashboard", params={"scope": "list", "listId": other_list}, headers=headers)
    assert foreign.status_code == 404
    missing = client.get("/dashboard", params={"scope": "list", "listId": str(uuid4())}, headers=headers)
    assert missing.status_code == 404


def test_dashboard_is_idempotent(client):
    headers = signup(client, "same@example.com")
    list_id = default_list_id(client, headers)
    record(client, headers, list_id, 1, solved=True, timeMinutes=15, dateSolved="2026-03-09")
    first = client.get("/dashboard", headers=headers)
    second = client.get("/dashboard", headers=headers)
    assert first.content == second.content
    assert first.json()["overallAvgTimeMinutes"] == 15.0
    assert first.json()["lastActivityAt"] is not None


def test_empty_attempt_payload_rejected(client):
    headers = signup(client, "empty@example.com")
    list_id = default_list_id(client, headers)
    resp = client.post(
        f"/lists/{list_id}/problems/{neet(1)}/attempts",
        json={"solved": None, "dateSolved": None, "timeMinutes": None, "notes": ""},
        headers=headers,
    )
    assert resp.status_code == 400
    assert client.get(f"/lists/{list_id}/problems/{neet(1)}/attempts", headers=headers).json() == []


def test_attempt_for_unknown_problem(client):
    headers = signup(client, "unknown@example.com")
    list_id = default_list_id(client, headers)
    resp = client.post(f"/lists/{list_id}/problems/99999/attempts", json={"solved": True}, headers=headers)
    assert resp.status_code == 404


def test_attempt_update_and_delete(client):
    headers = signup(client, "edit@example.com")
    list_id = default_list_id(client, headers)
    created = record(client, headers, list_id, 4, solved=False, attempts=1)

    patched = client.patch(f"/attempts/{created['id']}", json={"solved": True, "attempts": 2}, headers=headers)
    assert patched.status_code == 200
    assert patched.json()["id"] == created["id"]
    assert client.get("/dashboard", headers=headers).json()["totalSolved"] == 1

    assert client.delete(f"/attempts/{created['id']}", headers=headers).status_code == 204
    assert client.get("/dashboard", headers=headers).json()["totalSolved"] == 0
    assert client.delete(f"/attempts/{created['id']}", headers=headers).status_code == 404


def test_problems_with_latest_attempt(client):
    headers = signup(client, "catalog@example.com")
    list_id = default_list_id(client, headers)
    record(client, headers, list_id, 1, solved=False, notes="first try")
    record(client, headers, list_id, 1, solved=True, confidence="high")

    resp = client.get(f"/lists/{list_id}/problems", headers=headers)
    assert resp.status_code == 200
    rows = resp.json()
    assert [r["orderIndex"] for r in rows] == list(range(1, CATALOG_SIZE + 1))
    assert rows[0]["latestAttempt"]["solved"] is True
    assert rows[0]["latestAttempt"]["confidence"] == "HIGH"
    assert rows[1]["latestAttempt"] is None

    history = client.get(f"/lists/{list_id}/problems/{neet(1)}/attempts", headers=headers).json()
    assert [h["solved"] for h in history] == [True, False]


def test_list_rename_and_deprecate(client):
    headers = signup(client, "lists@example.com")
    list_id = default_list_id(client, headers)
    renamed = client.patch(f"/lists/{list_id}", json={"name": "Interview prep"}, headers=headers)
    assert renamed.json()["name"] == "Interview prep"
    deprecated = client.post(f"/lists/{list_id}/deprecate", headers=headers)
    assert deprecated.json()["deprecated"] is True
    unknown = client.post("/lists", json={"name": "x", "templateVersion": "nope.v9"}, headers=headers)
    assert unknown.status_code == 400


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["components"]["database"]["status"] == "ok"
