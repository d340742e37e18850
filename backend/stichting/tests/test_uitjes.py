"""
Tests for the uitje catalog endpoints.
"""
from datetime import datetime, timezone

import pytest


def test_create_uitje_with_programme(client, uitje):
    detail = client.get(f"/api/uitjes/{uitje['id']}")
    assert detail.status_code == 200
    body = detail.json()
    assert body["title"] == "Stranddag Scheveningen"
    assert body["collectTime"] == "09:15"
    assert len(body["events"]) == 2
    assert len(body["meals"]) == 1
    assert len(body["travels"]) == 1
    # Sub-activities come back in programme order
    assert [e["title"] for e in body["events"]] == ["Museum Bezoek", "Rondvaart Haven"]
    assert body["events"][0]["pricePP"] == 12.5
    travel = body["travels"][0]
    assert travel["from"] == "P+R"
    assert travel["to"] == "Scheveningen"
    assert travel["order"] == 0
    assert body["participants"] == []


def test_get_unknown_uitje(client):
    response = client.get("/api/uitjes/9999")
    assert response.status_code == 404
    assert response.json() == {"message": "Not found"}


def test_public_list_filters_and_projects(client, admin_headers):
    for title, day, visible in [
        ("Oud", "2029-01-01", True),
        ("Verborgen", "2031-01-01", False),
        ("Nieuw", "2030-01-01", True),
    ]:
        client.post(
            "/api/uitjes",
            json={"title": title, "date": day, "showOnFrontend": visible, "collectPoint": "Station"},
            headers=admin_headers
        )

    response = client.get("/api/uitjes")
    assert response.status_code == 200
    listed = response.json()
    assert [u["title"] for u in listed] == ["Nieuw", "Oud"]
    assert set(listed[0].keys()) == {
        "id", "date", "title", "description", "imageUrl", "published", "showOnFrontend"
    }


def test_admin_list_includes_hidden_and_participants(client, admin_headers, user_headers, admin_user):
    hidden = client.post(
        "/api/uitjes",
        json={"title": "Verborgen", "date": "2031-01-01"},
        headers=admin_headers
    ).json()
    client.post(f"/api/uitjes/{hidden['id']}/enrol", headers=user_headers)

    response = client.get("/api/uitjes/admin", headers=admin_headers)
    assert response.status_code == 200
    listed = response.json()
    assert [u["title"] for u in listed] == ["Verborgen"]
    assert len(listed[0]["participants"]) == 1
    assert listed[0]["participants"][0]["status"] == "GOING"


def test_detail_participants_carry_user_without_hash(client, uitje, user_headers, regular_user):
    client.post(f"/api/uitjes/{uitje['id']}/enrol", headers=user_headers)
    body = client.get(f"/api/uitjes/{uitje['id']}").json()
    participant = body["participants"][0]
    assert participant["user"]["username"] == "roelie"
    assert "hashedPassword" not in participant["user"]
    assert "phone" not in participant["user"]


def test_update_uitje_partial(client, uitje, admin_headers):
    response = client.put(
        f"/api/uitjes/{uitje['id']}",
        json={"description": "Aangepast", "published": False},
        headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["description"] == "Aangepast"
    assert response.json()["published"] is False
    assert response.json()["title"] == "Stranddag Scheveningen"

    # Programme untouched when not supplied
    detail = client.get(f"/api/uitjes/{uitje['id']}").json()
    assert len(detail["events"]) == 2


def test_update_uitje_replaces_supplied_programme(client, uitje, admin_headers):
    response = client.put(
        f"/api/uitjes/{uitje['id']}",
        json={"events": [{"title": "Strandwandeling", "order": 1}]},
        headers=admin_headers
    )
    assert response.status_code == 200
    detail = client.get(f"/api/uitjes/{uitje['id']}").json()
    assert [e["title"] for e in detail["events"]] == ["Strandwandeling"]
    assert len(detail["meals"]) == 1


def test_deadlines_are_stored_in_utc(client, admin_headers):
    created = client.post(
        "/api/uitjes",
        json={"title": "Zomer", "date": "2030-01-01", "registrationUntil": "2030-01-01T10:00:00+02:00"},
        headers=admin_headers
    ).json()
    body = client.get(f"/api/uitjes/{created['id']}").json()
    stored = datetime.fromisoformat(body["registrationUntil"].replace("Z", "+00:00"))
    assert stored == datetime(2030, 1, 1, 8, 0, tzinfo=timezone.utc)
    assert body["cancelUntil"] is None


def test_update_unknown_uitje(client, admin_headers):
    response = client.put("/api/uitjes/9999", json={"title": "X"}, headers=admin_headers)
    assert response.status_code == 404


def test_create_rejects_unknown_fields(client, admin_headers):
    response = client.post(
        "/api/uitjes",
        json={"title": "X", "date": "2030-01-01", "id": 5, "secretField": True},
        headers=admin_headers
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"


def test_create_rejects_bad_time(client, admin_headers):
    response = client.post(
        "/api/uitjes",
        json={"title": "X", "date": "2030-01-01", "collectTime": "25:99"},
        headers=admin_headers
    )
    assert response.status_code == 400


def test_delete_uitje_cascades(client, uitje, admin_headers, user_headers):
    client.post(f"/api/uitjes/{uitje['id']}/enrol", headers=user_headers)

    response = client.delete(f"/api/uitjes/{uitje['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert client.get(f"/api/uitjes/{uitje['id']}").status_code == 404
    assert client.get("/api/uitjes/admin", headers=admin_headers).json() == []


def test_delete_unknown_uitje(client, admin_headers):
    assert client.delete("/api/uitjes/9999", headers=admin_headers).status_code == 404


ADMIN_ROUTES = [
    ("get", "/api/users", None),
    ("post", "/api/users", {"username": "x"}),
    ("post", "/api/users/1/reset-password", None),
    ("get", "/api/uitjes/admin", None),
    ("post", "/api/uitjes", {"title": "X", "date": "2030-01-01"}),
    ("put", "/api/uitjes/1", {"title": "Y"}),
    ("delete", "/api/uitjes/1", None),
    ("post", "/api/uitjes/1/reset-cancel/1", None),
    ("post", "/api/uitjes/1/payflags/1", {"prepaid": True}),
    ("put", "/api/settings", {"siteTitle": "Y"}),
]


@pytest.mark.parametrize("method,path,body", ADMIN_ROUTES)
def test_admin_routes_forbidden_for_users(client, user_headers, method, path, body):
    kwargs = {"headers": user_headers}
    if body is not None:
        kwargs["json"] = body
    response = getattr(client, method)(path, **kwargs)
    assert response.status_code == 403
    assert response.json() == {"message": "Admin only"}


@pytest.mark.parametrize("method,path,body", ADMIN_ROUTES)
def test_admin_routes_need_a_token(client, method, path, body):
    kwargs = {} if body is None else {"json": body}
    response = getattr(client, method)(path, **kwargs)
    assert response.status_code == 401
