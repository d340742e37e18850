"""
Tests for site settings endpoints.
"""
from stichting.models import Setting


def test_get_settings_creates_singleton(client, db_session):
    response = client.get("/api/settings")
    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert response.json()["siteTitle"] == "de Stichting"

    client.get("/api/settings")
    assert db_session.query(Setting).count() == 1


def test_admin_updates_settings(client, admin_headers):
    response = client.put(
        "/api/settings",
        json={"siteTitle": "Stichting Uitjes", "contactEmail": "info@stichting.nl"},
        headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["siteTitle"] == "Stichting Uitjes"

    public = client.get("/api/settings").json()
    assert public["siteTitle"] == "Stichting Uitjes"
    assert public["contactEmail"] == "info@stichting.nl"
    assert public["id"] == 1


def test_settings_update_rejects_unknown_fields(client, admin_headers):
    response = client.put("/api/settings", json={"id": 2}, headers=admin_headers)
    assert response.status_code == 400


def test_settings_update_rejects_bad_email(client, admin_headers):
    response = client.put("/api/settings", json={"contactEmail": "geen-adres"}, headers=admin_headers)
    assert response.status_code == 400
