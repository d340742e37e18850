"""
Tests for the seed script.
"""
from stichting.db.seed import main, seed
from stichting.models import Role, User
from stichting.tests.conftest import TEST_PASSWORD


def test_seed_sample_uitje_counts(client, settings, database):
    uitje = seed(database, settings)

    response = client.get(f"/api/uitjes/{uitje.id}")
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Stranddag Scheveningen"
    assert len(body["events"]) == 2
    assert len(body["meals"]) == 2
    assert len(body["travels"]) == 2
    assert [t["order"] for t in body["travels"]] == [0, 6]

    assert [u["title"] for u in client.get("/api/uitjes").json()] == ["Stranddag Scheveningen"]
    assert client.get("/api/settings").json()["siteTitle"] == "de Stichting"


def test_seed_users_and_login(client, settings, database):
    seed(database, settings)
    response = client.post(
        "/api/auth/login",
        json={"username": "Marcel", "password": settings.DEFAULT_PASSWORD}
    )
    assert response.status_code == 200
    assert response.json()["user"]["role"] == "ADMIN"
    assert response.json()["user"]["mustChangePassword"] is True


def test_seed_keeps_existing_users(settings, database, db_session, make_user):
    make_user("Sandra", password=TEST_PASSWORD)
    seed(database, settings)
    seed(database, settings)

    users = db_session.query(User).order_by(User.id).all()
    assert [u.username for u in users] == ["Sandra", "Marcel", "Dennis", "Roelie"]
    assert [u.role for u in users] == [Role.USER, Role.ADMIN, Role.ADMIN, Role.USER]


def test_seed_main_reports_failure(settings):
    broken = settings.model_copy(update={"DATABASE_URL": "sqlite:////nonexistent-dir/x/seed.db"})
    assert main(broken) == 1
