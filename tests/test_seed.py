from travel_journal.models.sql import Trip, User
from travel_journal.seed import DEMO_PASSWORD, DEMO_TRIPS, seed


def test_seed_populates_demo_data(db_session):
    users, trips = seed(db_session)

    assert [u.email for u in users] == ["user1@example.com", "user2@example.com"]
    assert db_session.query(Trip).count() == len(DEMO_TRIPS)
    assert db_session.query(Trip).filter(Trip.is_public.is_(False)).count() == 1


def test_seed_is_repeatable(db_session):
    seed(db_session)
    seed(db_session)

    assert db_session.query(User).count() == 2
    assert db_session.query(Trip).count() == len(DEMO_TRIPS)


def test_seeded_data_through_api(client, db_session):
    seed(db_session)

    listing = client.get("/api/trips").json()
    assert len(listing) == 4
    assert "Выходные в Казани" not in [t["title"] for t in listing]

    login = client.post(
        "/api/auth/token",
        data={"username": "user1@example.com", "password": DEMO_PASSWORD},
    )
    assert login.status_code == 200
