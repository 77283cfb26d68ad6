import argparse
from datetime import datetime
from sqlalchemy.orm import Session

from travel_journal.core.database import Base, SessionLocal, engine
from travel_journal.models.sql import Trip, User
from travel_journal.repositories import users as user_store
from travel_journal.services.auth import get_password_hash

DEMO_PASSWORD = "password123"

DEMO_USERS = [
    {"name": "Иван Петров", "email": "user1@example.com"},
    {"name": "Мария Сидорова", "email": "user2@example.com"},
]

# owner is an index into DEMO_USERS
DEMO_TRIPS = [
    {
        "owner": 0,
        "title": "Поездка в Санкт-Петербург",
        "description": "Удивительное путешествие в культурную столицу России. Посетили Эрмитаж, Петергоф и другие достопримечательности.",
        "location": "Санкт-Петербург, Россия",
        "start_date": datetime(2023, 6, 10),
        "end_date": datetime(2023, 6, 17),
        "latitude": 59.9343,
        "longitude": 30.3351,
        "total_cost": 45000,
        "image_url": "https://via.placeholder.com/800x600?text=Санкт-Петербург",
        "is_public": True,
    },
    {
        "owner": 0,
        "title": "Отдых в Сочи",
        "description": "Прекрасный отпуск на Черноморском побережье. Чистое море, жаркое солнце и вкусная еда!",
        "location": "Сочи, Россия",
        "start_date": datetime(2023, 7, 20),
        "end_date": datetime(2023, 7, 31),
        "latitude": 43.6028,
        "longitude": 39.7342,
        "total_cost": 65000,
        "image_url": "https://via.placeholder.com/800x600?text=Сочи",
        "is_public": True,
    },
    {
        "owner": 0,
        "title": "Выходные в Казани",
        "description": "Короткая поездка на выходные в Казань. Посетили Казанский Кремль и другие интересные места.",
        "location": "Казань, Россия",
        "start_date": datetime(2023, 8, 12),
        "end_date": datetime(2023, 8, 14),
        "latitude": 55.7887,
        "longitude": 49.1221,
        "total_cost": 20000,
        "image_url": "https://via.placeholder.com/800x600?text=Казань",
        "is_public": False,
    },
    {
        "owner": 1,
        "title": "Поход на Алтай",
        "description": "Незабываемый поход по Горному Алтаю. Красивейшие пейзажи, чистый воздух и полное единение с природой.",
        "location": "Горный Алтай, Россия",
        "start_date": datetime(2023, 6, 1),
        "end_date": datetime(2023, 6, 10),
        "latitude": 50.7747,
        "longitude": 86.1566,
        "total_cost": 35000,
        "image_url": "https://via.placeholder.com/800x600?text=Алтай",
        "is_public": True,
    },
    {
        "owner": 1,
        "title": "Отпуск в Турции",
        "description": "Замечательный отдых в Анталии. All-inclusive отель, теплое море и множество экскурсий.",
        "location": "Анталия, Турция",
        "start_date": datetime(2023, 9, 5),
        "end_date": datetime(2023, 9, 15),
        "latitude": 36.8969,
        "longitude": 30.7133,
        "total_cost": 80000,
        "image_url": "https://via.placeholder.com/800x600?text=Турция",
        "is_public": True,
    },
]


def seed(db: Session) -> tuple[list[User], list[Trip]]:
    """
    Upserts the demo users and replaces every trip with the demo set.
    Existing users keep their password; new ones get DEMO_PASSWORD.
    """
    users = []
    for data in DEMO_USERS:
        user = user_store.find_by_email(db, data["email"])
        if user is None:
            user = user_store.create(
                db,
                name=data["name"],
                email=data["email"],
                hashed_password=get_password_hash(DEMO_PASSWORD),
            )
        users.append(user)

    db.query(Trip).delete()
    trips = []
    for data in DEMO_TRIPS:
        fields = {k: v for k, v in data.items() if k != "owner"}
        trip = Trip(user_id=users[data["owner"]].id, **fields)
        db.add(trip)
        trips.append(trip)
    db.commit()
    return users, trips


def main():
    parser = argparse.ArgumentParser(description="Populate the travel journal with demo data")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop and recreate all tables before seeding",
    )
    args = parser.parse_args()

    if args.reset:
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    print("--- Seeding demo data ---")
    db = SessionLocal()
    try:
        users, trips = seed(db)
    finally:
        db.close()

    print(f"Users: {len(users)}")
    print(f"Trips: {len(trips)}")
    print(f"Demo password: {DEMO_PASSWORD}")


if __name__ == "__main__":
    main()
