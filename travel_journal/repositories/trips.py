"""
Store access for trips. Owner projections are loaded with an explicit join on
trips.user_id rather than through ORM relationships.
"""

from typing import Optional
from sqlalchemy.orm import Session

from travel_journal.core.database import fits_id_column
from travel_journal.models.sql import Trip, User


def list_public_with_owner(
    db: Session, user_id: Optional[int] = None
) -> list[tuple[Trip, User]]:
    query = (
        db.query(Trip, User)
        .join(User, Trip.user_id == User.id)
        .filter(Trip.is_public.is_(True))
    )
    if user_id is not None:
        if not fits_id_column(user_id):
            return []
        query = query.filter(Trip.user_id == user_id)
    return query.order_by(Trip.created_at.desc(), Trip.id.desc()).all()


def find_by_id(db: Session, trip_id: int) -> Optional[Trip]:
    # Ids the column cannot hold cannot exist
    if not fits_id_column(trip_id):
        return None
    return db.query(Trip).filter(Trip.id == trip_id).first()


def find_with_owner(db: Session, trip_id: int) -> Optional[tuple[Trip, User]]:
    if not fits_id_column(trip_id):
        return None
    return (
        db.query(Trip, User)
        .join(User, Trip.user_id == User.id)
        .filter(Trip.id == trip_id)
        .first()
    )


def create(db: Session, user_id: int, fields: dict) -> Trip:
    trip = Trip(user_id=user_id, **fields)
    db.add(trip)
    db.commit()
    db.refresh(trip)
    return trip


def update(db: Session, trip: Trip, fields: dict) -> Trip:
    for name, value in fields.items():
        setattr(trip, name, value)
    db.commit()
    db.refresh(trip)
    return trip


def delete(db: Session, trip: Trip) -> None:
    db.delete(trip)
    db.commit()
