"""
Trip operations with visibility and ownership rules.

Every operation takes the current principal explicitly (None for anonymous
callers). Checks always run in the same order: authentication, existence,
ownership, then body validation, so a probe for a missing id gets NotFound
before any ownership decision is made.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy.orm import Session

from travel_journal.core.errors import (
    MSG_CREATE_FORBIDDEN,
    MSG_DELETE_FORBIDDEN,
    MSG_INVALID_DATE,
    MSG_TRIP_FORBIDDEN,
    MSG_UPDATE_FORBIDDEN,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)
from travel_journal.models.domain import (
    OwnerOut,
    Principal,
    TripOut,
    TripPayload,
    TripWithOwner,
)
from travel_journal.models.sql import Trip, User
from travel_journal.repositories import trips as trip_store

logger = logging.getLogger("travel_journal.trips")

REQUIRED_FIELDS = ("title", "description", "location", "start_date", "end_date")

MSG_TRIP_DELETED = "Путешествие успешно удалено"


def parse_date(value: str) -> datetime:
    """
    Parses an ISO-8601 date or timestamp. Aware values are converted to naive UTC
    so that every stored datetime shares one convention.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise BadRequestError(MSG_INVALID_DATE)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _with_owner(trip: Trip, owner: User) -> TripWithOwner:
    data = TripOut.model_validate(trip).model_dump()
    data["user"] = OwnerOut.model_validate(owner)
    return TripWithOwner(**data)


def _require_principal(principal: Optional[Principal]) -> Principal:
    if principal is None:
        raise UnauthorizedError()
    return principal


def _require_fields(payload: TripPayload) -> None:
    # Empty strings count as missing
    if not all(getattr(payload, name) for name in REQUIRED_FIELDS):
        raise BadRequestError()


def _mutable_fields(payload: TripPayload) -> dict:
    """Full replacement set: absent optional fields are cleared."""
    return {
        "title": payload.title,
        "description": payload.description,
        "location": payload.location,
        "start_date": parse_date(payload.start_date),
        "end_date": parse_date(payload.end_date),
        "latitude": payload.latitude,
        "longitude": payload.longitude,
        "total_cost": payload.total_cost,
        "image_url": payload.image_url,
        "is_public": bool(payload.is_public),
    }


def list_trips(db: Session, user_id: Optional[str] = None) -> list[TripWithOwner]:
    """
    Public trips only, newest first. The owner filter narrows the public set;
    it never reveals private trips, not even to their owner.

    The filter arrives as raw query text: empty means no filter, and a value
    that is not an integer id matches no owner.
    """
    owner_id = None
    if user_id:
        try:
            owner_id = int(user_id)
        except ValueError:
            return []

    rows = trip_store.list_public_with_owner(db, owner_id)
    return [_with_owner(trip, owner) for trip, owner in rows]


def get_trip(
    db: Session, principal: Optional[Principal], trip_id: int
) -> TripWithOwner:
    row = trip_store.find_with_owner(db, trip_id)
    if row is None:
        raise NotFoundError()

    trip, owner = row
    if not trip.is_public and (principal is None or principal.id != trip.user_id):
        raise ForbiddenError(MSG_TRIP_FORBIDDEN)

    return _with_owner(trip, owner)


def create_trip(
    db: Session, principal: Optional[Principal], payload: TripPayload
) -> TripOut:
    principal = _require_principal(principal)
    _require_fields(payload)

    if payload.user_id != principal.id:
        logger.warning(
            f"User {principal.id} tried to create a trip for user {payload.user_id}"
        )
        raise ForbiddenError(MSG_CREATE_FORBIDDEN)

    trip = trip_store.create(db, principal.id, _mutable_fields(payload))
    logger.info(f"Trip {trip.id} created by user {principal.id}")
    return TripOut.model_validate(trip)


def update_trip(
    db: Session, principal: Optional[Principal], trip_id: int, payload: TripPayload
) -> TripOut:
    principal = _require_principal(principal)

    trip = trip_store.find_by_id(db, trip_id)
    if trip is None:
        raise NotFoundError()
    if trip.user_id != principal.id:
        raise ForbiddenError(MSG_UPDATE_FORBIDDEN)

    _require_fields(payload)

    trip = trip_store.update(db, trip, _mutable_fields(payload))
    logger.info(f"Trip {trip.id} updated by user {principal.id}")
    return TripOut.model_validate(trip)


def delete_trip(db: Session, principal: Optional[Principal], trip_id: int) -> str:
    principal = _require_principal(principal)

    trip = trip_store.find_by_id(db, trip_id)
    if trip is None:
        raise NotFoundError()
    if trip.user_id != principal.id:
        raise ForbiddenError(MSG_DELETE_FORBIDDEN)

    trip_store.delete(db, trip)
    logger.info(f"Trip {trip_id} deleted by user {principal.id}")
    return MSG_TRIP_DELETED
