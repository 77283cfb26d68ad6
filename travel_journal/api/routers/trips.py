from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from travel_journal.api.deps import get_current_principal
from travel_journal.core.database import get_db
from travel_journal.core.errors import internal_errors
from travel_journal.models.domain import (
    Message,
    Principal,
    TripOut,
    TripPayload,
    TripWithOwner,
)
from travel_journal.services import trips as trip_service

router = APIRouter(prefix="/api/trips", tags=["Trips"])


@router.get("", response_model=list[TripWithOwner])
def list_trips(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    """
    Lists public trips, newest first, optionally for a single owner.
    """
    with internal_errors("listing trips"):
        return trip_service.list_trips(db, user_id)


@router.post("", response_model=TripOut, status_code=status.HTTP_201_CREATED)
def create_trip(
    payload: TripPayload,
    db: Session = Depends(get_db),
    principal: Optional[Principal] = Depends(get_current_principal),
):
    with internal_errors("creating a trip"):
        return trip_service.create_trip(db, principal, payload)


@router.get("/{trip_id}", response_model=TripWithOwner)
def get_trip(
    trip_id: int,
    db: Session = Depends(get_db),
    principal: Optional[Principal] = Depends(get_current_principal),
):
    with internal_errors(f"fetching trip {trip_id}"):
        return trip_service.get_trip(db, principal, trip_id)


@router.put("/{trip_id}", response_model=TripOut)
def update_trip(
    trip_id: int,
    payload: TripPayload,
    db: Session = Depends(get_db),
    principal: Optional[Principal] = Depends(get_current_principal),
):
    with internal_errors(f"updating trip {trip_id}"):
        return trip_service.update_trip(db, principal, trip_id, payload)


@router.delete("/{trip_id}", response_model=Message)
def delete_trip(
    trip_id: int,
    db: Session = Depends(get_db),
    principal: Optional[Principal] = Depends(get_current_principal),
):
    with internal_errors(f"deleting trip {trip_id}"):
        return Message(message=trip_service.delete_trip(db, principal, trip_id))
