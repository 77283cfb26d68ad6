from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_serializer
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON bodies use camelCase keys; Python code uses snake_case names."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class Principal(BaseModel):
    """Authenticated identity resolved from a request, passed into every trip operation."""

    id: int
    name: str
    email: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    image: Optional[str] = None


class OwnerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    image: Optional[str] = None


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class Message(BaseModel):
    message: str


class TripPayload(CamelModel):
    """
    Body of POST and PUT /api/trips. Everything is optional at the schema level
    so that missing required fields produce the domain BadRequest message
    rather than a generic validation error.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    total_cost: Optional[float] = None
    image_url: Optional[str] = None
    is_public: Optional[bool] = None
    # Only meaningful on create; PUT ignores it
    user_id: Optional[int] = None


class TripOut(CamelModel):
    id: int
    title: str
    description: str
    location: str
    start_date: datetime
    end_date: datetime
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    total_cost: Optional[float] = None
    image_url: Optional[str] = None
    is_public: bool
    user_id: int
    created_at: datetime

    @field_serializer("start_date", "end_date", "created_at")
    def serialize_utc(self, value: datetime) -> datetime:
        # Stored values are naive UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class TripWithOwner(TripOut):
    user: OwnerOut
