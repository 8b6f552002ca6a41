"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from fritter.db.time import as_utc


class Credentials(BaseModel):
    """Username and password as submitted; the gate validates their shape."""

    username: str | None = Field(None, description="Account username")
    password: str | None = Field(None, description="Account password")


class UserUpdate(BaseModel):
    """Partial account update; omitted fields stay unchanged."""

    username: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    id: int
    username: str
    date_joined: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    @field_validator("date_joined")
    @classmethod
    def normalize_date_joined(cls, value: datetime) -> datetime:
        return as_utc(value)


class SessionResponse(BaseModel):
    """Returned on sign in."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str
