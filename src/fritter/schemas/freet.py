"""Freet-related Pydantic schemas."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from fritter.db.time import as_utc


class FreetCreate(BaseModel):
    """Payload for creating or rewriting a freet.

    ``expand_content`` is deliberately unconstrained here; its bounds are
    enforced by the validation gate so that failures carry the API's status
    codes rather than a schema 422.
    """

    content: str = Field(..., description="Freet text")
    expand_content: str | None = Field(None, description="Expanded commentary")
    source_one: str | None = Field(None, description="First source citation")
    source_two: str | None = Field(None, description="Second source citation")
    source_three: str | None = Field(None, description="Third source citation")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


FreetUpdate = FreetCreate


class ExpandReplace(BaseModel):
    """Payload for replacing the expanded commentary of a freet."""

    id: str | int | None = Field(None, description="Identifier of the owning freet")
    content: str | None = Field(None, description="New expanded commentary")


class FreetResponse(BaseModel):
    """Freet with its author and satellites resolved."""

    id: int
    author: str
    content: str
    date_created: datetime
    date_modified: datetime
    expand_content_id: int | None
    source_citation_id: int | None
    similar_link_id: int | None
    expand_content: str | None = None
    sources: list[str | None] = Field(default_factory=lambda: [None, None, None])
    similar: list[int | None] = Field(default_factory=lambda: [None, None])

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("date_created", "date_modified")
    @classmethod
    def normalize_dates(cls, value: datetime) -> datetime:
        return as_utc(value)


class ExpandResponse(BaseModel):
    id: int
    freet_id: int = Field(validation_alias=AliasChoices("freetId", "freet_id", "post_id"))
    content: str

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class SourceResponse(BaseModel):
    id: int
    freet_id: int = Field(validation_alias=AliasChoices("freetId", "freet_id", "post_id"))
    source_one: str | None
    source_two: str | None
    source_three: str | None

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class SimilarResponse(BaseModel):
    id: int
    freet_id: int = Field(validation_alias=AliasChoices("freetId", "freet_id", "post_id"))
    similar_post_id_one: int | None
    similar_post_id_two: int | None

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
