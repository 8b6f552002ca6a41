# src/fritter/api/v1/endpoints/satellites.py
"""Endpoints exposing the records attached to each freet."""

from typing import Annotated

from fastapi import APIRouter, Query

from fritter.api.v1.dependencies import FreetServiceDep, IdentityDep, SessionDep
from fritter.schemas.freet import (
    ExpandReplace,
    ExpandResponse,
    FreetResponse,
    SimilarResponse,
    SourceResponse,
)
from fritter.services.gate import (
    READ_FREET_GATE,
    REPLACE_EXPAND_GATE,
    GateRequest,
    parse_identifier,
)

router = APIRouter(tags=["satellites"])

FreetIdQuery = Annotated[
    str | None, Query(alias="freetId", description="Identifier of the owning freet")
]


@router.get("/expands", response_model=ExpandResponse)
async def get_expand(
    db: SessionDep,
    freets: FreetServiceDep,
    freet_id: FreetIdQuery = None,
) -> ExpandResponse:
    """Return the expanded commentary of a freet."""
    READ_FREET_GATE.run(GateRequest(db=db, freet_id=freet_id))
    record = freets.expand_for(parse_identifier(freet_id))  # type: ignore[arg-type]
    return ExpandResponse.model_validate(record)


@router.patch("/expands", response_model=FreetResponse)
async def replace_expand(
    payload: ExpandReplace,
    db: SessionDep,
    identity: IdentityDep,
    freets: FreetServiceDep,
) -> FreetResponse:
    """Replace the expanded commentary of a freet owned by the caller."""
    REPLACE_EXPAND_GATE.run(
        GateRequest(
            db=db,
            identity=identity,
            target_id=payload.id,
            expand_content=payload.content,
        )
    )
    post = freets.replace_expanded(
        parse_identifier(payload.id),  # type: ignore[arg-type]
        (payload.content or "").strip(),
    )
    return freets.to_response(post)


@router.get("/sources", response_model=SourceResponse)
async def get_sources(
    db: SessionDep,
    freets: FreetServiceDep,
    freet_id: FreetIdQuery = None,
) -> SourceResponse:
    """Return the source citations of a freet."""
    READ_FREET_GATE.run(GateRequest(db=db, freet_id=freet_id))
    record = freets.sources_for(parse_identifier(freet_id))  # type: ignore[arg-type]
    return SourceResponse.model_validate(record)


@router.get("/similar", response_model=SimilarResponse)
async def get_similar(
    db: SessionDep,
    freets: FreetServiceDep,
    freet_id: FreetIdQuery = None,
) -> SimilarResponse:
    """Return the similarity link of a freet."""
    READ_FREET_GATE.run(GateRequest(db=db, freet_id=freet_id))
    record = freets.similar_for(parse_identifier(freet_id))  # type: ignore[arg-type]
    return SimilarResponse.model_validate(record)
