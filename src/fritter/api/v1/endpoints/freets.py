# src/fritter/api/v1/endpoints/freets.py
"""Freet endpoints for the Fritter API."""

from fastapi import APIRouter, Query, status

from fritter.api.v1.dependencies import FreetServiceDep, IdentityDep, SessionDep
from fritter.schemas.freet import FreetCreate, FreetResponse, FreetUpdate
from fritter.schemas.user import MessageResponse
from fritter.services.gate import (
    CREATE_FREET_GATE,
    DELETE_FREET_GATE,
    LIST_BY_AUTHOR_GATE,
    READ_FREET_GATE,
    UPDATE_FREET_GATE,
    GateRequest,
    parse_identifier,
)

router = APIRouter(prefix="/freets", tags=["freets"])


@router.get("/", response_model=list[FreetResponse])
async def list_freets(
    db: SessionDep,
    freets: FreetServiceDep,
    author: str | None = Query(None, description="Only freets by this username"),
) -> list[FreetResponse]:
    """List freets, most recently modified first.

    Args:
        db: Database session
        freets: Freet orchestrator
        author: Optional author username; when the key is present it must name a user

    Returns:
        Freets with author and satellites resolved
    """
    if author is None:
        posts = freets.find_all()
    else:
        LIST_BY_AUTHOR_GATE.run(GateRequest(db=db, author=author))
        posts = freets.find_all_by_username(author)
    return [freets.to_response(post) for post in posts]


@router.post("/", response_model=FreetResponse, status_code=status.HTTP_201_CREATED)
async def create_freet(
    payload: FreetCreate,
    db: SessionDep,
    identity: IdentityDep,
    freets: FreetServiceDep,
) -> FreetResponse:
    """Create a freet with its expanded commentary, citations and similarity link."""
    CREATE_FREET_GATE.run(
        GateRequest(db=db, identity=identity, expand_content=payload.expand_content)
    )
    post = freets.create(
        author_id=identity,  # type: ignore[arg-type]
        content=payload.content,
        expand_content=(payload.expand_content or "").strip(),
        source_one=payload.source_one,
        source_two=payload.source_two,
        source_three=payload.source_three,
    )
    return freets.to_response(post)


@router.get("/{freet_id}", response_model=FreetResponse)
async def get_freet(freet_id: str, db: SessionDep, freets: FreetServiceDep) -> FreetResponse:
    """Return one freet by identifier."""
    READ_FREET_GATE.run(GateRequest(db=db, freet_id=freet_id))
    post = freets.find_one(parse_identifier(freet_id))  # type: ignore[arg-type]
    return freets.to_response(post)  # type: ignore[arg-type]


@router.patch("/{freet_id}", response_model=FreetResponse)
async def update_freet(
    freet_id: str,
    payload: FreetUpdate,
    db: SessionDep,
    identity: IdentityDep,
    freets: FreetServiceDep,
) -> FreetResponse:
    """Rewrite a freet; all three satellites are re-created and repointed."""
    UPDATE_FREET_GATE.run(
        GateRequest(
            db=db,
            identity=identity,
            freet_id=freet_id,
            expand_content=payload.expand_content,
        )
    )
    post = freets.update(
        parse_identifier(freet_id),  # type: ignore[arg-type]
        content=payload.content,
        expand_content=(payload.expand_content or "").strip(),
        source_one=payload.source_one,
        source_two=payload.source_two,
        source_three=payload.source_three,
    )
    return freets.to_response(post)


@router.delete("/{freet_id}", response_model=MessageResponse)
async def delete_freet(
    freet_id: str,
    db: SessionDep,
    identity: IdentityDep,
    freets: FreetServiceDep,
) -> MessageResponse:
    """Delete a freet together with its satellites."""
    DELETE_FREET_GATE.run(GateRequest(db=db, identity=identity, freet_id=freet_id))
    freets.delete(parse_identifier(freet_id))  # type: ignore[arg-type]
    return MessageResponse(message="Your freet was deleted successfully.")
