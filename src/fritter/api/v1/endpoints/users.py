# src/fritter/api/v1/endpoints/users.py
"""Account and session endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status

from fritter.api.v1.dependencies import FreetServiceDep, IdentityDep, SessionDep
from fritter.core.errors import GateRejection
from fritter.core.security import create_access_token
from fritter.repositories.user_repo import UserDirectory
from fritter.schemas.user import (
    Credentials,
    MessageResponse,
    SessionResponse,
    UserResponse,
    UserUpdate,
)
from fritter.services.gate import (
    CREATE_ACCOUNT_GATE,
    DELETE_ACCOUNT_GATE,
    SIGN_IN_GATE,
    SIGN_OUT_GATE,
    UPDATE_ACCOUNT_GATE,
    GateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_account(
    payload: Credentials,
    db: SessionDep,
    identity: IdentityDep,
) -> UserResponse:
    """Create a new account. Callers must be signed out."""
    CREATE_ACCOUNT_GATE.run(
        GateRequest(
            db=db,
            identity=identity,
            username=payload.username,
            password=payload.password,
        )
    )
    user = UserDirectory(db).create(payload.username or "", payload.password or "")
    logger.info("Created account %s", user.id)
    return UserResponse.model_validate(user)


@router.post("/session", response_model=SessionResponse)
async def sign_in(
    payload: Credentials,
    db: SessionDep,
    identity: IdentityDep,
) -> SessionResponse:
    """Exchange valid credentials for a bearer token."""
    SIGN_IN_GATE.run(
        GateRequest(
            db=db,
            identity=identity,
            username=payload.username,
            password=payload.password,
        )
    )
    user = UserDirectory(db).find_by_username_and_password(
        payload.username or "", payload.password or ""
    )
    if user is None:
        raise GateRejection(status.HTTP_401_UNAUTHORIZED, "Invalid user login credentials provided.")
    return SessionResponse(
        access_token=create_access_token(user.id),
        user=UserResponse.model_validate(user),
    )


@router.delete("/session", response_model=MessageResponse)
async def sign_out(db: SessionDep, identity: IdentityDep) -> MessageResponse:
    """Sign out. Tokens are stateless, so the client simply discards its token."""
    SIGN_OUT_GATE.run(GateRequest(db=db, identity=identity))
    return MessageResponse(message="You have been signed out successfully.")


@router.patch("/", response_model=UserResponse)
async def update_account(
    payload: UserUpdate,
    db: SessionDep,
    identity: IdentityDep,
) -> UserResponse:
    """Change the signed-in user's username and/or password."""
    UPDATE_ACCOUNT_GATE.run(
        GateRequest(
            db=db,
            identity=identity,
            username=payload.username,
            password=payload.password,
        )
    )
    directory = UserDirectory(db)
    user = directory.find_by_id(identity)  # type: ignore[arg-type]
    user = directory.update(user, username=payload.username, password=payload.password)  # type: ignore[arg-type]
    return UserResponse.model_validate(user)


@router.delete("/", response_model=MessageResponse)
async def delete_account(
    db: SessionDep,
    identity: IdentityDep,
    freets: FreetServiceDep,
) -> MessageResponse:
    """Delete the signed-in account together with every freet it wrote."""
    DELETE_ACCOUNT_GATE.run(GateRequest(db=db, identity=identity))
    user = UserDirectory(db).find_by_id(identity)  # type: ignore[arg-type]
    freets.delete_account(user)  # type: ignore[arg-type]
    return MessageResponse(message="Your account has been deleted successfully.")
