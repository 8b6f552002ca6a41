"""Shared API dependencies for identity and service wiring."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from fritter.core.security import decode_access_token
from fritter.db.session import get_db
from fritter.repositories.post_repo import PostRepository
from fritter.services.freet_service import FreetService
from fritter.services.similarity import CorpusSimilarityOracle, SimilarityOracle

# Optional bearer scheme: a missing header means "no identity claim".
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> int | None:
    """Return the user id claimed by the bearer token, if one was sent.

    Whether that user still exists is for the validation gate to decide.

    Raises:
        HTTPException: If a token was sent but cannot be decoded.
    """
    if credentials is None:
        return None
    try:
        return decode_access_token(credentials.credentials)
    except (JWTError, ValueError) as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err


def get_similarity_oracle(db: SessionDep) -> SimilarityOracle:
    """Return the oracle used to rank similar freets."""
    return CorpusSimilarityOracle(PostRepository(db))


def get_freet_service(
    db: SessionDep,
    oracle: Annotated[SimilarityOracle, Depends(get_similarity_oracle)],
) -> FreetService:
    return FreetService(db, oracle)


# Type aliases for identity and orchestrator dependencies
IdentityDep = Annotated[int | None, Depends(get_identity)]
FreetServiceDep = Annotated[FreetService, Depends(get_freet_service)]
