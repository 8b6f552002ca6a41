"""Validation gate: ordered precondition checks run before any mutation.

Each check receives a :class:`GateRequest` and either returns ``None`` or
raises :class:`~fritter.core.errors.GateRejection`. A :class:`ValidationGate`
runs its checks in order and stops at the first rejection, so later checks
never execute.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import status
from sqlalchemy.orm import Session

from fritter.core.errors import GateRejection
from fritter.core.settings import settings
from fritter.repositories.post_repo import PostRepository
from fritter.repositories.user_repo import UserDirectory

logger = logging.getLogger(__name__)

_USERNAME_RE = re.compile(r"\w+", re.ASCII)
_PASSWORD_RE = re.compile(r"\S+")


@dataclass
class GateRequest:
    """Everything a check may inspect about one inbound request.

    Attributes:
        db: Session used for read-only lookups.
        identity: Authenticated user id, or None when no identity claim was sent.
        username: Candidate username from the payload.
        password: Candidate password from the payload.
        author: Author username from the query string.
        freet_id: Freet identifier addressed by the request, as received.
        target_id: Freet identifier named in an expanded-commentary payload.
        expand_content: Candidate expanded-commentary text.
    """

    db: Session
    identity: int | None = None
    username: str | None = None
    password: str | None = None
    author: str | None = None
    freet_id: str | int | None = None
    target_id: str | int | None = None
    expand_content: str | None = None

    @property
    def subject_post_id(self) -> int | None:
        """Return the freet this request acts on, if it names a valid one."""
        raw = self.freet_id if self.freet_id is not None else self.target_id
        return parse_identifier(raw)


Check = Callable[[GateRequest], None]


def parse_identifier(raw: str | int | None) -> int | None:
    """Return ``raw`` as a freet identifier, or None if it is not well formed."""
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    text = str(raw).strip()
    if not text.isascii() or not text.isdigit():
        return None
    value = int(text)
    return value if value > 0 else None


class ValidationGate:
    """An ordered, short-circuiting chain of checks."""

    def __init__(self, *checks: Check) -> None:
        self.checks: tuple[Check, ...] = checks

    def run(self, request: GateRequest) -> None:
        """Run every check in order; the first rejection propagates."""
        for check in self.checks:
            try:
                check(request)
            except GateRejection as rejection:
                name = getattr(check, "__name__", repr(check))
                rejection.check = rejection.check or name
                logger.debug("Gate rejected request at %s with %s", name, rejection.status_code)
                raise


def when_present(field: str, check: Check) -> Check:
    """Run ``check`` only when ``field`` was supplied in the request."""

    def conditional(request: GateRequest) -> None:
        if getattr(request, field) is not None:
            check(request)

    conditional.__name__ = check.__name__
    return conditional


# --- account checks -------------------------------------------------------------


def session_identity_exists(request: GateRequest) -> None:
    """The identity claim, if any, must still resolve to a user.

    A user may act from one browser after deleting the account in another.
    """
    if request.identity is None:
        return
    if UserDirectory(request.db).find_by_id(request.identity) is None:
        raise GateRejection(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"userNotFound": "User session was not recognized."},
        )


def username_well_formed(request: GateRequest) -> None:
    if not _USERNAME_RE.fullmatch(request.username or ""):
        raise GateRejection(
            status.HTTP_400_BAD_REQUEST,
            {"username": "Username must be a nonempty alphanumeric string."},
        )


def password_well_formed(request: GateRequest) -> None:
    if not _PASSWORD_RE.fullmatch(request.password or ""):
        raise GateRejection(
            status.HTTP_400_BAD_REQUEST,
            {"password": "Password must be a nonempty string."},
        )


def credentials_match(request: GateRequest) -> None:
    if not request.username or not request.password:
        missing = "password" if request.username else "username"
        raise GateRejection(
            status.HTTP_400_BAD_REQUEST,
            f"Missing {missing} credentials for sign in.",
        )
    user = UserDirectory(request.db).find_by_username_and_password(
        request.username, request.password
    )
    if user is None:
        raise GateRejection(
            status.HTTP_401_UNAUTHORIZED,
            "Invalid user login credentials provided.",
        )


def username_available(request: GateRequest) -> None:
    """Nobody else may own the username; renaming to one's own name in any case is fine."""
    user = UserDirectory(request.db).find_by_username(request.username or "")
    if user is None or user.id == request.identity:
        return
    raise GateRejection(
        status.HTTP_409_CONFLICT,
        {"username": "An account with this username already exists."},
    )


def must_be_logged_in(request: GateRequest) -> None:
    if request.identity is None:
        raise GateRejection(
            status.HTTP_403_FORBIDDEN,
            {"auth": "You must be logged in to complete this action."},
        )


def must_be_logged_out(request: GateRequest) -> None:
    if request.identity is not None:
        raise GateRejection(status.HTTP_403_FORBIDDEN, "You are already signed in.")


def author_exists(request: GateRequest) -> None:
    if not request.author:
        raise GateRejection(
            status.HTTP_400_BAD_REQUEST,
            "Provided author username must be nonempty.",
        )
    if UserDirectory(request.db).find_by_username(request.author) is None:
        raise GateRejection(
            status.HTTP_404_NOT_FOUND,
            f"A user with username {request.author} does not exist.",
        )


# --- freet checks ---------------------------------------------------------------


def target_post_exists(request: GateRequest) -> None:
    """The freet named in an expanded-commentary payload must exist."""
    if request.target_id is None or request.target_id == "":
        raise GateRejection(status.HTTP_400_BAD_REQUEST, "Missing id")
    post_id = parse_identifier(request.target_id)
    if post_id is None or PostRepository(request.db).get_by_id(post_id) is None:
        raise GateRejection(status.HTTP_401_UNAUTHORIZED, "Invalid expand")


def expanded_content_well_formed(request: GateRequest) -> None:
    content = (request.expand_content or "").strip()
    if not content:
        raise GateRejection(
            status.HTTP_400_BAD_REQUEST,
            "Expanded content must be at least one character long.",
        )
    limit = settings.expand_content_max_length
    if len(content) > limit:
        raise GateRejection(
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            f"Expand content must be no more than {limit} characters.",
        )


def freet_exists_by_id(request: GateRequest) -> None:
    post_id = parse_identifier(request.freet_id)
    if post_id is None or PostRepository(request.db).get_by_id(post_id) is None:
        raise GateRejection(
            status.HTTP_404_NOT_FOUND,
            {"freetNotFound": f"Freet with freet ID {request.freet_id} does not exist."},
        )


def author_matches_identity(request: GateRequest) -> None:
    """Only the author may modify a freet or its satellites."""
    if request.identity is None:
        return
    post_id = request.subject_post_id
    post = PostRepository(request.db).get_by_id(post_id) if post_id is not None else None
    if post is not None and post.author_id != request.identity:
        raise GateRejection(
            settings.author_mismatch_status,
            {"userNotFound": "User attempting to edit another users freet."},
        )


# --- per-route chains -----------------------------------------------------------

CREATE_ACCOUNT_GATE = ValidationGate(
    session_identity_exists,
    must_be_logged_out,
    username_well_formed,
    password_well_formed,
    username_available,
)
SIGN_IN_GATE = ValidationGate(
    session_identity_exists,
    must_be_logged_out,
    username_well_formed,
    password_well_formed,
    credentials_match,
)
SIGN_OUT_GATE = ValidationGate(session_identity_exists, must_be_logged_in)
UPDATE_ACCOUNT_GATE = ValidationGate(
    session_identity_exists,
    must_be_logged_in,
    when_present("username", username_well_formed),
    when_present("username", username_available),
    when_present("password", password_well_formed),
)
DELETE_ACCOUNT_GATE = ValidationGate(session_identity_exists, must_be_logged_in)

LIST_BY_AUTHOR_GATE = ValidationGate(author_exists)
READ_FREET_GATE = ValidationGate(freet_exists_by_id)
CREATE_FREET_GATE = ValidationGate(
    session_identity_exists,
    must_be_logged_in,
    expanded_content_well_formed,
)
UPDATE_FREET_GATE = ValidationGate(
    session_identity_exists,
    must_be_logged_in,
    freet_exists_by_id,
    author_matches_identity,
    expanded_content_well_formed,
)
DELETE_FREET_GATE = ValidationGate(
    session_identity_exists,
    must_be_logged_in,
    freet_exists_by_id,
    author_matches_identity,
)
REPLACE_EXPAND_GATE = ValidationGate(
    session_identity_exists,
    must_be_logged_in,
    target_post_exists,
    author_matches_identity,
    expanded_content_well_formed,
)

__all__ = [
    "GateRequest",
    "ValidationGate",
    "parse_identifier",
    "when_present",
    "session_identity_exists",
    "username_well_formed",
    "password_well_formed",
    "credentials_match",
    "username_available",
    "must_be_logged_in",
    "must_be_logged_out",
    "author_exists",
    "target_post_exists",
    "expanded_content_well_formed",
    "freet_exists_by_id",
    "author_matches_identity",
]
