"""User directory lookups used by the validation gate and account endpoints."""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from fritter.core.security import hash_password
from fritter.models.user import User

__all__ = ["UserDirectory"]


class UserDirectory:
    """Read and write access to user accounts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, user_id: int) -> User | None:
        """Return a user by primary key."""
        return self.session.get(User, user_id)

    def find_by_username(self, username: str) -> User | None:
        """Return the user owning ``username``, compared case-insensitively."""
        result = self.session.execute(
            select(User).where(func.lower(User.username) == username.lower())
        )
        return result.scalars().first()

    def find_by_username_and_password(self, username: str, password: str) -> User | None:
        """Return the user whose credentials match, if any."""
        result = self.session.execute(
            select(User).where(
                func.lower(User.username) == username.lower(),
                User.password_hash == hash_password(password),
            )
        )
        return result.scalars().first()

    def create(self, username: str, password: str) -> User:
        """Persist a new account with a hashed password."""
        user = User(username=username, password_hash=hash_password(password))
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def update(
        self,
        user: User,
        *,
        username: str | None = None,
        password: str | None = None,
    ) -> User:
        """Apply partial updates to an existing account."""
        if username is not None:
            user.username = username
        if password is not None:
            user.password_hash = hash_password(password)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def delete(self, user: User) -> None:
        """Remove an account row."""
        self.session.delete(user)
        self.session.commit()
