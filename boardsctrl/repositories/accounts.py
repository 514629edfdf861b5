"""Credential store: account and role lookups used by login and registration."""

import logging
from datetime import UTC, datetime
from typing import Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from boardsctrl.models import Role, User

logger = logging.getLogger(__name__)


class DuplicateUsernameError(Exception):
    """Raised when an insert collides with an existing username (unique constraint)."""

    def __init__(self, username: str) -> None:
        self.username = username
        self.message = f"Username '{username}' already exists."
        super().__init__(self.message)


class AccountRepository(Protocol):
    """Contract the auth service needs from the credential store."""

    def get_active_by_username(self, username: str) -> User | None: ...

    def username_exists(self, username: str) -> bool: ...

    def get_role(self, role_id: int) -> Role | None: ...

    def get_role_by_name(self, name: str) -> Role | None: ...

    def add_account(
        self,
        *,
        username: str,
        password_hash: str | None,
        email: str,
        role: Role,
        created_by_id: int | None = None,
    ) -> User: ...


class SqlAccountRepository:
    """AccountRepository backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_active_by_username(self, username: str) -> User | None:
        """Exact, case-sensitive match on username among active accounts."""
        return (
            self.db.query(User)
            .filter(User.username == username, User.status.is_(True))
            .first()
        )

    def username_exists(self, username: str) -> bool:
        return (
            self.db.query(User.id).filter(User.username == username).first() is not None
        )

    def get_role(self, role_id: int) -> Role | None:
        return self.db.get(Role, role_id)

    def get_role_by_name(self, name: str) -> Role | None:
        return self.db.query(Role).filter(Role.name == name).first()

    def add_account(
        self,
        *,
        username: str,
        password_hash: str | None,
        email: str,
        role: Role,
        created_by_id: int | None = None,
    ) -> User:
        """
        Insert an active account. Raises DuplicateUsernameError if a concurrent
        request inserted the same username first.
        """
        user = User(
            username=username,
            password_hash=password_hash,
            email=email,
            role_id=role.id,
            status=True,
            created_by_id=created_by_id,
            created_at=datetime.now(UTC),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Account insert rejected by unique constraint", extra={"username": username})
            raise DuplicateUsernameError(username) from e
        self.db.refresh(user)
        return user
