"""Shared builders for tests: in-memory SQLite, seeded accounts, stub verifiers."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from boardsctrl.core.config import Settings
from boardsctrl.core.security import hash_password
from boardsctrl.models import Base, Role, User
from boardsctrl.services.legacy_auth import ExternalVerificationOutcome

# Low bcrypt cost keeps the suite fast; production uses BCRYPT_ROUNDS.
TEST_BCRYPT_ROUNDS = 4
TEST_JWT_SECRET = "test-secret-key-that-is-at-least-32-bytes-long"


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": TEST_JWT_SECRET,
        "JWT_ISSUER": "boardsctrl-test",
        "JWT_AUDIENCE": "boardsctrl-test-clients",
        "LEGACY_AUTH_BASE_URL": "https://legacy.test",
        "LEGACY_AUTH_SIGNATURE": "test-signature",
    }
    values.update(overrides)
    return Settings(**values)


def make_engine() -> Engine:
    """One shared in-memory database for every connection (TestClient uses threads)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def db_override(factory: sessionmaker):
    """Build a get_db replacement bound to the test database."""

    def _get_db() -> Generator[Session, None, None]:
        db = factory()
        try:
            yield db
        finally:
            db.close()

    return _get_db


def seed_role(db: Session, name: str, status: bool = True) -> Role:
    role = Role(name=name, status=status)
    db.add(role)
    db.commit()
    db.refresh(role)
    return role


def seed_user(
    db: Session,
    username: str,
    role: Role,
    password: str | None = "correct",
    status: bool = True,
    email: str = "",
) -> User:
    user = User(
        username=username,
        role_id=role.id,
        password_hash=hash_password(password, rounds=TEST_BCRYPT_ROUNDS) if password else None,
        status=status,
        email=email or f"{username}@example.com",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def accepted(code: int = 0) -> ExternalVerificationOutcome:
    return ExternalVerificationOutcome(success=code == 0, response_code=code, http_status=200)


class StubVerifier:
    """IdentityVerifier that returns a fixed outcome (or raises) and records calls."""

    def __init__(
        self,
        outcome: ExternalVerificationOutcome | None = None,
        error: Exception | None = None,
    ) -> None:
        self.outcome = outcome or accepted()
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def verify(self, username: str, password: str) -> ExternalVerificationOutcome:
        self.calls.append((username, password))
        if self.error is not None:
            raise self.error
        return self.outcome
