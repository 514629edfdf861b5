"""Base TestCase for HTTP tests: in-memory database and a stubbed legacy verifier."""

import unittest

from fastapi.testclient import TestClient

from boardsctrl.api.auth import get_identity_verifier
from boardsctrl.core.config import get_settings
from boardsctrl.core.database import get_db
from boardsctrl.core.security import create_access_token
from boardsctrl.main import app
from tests.helpers import (
    StubVerifier,
    db_override,
    make_engine,
    make_session_factory,
    seed_role,
)

PREFIX = get_settings().API_PREFIX


class ApiTestCase(unittest.TestCase):
    """TestClient over an in-memory database with a stubbed legacy verifier."""

    def setUp(self) -> None:
        self.engine = make_engine()
        self.factory = make_session_factory(self.engine)
        self.db = self.factory()
        self.admin_role = seed_role(self.db, "Admin")
        self.user_role = seed_role(self.db, "User")
        self.verifier = StubVerifier()
        app.dependency_overrides[get_db] = db_override(self.factory)
        app.dependency_overrides[get_identity_verifier] = lambda: self.verifier
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.db.close()
        self.engine.dispose()

    def token_for(self, account_id: int, username: str, role: str, **kwargs) -> str:
        return create_access_token(account_id, username, role, settings=get_settings(), **kwargs)

    def auth(self, token: str) -> dict[str, str]:
        return {"Authorization": token}
