"""
Create a user (e.g. first admin). Run from project root:
  python -m boardsctrl.scripts.create_user USERNAME PASSWORD EMAIL [role]
Example:
  python -m boardsctrl.scripts.create_user admin your-secure-password admin@example.com Admin
"""
import argparse
import logging
import sys

from boardsctrl.core.config import get_settings
from boardsctrl.core.database import SessionLocal
from boardsctrl.core.security import PASSWORD_MAX_LEN, USERNAME_MAX_LEN
from boardsctrl.repositories.accounts import SqlAccountRepository
from boardsctrl.scripts.init_db import DEFAULT_ROLES, ensure_default_roles
from boardsctrl.services.auth_service import AuthService, Rejected
from boardsctrl.services.legacy_auth import LegacyIdentityVerifier

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a BoardsCTRL user with a local password.")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password (1-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("role", nargs="?", default="User", choices=list(DEFAULT_ROLES))
    args = parser.parse_args()

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be 1-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    settings = get_settings()
    db = SessionLocal()
    try:
        ensure_default_roles(db)
        service = AuthService(
            SqlAccountRepository(db),
            LegacyIdentityVerifier(settings),
            settings,
        )
        result = service.register(username, args.password, args.email, args.role)
        if isinstance(result, Rejected):
            print(f"Could not create '{username}': {result.message}", file=sys.stderr)
            return 1
        print(f"Created user '{username}' with role '{result.role_name}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
