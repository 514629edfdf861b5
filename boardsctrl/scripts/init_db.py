"""
Create tables and the default roles. Run from project root:
  python -m boardsctrl.scripts.init_db
"""
import logging
import sys

from sqlalchemy.orm import Session

from boardsctrl.api.auth import ROLE_ADMIN, ROLE_USER
from boardsctrl.core.database import SessionLocal, init_db
from boardsctrl.models import Role

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

DEFAULT_ROLES = (ROLE_ADMIN, ROLE_USER)


def ensure_default_roles(db: Session) -> list[str]:
    """Insert any missing default role; return the names that were created."""
    existing = {name for (name,) in db.query(Role.name).all()}
    created = [name for name in DEFAULT_ROLES if name not in existing]
    for name in created:
        db.add(Role(name=name, status=True))
    if created:
        db.commit()
    return created


def main() -> int:
    try:
        init_db()
    except Exception as e:
        logger.exception("Schema creation failed: %s", e)
        return 1
    db = SessionLocal()
    try:
        created = ensure_default_roles(db)
        logger.info("Database initialised: roles_created=%s", created or "none")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
