"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from boardsctrl.models.base import AuditMixin, Base


class User(AuditMixin, Base):
    """
    User account for JWT authentication and role-based access control.

    password_hash is optional: accounts provisioned only in the legacy identity
    service have no local hash and are verified remotely alone.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False, index=True)
    username = Column(String(100), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False, default="")

    role = relationship("Role", back_populates="users")
