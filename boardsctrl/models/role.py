"""ORM model for roles referenced by user accounts."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from boardsctrl.models.base import AuditMixin, Base


class Role(AuditMixin, Base):
    """
    Named role granted to user accounts (e.g. 'Admin', 'User').

    Route allowlists compare against `name`; many users share one role.
    """

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True, index=True)

    users = relationship("User", back_populates="role")
