"""SQLAlchemy declarative Base and the audit columns shared by every table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


class AuditMixin:
    """
    Active flag plus creator/modifier stamps. An inactive user cannot log in.
    """

    status = Column(Boolean, nullable=False, default=True)
    created_by_id = Column(Integer, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    modified_by_id = Column(Integer, nullable=True)
    modified_at = Column(DateTime(timezone=True), nullable=True)
