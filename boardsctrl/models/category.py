"""ORM model for board categories."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from boardsctrl.models.base import AuditMixin, Base


class Category(AuditMixin, Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)

    boards = relationship("Board", back_populates="category")
