"""ORM model for boards (a rotating set of slides shown on a screen)."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from boardsctrl.models.base import AuditMixin, Base


class Board(AuditMixin, Base):
    """
    Board grouped under a category. Titles are unique within a category.

    Deleting a board deletes its slides.
    """

    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    title = Column(String(100), nullable=False)
    description = Column(String(255), nullable=True)

    category = relationship("Category", back_populates="boards")
    slides = relationship(
        "Slide",
        back_populates="board",
        cascade="all, delete-orphan",
    )
