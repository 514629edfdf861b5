"""ORM model for slides displayed on a board."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from boardsctrl.models.base import AuditMixin, Base


class Slide(AuditMixin, Base):
    """
    One URL shown on a board for `time` seconds.
    """

    __tablename__ = "slides"

    id = Column(Integer, primary_key=True, autoincrement=True)
    board_id = Column(
        Integer,
        ForeignKey("boards.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(100), nullable=False)
    url = Column(String(255), nullable=False)
    time = Column(Integer, nullable=False, default=10)

    board = relationship("Board", back_populates="slides")
