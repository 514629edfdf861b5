"""SQLAlchemy ORM models."""

from boardsctrl.models.base import Base
from boardsctrl.models.board import Board
from boardsctrl.models.category import Category
from boardsctrl.models.role import Role
from boardsctrl.models.slide import Slide
from boardsctrl.models.user import User

__all__ = ["Base", "Board", "Category", "Role", "Slide", "User"]
