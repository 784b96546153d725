"""Hashtag ORM - standalone tag with a unique name. No timestamps."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, BigId


class Hashtag(Base):
    """Hashtag keyed by unique name."""
    __tablename__ = "hashtags"

    id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
