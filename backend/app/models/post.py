"""Post ORM - text content authored by a user.

Invariants:
    - Always belongs to a User (user_id FK, ON DELETE RESTRICT)
    - content is non-nullable text
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, BigId


class Post(Base):
    """Post authored by a user."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigId, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="posts")
    likes: Mapped[list["Like"]] = relationship(
        "Like", back_populates="post", passive_deletes=True,
    )
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="post", passive_deletes=True,
    )
