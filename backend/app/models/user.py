"""User ORM - account record that owns posts, likes, comments and follow edges.

Invariants:
    - username and email are each unique
    - password_hash is stored as given; hashing happens upstream of this API
    - created_at is set once on insert
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, BigId


class User(Base):
    """User account."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    # Relationships
    posts: Mapped[list["Post"]] = relationship(
        "Post", back_populates="user", passive_deletes=True,
    )
    likes: Mapped[list["Like"]] = relationship(
        "Like", back_populates="user", passive_deletes=True,
    )
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="user", passive_deletes=True,
    )
    following: Mapped[list["Follower"]] = relationship(
        "Follower", back_populates="follower",
        foreign_keys="Follower.follower_id", passive_deletes=True,
    )
    followers: Mapped[list["Follower"]] = relationship(
        "Follower", back_populates="followee",
        foreign_keys="Follower.followee_id", passive_deletes=True,
    )
