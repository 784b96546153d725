"""Follower ORM - directed follow edge between two users.

Invariants:
    - (follower_id, followee_id) is unique
    - Both endpoints reference users.id (ON DELETE RESTRICT)

Design Decisions:
    - No CHECK against self-follow: the schema allows it and the API
      does not add business rules beyond ownership
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, BigId


class Follower(Base):
    """Follow edge: follower_id follows followee_id."""
    __tablename__ = "followers"
    __table_args__ = (
        UniqueConstraint(
            "follower_id", "followee_id",
            name="followers_follower_id_followee_id_key",
        ),
    )

    id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    follower_id: Mapped[int] = mapped_column(
        BigId, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False,
    )
    followee_id: Mapped[int] = mapped_column(
        BigId, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    # Relationships
    follower: Mapped["User"] = relationship(
        "User", back_populates="following", foreign_keys=[follower_id],
    )
    followee: Mapped["User"] = relationship(
        "User", back_populates="followers", foreign_keys=[followee_id],
    )
