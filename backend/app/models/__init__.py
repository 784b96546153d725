"""ORM Models - SQLAlchemy declarative models for all six resources.

Invariants:
    - All models inherit from Base (db/base.py)
    - Foreign keys and uniqueness are enforced by the database, not the application

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.user import User  # noqa: F401
from app.models.post import Post  # noqa: F401
from app.models.like import Like  # noqa: F401
from app.models.comment import Comment  # noqa: F401
from app.models.follower import Follower  # noqa: F401
from app.models.hashtag import Hashtag  # noqa: F401
