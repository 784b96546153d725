"""Resource Registry - metadata that drives the generic CRUD handlers.

Invariants:
    - One ResourceSpec per ResourceName, keyed in RESOURCES
    - filter_type fields are real column names on model
    - search_columns are text columns on model; empty means search applies no
      text condition and paginates over every row

Design Decisions:
    - Explicit mapping, no model introspection: what each resource filters and
      searches on is readable in one place
"""

from dataclasses import dataclass

from app.core.domain_types import MatchMode, ResourceName
from app.db.base import Base
from app.models import Comment, Follower, Hashtag, Like, Post, User
from app.schemas import comments, followers, hashtags, likes, posts, users
from app.schemas.common import CamelModel, FilterCriteria, ListQuery, RecordOut, UpdateModel


@dataclass(frozen=True)
class ResourceSpec:
    """Everything the CRUD router and service need to serve one table."""
    name: ResourceName
    model: type[Base]
    create_schema: type[CamelModel]
    update_schema: type[UpdateModel]
    out_schema: type[RecordOut]
    filter_type: type[FilterCriteria]
    list_query_schema: type[ListQuery]
    search_columns: tuple[str, ...] = ()
    search_mode: MatchMode = MatchMode.STARTS_WITH

    @property
    def label(self) -> str:
        return self.name.value


RESOURCES: dict[ResourceName, ResourceSpec] = {
    ResourceName.USERS: ResourceSpec(
        name=ResourceName.USERS,
        model=User,
        create_schema=users.UserCreate,
        update_schema=users.UserUpdate,
        out_schema=users.UserOut,
        filter_type=users.UserFilter,
        list_query_schema=users.UserListQuery,
        search_columns=("username", "email"),
        search_mode=MatchMode.CONTAINS,
    ),
    ResourceName.POSTS: ResourceSpec(
        name=ResourceName.POSTS,
        model=Post,
        create_schema=posts.PostCreate,
        update_schema=posts.PostUpdate,
        out_schema=posts.PostOut,
        filter_type=posts.PostFilter,
        list_query_schema=posts.PostListQuery,
        search_columns=("content",),
    ),
    ResourceName.LIKES: ResourceSpec(
        name=ResourceName.LIKES,
        model=Like,
        create_schema=likes.LikeCreate,
        update_schema=likes.LikeUpdate,
        out_schema=likes.LikeOut,
        filter_type=likes.LikeFilter,
        list_query_schema=likes.LikeListQuery,
    ),
    ResourceName.COMMENTS: ResourceSpec(
        name=ResourceName.COMMENTS,
        model=Comment,
        create_schema=comments.CommentCreate,
        update_schema=comments.CommentUpdate,
        out_schema=comments.CommentOut,
        filter_type=comments.CommentFilter,
        list_query_schema=comments.CommentListQuery,
        search_columns=("content",),
    ),
    ResourceName.FOLLOWERS: ResourceSpec(
        name=ResourceName.FOLLOWERS,
        model=Follower,
        create_schema=followers.FollowerCreate,
        update_schema=followers.FollowerUpdate,
        out_schema=followers.FollowerOut,
        filter_type=followers.FollowerFilter,
        list_query_schema=followers.FollowerListQuery,
    ),
    ResourceName.HASHTAGS: ResourceSpec(
        name=ResourceName.HASHTAGS,
        model=Hashtag,
        create_schema=hashtags.HashtagCreate,
        update_schema=hashtags.HashtagUpdate,
        out_schema=hashtags.HashtagOut,
        filter_type=hashtags.HashtagFilter,
        list_query_schema=hashtags.HashtagListQuery,
        search_columns=("name",),
    ),
}
