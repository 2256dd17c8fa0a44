"""
GraphQL object types.

Each type maps one domain model onto the public schema. Field names
follow the wire format clients already use (`_id`, `creatorID`, ...).
"""

from datetime import datetime
from typing import Optional

import strawberry
from strawberry.types import Info

from modules.posts.models import Post
from modules.users.models import User

from .context import GraphQLContext
from .scalars import URL, EmailAddress


@strawberry.type(name="Post", description="A message with links, shareable by any user.")
class PostType:
    id: strawberry.ID = strawberry.field(name="_id")
    creator_id: strawberry.ID = strawberry.field(name="creatorID")
    created_time: datetime
    message: str
    updated_time: Optional[datetime]
    links: list[URL]
    shares: list[strawberry.ID]

    @classmethod
    def from_model(cls, post: Post) -> "PostType":
        return cls(
            id=strawberry.ID(post.id),
            creator_id=strawberry.ID(post.creator_id),
            created_time=post.created_time,
            message=post.message,
            updated_time=post.updated_time,
            links=[URL(link) for link in post.links],
            shares=[strawberry.ID(user_id) for user_id in post.shares],
        )


@strawberry.type(name="User", description="A registered user.")
class UserType:
    id: strawberry.ID = strawberry.field(name="_id")
    email: EmailAddress
    first_name: Optional[str]
    last_name: Optional[str]

    @strawberry.field(description="Posts created by this user.")
    async def posts(self, info: Info[GraphQLContext, None]) -> list[PostType]:
        ctx = info.context
        posts = await ctx.posts.list_user_posts(ctx.identity, self.id)
        return [PostType.from_model(p) for p in posts]

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls(
            id=strawberry.ID(user.id),
            email=EmailAddress(user.email),
            first_name=user.first_name,
            last_name=user.last_name,
        )
