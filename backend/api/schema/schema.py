"""
GraphQL schema: queries and mutations.

Resolvers stay thin. They hand the request identity from the context to
the owning service, which applies the authorization guards, and map the
returned models onto GraphQL types.
"""

from typing import Annotated, Optional

import strawberry
from strawberry.schema.config import StrawberryConfig
from strawberry.types import Info

from .context import GraphQLContext
from .errors import MaskInternalErrors
from .scalars import SCALAR_MAP, URL, EmailAddress
from .types import PostType, UserType

Context = Info[GraphQLContext, None]


@strawberry.type
class Query:
    @strawberry.field(description="The currently authenticated user.")
    async def me(self, info: Context) -> UserType:
        ctx = info.context
        return UserType.from_model(await ctx.users.get_me(ctx.identity))

    @strawberry.field(description="All users.")
    async def users(self, info: Context) -> list[UserType]:
        ctx = info.context
        return [UserType.from_model(u) for u in await ctx.users.list_users(ctx.identity)]

    @strawberry.field(name="findUserById")
    async def find_user_by_id(
        self,
        info: Context,
        user_id: Annotated[strawberry.ID, strawberry.argument(name="_id")],
    ) -> UserType:
        ctx = info.context
        return UserType.from_model(await ctx.users.get_user(ctx.identity, user_id))

    @strawberry.field(description="All posts.")
    async def posts(self, info: Context) -> list[PostType]:
        ctx = info.context
        return [PostType.from_model(p) for p in await ctx.posts.list_posts(ctx.identity)]

    @strawberry.field(name="findPostById")
    async def find_post_by_id(
        self,
        info: Context,
        post_id: Annotated[strawberry.ID, strawberry.argument(name="_id")],
    ) -> PostType:
        ctx = info.context
        return PostType.from_model(await ctx.posts.get_post(ctx.identity, post_id))


@strawberry.type
class Mutation:
    @strawberry.mutation(name="signUp", description="Register and log in. Returns a JWT.")
    async def sign_up(
        self,
        info: Context,
        email: EmailAddress,
        password: str,
        first_name: str,
        last_name: str,
    ) -> str:
        ctx = info.context
        result = await ctx.auth.sign_up(ctx.identity, email, password, first_name, last_name)
        ctx.start_session(result.session)
        return result.token

    @strawberry.mutation(name="logIn", description="Log in. Returns a JWT.")
    async def log_in(self, info: Context, email: str, password: str) -> str:
        ctx = info.context
        result = await ctx.auth.log_in(ctx.identity, email, password)
        ctx.start_session(result.session)
        return result.token

    @strawberry.mutation(name="logOut")
    async def log_out(self, info: Context) -> str:
        ctx = info.context
        message = await ctx.auth.log_out(ctx.identity, ctx.session_id)
        ctx.end_session()
        return message

    @strawberry.mutation(name="createPost")
    async def create_post(
        self,
        info: Context,
        message: str,
        links: Optional[list[URL]] = None,
    ) -> PostType:
        ctx = info.context
        post = await ctx.posts.create_post(ctx.identity, message, list(links or []))
        return PostType.from_model(post)

    @strawberry.mutation(name="updatePost")
    async def update_post(
        self,
        info: Context,
        post_id: Annotated[strawberry.ID, strawberry.argument(name="postID")],
        message: str,
        links: Optional[list[URL]] = None,
    ) -> PostType:
        ctx = info.context
        post = await ctx.posts.update_post(ctx.identity, post_id, message, list(links or []))
        return PostType.from_model(post)

    @strawberry.mutation(name="sharePost")
    async def share_post(
        self,
        info: Context,
        post_id: Annotated[strawberry.ID, strawberry.argument(name="postID")],
    ) -> PostType:
        ctx = info.context
        return PostType.from_model(await ctx.posts.share_post(ctx.identity, post_id))

    @strawberry.mutation(name="deletePostById")
    async def delete_post_by_id(
        self,
        info: Context,
        post_id: Annotated[strawberry.ID, strawberry.argument(name="_id")],
    ) -> PostType:
        ctx = info.context
        return PostType.from_model(await ctx.posts.delete_post(ctx.identity, post_id))

    @strawberry.mutation(name="deleteAllPosts")
    async def delete_all_posts(self, info: Context) -> str:
        ctx = info.context
        return await ctx.posts.delete_all_posts(ctx.identity)

    @strawberry.mutation(name="deleteUserById")
    async def delete_user_by_id(
        self,
        info: Context,
        user_id: Annotated[strawberry.ID, strawberry.argument(name="_id")],
    ) -> UserType:
        ctx = info.context
        return UserType.from_model(await ctx.users.delete_user(ctx.identity, user_id))

    @strawberry.mutation(name="deleteAllUsers")
    async def delete_all_users(self, info: Context) -> str:
        ctx = info.context
        return await ctx.users.delete_all_users(ctx.identity)


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[MaskInternalErrors],
    config=StrawberryConfig(scalar_map=SCALAR_MAP),
)
