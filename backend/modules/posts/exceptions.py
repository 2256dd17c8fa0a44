"""
Posts module exceptions.
"""

from shared.exceptions import AuthenticationError, InvalidQueryError, NotFoundError


class PostNotFoundError(NotFoundError):
    """Raised when no post has the requested ID."""

    def __init__(self, post_id: str):
        super().__init__(
            f"No post with ID {post_id} found!",
            details={"post_id": post_id},
        )


class NoPostsError(InvalidQueryError):
    """Raised when the posts collection is empty."""

    def __init__(self):
        super().__init__("No posts in the database!")


class PostOwnershipError(AuthenticationError):
    """Raised when a user acts on a post created by someone else."""

    def __init__(self, post_id: str, user_id: str, action: str):
        super().__init__(
            f"You cannot {action} a post created by someone else!",
            details={"post_id": post_id, "user_id": user_id},
        )
