"""
Posts module.

Handles creating, updating, sharing and deleting posts.

Public API:
- IPostService: Interface for post operations
- Post, PostCreate: Post data models
- Post exceptions: PostNotFoundError, NoPostsError, PostOwnershipError
"""

from .interfaces import IPostService
from .models import Post, PostCreate
from .exceptions import PostNotFoundError, NoPostsError, PostOwnershipError

__all__ = [
    "IPostService",
    "Post",
    "PostCreate",
    "PostNotFoundError",
    "NoPostsError",
    "PostOwnershipError",
]
