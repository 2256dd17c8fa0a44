"""
Posts module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    """Data required to persist a new post."""

    creator_id: str = Field(..., description="ID of the creating user")
    created_time: datetime = Field(..., description="Server-assigned creation time (UTC)")
    message: str = Field(..., description="Post body")
    links: list[str] = Field(default_factory=list, description="Ordered link URLs")


class Post(BaseModel):
    """A post record from the `posts` collection."""

    id: str = Field(..., description="Post ID (MongoDB ObjectId as a string)")
    creator_id: str = Field(..., description="ID of the creating user")
    created_time: datetime = Field(..., description="Creation time (UTC)")
    message: str = Field(..., description="Post body")
    updated_time: Optional[datetime] = Field(
        None, description="Time of the last update or share, null until then"
    )
    links: list[str] = Field(default_factory=list, description="Ordered link URLs")
    shares: list[str] = Field(
        default_factory=list, description="Deduplicated IDs of users who shared the post"
    )
