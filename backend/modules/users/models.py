"""
Users module data models.

These models define the user records stored in the `users` collection
and the data needed to create them.
"""

from typing import Optional
from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser


class UserCreate(BaseModel):
    """Data required to persist a new user."""

    email: str = Field(..., description="Unique email address")
    password_hash: str = Field(..., description="Bcrypt hash of the password")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")


class User(BaseModel):
    """
    A user record.

    The password hash is kept on the model for credential checks but is
    never exposed through the GraphQL schema.
    """

    id: str = Field(..., description="User ID (MongoDB ObjectId as a string)")
    email: str = Field(..., description="Unique email address")
    password_hash: str = Field(..., description="Bcrypt hash of the password")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")

    def to_identity(self) -> AuthenticatedUser:
        """Snapshot of this user used as a request identity."""
        return AuthenticatedUser(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
        )
