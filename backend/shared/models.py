"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents the acting user of a request.

    Populated either from a server-side session snapshot or from the
    claims of a verified JWT, and threaded into every resolver call
    through the request context. Absence of an identity is represented
    by None, never by an instance of this model.
    """

    id: str = Field(..., description="User ID (MongoDB ObjectId as a string)")
    email: str = Field(..., description="User's email address")

    # Only present when resolved from a session snapshot
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
