"""
SocialDeck API package.

Provides the FastAPI application serving the SocialDeck GraphQL API.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
