"""
Custom GraphQL scalars.

Values are validated while the request is being parsed, so malformed
input is rejected before any resolver runs. The scalar definitions are
registered on the schema through `SCALAR_MAP`.
"""

from typing import NewType

import strawberry
from pydantic import AnyHttpUrl, EmailStr, TypeAdapter, ValidationError

URL = NewType("URL", str)
EmailAddress = NewType("EmailAddress", str)

_url_adapter = TypeAdapter(AnyHttpUrl)
_email_adapter = TypeAdapter(EmailStr)


def parse_url(value: object) -> str:
    """Validate an absolute http(s) URL and return its normalized form."""
    try:
        return str(_url_adapter.validate_python(value))
    except ValidationError:
        raise ValueError(f"Invalid URL: {value}")


def parse_email(value: object) -> str:
    """
    Validate an email address.

    The address is returned exactly as given. Emails are compared
    verbatim, so rewriting the value here would store an address that a
    later log-in with the same input could not find.
    """
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        raise ValueError(f"Invalid email address: {value}")
    return value


SCALAR_MAP = {
    URL: strawberry.scalar(
        name="URL",
        serialize=str,
        parse_value=parse_url,
        description="An absolute HTTP or HTTPS URL.",
    ),
    EmailAddress: strawberry.scalar(
        name="EmailAddress",
        serialize=str,
        parse_value=parse_email,
        description="An email address.",
    ),
}
