"""
GraphQL router for the FastAPI app.

Business-rule failures are reported with HTTP 200 and an `errors` array.
Requests rejected before execution (bad syntax, unknown fields, input
that fails scalar validation) are answered with HTTP 400.
"""

from typing import Union

from fastapi import Response, status
from strawberry.fastapi import GraphQLRouter
from strawberry.http import GraphQLHTTPResponse


def is_rejected_request(response_data: Union[GraphQLHTTPResponse, list]) -> bool:
    """Whether a result carries only errors raised before any resolver ran."""
    if not isinstance(response_data, dict):
        return False
    errors = response_data.get("errors")
    if not errors or response_data.get("data") is not None:
        return False
    return all("path" not in error for error in errors)


class SocialDeckGraphQLRouter(GraphQLRouter):
    """GraphQLRouter that maps pre-execution failures to 400 Bad Request."""

    def create_response(
        self,
        response_data: Union[GraphQLHTTPResponse, list[GraphQLHTTPResponse]],
        sub_response: Response,
    ) -> Response:
        if is_rejected_request(response_data):
            sub_response.status_code = status.HTTP_400_BAD_REQUEST
        return super().create_response(response_data, sub_response)
