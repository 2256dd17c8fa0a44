"""
GraphQL error handling.

Domain exceptions (SocialDeckError) reach clients with their message and
`extensions.code`. Errors raised before execution (syntax, validation,
variable coercion through the custom scalars) are client errors and are
reported as-is. Anything else raised inside a resolver is logged and
replaced by a generic INTERNAL_SERVER_ERROR so internals never leak.
"""

import logging

from graphql import GraphQLError
from strawberry.extensions import MaskErrors

from shared.exceptions import ErrorCode, SocialDeckError

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected error."


def is_pre_execution_error(error: GraphQLError) -> bool:
    """Whether the error rejected the request before any resolver ran."""
    return error.path is None


def should_mask_error(error: GraphQLError) -> bool:
    """Mask errors that come from unexpected exceptions inside resolvers."""
    if error.original_error is None or is_pre_execution_error(error):
        return False
    return not isinstance(error.original_error, SocialDeckError)


class MaskInternalErrors(MaskErrors):
    """MaskErrors that tags masked errors with INTERNAL_SERVER_ERROR."""

    def __init__(self) -> None:
        super().__init__(
            should_mask_error=should_mask_error,
            error_message=UNEXPECTED_ERROR_MESSAGE,
        )

    def anonymise_error(self, error: GraphQLError) -> GraphQLError:
        logger.error(
            "Unexpected error in GraphQL resolver at %s",
            error.path,
            exc_info=error.original_error,
        )
        return GraphQLError(
            self.error_message,
            nodes=error.nodes,
            source=error.source,
            positions=error.positions,
            path=error.path,
            extensions={"code": ErrorCode.INTERNAL_SERVER_ERROR},
        )
