"""
Error classes raised by the Hasura GraphQL client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hasura_client.models import HasuraError


class HasuraGraphQLClientError(Exception):
    """Base class for every failure surfaced by ``HasuraGraphQLClient.post_query``."""

    pass


class TransportError(HasuraGraphQLClientError):
    """Raised when the HTTP exchange fails or the gateway answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class BodyParseError(HasuraGraphQLClientError):
    """Raised when the response body is not JSON or its ``errors`` list has an unexpected shape."""

    pass


class GraphQLError(HasuraGraphQLClientError):
    """Raised when the gateway returns GraphQL errors in the response."""

    def __init__(self, errors: list[HasuraError]) -> None:
        self.errors = errors
        messages = "; ".join(error.message for error in errors)
        super().__init__(f"GraphQL errors: {messages}")


class MissingDataError(HasuraGraphQLClientError):
    """Raised when the response carries neither ``errors`` nor ``data``."""

    def __init__(self, message: str = "Invalid response body: missing the 'data' property") -> None:
        super().__init__(message)


class DecodeError(HasuraGraphQLClientError):
    """Raised when ``data`` does not match the requested result type."""

    pass
