"""
Minimal async client for a Hasura GraphQL endpoint.
"""

from hasura_client.client import HasuraGraphQLClient
from hasura_client.config import HasuraConfig, load_config
from hasura_client.errors import (
    BodyParseError,
    DecodeError,
    GraphQLError,
    HasuraGraphQLClientError,
    MissingDataError,
    TransportError,
)
from hasura_client.models import GraphQLRequest, HasuraError

__all__ = [
    "BodyParseError",
    "DecodeError",
    "GraphQLError",
    "GraphQLRequest",
    "HasuraConfig",
    "HasuraError",
    "HasuraGraphQLClient",
    "HasuraGraphQLClientError",
    "MissingDataError",
    "TransportError",
    "load_config",
]
