"""
Hasura connection configuration.

Values come from the environment (optionally a ``.env`` file). The client
itself never reads the environment; ``load_config`` is the only entry point.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:8080/v1/graphql"


@dataclass
class HasuraConfig:
    """Hasura GraphQL endpoint configuration."""

    api_url: str
    admin_secret: str

    def __repr__(self) -> str:
        return f"HasuraConfig(api_url={self.api_url!r}, admin_secret='**********')"

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if not self.api_url:
            errors.append("HASURA_GRAPHQL_URL is required")

        if not self.admin_secret:
            errors.append("HASURA_GRAPHQL_ADMIN_SECRET is required")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


def load_config() -> HasuraConfig:
    # Values already exported in the environment win over the .env file.
    load_dotenv()
    return HasuraConfig(
        api_url=os.getenv("HASURA_GRAPHQL_URL", DEFAULT_API_URL),
        admin_secret=os.getenv("HASURA_GRAPHQL_ADMIN_SECRET", ""),
    )
