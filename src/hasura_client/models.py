from typing import Any

from pydantic import BaseModel, ConfigDict


class HasuraError(BaseModel):
    """Single entry of a GraphQL ``errors`` array."""

    model_config = ConfigDict(extra="allow")

    message: str
    extensions: dict[str, Any] | None = None
    locations: list[dict[str, int]] | None = None
    path: list[str | int] | None = None

    @property
    def code(self) -> str | None:
        """Hasura error code, e.g. ``validation-failed``."""
        if not self.extensions:
            return None
        return self.extensions.get("code")

    @property
    def extension_path(self) -> str | None:
        """JSON path Hasura reports inside ``extensions``, e.g. ``$.selectionSet.users``."""
        if not self.extensions:
            return None
        return self.extensions.get("path")


class GraphQLRequest(BaseModel):
    """Outbound request body."""

    query: str
    variables: Any = None

    def to_payload(self) -> dict[str, Any]:
        # Variables are dropped from the body when not given.
        exclude = {"variables"} if self.variables is None else None
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
