from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar, overload

import httpx
import structlog
from pydantic import SecretStr, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from hasura_client.errors import (
    BodyParseError,
    DecodeError,
    GraphQLError,
    MissingDataError,
    TransportError,
)
from hasura_client.models import GraphQLRequest, HasuraError

if TYPE_CHECKING:
    from types import TracebackType

    from hasura_client.config import HasuraConfig

logger = structlog.get_logger(__name__)

R = TypeVar("R")

ADMIN_SECRET_HEADER = "x-hasura-admin-secret"

_errors_adapter: TypeAdapter[list[HasuraError]] = TypeAdapter(list[HasuraError])


@lru_cache(maxsize=128)
def _result_adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


class HasuraGraphQLClient:
    """
    A client for posting GraphQL queries and mutations to a Hasura endpoint.

    Requests authenticate with either a caller-supplied bearer token or the
    admin secret the client was built with. The admin secret is held as a
    ``SecretStr`` so it never shows up in ``repr`` output or logs.

    The underlying ``httpx.AsyncClient`` is safe to share between concurrent
    ``post_query`` calls; the client keeps no other per-call state.
    """

    def __init__(self, api_url: str, admin_secret: str, http_client: httpx.AsyncClient | None = None) -> None:
        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else httpx.AsyncClient()
        self._api_url = api_url
        self._admin_secret = SecretStr(admin_secret)

    @classmethod
    def from_config(cls, config: HasuraConfig) -> HasuraGraphQLClient:
        return cls(config.api_url, config.admin_secret)

    @property
    def api_url(self) -> str:
        return self._api_url

    def __repr__(self) -> str:
        return f"HasuraGraphQLClient(api_url={self._api_url!r}, admin_secret={self._admin_secret!r})"

    def _auth_headers(self, bearer_token: str | None) -> dict[str, str]:
        """Exactly one auth header: the bearer token if given, else the admin secret."""
        if bearer_token is not None:
            return {"Authorization": f"Bearer {bearer_token}"}
        return {ADMIN_SECRET_HEADER: self._admin_secret.get_secret_value()}

    @overload
    async def post_query(
        self,
        query: str,
        variables: Any = ...,
        bearer_token: str | None = ...,
    ) -> dict[str, Any]: ...

    @overload
    async def post_query(
        self,
        query: str,
        variables: Any = ...,
        bearer_token: str | None = ...,
        *,
        result_type: type[R],
    ) -> R: ...

    async def post_query(
        self,
        query: str,
        variables: Any = None,
        bearer_token: str | None = None,
        *,
        result_type: Any = dict[str, Any],
    ) -> Any:
        """
        Posts a GraphQL document and decodes the ``data`` of the response.

        Args:
            query: The GraphQL query or mutation text.
            variables: Optional JSON-serializable variables (dict, pydantic model, dataclass...).
            bearer_token: Per-request token. When given, the admin secret is not sent.
            result_type: Type the ``data`` payload is validated into. Defaults to a plain mapping.

        Returns:
            The ``data`` payload validated as ``result_type``.

        Raises:
            TransportError: If the variables cannot be serialized, the request fails or the response status is not 2xx.
            BodyParseError: If the body is not JSON or ``errors`` has an unexpected shape.
            GraphQLError: If the response carries a GraphQL ``errors`` list.
            MissingDataError: If the response has neither ``errors`` nor ``data``.
            DecodeError: If ``data`` does not match ``result_type``.
        """
        try:
            payload = GraphQLRequest(query=query, variables=variables).to_payload()
        except PydanticSerializationError as e:
            raise TransportError(f"Unable to serialize request body: {e}") from e
        headers = self._auth_headers(bearer_token)

        logger.debug(
            "hasura_request",
            url=self._api_url,
            auth="bearer" if bearer_token is not None else "admin_secret",
        )

        try:
            response = await self._http_client.post(self._api_url, json=payload, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise TransportError(f"Hasura responded with HTTP {status_code}: {e}", status_code=status_code) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Request to {self._api_url} failed: {e}") from e

        try:
            envelope = response.json()
        except ValueError as e:
            raise BodyParseError(f"Invalid response body: {e}") from e

        if not isinstance(envelope, dict):
            envelope = {}

        raw_errors = envelope.get("errors")
        if raw_errors is not None:
            try:
                errors = _errors_adapter.validate_python(raw_errors)
            except ValidationError as e:
                raise BodyParseError(f"Invalid 'errors' property in response body: {e}") from e
            logger.debug("hasura_graphql_errors", url=self._api_url, messages=[error.message for error in errors])
            raise GraphQLError(errors)

        if "data" not in envelope:
            logger.debug("hasura_missing_data", url=self._api_url, keys=sorted(envelope))
            raise MissingDataError()

        try:
            return _result_adapter(result_type).validate_python(envelope["data"])
        except ValidationError as e:
            raise DecodeError(f"Response 'data' does not match {result_type!r}: {e}") from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client and not self._http_client.is_closed:
            await self._http_client.aclose()

    async def __aenter__(self) -> HasuraGraphQLClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
