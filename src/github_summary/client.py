"""GitHub GraphQL API client."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Generic, Self, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from github_summary.config.settings import Settings
from github_summary.errors import (
    AuthResolutionError,
    BadResponse,
    DecodeError,
    QueryError,
    QueryErrors,
    QueryFailure,
    TransportError,
)
from github_summary.models import format_timestamp

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class QueryData(BaseModel, Generic[PayloadT]):
    """Successful GraphQL response."""

    data: PayloadT


class QueryErrorList(BaseModel):
    """GraphQL response carrying only errors."""

    errors: list[QueryError]


class UserResponse(BaseModel):
    """Response of the REST ``/user`` endpoint."""

    login: str


def query_name(query: str) -> str:
    """
    Describe a GraphQL document by its first non-blank line.

    ``"query Foo($a: Int) {"`` becomes ``"query Foo($a: Int)"``.
    """
    for line in query.splitlines():
        line = line.strip()
        if line:
            return line.rstrip("{").rstrip()
    return "<empty query>"


def encode_variables(variables: Mapping[str, Any]) -> dict[str, Any]:
    """Drop unset variables and encode timestamps as ISO-8601 text."""
    encoded: dict[str, Any] = {}
    for name, value in variables.items():
        if value is None:
            continue
        if isinstance(value, datetime):
            value = format_timestamp(value)
        encoded[name] = value
    return encoded


class GitHubGraphQLClient:
    """Async client for GitHub GraphQL API."""

    def __init__(self, settings: Settings, login: str | None = None) -> None:
        """
        Initialize GitHub GraphQL client.

        The login is not looked up here; call ``resolve_login`` or build the
        client with ``connect``.

        Args:
            settings: Application settings containing GitHub token and API URL
            login: Login to query; defaults to the owner of the token
        """
        self.settings = settings
        self.api_url = settings.github_api_url
        self.headers = {
            "Authorization": f"Bearer {settings.github_token.get_secret_value()}",
            "Content-Type": "application/json",
            "User-Agent": settings.user_agent,
            "X-GitHub-Api-Version": settings.github_api_version,
        }
        self.client = httpx.AsyncClient(
            headers=self.headers,
            timeout=self.settings.github_api_timeout,
        )
        self._login = login

    @classmethod
    async def connect(cls, settings: Settings, login: str | None = None) -> Self:
        """
        Create a client and resolve the login it queries for.

        Raises:
            AuthResolutionError: If the token owner cannot be looked up
        """
        client = cls(settings, login=login)
        try:
            await client.resolve_login()
        except Exception:
            await client.close()
            raise
        return client

    async def __aenter__(self) -> Self:
        """Enter async context manager."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit async context manager and close the client."""
        await self.close()

    @property
    def login(self) -> str:
        """The login every contributions query is made for."""
        if self._login is None:
            raise AuthResolutionError("Login has not been resolved yet")
        return self._login

    async def resolve_login(self) -> str:
        """
        Resolve the login, asking the REST API for the token owner if needed.

        The GraphQL API cannot tell us who owns the token, so this is the
        only REST call the client makes.

        Returns:
            The resolved login

        Raises:
            AuthResolutionError: If the lookup fails or its body cannot be decoded
        """
        if self._login is not None:
            return self._login

        url = f"{self.settings.github_rest_url.rstrip('/')}/user"
        logger.debug("Resolving login for token", url=url)

        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            raise AuthResolutionError(f"Failed to send request to get user: {e}") from e

        if not response.is_success:
            raise AuthResolutionError(
                f"Failed to get user: {response.status_code} response: {response.text}"
            )

        try:
            user = UserResponse.model_validate_json(response.text)
        except ValidationError as e:
            raise AuthResolutionError(f"Failed to decode user response: {e}") from e

        self._login = user.login
        logger.info("Resolved login for token", login=self._login)
        return self._login

    async def execute(
        self,
        query: str,
        payload_type: type[PayloadT],
        variables: Mapping[str, Any] | None = None,
    ) -> PayloadT:
        """
        Execute a GraphQL query against GitHub API.

        Args:
            query: GraphQL query string
            payload_type: Model the ``data`` member of the response decodes into
            variables: Optional variables for the query; ``None`` values are not sent

        Returns:
            Decoded ``data`` member of the response

        Raises:
            BadResponse: If the API answers with a non-success status
            QueryErrors: If the API reports GraphQL errors
            DecodeError: If the response matches neither expected shape
            TransportError: If the request cannot be sent or read
        """
        payload: dict[str, Any] = {"query": query}
        encoded = encode_variables(variables or {})
        if encoded:
            payload["variables"] = encoded

        context = query_name(query)
        logger.debug("Executing GraphQL query", query=context, variables=encoded)

        try:
            result = await self._send(payload, payload_type)
        except QueryFailure as e:
            e.context = context
            raise

        logger.debug("GraphQL query executed successfully", query=context)
        return result

    async def _send(
        self, payload: dict[str, Any], payload_type: type[PayloadT]
    ) -> PayloadT:
        try:
            response = await self.client.post(self.api_url, json=payload)
            text = response.text
        except httpx.HTTPError as e:
            raise TransportError(str(e)) from e

        if not response.is_success:
            raise BadResponse(response.status_code, text)

        # Decoding the expected shape first gives a precise error when the
        # schema drifts, rather than a vague "neither data nor errors" one.
        try:
            return QueryData[payload_type].model_validate_json(text).data  # type: ignore[valid-type]
        except ValidationError as data_error:
            try:
                errors = QueryErrorList.model_validate_json(text).errors
            except ValidationError:
                logger.error("Undecodable GraphQL response: {}", text)
                raise DecodeError(str(data_error), body=text) from data_error
            raise QueryErrors(errors) from data_error

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()
