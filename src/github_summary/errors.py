"""Exceptions raised by the GitHub summary client."""

from pydantic import BaseModel, Field


class GitHubSummaryError(Exception):
    """Base class for all errors raised by this package."""


class AuthResolutionError(GitHubSummaryError):
    """The login for the API token could not be resolved."""


class QueryError(BaseModel):
    """A single error entry reported by the GraphQL API."""

    path: list[str | int] | None = Field(None, description="Path to the failing field")
    message: str = Field(..., description="Error message")

    def __str__(self) -> str:
        if self.path:
            return f"{'.'.join(str(p) for p in self.path)}: {self.message}"
        return self.message


class QueryFailure(GitHubSummaryError):
    """
    Base class for failures of a single GraphQL query.

    The ``context`` attribute names the query that failed. It is filled in by
    the client once the failure leaves ``execute``.
    """

    context: str | None = None

    def describe(self) -> str:
        return super().__str__()

    def __str__(self) -> str:
        if self.context:
            return f"{self.context}: {self.describe()}"
        return self.describe()


class BadResponse(QueryFailure):
    """The API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(status_code, body)
        self.status_code = status_code
        self.body = body

    def describe(self) -> str:
        return f"Bad response making request: {self.status_code} response: {self.body}"


class QueryErrors(QueryFailure):
    """The API accepted the request but reported GraphQL errors."""

    def __init__(self, errors: list[QueryError]) -> None:
        super().__init__(errors)
        self.errors = errors

    def describe(self) -> str:
        return "Errors with query: " + "; ".join(str(error) for error in self.errors)


class DecodeError(QueryFailure):
    """The response body matched neither the data nor the errors shape."""

    def __init__(self, message: str, body: str) -> None:
        super().__init__(message)
        self.body = body

    def describe(self) -> str:
        return f"Failed to decode response: {super().describe()}"


class TransportError(QueryFailure):
    """The request could not be sent or its response could not be read."""

    def describe(self) -> str:
        return f"Failed to send request: {super().describe()}"
