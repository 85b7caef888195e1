"""GitHub Summary - Library for summarizing a user's GitHub activity."""

from github_summary.client import GitHubGraphQLClient
from github_summary.collector import (
    ActivityCollector,
    fetch_issues,
    fetch_pull_requests,
    fetch_repositories,
)
from github_summary.config.settings import Settings, get_settings
from github_summary.errors import (
    AuthResolutionError,
    BadResponse,
    DecodeError,
    GitHubSummaryError,
    QueryError,
    QueryErrors,
    QueryFailure,
    TransportError,
)
from github_summary.models import (
    ActivitySummary,
    Issue,
    LifecycleState,
    PullRequest,
    Repository,
    Timestamp,
    format_timestamp,
    parse_timestamp,
)
from github_summary.pagination import Page, paginate

__all__ = [
    "ActivityCollector",
    "GitHubGraphQLClient",
    "Settings",
    "get_settings",
    "fetch_issues",
    "fetch_pull_requests",
    "fetch_repositories",
    "paginate",
    "Page",
    "ActivitySummary",
    "Issue",
    "LifecycleState",
    "PullRequest",
    "Repository",
    "Timestamp",
    "format_timestamp",
    "parse_timestamp",
    "GitHubSummaryError",
    "AuthResolutionError",
    "QueryFailure",
    "QueryError",
    "QueryErrors",
    "BadResponse",
    "DecodeError",
    "TransportError",
]
