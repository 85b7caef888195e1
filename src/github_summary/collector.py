"""GitHub contributions collector service."""

from datetime import UTC, datetime

from loguru import logger

from github_summary.client import GitHubGraphQLClient
from github_summary.models import ActivitySummary, Issue, PullRequest, Repository
from github_summary.pagination import Page, paginate
from github_summary.payloads import (
    IssueContributionNode,
    IssueContributionsPayload,
    PullRequestContributionNode,
    PullRequestContributionsPayload,
    RepositoryContributionNode,
    RepositoryContributionsPayload,
)
from github_summary.queries import (
    ISSUE_CONTRIBUTIONS_QUERY,
    PULL_REQUEST_CONTRIBUTIONS_QUERY,
    REPOSITORY_CONTRIBUTIONS_QUERY,
)


def _window_variables(
    client: GitHubGraphQLClient, window_start: datetime, window_end: datetime
) -> dict[str, object]:
    return {"user": client.login, "from": window_start, "to": window_end}


def _issue_page(payload: IssueContributionsPayload) -> Page[IssueContributionNode]:
    contributions = payload.user.contributions_collection.issue_contributions
    return Page(
        items=contributions.nodes,
        end_cursor=contributions.page_info.end_cursor,
        has_next_page=contributions.page_info.has_next_page,
    )


def _parse_issue(node: IssueContributionNode) -> Issue:
    issue = node.issue
    return Issue(
        repository=issue.repository.name,
        owner=issue.repository.owner.login,
        title=issue.title,
        state=issue.state,
        created_at=issue.created_at,
        body_text=issue.body_text,
    )


def _pull_request_page(
    payload: PullRequestContributionsPayload,
) -> Page[PullRequestContributionNode]:
    contributions = payload.user.contributions_collection.pull_request_contributions
    return Page(
        items=contributions.nodes,
        end_cursor=contributions.page_info.end_cursor,
        has_next_page=contributions.page_info.has_next_page,
    )


def _parse_pull_request(node: PullRequestContributionNode) -> PullRequest:
    pr = node.pull_request
    return PullRequest(
        repository=pr.repository.name,
        owner=pr.repository.owner.login,
        title=pr.title,
        state=pr.state,
        created_at=pr.created_at,
        body_text=pr.body_text,
    )


def _repository_page(
    payload: RepositoryContributionsPayload,
) -> Page[RepositoryContributionNode]:
    contributions = payload.user.contributions_collection.repository_contributions
    return Page(
        items=contributions.nodes,
        end_cursor=contributions.page_info.end_cursor,
        has_next_page=contributions.page_info.has_next_page,
    )


def _parse_repository(node: RepositoryContributionNode) -> Repository:
    repo = node.repository
    return Repository(
        name=repo.name,
        description=repo.description,
        owner=repo.owner.login,
        original_owner=repo.parent.owner.login if repo.parent else None,
        created_at=repo.created_at,
        url=repo.url,
    )


async def fetch_issues(
    client: GitHubGraphQLClient, window_start: datetime, window_end: datetime
) -> list[Issue]:
    """
    Fetch the issues the client's user opened within a time window.

    Args:
        client: Client with a resolved login
        window_start: Start of the window, passed to the API as is
        window_end: End of the window, passed to the API as is

    Returns:
        Issues sorted by creation time
    """
    logger.info("Fetching issue contributions", user=client.login)
    nodes = await paginate(
        client,
        ISSUE_CONTRIBUTIONS_QUERY,
        IssueContributionsPayload,
        _window_variables(client, window_start, window_end),
        _issue_page,
    )
    issues = sorted((_parse_issue(node) for node in nodes), key=lambda i: i.created_at)
    logger.info("Fetched issue contributions", user=client.login, total=len(issues))
    return issues


async def fetch_pull_requests(
    client: GitHubGraphQLClient, window_start: datetime, window_end: datetime
) -> list[PullRequest]:
    """
    Fetch the pull requests the client's user opened within a time window.

    Returns:
        Pull requests sorted by creation time
    """
    logger.info("Fetching pull request contributions", user=client.login)
    nodes = await paginate(
        client,
        PULL_REQUEST_CONTRIBUTIONS_QUERY,
        PullRequestContributionsPayload,
        _window_variables(client, window_start, window_end),
        _pull_request_page,
    )
    pull_requests = sorted(
        (_parse_pull_request(node) for node in nodes), key=lambda pr: pr.created_at
    )
    logger.info(
        "Fetched pull request contributions",
        user=client.login,
        total=len(pull_requests),
    )
    return pull_requests


async def fetch_repositories(
    client: GitHubGraphQLClient, window_start: datetime, window_end: datetime
) -> list[Repository]:
    """
    Fetch the repositories the client's user created or forked within a window.

    Forks carry the parent repository's owner in ``original_owner``.

    Returns:
        Repositories sorted by creation time
    """
    logger.info("Fetching repository contributions", user=client.login)
    nodes = await paginate(
        client,
        REPOSITORY_CONTRIBUTIONS_QUERY,
        RepositoryContributionsPayload,
        _window_variables(client, window_start, window_end),
        _repository_page,
    )
    repositories = sorted(
        (_parse_repository(node) for node in nodes), key=lambda r: r.created_at
    )
    logger.info(
        "Fetched repository contributions",
        user=client.login,
        total=len(repositories),
    )
    return repositories


class ActivityCollector:
    """Collector for a user's GitHub activity."""

    def __init__(self, client: GitHubGraphQLClient) -> None:
        """
        Initialize activity collector.

        Args:
            client: Client with a resolved login
        """
        self.client = client

    async def collect(
        self, window_start: datetime, window_end: datetime | None = None
    ) -> ActivitySummary:
        """
        Collect pull requests, issues and repositories within a time window.

        Args:
            window_start: Start of the window
            window_end: End of the window; defaults to now

        Returns:
            Summary of the user's activity
        """
        # Ensure dates are timezone-aware
        if window_start.tzinfo is None:
            window_start = window_start.replace(tzinfo=UTC)
        if window_end is None:
            window_end = datetime.now(UTC)
        elif window_end.tzinfo is None:
            window_end = window_end.replace(tzinfo=UTC)

        logger.info(
            "Starting activity collection",
            user=self.client.login,
            window_start=window_start.isoformat(),
            window_end=window_end.isoformat(),
        )

        pull_requests = await fetch_pull_requests(self.client, window_start, window_end)
        issues = await fetch_issues(self.client, window_start, window_end)
        repositories = await fetch_repositories(self.client, window_start, window_end)

        summary = ActivitySummary(
            user=self.client.login,
            period_start=window_start,
            period_end=window_end,
            issues=issues,
            pull_requests=pull_requests,
            repositories=repositories,
        )
        logger.info(
            "Completed activity collection",
            user=summary.user,
            pull_requests=summary.total_prs,
            issues=summary.total_issues,
            repositories=len(summary.repositories),
        )
        return summary
