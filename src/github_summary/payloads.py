"""
Response shapes of the contributions queries.

Each model mirrors the nesting of its query in ``queries.py``. Aliases hold
the camelCase names used on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field

from github_summary.models import LifecycleState, Timestamp


class WireModel(BaseModel):
    """Base for response models, populated by wire alias or field name."""

    model_config = ConfigDict(populate_by_name=True)


class PageInfo(WireModel):
    """Cursor state of one connection page."""

    end_cursor: str | None = Field(None, alias="endCursor")
    has_next_page: bool = Field(..., alias="hasNextPage")


class Owner(WireModel):
    """Account owning a repository."""

    login: str


class RepositoryRef(WireModel):
    """Repository an issue or pull request belongs to."""

    name: str
    owner: Owner


# Issues


class IssueNode(WireModel):
    """Issue fields requested by the issues query."""

    repository: RepositoryRef
    title: str
    state: LifecycleState
    created_at: Timestamp = Field(..., alias="createdAt")
    body_text: str = Field(..., alias="bodyText")


class IssueContributionNode(WireModel):
    """One issue contribution."""

    issue: IssueNode


class IssueContributions(WireModel):
    """Page of issue contributions."""

    page_info: PageInfo = Field(..., alias="pageInfo")
    nodes: list[IssueContributionNode]


class IssueContributionsCollection(WireModel):
    """Contributions collection holding the issue page."""

    issue_contributions: IssueContributions = Field(..., alias="issueContributions")


class IssueContributionsUser(WireModel):
    """User node of the issues query."""

    contributions_collection: IssueContributionsCollection = Field(
        ..., alias="contributionsCollection"
    )


class IssueContributionsPayload(WireModel):
    """``data`` member of the issues query."""

    user: IssueContributionsUser


# Pull requests


class PullRequestNode(WireModel):
    """Pull request fields requested by the pull requests query."""

    repository: RepositoryRef
    title: str
    state: LifecycleState
    created_at: Timestamp = Field(..., alias="createdAt")
    body_text: str = Field(..., alias="bodyText")


class PullRequestContributionNode(WireModel):
    """One pull request contribution."""

    pull_request: PullRequestNode = Field(..., alias="pullRequest")


class PullRequestContributions(WireModel):
    """Page of pull request contributions."""

    page_info: PageInfo = Field(..., alias="pageInfo")
    nodes: list[PullRequestContributionNode]


class PullRequestContributionsCollection(WireModel):
    """Contributions collection holding the pull request page."""

    pull_request_contributions: PullRequestContributions = Field(
        ..., alias="pullRequestContributions"
    )


class PullRequestContributionsUser(WireModel):
    """User node of the pull requests query."""

    contributions_collection: PullRequestContributionsCollection = Field(
        ..., alias="contributionsCollection"
    )


class PullRequestContributionsPayload(WireModel):
    """``data`` member of the pull requests query."""

    user: PullRequestContributionsUser


# Repositories


class RepositoryParent(WireModel):
    """Repository a fork was created from."""

    owner: Owner


class RepositoryNode(WireModel):
    """Repository fields requested by the repositories query."""

    name: str
    description: str | None = None
    url: str
    created_at: Timestamp = Field(..., alias="createdAt")
    owner: Owner
    parent: RepositoryParent | None = None


class RepositoryContributionNode(WireModel):
    """One created repository."""

    repository: RepositoryNode


class RepositoryContributions(WireModel):
    """Page of repository contributions."""

    page_info: PageInfo = Field(..., alias="pageInfo")
    nodes: list[RepositoryContributionNode]


class RepositoryContributionsCollection(WireModel):
    """Contributions collection holding the repository page."""

    repository_contributions: RepositoryContributions = Field(
        ..., alias="repositoryContributions"
    )


class RepositoryContributionsUser(WireModel):
    """User node of the repositories query."""

    contributions_collection: RepositoryContributionsCollection = Field(
        ..., alias="contributionsCollection"
    )


class RepositoryContributionsPayload(WireModel):
    """``data`` member of the repositories query."""

    user: RepositoryContributionsUser
