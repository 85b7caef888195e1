"""Data models for GitHub activity summaries."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    computed_field,
)


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an ISO-8601 timestamp carrying a timezone offset.

    Args:
        value: ISO-8601 string (a trailing ``Z`` is accepted) or an aware datetime

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the value is not an ISO-8601 string or has no offset
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip())
    else:
        raise ValueError(f"Expected an ISO-8601 string, got {type(value).__name__}")

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise ValueError(f"Timestamp has no timezone offset: {value!r}")
    return parsed


def format_timestamp(value: datetime) -> str:
    """Format an aware datetime as ISO-8601 text."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"Timestamp has no timezone offset: {value!r}")
    return value.isoformat()


Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


class LifecycleState(str, Enum):
    """State of an issue or pull request, as encoded by the API."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"
    MERGED = "MERGED"

    @classmethod
    def _missing_(cls, value: object) -> Any:
        raise ValueError(
            f"Unknown state {value!r}, expecting OPEN, CLOSED or MERGED"
        )


class Issue(BaseModel):
    """An issue opened by the user."""

    model_config = ConfigDict(frozen=True)

    repository: str = Field(..., description="Repository name")
    owner: str = Field(..., description="Repository owner login")
    title: str = Field(..., description="Issue title")
    state: LifecycleState = Field(..., description="Issue state")
    created_at: Timestamp = Field(..., description="Issue creation timestamp")
    body_text: str = Field(default="", description="Issue body as plain text")


class PullRequest(BaseModel):
    """A pull request opened by the user."""

    model_config = ConfigDict(frozen=True)

    repository: str = Field(..., description="Repository name")
    owner: str = Field(..., description="Repository owner login")
    title: str = Field(..., description="PR title")
    state: LifecycleState = Field(..., description="PR state")
    created_at: Timestamp = Field(..., description="PR creation timestamp")
    body_text: str = Field(default="", description="PR body as plain text")


class Repository(BaseModel):
    """A repository created or forked by the user."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Repository name")
    description: str | None = Field(None, description="Repository description")
    owner: str = Field(..., description="Repository owner login")
    original_owner: str | None = Field(
        None, description="Owner of the parent repository, set only for forks"
    )
    created_at: Timestamp = Field(..., description="Repository creation timestamp")
    url: str = Field(..., description="Repository URL")

    @property
    def is_fork(self) -> bool:
        """Whether the repository was forked from another one."""
        return self.original_owner is not None


class ActivitySummary(BaseModel):
    """Everything a user did on GitHub within a time window."""

    user: str = Field(..., description="GitHub login the activity belongs to")
    period_start: Timestamp = Field(..., description="Start of the window")
    period_end: Timestamp = Field(..., description="End of the window")
    issues: list[Issue] = Field(default_factory=list, description="Issues opened")
    pull_requests: list[PullRequest] = Field(
        default_factory=list, description="Pull requests opened"
    )
    repositories: list[Repository] = Field(
        default_factory=list, description="Repositories created or forked"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_prs(self) -> int:
        """Total number of PRs."""
        return len(self.pull_requests)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def merged_prs(self) -> int:
        """Number of merged PRs."""
        return sum(
            1 for pr in self.pull_requests if pr.state == LifecycleState.MERGED
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_issues(self) -> int:
        """Total number of issues."""
        return len(self.issues)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def closed_issues(self) -> int:
        """Number of closed issues."""
        return sum(
            1 for issue in self.issues if issue.state == LifecycleState.CLOSED
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def created_repositories(self) -> int:
        """Number of repositories, not counting forks."""
        return sum(1 for repo in self.repositories if not repo.is_fork)
