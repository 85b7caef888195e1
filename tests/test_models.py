"""Tests for data models."""

import json
from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from github_summary.models import (
    ActivitySummary,
    Issue,
    LifecycleState,
    PullRequest,
    Repository,
    format_timestamp,
    parse_timestamp,
)


@pytest.mark.parametrize(
    "value",
    [
        datetime(2024, 1, 1, tzinfo=UTC),
        datetime(2024, 2, 29, 23, 59, 59, 999999, tzinfo=UTC),
        datetime(2025, 6, 1, 8, 30, tzinfo=timezone(timedelta(hours=5, minutes=30))),
        datetime(1999, 12, 31, 18, 0, tzinfo=timezone(timedelta(hours=-7))),
        datetime(1, 1, 1, tzinfo=UTC),
    ],
)
def test_timestamp_round_trip(value: datetime) -> None:
    """Test that formatting then parsing yields the same instant."""
    assert parse_timestamp(format_timestamp(value)) == value


def test_timestamp_parses_zulu_suffix() -> None:
    """Test parsing the UTC designator used by the GitHub API."""
    parsed = parse_timestamp("2024-01-10T12:00:00Z")
    assert parsed == datetime(2024, 1, 10, 12, 0, tzinfo=UTC)
    assert parsed.utcoffset() == timedelta(0)


def test_timestamp_equality_is_by_instant() -> None:
    """Test that the same instant in different offsets compares equal."""
    assert parse_timestamp("2024-01-10T12:00:00Z") == parse_timestamp(
        "2024-01-10T17:30:00+05:30"
    )
    assert parse_timestamp("2024-01-10T12:00:00Z") < parse_timestamp(
        "2024-01-10T12:00:01+00:00"
    )


@pytest.mark.parametrize("value", ["2024-01-10T12:00:00", "2024-01-10", "yesterday", ""])
def test_timestamp_rejects_invalid_text(value: str) -> None:
    """Test that naive or malformed timestamps are rejected."""
    with pytest.raises(ValueError):
        parse_timestamp(value)


def test_timestamp_rejects_non_strings() -> None:
    """Test that only text is accepted off the wire."""
    with pytest.raises(ValueError):
        parse_timestamp(1704888000)


def test_format_timestamp_rejects_naive() -> None:
    """Test that naive datetimes cannot be formatted."""
    with pytest.raises(ValueError):
        format_timestamp(datetime(2024, 1, 1))


@pytest.mark.parametrize(
    ("token", "state"),
    [
        ("OPEN", LifecycleState.OPEN),
        ("CLOSED", LifecycleState.CLOSED),
        ("MERGED", LifecycleState.MERGED),
    ],
)
def test_lifecycle_state_decoding(token: str, state: LifecycleState) -> None:
    """Test LifecycleState enum."""
    assert LifecycleState(token) is state
    assert state.value == token


@pytest.mark.parametrize("token", ["open", "Closed", "DRAFT", ""])
def test_lifecycle_state_rejects_unknown_tokens(token: str) -> None:
    """Test that decoding is exact and case-sensitive."""
    with pytest.raises(ValueError, match="expecting OPEN, CLOSED or MERGED"):
        LifecycleState(token)


def test_issue_model_rejects_unknown_state() -> None:
    """Test that an unknown state never falls back to a default."""
    with pytest.raises(ValidationError):
        Issue(
            repository="repo",
            owner="owner",
            title="Title",
            state="open",
            created_at="2024-01-10T12:00:00Z",
        )


def test_issue_model_serialization() -> None:
    """Test Issue model and its JSON encoding."""
    issue = Issue(
        repository="repo",
        owner="owner",
        title="Crash on start",
        state="OPEN",
        created_at="2024-01-10T12:00:00Z",
        body_text="It crashes.",
    )

    assert issue.state == LifecycleState.OPEN
    assert issue.created_at == datetime(2024, 1, 10, 12, tzinfo=UTC)
    assert json.loads(issue.model_dump_json()) == {
        "repository": "repo",
        "owner": "owner",
        "title": "Crash on start",
        "state": "OPEN",
        "created_at": "2024-01-10T12:00:00+00:00",
        "body_text": "It crashes.",
    }


def test_repository_model_fork() -> None:
    """Test Repository model."""
    created = datetime(2024, 1, 1, tzinfo=UTC)
    fork = Repository(
        name="linux",
        owner="octocat",
        original_owner="torvalds",
        created_at=created,
        url="https://github.com/octocat/linux",
    )
    own = Repository(
        name="dotfiles",
        description="My dotfiles",
        owner="octocat",
        created_at=created,
        url="https://github.com/octocat/dotfiles",
    )

    assert fork.is_fork
    assert not own.is_fork
    assert own.original_owner is None


def test_activity_summary_counts() -> None:
    """Test ActivitySummary model."""
    created = datetime(2024, 1, 10, 12, 0, 0, tzinfo=UTC)

    def pr(state: LifecycleState) -> PullRequest:
        return PullRequest(
            repository="repo", owner="owner", title="PR", state=state, created_at=created
        )

    def issue(state: LifecycleState) -> Issue:
        return Issue(
            repository="repo",
            owner="owner",
            title="Issue",
            state=state,
            created_at=created,
        )

    summary = ActivitySummary(
        user="octocat",
        period_start=datetime(2024, 1, 1, tzinfo=UTC),
        period_end=datetime(2024, 1, 31, tzinfo=UTC),
        pull_requests=[
            pr(LifecycleState.MERGED),
            pr(LifecycleState.OPEN),
            pr(LifecycleState.CLOSED),
            pr(LifecycleState.MERGED),
        ],
        issues=[issue(LifecycleState.CLOSED), issue(LifecycleState.OPEN)],
        repositories=[
            Repository(
                name="a", owner="octocat", created_at=created, url="https://x/a"
            ),
            Repository(
                name="b",
                owner="octocat",
                original_owner="other",
                created_at=created,
                url="https://x/b",
            ),
        ],
    )

    assert summary.total_prs == 4
    assert summary.merged_prs == 2
    assert summary.total_issues == 2
    assert summary.closed_issues == 1
    assert summary.created_repositories == 1


def test_activity_summary_empty() -> None:
    """Test ActivitySummary without any activity."""
    summary = ActivitySummary(
        user="octocat",
        period_start=datetime(2024, 1, 1, tzinfo=UTC),
        period_end=datetime(2024, 1, 31, tzinfo=UTC),
    )

    assert summary.total_prs == 0
    assert summary.merged_prs == 0
    assert summary.total_issues == 0
    assert summary.closed_issues == 0
    assert summary.created_repositories == 0
