"""Tests for report rendering."""

import json
from datetime import UTC, datetime

import pytest

from github_summary.models import (
    ActivitySummary,
    Issue,
    LifecycleState,
    PullRequest,
    Repository,
)
from github_summary.report import render_json, render_text


@pytest.fixture
def summary() -> ActivitySummary:
    """Create a summary with one item of each kind."""
    created = datetime(2024, 1, 10, 12, 0, 0, tzinfo=UTC)
    return ActivitySummary(
        user="octocat",
        period_start=datetime(2024, 1, 1, tzinfo=UTC),
        period_end=datetime(2024, 1, 31, tzinfo=UTC),
        issues=[
            Issue(
                repository="repo",
                owner="owner",
                title="Crash on start",
                state=LifecycleState.CLOSED,
                created_at=created,
                body_text="It crashes.",
            )
        ],
        pull_requests=[
            PullRequest(
                repository="repo",
                owner="owner",
                title="Fix crash",
                state=LifecycleState.MERGED,
                created_at=created,
            ),
            PullRequest(
                repository="repo",
                owner="owner",
                title="Refactor",
                state=LifecycleState.OPEN,
                created_at=created,
            ),
        ],
        repositories=[
            Repository(
                name="linux",
                owner="octocat",
                original_owner="torvalds",
                created_at=created,
                url="https://github.com/octocat/linux",
            )
        ],
    )


def test_render_text(summary: ActivitySummary) -> None:
    """Test the prose report."""
    text = render_text(summary)

    assert text.startswith(
        "Below is a summary of what I've worked on in GitHub since "
        "2024-01-01T00:00:00+00:00."
    )
    assert '"title": "Crash on start"' in text
    assert '"title": "Fix crash"' in text
    assert '"original_owner": "torvalds"' in text
    assert text.index("Crash on start") < text.index("Fix crash") < text.index("linux")
    assert "- Opened 2 pull requests, of which 1 were merged." in text
    assert "- Opened 1 issues, of which 1 have been closed." in text
    assert "- Created 0 repositories (not counting forks)." in text


def test_render_json(summary: ActivitySummary) -> None:
    """Test the JSON report."""
    document = json.loads(render_json(summary))

    assert document["user"] == "octocat"
    assert document["period_start"] == "2024-01-01T00:00:00+00:00"
    assert document["issues"][0]["state"] == "CLOSED"
    assert document["pull_requests"][1]["title"] == "Refactor"
    assert document["repositories"][0]["original_owner"] == "torvalds"
    assert document["total_prs"] == 2
    assert document["merged_prs"] == 1
    assert document["total_issues"] == 1
    assert document["closed_issues"] == 1
    assert document["created_repositories"] == 0
