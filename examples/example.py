"""Example usage of the github-summary library."""

import asyncio
from datetime import UTC, datetime, timedelta

from github_summary import (
    ActivityCollector,
    GitHubGraphQLClient,
    GitHubSummaryError,
    get_settings,
)
from github_summary.config.logging import setup_logging


async def main() -> None:
    """
    Example of summarizing a user's GitHub activity.

    Before running:
    1. Set the GITHUB_TOKEN (or GITHUB_SUMMARY__GITHUB_TOKEN) environment variable
    2. Optionally set GITHUB_SUMMARY__GITHUB_LOGIN to summarize another user
    """
    # Get settings (reads from environment variables)
    settings = get_settings()
    setup_logging(settings)

    # Example: last 30 days
    end_date = datetime.now(UTC)
    start_date = end_date - timedelta(days=30)

    try:
        async with await GitHubGraphQLClient.connect(
            settings, login=settings.github_login
        ) as client:
            print(f"\nCollecting activity for {client.login}")
            print(f"Period: {start_date.date()} to {end_date.date()}")
            print("-" * 60)

            summary = await ActivityCollector(client).collect(start_date, end_date)
    except GitHubSummaryError as e:
        print(f"Error collecting activity: {e}")
        raise

    print(f"\nPull requests: {summary.total_prs} ({summary.merged_prs} merged)")
    for pr in summary.pull_requests:
        print(f"  - [{pr.state.value}] {pr.owner}/{pr.repository}: {pr.title}")

    print(f"\nIssues: {summary.total_issues} ({summary.closed_issues} closed)")
    for issue in summary.issues:
        print(f"  - [{issue.state.value}] {issue.owner}/{issue.repository}: {issue.title}")

    print(f"\nRepositories: {summary.created_repositories} (not counting forks)")
    for repo in summary.repositories:
        origin = f" (fork of {repo.original_owner})" if repo.is_fork else ""
        print(f"  - {repo.url}{origin}")


if __name__ == "__main__":
    asyncio.run(main())
