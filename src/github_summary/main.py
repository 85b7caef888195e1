"""Command line entry point for github-summary."""

import argparse
import asyncio
import sys
from datetime import datetime

from loguru import logger
from pydantic import SecretStr

from github_summary.client import GitHubGraphQLClient
from github_summary.collector import ActivityCollector
from github_summary.config.logging import setup_logging
from github_summary.config.settings import Settings, get_settings
from github_summary.errors import GitHubSummaryError
from github_summary.models import ActivitySummary, parse_timestamp
from github_summary.report import render_json, render_text

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def _timestamp_arg(value: str) -> datetime:
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"expected an ISO-8601 timestamp with offset, e.g. '2025-06-01T00:00:00Z': {e}"
        ) from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="github-summary",
        description=(
            "Summarize the issues, pull requests and repositories a GitHub "
            "user opened or created within a time window."
        ),
    )
    parser.add_argument(
        "--from",
        dest="window_start",
        required=True,
        type=_timestamp_arg,
        help="Start of the window, for example '2025-06-01T00:00:00Z'",
    )
    parser.add_argument(
        "--to",
        dest="window_end",
        type=_timestamp_arg,
        default=None,
        help="End of the window (default: now)",
    )
    parser.add_argument(
        "--gh-token",
        help=(
            "GitHub token with read access to issues, metadata and pull "
            "requests (default: GITHUB_TOKEN env var)"
        ),
    )
    parser.add_argument(
        "--user",
        help="Login to summarize (default: the owner of the token)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: INFO)",
    )
    return parser


async def collect_summary(
    settings: Settings, window_start: datetime, window_end: datetime | None = None
) -> ActivitySummary:
    """Connect to GitHub and collect the activity summary."""
    async with await GitHubGraphQLClient.connect(
        settings, login=settings.github_login
    ) as client:
        return await ActivityCollector(client).collect(window_start, window_end)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides: dict[str, object] = {}
    if args.gh_token:
        overrides["github_token"] = SecretStr(args.gh_token)
    if args.user:
        overrides["github_login"] = args.user
    if args.log_level:
        overrides["logging_level"] = args.log_level
    settings = get_settings().model_copy(update=overrides)

    setup_logging(settings)

    if not settings.github_token.get_secret_value():
        parser.error("GITHUB_TOKEN must be set either via --gh-token or GITHUB_TOKEN env var")

    try:
        summary = asyncio.run(
            collect_summary(settings, args.window_start, args.window_end)
        )
    except GitHubSummaryError as e:
        logger.opt(exception=e).debug("Activity collection failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = render_json(summary) if args.format == "json" else render_text(summary)
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
