"""Rendering of activity summaries."""

from github_summary.models import ActivitySummary


def render_text(summary: ActivitySummary) -> str:
    """
    Render a summary as prose with each item embedded as pretty JSON.

    The text is meant to be pasted into a report or handed to a language
    model, so every item keeps all of its fields.
    """
    lines = [
        "Below is a summary of what I've worked on in GitHub since "
        f"{summary.period_start.isoformat()}.",
        "",
        "First, the issues that I've opened, in JSON:",
        "",
    ]
    lines.extend(issue.model_dump_json(indent=2) for issue in summary.issues)
    lines += ["", "Next, the pull requests that I've opened, in JSON:", ""]
    lines.extend(pr.model_dump_json(indent=2) for pr in summary.pull_requests)
    lines += [
        "",
        "Finally, the repositories that I've created or forked "
        "(forks have a non-null 'original_owner' field), in JSON:",
        "",
    ]
    lines.extend(repo.model_dump_json(indent=2) for repo in summary.repositories)
    lines += [
        "",
        "In summary, I have:",
        f"- Opened {summary.total_prs} pull requests, "
        f"of which {summary.merged_prs} were merged.",
        f"- Opened {summary.total_issues} issues, "
        f"of which {summary.closed_issues} have been closed.",
        f"- Created {summary.created_repositories} repositories (not counting forks).",
    ]
    return "\n".join(lines) + "\n"


def render_json(summary: ActivitySummary) -> str:
    """Render a summary, counts included, as one JSON document."""
    return summary.model_dump_json(indent=2) + "\n"
