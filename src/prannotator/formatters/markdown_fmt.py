from __future__ import annotations

from ..models import AnnotationResult, DiffSummary


def format_comment(pr_number: int | str, summary: DiffSummary) -> str:
    lines = [
        f"Pull Request #{pr_number} has been updated with:",
        "",
        f"- {summary.changes} changes",
        f"- {summary.additions} additions",
        f"- {summary.deletions} deletions",
    ]
    return "\n".join(lines) + "\n"


def format_markdown(result: AnnotationResult) -> str:
    return format_comment(result.pr_number, result.summary)
