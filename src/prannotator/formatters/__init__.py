from __future__ import annotations

from collections.abc import Callable

from .json_fmt import format_json
from .markdown_fmt import format_comment, format_markdown
from ..models import AnnotationResult

__all__ = ["format_comment", "format_json", "format_markdown", "format_text", "get_formatter"]


def format_text(result: AnnotationResult) -> str:
    labels = ", ".join(dict.fromkeys(result.labels)) or "none"
    return (
        f"{result.owner}/{result.repo}#{result.pr_number}: {len(result.files)} files, "
        f"{result.summary.changes} changes, labels: {labels}"
    )


def get_formatter(fmt: str) -> Callable[[AnnotationResult], str]:
    if fmt == "text":
        return format_text
    if fmt == "json":
        return format_json
    if fmt == "markdown":
        return format_markdown
    raise ValueError(f"Unknown format: {fmt!r}")
