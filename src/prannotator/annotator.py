"""Label a pull request by changed file types and post a diff summary.

The pipeline is strictly linear: validate, fetch changed files, sum their
statistics, add one label per matching file, post one comment. The first
error raised by any stage propagates to the caller; labels applied before a
failure are left in place.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import fields
from functools import reduce
from typing import Protocol

from .errors import ConfigurationError
from .formatters.markdown_fmt import format_comment
from .labels import label_for
from .models import AnnotationResult, ChangedFile, DiffSummary, InvocationParameters


class HostingClient(Protocol):
    def list_pull_request_files(self, owner: str, repo: str, pr_number: int) -> list[ChangedFile]: ...

    def add_labels(self, owner: str, repo: str, issue_number: int, labels: list[str]) -> list[str]: ...

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> str | None: ...


def validate_parameters(params: InvocationParameters) -> int:
    """Check that every parameter is set and return the parsed PR number."""
    for f in fields(params):
        value = getattr(params, f.name)
        if value is None or not str(value).strip():
            raise ConfigurationError(f"Input required and not supplied: {f.name}")

    pr_number = params.pr_number.strip()
    if not pr_number.isdecimal() or int(pr_number) == 0:
        raise ConfigurationError(f"pr_number must be a positive integer, got {params.pr_number!r}")
    return int(pr_number)


def summarize(files: Iterable[ChangedFile]) -> DiffSummary:
    return reduce(lambda acc, f: acc + f, files, DiffSummary())


def apply_labels(
    client: HostingClient,
    owner: str,
    repo: str,
    pr_number: int,
    files: Iterable[ChangedFile],
) -> list[str]:
    applied: list[str] = []
    for changed in files:
        label = label_for(changed.filename)
        if label is None:
            continue
        client.add_labels(owner, repo, pr_number, [label])
        applied.append(label)
    return applied


def run(
    params: InvocationParameters,
    client: HostingClient,
    on_progress: Callable[[str], None] | None = None,
) -> AnnotationResult:
    def progress(message: str) -> None:
        if on_progress is not None:
            on_progress(message)

    pr_number = validate_parameters(params)
    owner, repo = params.owner.strip(), params.repo.strip()

    progress(f"Fetching changed files for {owner}/{repo}#{pr_number}…")
    files = client.list_pull_request_files(owner, repo, pr_number)

    summary = summarize(files)

    progress(f"Labelling {len(files)} changed files…")
    labels = apply_labels(client, owner, repo, pr_number, files)

    progress("Posting summary comment…")
    comment_url = client.create_comment(owner, repo, pr_number, format_comment(pr_number, summary))

    return AnnotationResult(
        owner=owner,
        repo=repo,
        pr_number=pr_number,
        files=files,
        summary=summary,
        labels=labels,
        comment_url=comment_url,
    )
