from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class InvocationParameters:
    owner: str
    repo: str
    pr_number: str
    token: str = field(repr=False)


@dataclass(frozen=True)
class ChangedFile:
    filename: str
    additions: int
    deletions: int
    changes: int
    status: str | None = None

    @classmethod
    def from_api(cls, node: dict[str, Any]) -> ChangedFile:
        return cls(
            filename=node["filename"],
            additions=node.get("additions", 0),
            deletions=node.get("deletions", 0),
            changes=node.get("changes", 0),
            status=node.get("status"),
        )


@dataclass(frozen=True)
class DiffSummary:
    additions: int = 0
    deletions: int = 0
    changes: int = 0

    def __add__(self, other: ChangedFile | DiffSummary) -> DiffSummary:
        if not isinstance(other, (ChangedFile, DiffSummary)):
            return NotImplemented
        return DiffSummary(
            additions=self.additions + other.additions,
            deletions=self.deletions + other.deletions,
            changes=self.changes + other.changes,
        )


@dataclass(frozen=True)
class AnnotationResult:
    owner: str
    repo: str
    pr_number: int
    files: list[ChangedFile]
    summary: DiffSummary
    labels: list[str]
    comment_url: str | None
