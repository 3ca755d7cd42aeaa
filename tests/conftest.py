"""Shared factories and fixtures for the test suite."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from prannotator.models import ChangedFile, DiffSummary, InvocationParameters

API_URL = "https://api.github.com"
FILES_URL = f"{API_URL}/repos/owner/repo/pulls/7/files"
LABELS_URL = f"{API_URL}/repos/owner/repo/issues/7/labels"
COMMENTS_URL = f"{API_URL}/repos/owner/repo/issues/7/comments"

# ---------------------------------------------------------------------------
# REST payload factories — return raw dicts that mirror API responses
# ---------------------------------------------------------------------------


def file_node(
    filename: str = "README.md",
    additions: int = 5,
    deletions: int = 1,
    changes: int | None = None,
    status: str = "modified",
) -> dict:
    return {
        "sha": "bbcd538c8e72b8c175046e27cc8f907076331401",
        "filename": filename,
        "status": status,
        "additions": additions,
        "deletions": deletions,
        "changes": additions + deletions if changes is None else changes,
        "blob_url": f"https://github.com/owner/repo/blob/abc/{filename}",
        "patch": "@@ -1 +1 @@\n-old\n+new",
    }


def label_nodes(*names: str) -> list[dict]:
    return [{"id": i, "name": name, "color": "ededed", "default": False} for i, name in enumerate(names, 1)]


def comment_payload(
    id: int = 1,
    body: str = "",
    html_url: str = "https://github.com/owner/repo/pull/7#issuecomment-1",
) -> dict:
    return {"id": id, "body": body, "html_url": html_url, "user": {"login": "github-actions[bot]"}}


# ---------------------------------------------------------------------------
# Model object factories — construct typed model instances
# ---------------------------------------------------------------------------


def make_changed_file(
    filename: str = "README.md",
    additions: int = 5,
    deletions: int = 1,
    changes: int | None = None,
    status: str | None = "modified",
) -> ChangedFile:
    return ChangedFile(
        filename=filename,
        additions=additions,
        deletions=deletions,
        changes=additions + deletions if changes is None else changes,
        status=status,
    )


def make_params(
    owner: str = "owner",
    repo: str = "repo",
    pr_number: str = "7",
    token: str = "tok",
) -> InvocationParameters:
    return InvocationParameters(owner=owner, repo=repo, pr_number=pr_number, token=token)


def scenario_files() -> list[ChangedFile]:
    return [
        make_changed_file("README.md", additions=5, deletions=1, changes=6),
        make_changed_file("app.js", additions=10, deletions=0, changes=10),
        make_changed_file("logo.png", additions=0, deletions=0, changes=0),
    ]


def make_client(files: list[ChangedFile] | None = None) -> MagicMock:
    client = MagicMock()
    client.list_pull_request_files.return_value = files if files is not None else []
    client.add_labels.side_effect = lambda owner, repo, number, labels: list(labels)
    client.create_comment.return_value = "https://github.com/owner/repo/pull/7#issuecomment-1"
    return client


SCENARIO_SUMMARY = DiffSummary(additions=15, deletions=1, changes=16)


# ---------------------------------------------------------------------------
# Autouse fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def no_dotenv(mocker):
    """Prevent tests from loading a real .env file."""
    mocker.patch("prannotator.cli.load_dotenv")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's or CI runner's environment out of the tests."""
    for name in (
        "INPUT_OWNER",
        "INPUT_REPO",
        "INPUT_PR_NUMBER",
        "INPUT_TOKEN",
        "GITHUB_TOKEN",
        "GITHUB_API_URL",
        "GITHUB_ACTIONS",
    ):
        monkeypatch.delenv(name, raising=False)
