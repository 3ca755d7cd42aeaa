from __future__ import annotations

import time
from collections.abc import Iterator
from typing import Any

import httpx
from rich.console import Console

from .errors import ApiError, AuthError, NetworkError, NotFoundError, RateLimitError
from .models import ChangedFile

DEFAULT_API_URL = "https://api.github.com"
_PER_PAGE = 100
_RETRY_DELAYS = (1, 5, 15)
_LOW_RATE_LIMIT = 100
_stderr = Console(stderr=True)


class GitHubClient:
    def __init__(self, token: str, base_url: str = DEFAULT_API_URL) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "pr-annotator",
            },
            timeout=httpx.Timeout(30.0),
            follow_redirects=True,
        )

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        retry: bool = True,
    ) -> httpx.Response:
        delays = (*_RETRY_DELAYS, None) if retry else (None,)

        last_exc: Exception | None = None
        for delay in delays:
            try:
                response = self._client.request(method, url, params=params, json=json)
            except httpx.TimeoutException as exc:
                if not retry:
                    raise NetworkError(f"Request timed out: {exc}") from exc
                last_exc = exc
                if delay is not None:
                    time.sleep(delay)
                continue
            except httpx.RequestError as exc:
                raise NetworkError(str(exc)) from exc

            if response.status_code >= 500:
                last_exc = ApiError(f"GitHub API returned HTTP {response.status_code}")
                if not retry:
                    raise last_exc
                if delay is not None:
                    time.sleep(delay)
                continue

            self._check_response(response)
            return response

        raise NetworkError(f"Request failed after {len(delays)} attempts: {last_exc}") from last_exc

    def list_pull_request_files(self, owner: str, repo: str, pr_number: int) -> list[ChangedFile]:
        return [
            ChangedFile.from_api(node)
            for node in self._paginate(f"/repos/{owner}/{repo}/pulls/{pr_number}/files")
        ]

    def add_labels(self, owner: str, repo: str, issue_number: int, labels: list[str]) -> list[str]:
        response = self.request(
            "POST",
            f"/repos/{owner}/{repo}/issues/{issue_number}/labels",
            json={"labels": labels},
        )
        data = response.json()
        if not isinstance(data, list):
            raise ApiError(f"Expected a list of labels, got {type(data).__name__}")
        return [lbl["name"] for lbl in data]

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> str | None:
        # Not retried: a timed-out POST may still have created the comment.
        response = self.request(
            "POST",
            f"/repos/{owner}/{repo}/issues/{issue_number}/comments",
            json={"body": body},
            retry=False,
        )
        return response.json().get("html_url")

    def _paginate(self, path: str) -> Iterator[dict[str, Any]]:
        url: str | None = path
        params: dict[str, Any] | None = {"per_page": _PER_PAGE}

        while url:
            response = self.request("GET", url, params=params)
            data = response.json()
            if not isinstance(data, list):
                raise ApiError(f"Expected a list from {path}, got {type(data).__name__}")
            yield from data

            # The next link already carries per_page and page.
            url = response.links.get("next", {}).get("url")
            params = None

    @staticmethod
    def _check_response(response: httpx.Response) -> None:
        remaining = response.headers.get("x-ratelimit-remaining")
        status = response.status_code

        if status in (403, 429) and remaining == "0":
            reset = response.headers.get("x-ratelimit-reset", "unknown")
            raise RateLimitError(f"GitHub rate limit exhausted. Resets at epoch {reset}.")
        if status == 401:
            raise AuthError("GitHub token is invalid or missing required scopes.")
        if status == 404:
            raise NotFoundError(f"Not Found: {response.request.method} {response.request.url.path}")
        if status >= 400:
            raise ApiError(f"GitHub API returned HTTP {status}: {_error_message(response)}")

        if remaining is not None and remaining.isdigit() and int(remaining) < _LOW_RATE_LIMIT:
            _stderr.print(
                f"[yellow]Warning:[/yellow] GitHub rate limit low: {remaining} requests remaining "
                f"(resets at epoch {response.headers.get('x-ratelimit-reset', 'unknown')})"
            )


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, dict) and payload.get("message"):
        return payload["message"]
    return response.text
