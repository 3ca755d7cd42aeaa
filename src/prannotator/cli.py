from __future__ import annotations

import os
import sys
from typing import NoReturn

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from . import annotator
from .client import DEFAULT_API_URL, GitHubClient
from .errors import PrAnnotatorError
from .formatters import get_formatter
from .models import InvocationParameters

_stderr = Console(stderr=True)


load_dotenv()


def _escape_workflow_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _fail(exc: PrAnnotatorError) -> NoReturn:
    message = str(exc)
    _stderr.print(f"[red]Error:[/red] {escape(message)}")
    if os.environ.get("GITHUB_ACTIONS") == "true":
        click.echo(f"::error::{_escape_workflow_data(message)}")
    sys.exit(1)


@click.command()
@click.option("--owner", envvar="INPUT_OWNER", help="Repository owner. [env: INPUT_OWNER]")
@click.option("--repo", envvar="INPUT_REPO", help="Repository name. [env: INPUT_REPO]")
@click.option(
    "--pr-number",
    envvar="INPUT_PR_NUMBER",
    help="Pull request number. [env: INPUT_PR_NUMBER]",
)
@click.option(
    "--token",
    envvar=["INPUT_TOKEN", "GITHUB_TOKEN"],
    help="GitHub token. [env: INPUT_TOKEN, GITHUB_TOKEN]",
)
@click.option(
    "--api-url",
    envvar="GITHUB_API_URL",
    default=DEFAULT_API_URL,
    show_default=True,
    help="GitHub REST API base URL. [env: GITHUB_API_URL]",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "markdown"]),
    default="text",
    show_default=True,
    help="What to print after a successful run.",
)
def cli(
    owner: str | None,
    repo: str | None,
    pr_number: str | None,
    token: str | None,
    api_url: str,
    output_format: str,
) -> None:
    """pr-annotator — label a pull request by file type and post a diff summary."""
    params = InvocationParameters(
        owner=owner or "",
        repo=repo or "",
        pr_number=pr_number or "",
        token=token or "",
    )

    try:
        # Fail on bad input before a client or network connection exists.
        annotator.validate_parameters(params)
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=_stderr,
            transient=True,
        ) as progress:
            task_id = progress.add_task("Starting…", total=None)
            with GitHubClient(params.token.strip(), base_url=api_url) as client:
                result = annotator.run(
                    params,
                    client,
                    on_progress=lambda msg: progress.update(task_id, description=msg),
                )
    except PrAnnotatorError as exc:
        _fail(exc)

    formatter = get_formatter(output_format)
    click.echo(formatter(result))


if __name__ == "__main__":
    cli()
