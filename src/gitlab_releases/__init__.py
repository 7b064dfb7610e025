"""Typed async client and MCP server for GitLab project releases."""

import asyncio
import os

import click
from dotenv import load_dotenv

from .client import GitLabClient
from .config import GitLabConfig
from .ids import ProjectRef, parse_id
from .options import with_header, with_sudo, with_timeout
from .response import ApiResponse

__all__ = [
    "ApiResponse",
    "GitLabClient",
    "GitLabConfig",
    "ProjectRef",
    "main",
    "parse_id",
    "with_header",
    "with_sudo",
    "with_timeout",
]


@click.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="MCP transport type",
)
@click.option("--port", default=8000, help="Port for HTTP transports")
@click.option("--host", default="127.0.0.1", help="Host for HTTP transports")
@click.option("--gitlab-url", envvar="GITLAB_URL", help="GitLab instance URL")
@click.option("--gitlab-token", envvar="GITLAB_TOKEN", help="GitLab personal access token")
@click.option("--read-only", is_flag=True, help="Disable release create/update/delete")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    envvar="GITLAB_LOG_LEVEL",
    default="WARNING",
    help="Log level for client and server logs (written to stderr)",
)
def main(
    transport: str,
    port: int,
    host: str,
    gitlab_url: str | None,
    gitlab_token: str | None,
    read_only: bool,
    log_level: str,
) -> None:
    """Run the GitLab releases MCP server."""
    load_dotenv()

    if gitlab_url:
        os.environ["GITLAB_URL"] = gitlab_url
    if gitlab_token:
        os.environ["GITLAB_TOKEN"] = gitlab_token
    if read_only:
        os.environ["GITLAB_READ_ONLY"] = "true"

    from .logging import setup_logging

    setup_logging(log_level, json_logs=GitLabConfig.from_env().log_json)

    from .servers.releases import mcp

    run_kwargs: dict = {"transport": transport}
    if transport != "stdio":
        run_kwargs["host"] = host
        run_kwargs["port"] = port

    asyncio.run(mcp.run_async(show_banner=False, **run_kwargs))


if __name__ == "__main__":
    main()
