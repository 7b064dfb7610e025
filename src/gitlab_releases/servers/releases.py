"""GitLab releases MCP server: tool registrations."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated, Any

import structlog
from fastmcp import Context, FastMCP
from pydantic import BaseModel, Field

from ..client import GitLabClient
from ..config import GitLabConfig
from ..exceptions import (
    GitLabApiError,
    GitLabAuthError,
    GitLabDecodeError,
    GitLabError,
    GitLabInvalidArgumentError,
    GitLabNotFoundError,
    GitLabTransportError,
    GitLabWriteDisabledError,
)
from ..models.releases import (
    CreateReleaseOptions,
    ListReleasesOptions,
    ReleaseAssetLink,
    ReleaseAssets,
    UpdateReleaseOptions,
)
from ..response import ApiResponse
from ._helpers import _project_ref

logger = structlog.get_logger("gitlab_releases.server")

ProjectArg = Annotated[
    str,
    Field(
        description=(
            "Project ID, path (e.g. 'my-group/my-project') or project URL"
        ),
        min_length=1,
    ),
]
TagArg = Annotated[str, Field(description="Tag name of the release", min_length=1)]


class AssetLinkArg(BaseModel):
    name: str = Field(description="Link name shown on the release page", min_length=1)
    url: str = Field(description="URL of the asset", min_length=1)


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    config = GitLabConfig.from_env()
    config.validate()
    client = GitLabClient(config)
    logger.info("GitLab releases server starting", url=config.url, read_only=config.read_only)
    try:
        yield {"client": client, "config": config}
    finally:
        await client.close()


mcp = FastMCP(
    name="GitLab Releases MCP Server",
    instructions="Lists, inspects, creates, updates and deletes GitLab project releases.",
    lifespan=lifespan,
)


def _get_client(ctx: Context) -> GitLabClient:
    return ctx.request_context.lifespan_context["client"]


def _get_config(ctx: Context) -> GitLabConfig:
    return ctx.request_context.lifespan_context["config"]


def _check_write(ctx: Context) -> None:
    if _get_config(ctx).read_only:
        raise GitLabWriteDisabledError


def _ok(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _paginated(items: list, resp: ApiResponse) -> str:
    """Wrap a list response with pagination metadata from the response headers."""
    return json.dumps(
        {
            "items": items,
            "count": len(items),
            "page": resp.page,
            "next_page": resp.next_page,
            "total": resp.total,
            "has_more": resp.has_next_page,
        },
        indent=2,
        ensure_ascii=False,
    )


def _err(error: Exception) -> str:
    detail: dict[str, Any] = {"error": str(error)}

    if isinstance(error, GitLabNotFoundError):
        detail["status_code"] = error.status_code
        detail["body"] = error.body
        detail["hint"] = "Verify the project ID/path and the tag name of the release."
    elif isinstance(error, GitLabAuthError):
        detail["status_code"] = error.status_code
        detail["body"] = error.body
        detail["hint"] = "Check GITLAB_TOKEN permissions. Token needs 'api' scope."
    elif isinstance(error, GitLabWriteDisabledError):
        detail["hint"] = "Server is in read-only mode. Set GITLAB_READ_ONLY=false to enable writes."
    elif isinstance(error, GitLabInvalidArgumentError):
        detail["hint"] = "Pass a positive numeric project ID or a 'group/project' path."
    elif isinstance(error, GitLabApiError):
        detail["status_code"] = error.status_code
        detail["body"] = error.body
        if error.status_code == 409:
            detail["hint"] = "Conflict: a release for this tag may already exist."
        elif error.status_code in (400, 422):
            detail["hint"] = "Validation failed, check required fields and formats."
        elif error.status_code == 429:
            detail["hint"] = "Rate limited. Wait before retrying."
    elif isinstance(error, GitLabDecodeError):
        detail["body"] = error.body
        detail["hint"] = "Unexpected response body, check GITLAB_URL points at the GitLab instance."
    elif isinstance(error, GitLabTransportError):
        detail["hint"] = "Could not reach GitLab, check GITLAB_URL and network access."
    if not isinstance(error, GitLabError):
        logger.exception("Unexpected tool failure")
    return json.dumps(detail, indent=2, ensure_ascii=False)


@mcp.tool(
    tags={"gitlab", "releases", "read"},
    annotations={"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True},
)
async def gitlab_list_releases(
    ctx: Context,
    project_id: ProjectArg,
    page: Annotated[int | None, Field(description="Page number (1-based)", ge=1)] = None,
    per_page: Annotated[
        int | None, Field(description="Results per page (1-100)", ge=1, le=100)
    ] = None,
) -> str:
    """List project releases, newest first."""
    try:
        opts = ListReleasesOptions(page=page, per_page=per_page)
        releases, resp = await _get_client(ctx).releases.list_releases(
            _project_ref(project_id), opts
        )
        return _paginated([r.to_dict() for r in releases], resp)
    except Exception as e:
        return _err(e)


@mcp.tool(
    tags={"gitlab", "releases", "read"},
    annotations={"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True},
)
async def gitlab_get_release(ctx: Context, project_id: ProjectArg, tag_name: TagArg) -> str:
    """Get details of a specific release."""
    try:
        release, _ = await _get_client(ctx).releases.get_release(
            _project_ref(project_id), tag_name
        )
        return _ok(release.to_dict())
    except Exception as e:
        return _err(e)


@mcp.tool(
    tags={"gitlab", "releases", "write"},
    annotations={"readOnlyHint": False, "openWorldHint": True},
)
async def gitlab_create_release(
    ctx: Context,
    project_id: ProjectArg,
    tag_name: Annotated[str, Field(description="Tag name for the release", min_length=1)],
    name: Annotated[str, Field(description="Release name")],
    description: Annotated[str, Field(description="Release description (markdown)")],
    ref: Annotated[
        str | None, Field(description="Branch/commit to tag if the tag doesn't exist yet")
    ] = None,
    links: Annotated[
        list[AssetLinkArg] | None,
        Field(description="Asset links: [{name, url}]"),
    ] = None,
) -> str:
    """Create a new release."""
    try:
        _check_write(ctx)
        assets = None
        if links is not None:
            assets = ReleaseAssets(
                links=[ReleaseAssetLink(name=link.name, url=link.url) for link in links]
            )
        opts = CreateReleaseOptions(
            name=name, tag_name=tag_name, description=description, ref=ref, assets=assets
        )
        release, _ = await _get_client(ctx).releases.create_release(
            _project_ref(project_id), opts
        )
        return _ok(release.to_dict())
    except Exception as e:
        return _err(e)


@mcp.tool(
    tags={"gitlab", "releases", "write"},
    annotations={"readOnlyHint": False, "idempotentHint": True, "openWorldHint": True},
)
async def gitlab_update_release(
    ctx: Context,
    project_id: ProjectArg,
    tag_name: TagArg,
    name: Annotated[str, Field(description="New release name")],
    description: Annotated[str, Field(description="New release description")],
) -> str:
    """Update the name and description of an existing release."""
    try:
        _check_write(ctx)
        opts = UpdateReleaseOptions(name=name, description=description)
        release, _ = await _get_client(ctx).releases.update_release(
            _project_ref(project_id), tag_name, opts
        )
        return _ok(release.to_dict())
    except Exception as e:
        return _err(e)


@mcp.tool(
    tags={"gitlab", "releases", "write"},
    annotations={"destructiveHint": True, "readOnlyHint": False, "openWorldHint": True},
)
async def gitlab_delete_release(ctx: Context, project_id: ProjectArg, tag_name: TagArg) -> str:
    """Delete a release (does not delete the tag)."""
    try:
        _check_write(ctx)
        release, _ = await _get_client(ctx).releases.delete_release(
            _project_ref(project_id), tag_name
        )
        deleted = release.to_dict() if release is not None else None
        return _ok({"status": "deleted", "tag_name": tag_name, "release": deleted})
    except Exception as e:
        return _err(e)
