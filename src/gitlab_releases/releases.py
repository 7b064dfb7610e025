"""Project releases: list, get, create, update and delete."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .ids import ProjectRef, encode_id, encode_tag
from .models.releases import (
    CreateReleaseOptions,
    ListReleasesOptions,
    Release,
    UpdateReleaseOptions,
)
from .options import RequestOption
from .response import ApiResponse

if TYPE_CHECKING:
    from .client import GitLabClient


class ReleasesService:
    """Operations on ``/projects/{project}/releases``.

    Every call makes exactly one request and returns ``(result, response)``.
    The project segment is percent-encoded; tag names are placed in the path
    as given, except that ``#`` and ``?`` are escaped. Errors from the client
    propagate unchanged and carry the response metadata when a response was
    received.
    """

    def __init__(self, client: GitLabClient) -> None:
        self._client = client

    async def list_releases(
        self,
        project: ProjectRef,
        opts: ListReleasesOptions | None = None,
        *options: RequestOption,
    ) -> tuple[list[Release], ApiResponse]:
        """List releases in the order the server returns them (newest first)."""
        enc = encode_id(project)
        params = opts.to_params() if opts is not None else None
        return await self._client.get(
            f"/projects/{enc}/releases", params, model=list[Release], options=options
        )

    async def get_release(
        self, project: ProjectRef, tag_name: str, *options: RequestOption
    ) -> tuple[Release, ApiResponse]:
        enc = encode_id(project)
        return await self._client.get(
            f"/projects/{enc}/releases/{encode_tag(tag_name)}",
            model=Release,
            options=options,
        )

    async def create_release(
        self, project: ProjectRef, opts: CreateReleaseOptions, *options: RequestOption
    ) -> tuple[Release, ApiResponse]:
        """Create a release; the result is the server's record, author and commit included."""
        enc = encode_id(project)
        return await self._client.post(
            f"/projects/{enc}/releases", opts.to_dict(), model=Release, options=options
        )

    async def update_release(
        self,
        project: ProjectRef,
        tag_name: str,
        opts: UpdateReleaseOptions,
        *options: RequestOption,
    ) -> tuple[Release, ApiResponse]:
        enc = encode_id(project)
        return await self._client.put(
            f"/projects/{enc}/releases/{encode_tag(tag_name)}",
            opts.to_dict(),
            model=Release,
            options=options,
        )

    async def delete_release(
        self, project: ProjectRef, tag_name: str, *options: RequestOption
    ) -> tuple[Release | None, ApiResponse]:
        """Delete a release, leaving the tag in place.

        GitLab answers with the deleted record, which is returned.
        """
        enc = encode_id(project)
        return await self._client.delete(
            f"/projects/{enc}/releases/{encode_tag(tag_name)}",
            model=Release,
            options=options,
        )
