"""Release models.

Response records (``Release`` and its nested parts) and request payloads
(``CreateReleaseOptions``, ``UpdateReleaseOptions``) are kept apart: asset
links are sent as ``{"name", "ref"}`` but come back as ``{"id", "name",
"url", "external"}``.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import GitLabModel
from .common import ListOptions


class ReleaseAuthor(GitLabModel):
    id: int
    name: str = ""
    username: str = ""
    state: str = ""
    avatar_url: str | None = None
    web_url: str = ""


class Commit(GitLabModel):
    """Commit a release tag points at, as embedded in release payloads."""

    id: str = ""
    short_id: str = ""
    title: str = ""
    message: str = ""
    created_at: datetime | None = None
    parent_ids: list[str] = []
    author_name: str = ""
    author_email: str = ""
    authored_date: datetime | None = None
    committer_name: str = ""
    committer_email: str = ""
    committed_date: datetime | None = None


class ReleaseSource(GitLabModel):
    format: str = ""
    url: str = ""


class ReleaseLink(GitLabModel):
    id: int
    name: str = ""
    url: str = ""
    external: bool = False


class ReleaseAssetsSummary(GitLabModel):
    count: int = 0
    sources: list[ReleaseSource] = []
    links: list[ReleaseLink] = []


class Release(GitLabModel):
    """A tagged release of a project.

    Nested records that the server leaves out stay ``None`` so an absent
    author, commit or assets block is never confused with an empty one.
    """

    tag_name: str = ""
    name: str = ""
    description: str = ""
    description_html: str = ""
    created_at: datetime | None = None
    author: ReleaseAuthor | None = None
    commit: Commit | None = None
    assets: ReleaseAssetsSummary | None = None


ListReleasesOptions = ListOptions


class ReleaseAssetLink(GitLabModel):
    """Asset link supplied when creating a release; ``url`` goes out as ``ref``."""

    name: str
    url: str = Field(alias="ref")


class ReleaseAssets(GitLabModel):
    links: list[ReleaseAssetLink] = []


class CreateReleaseOptions(GitLabModel):
    name: str
    tag_name: str
    description: str
    ref: str | None = None
    assets: ReleaseAssets | None = None

    @classmethod
    def from_release(
        cls,
        release: Release,
        *,
        ref: str | None = None,
        assets: ReleaseAssets | None = None,
    ) -> CreateReleaseOptions:
        """Build create options that reproduce *release* (e.g. on another project)."""
        return cls(
            name=release.name,
            tag_name=release.tag_name,
            description=release.description,
            ref=ref,
            assets=assets,
        )


class UpdateReleaseOptions(GitLabModel):
    """Body of an update; the tag name is part of the URL and cannot change."""

    name: str
    description: str
