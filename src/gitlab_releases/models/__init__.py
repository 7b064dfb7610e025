"""Pydantic models for GitLab release payloads."""

from .base import GitLabModel
from .common import ListOptions
from .releases import (
    Commit,
    CreateReleaseOptions,
    ListReleasesOptions,
    Release,
    ReleaseAssetLink,
    ReleaseAssets,
    ReleaseAssetsSummary,
    ReleaseAuthor,
    ReleaseLink,
    ReleaseSource,
    UpdateReleaseOptions,
)

__all__ = [
    "Commit",
    "CreateReleaseOptions",
    "GitLabModel",
    "ListOptions",
    "ListReleasesOptions",
    "Release",
    "ReleaseAssetLink",
    "ReleaseAssets",
    "ReleaseAssetsSummary",
    "ReleaseAuthor",
    "ReleaseLink",
    "ReleaseSource",
    "UpdateReleaseOptions",
]
