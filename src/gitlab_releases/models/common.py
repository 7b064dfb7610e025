"""Common GitLab models shared across resources."""

from __future__ import annotations

from typing import Any

from .base import GitLabModel


class ListOptions(GitLabModel):
    """Pagination parameters, sent as query parameters.

    Values are passed through untouched; the server clamps or rejects
    out-of-range pages.
    """

    page: int | None = None
    per_page: int | None = None

    def to_params(self) -> dict[str, Any]:
        return self.to_dict()
