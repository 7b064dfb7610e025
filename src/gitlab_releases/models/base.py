"""Base model for GitLab API payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class GitLabModel(BaseModel):
    """Immutable base model shared by request and response payloads."""

    model_config = {"extra": "ignore", "populate_by_name": True, "frozen": True}

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
