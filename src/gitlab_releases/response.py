"""Response metadata returned alongside every decoded result."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx


def _int_header(headers: Mapping[str, str], name: str) -> int | None:
    value = headers.get(name, "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class ApiResponse:
    """Status, pagination and rate-limit details of one GitLab API response.

    Header values that are missing or not integers are reported as ``None``.
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    page: int | None = None
    per_page: int | None = None
    next_page: int | None = None
    prev_page: int | None = None
    total: int | None = None
    total_pages: int | None = None
    rate_limit: int | None = None
    rate_limit_remaining: int | None = None
    rate_limit_reset: int | None = None

    @classmethod
    def from_httpx(cls, resp: httpx.Response) -> ApiResponse:
        headers = resp.headers
        return cls(
            status_code=resp.status_code,
            headers=dict(headers),
            page=_int_header(headers, "X-Page"),
            per_page=_int_header(headers, "X-Per-Page"),
            next_page=_int_header(headers, "X-Next-Page"),
            prev_page=_int_header(headers, "X-Prev-Page"),
            total=_int_header(headers, "X-Total"),
            total_pages=_int_header(headers, "X-Total-Pages"),
            rate_limit=_int_header(headers, "RateLimit-Limit"),
            rate_limit_remaining=_int_header(headers, "RateLimit-Remaining"),
            rate_limit_reset=_int_header(headers, "RateLimit-Reset"),
        )

    @property
    def has_next_page(self) -> bool:
        return self.next_page is not None
