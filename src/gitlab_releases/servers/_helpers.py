"""Shared helper functions for server modules."""

from __future__ import annotations

import re
from urllib.parse import unquote

# Matches:  <host>/<namespace/project>, with an optional /-/... suffix
_PROJECT_RE = re.compile(r"https?://[^/]+/(.+?)(?:/-/.*)?/?$")


def _parse_gitlab_project_url(value: str) -> str:
    """Extract project_path from a GitLab project or release URL.

    If *value* is not a URL, returns it unchanged.
    """
    if not value.startswith(("http://", "https://")):
        return value
    m = _PROJECT_RE.match(value)
    if m:
        return unquote(m.group(1))
    return value


def _project_ref(value: str) -> int | str:
    """Turn a tool argument into a project reference: numeric ID, path, or URL."""
    value = _parse_gitlab_project_url(value.strip())
    if value.isdigit():
        return int(value)
    return value
