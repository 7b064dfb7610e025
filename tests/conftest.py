"""Shared test fixtures for gitlab-releases."""

from __future__ import annotations

import copy
from collections.abc import AsyncIterator
from typing import Any

import pytest
import respx

from gitlab_releases.client import GitLabClient
from gitlab_releases.config import GitLabConfig

TEST_URL = "https://gitlab.example.com"
TEST_TOKEN = "test-token"
BASE = f"{TEST_URL}/api/v4"

AUTHOR = {
    "id": 1,
    "name": "Administrator",
    "username": "root",
    "state": "active",
    "avatar_url": "https://www.gravatar.com/avatar/e64c7d89f26bd1972efa854d13d7dd61?s=80&d=identicon",
    "web_url": "http://localhost:3000/root",
}


def _sources(tag: str) -> list[dict[str, str]]:
    archive = f"http://localhost:3000/root/awesome-app/-/archive/{tag}/awesome-app-{tag}"
    return [
        {"format": fmt, "url": f"{archive}.{fmt}"} for fmt in ("zip", "tar.gz", "tar.bz2", "tar")
    ]


RELEASE_V01: dict[str, Any] = {
    "tag_name": "v0.1",
    "description": (
        "## CHANGELOG\r\n\r\n- Remove limit of 100 when searching repository code. !8671\r\n"
        "- Fix a bug where internal email pattern wasn't respected. !22516"
    ),
    "name": "Awesome app v0.1 alpha",
    "description_html": '<h2 dir="auto">CHANGELOG</h2>\n<ul dir="auto">\n<li>...</li>\n</ul>',
    "created_at": "2019-01-03T01:55:18.203Z",
    "author": AUTHOR,
    "commit": {
        "id": "f8d3d94cbd347e924aa7b715845e439d00e80ca4",
        "short_id": "f8d3d94c",
        "title": "Initial commit",
        "created_at": "2019-01-03T01:53:28.000Z",
        "parent_ids": [],
        "message": "Initial commit",
        "author_name": "Administrator",
        "author_email": "admin@example.com",
        "authored_date": "2019-01-03T01:53:28.000Z",
        "committer_name": "Administrator",
        "committer_email": "admin@example.com",
        "committed_date": "2019-01-03T01:53:28.000Z",
    },
    "assets": {"count": 4, "sources": _sources("v0.1"), "links": []},
}

RELEASE_V02: dict[str, Any] = {
    "tag_name": "v0.2",
    "description": "## CHANGELOG\r\n\r\n- Prevent private snippets from being embeddable.",
    "name": "Awesome app v0.2 beta",
    "description_html": '<h2 dir="auto">CHANGELOG</h2>',
    "created_at": "2019-01-03T01:56:19.539Z",
    "author": AUTHOR,
    "commit": {
        "id": "079e90101242458910cccd35eab0e211dfc359c0",
        "short_id": "079e9010",
        "title": "Update README.md",
        "created_at": "2019-01-03T01:55:38.000Z",
        "parent_ids": ["f8d3d94cbd347e924aa7b715845e439d00e80ca4"],
        "message": "Update README.md",
        "author_name": "Administrator",
        "author_email": "admin@example.com",
        "authored_date": "2019-01-03T01:55:38.000Z",
        "committer_name": "Administrator",
        "committer_email": "admin@example.com",
        "committed_date": "2019-01-03T01:55:38.000Z",
    },
    "assets": {
        "count": 6,
        "sources": _sources("v0.2"),
        "links": [
            {
                "id": 2,
                "name": "awesome-v0.2.msi",
                "url": "http://192.168.10.15:3000/msi",
                "external": True,
            },
            {
                "id": 1,
                "name": "awesome-v0.2.dmg",
                "url": "http://192.168.10.15:3000",
                "external": True,
            },
        ],
    },
}


@pytest.fixture
def config() -> GitLabConfig:
    return GitLabConfig(url=TEST_URL, token=TEST_TOKEN)


@pytest.fixture
async def client(config: GitLabConfig) -> AsyncIterator[GitLabClient]:
    gitlab = GitLabClient(config)
    yield gitlab
    await gitlab.close()


@pytest.fixture
def mock_api() -> respx.MockRouter:
    with respx.mock(base_url=BASE) as router:
        yield router


@pytest.fixture
def release_json() -> dict[str, Any]:
    return copy.deepcopy(RELEASE_V01)


@pytest.fixture
def release_list_json() -> list[dict[str, Any]]:
    return copy.deepcopy([RELEASE_V02, RELEASE_V01])
