"""Tests for release models."""

from __future__ import annotations

import pydantic
import pytest

from gitlab_releases.models import (
    CreateReleaseOptions,
    ListReleasesOptions,
    Release,
    ReleaseAssetLink,
    ReleaseAssets,
    UpdateReleaseOptions,
)


def test_release_round_trip_preserves_create_fields(release_json):
    release = Release.model_validate(release_json)
    body = CreateReleaseOptions.from_release(release).to_dict()
    assert body["tag_name"] == release_json["tag_name"]
    assert body["name"] == release_json["name"]
    assert body["description"] == release_json["description"]
    assert "assets" not in body
    assert "ref" not in body


def test_release_ignores_unknown_fields(release_json):
    release_json["upcoming_release"] = False
    release_json["_links"] = {"self": "http://localhost:3000/root/awesome-app/-/releases/v0.1"}
    release = Release.model_validate(release_json)
    assert release.tag_name == "v0.1"


def test_release_is_immutable(release_json):
    release = Release.model_validate(release_json)
    with pytest.raises(pydantic.ValidationError):
        release.tag_name = "v9"


def test_release_output_links(release_list_json):
    release = Release.model_validate(release_list_json[0])
    assert release.assets is not None
    links = release.assets.links
    assert [link.id for link in links] == [2, 1]
    assert links[0].url == "http://192.168.10.15:3000/msi"
    assert links[0].external is True


def test_release_to_dict_omits_absent_records():
    data = Release(tag_name="v1", name="One").to_dict()
    assert "author" not in data
    assert "commit" not in data
    assert "assets" not in data
    assert "created_at" not in data


def test_release_empty_assets_differs_from_absent():
    release = Release.model_validate({"tag_name": "v1", "assets": {"count": 0}})
    assert release.assets is not None
    assert release.assets.count == 0
    assert release.to_dict()["assets"] == {"count": 0, "sources": [], "links": []}


def test_asset_link_url_serializes_as_ref():
    link = ReleaseAssetLink(name="linux", url="https://example.com/app.tar.gz")
    assert link.to_dict() == {"name": "linux", "ref": "https://example.com/app.tar.gz"}


def test_asset_link_accepts_wire_key():
    link = ReleaseAssetLink.model_validate({"name": "linux", "ref": "https://example.com/a"})
    assert link.url == "https://example.com/a"


def test_create_options_required_fields():
    with pytest.raises(pydantic.ValidationError):
        CreateReleaseOptions(name="n", tag_name="v1")


def test_create_options_empty_assets_still_sent():
    opts = CreateReleaseOptions(
        name="n", tag_name="v1", description="d", assets=ReleaseAssets(links=[])
    )
    assert opts.to_dict()["assets"] == {"links": []}


def test_update_options_have_no_tag():
    assert UpdateReleaseOptions(name="n", description="d").to_dict() == {
        "name": "n",
        "description": "d",
    }


def test_list_options_drop_unset_values():
    assert ListReleasesOptions().to_params() == {}
    assert ListReleasesOptions(per_page=50).to_params() == {"per_page": 50}
