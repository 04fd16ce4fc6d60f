"""Tests for pure helpers"""

import json
from pathlib import Path

from staticsite import _helpers


class TestPublicReadPolicy:
    def test_allows_get_object_for_everyone(self):
        policy = json.loads(_helpers.public_read_policy("site.example.com"))
        (statement,) = policy["Statement"]
        assert statement["Effect"] == "Allow"
        assert statement["Principal"] == {"AWS": "*"}
        assert statement["Action"] == "s3:GetObject"

    def test_scopes_resource_to_bucket_objects(self):
        policy = json.loads(_helpers.public_read_policy("site.example.com"))
        assert policy["Statement"][0]["Resource"] == "arn:aws:s3:::site.example.com/*"


class TestWebsiteUrl:
    def test_adds_http_scheme(self):
        endpoint = "site.example.com.s3-website-us-east-1.amazonaws.com"
        assert _helpers.website_url(endpoint) == f"http://{endpoint}"

    def test_leaves_scheme_unchanged(self):
        assert _helpers.website_url("http://site.example.com") == "http://site.example.com"


class TestResolveAssetPath:
    def test_relative_to_base_dir(self, tmp_path):
        result = _helpers.resolve_asset_path("./website", tmp_path)
        assert result == (tmp_path / "website").resolve()
        assert result.is_absolute()

    def test_ignores_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        base = tmp_path / "project"
        assert _helpers.resolve_asset_path("site", base) == (base / "site").resolve()

    def test_normalizes_parent_segments(self, tmp_path):
        base = tmp_path / "project" / "infra"
        result = _helpers.resolve_asset_path("../website", base)
        assert result == (tmp_path / "project" / "website").resolve()

    def test_absolute_directory_kept(self, tmp_path):
        absolute = tmp_path / "assets"
        assert _helpers.resolve_asset_path(str(absolute), Path("/elsewhere")) == absolute.resolve()
