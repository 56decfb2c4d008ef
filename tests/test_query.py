"""Query encoding and path tests."""

import pytest

from roadgateway_admin.projection.query import (
    add_options,
    encode_query,
    offset_from_next,
)
from roadgateway_admin.resources.apis import ApisGetAllOptions
from roadgateway_admin.resources.registry import ResourceKind, resource_path
from roadgateway_admin.resources.targets import TargetsGetAllOptions
from roadgateway_admin.utils.helpers import join_path, normalize_base_url


class TestEncodeQuery:
    """Test filter option encoding."""

    def test_none(self):
        """Test no options give no parameters."""
        assert encode_query(None) == {}

    def test_omits_zero(self):
        """Test only set filters are encoded."""
        options = ApisGetAllOptions(request_path="service", size=10)
        assert encode_query(options) == {"request_path": "service", "size": "10"}

    def test_add_options(self):
        """Test options are appended to a path."""
        options = TargetsGetAllOptions(weight=50)
        assert add_options("upstreams/u/targets", options) == (
            "upstreams/u/targets?weight=50"
        )
        assert add_options("apis", ApisGetAllOptions()) == "apis"

    def test_offset_from_next(self):
        """Test the cursor is read from a next link."""
        assert offset_from_next("http://gw:8001/apis?size=2&offset=abc%3D") == "abc="
        assert offset_from_next("") == ""
        assert offset_from_next("http://gw:8001/apis?size=2") == ""


class TestResourcePath:
    """Test resource path building."""

    def test_simple(self):
        """Test base paths and keys."""
        assert resource_path(ResourceKind.APIS) == "apis"
        assert resource_path(ResourceKind.APIS, "example") == "apis/example"
        assert resource_path(ResourceKind.NODE) == ""

    def test_placeholders(self):
        """Test placeholders are filled and keys quoted."""
        path = resource_path(ResourceKind.TARGETS, "10.0.0.1:80", upstream="svc a")
        assert path == "upstreams/svc%20a/targets/10.0.0.1:80"

    def test_key_with_slash(self):
        """Test a key cannot escape its segment."""
        assert resource_path(ResourceKind.APIS, "a/b") == "apis/a%2Fb"

    def test_dot_keys(self):
        """Test dot segments are refused as keys."""
        with pytest.raises(ValueError):
            resource_path(ResourceKind.APIS, "..")
        with pytest.raises(ValueError):
            resource_path(ResourceKind.TARGETS, ".", upstream="svc")
        with pytest.raises(ValueError):
            resource_path(ResourceKind.CONSUMER_ACLS, "g1", consumer="..")
        assert resource_path(ResourceKind.APIS, "...") == "apis/..."

    def test_missing_placeholder(self):
        """Test a missing placeholder is reported."""
        with pytest.raises(ValueError):
            resource_path(ResourceKind.CONSUMER_ACLS)

    def test_empty_key(self):
        """Test an empty key is rejected."""
        with pytest.raises(ValueError):
            resource_path(ResourceKind.APIS, "")


class TestHelpers:
    """Test URL helpers."""

    def test_normalize_base_url(self):
        """Test a trailing slash is added."""
        assert normalize_base_url("http://gw:8001/admin") == "http://gw:8001/admin/"
        assert normalize_base_url("https://gw/") == "https://gw/"

    def test_invalid_base_url(self):
        """Test non-http URLs are rejected."""
        with pytest.raises(ValueError):
            normalize_base_url("")
        with pytest.raises(ValueError):
            normalize_base_url("ftp://gw")

    def test_join_path(self):
        """Test parts are joined with single slashes."""
        assert join_path("apis/", "/x", "") == "apis/x"
