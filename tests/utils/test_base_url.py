"""Tests for base URL parsing."""

from wadl2swagger.utils.base_url import BaseUrl


def test_parse_full_url() -> None:
    """Test scheme, host and root are split out."""
    base = BaseUrl.parse("https://api.example.com:8443/v1/")

    assert base.scheme == "https"
    assert base.host == "api.example.com:8443"
    assert base.root == "/v1/"
    assert base.origin == "https://api.example.com:8443"
    assert base.base_path == "/v1"


def test_parse_without_path() -> None:
    """Test a bare host has an empty root."""
    base = BaseUrl.parse("http://localhost")

    assert base.root == ""
    assert base.base_path == ""
    assert base.origin == "http://localhost"


def test_parse_empty() -> None:
    """Test a missing base URL gives empty components."""
    base = BaseUrl.parse(None)

    assert base == BaseUrl()
    assert base.origin == ""
    assert base.scheme == ""
