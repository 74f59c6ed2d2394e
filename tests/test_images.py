"""Tests for the remote image allow-list."""

from mediadesk.core.images import is_allowed_image

HOSTS = {"img.example.com", "cdn.example.org"}


def test_allowed_http_and_https():
    assert is_allowed_image("https://img.example.com/a.jpg", HOSTS)
    assert is_allowed_image("http://cdn.example.org/a.jpg", HOSTS)


def test_host_match_is_case_insensitive():
    assert is_allowed_image("https://IMG.Example.com/a.jpg", HOSTS)


def test_other_hosts_rejected():
    assert not is_allowed_image("https://evil.example.com/a.jpg", HOSTS)
    assert not is_allowed_image("https://img.example.com.evil.net/a.jpg", HOSTS)


def test_non_http_rejected():
    assert not is_allowed_image("ftp://img.example.com/a.jpg", HOSTS)
    assert not is_allowed_image("/local/a.jpg", HOSTS)


def test_missing_url():
    assert not is_allowed_image(None, HOSTS)
    assert not is_allowed_image("", HOSTS)
