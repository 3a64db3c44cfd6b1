"""tests/unit/test_classifier.py

Unit tests for urlivo.domain.classifier module.
"""

import pytest

from urlivo.domain.classifier import HostParts, classify_host


@pytest.mark.parametrize(
    "hostname, expected",
    [
        ("example.org", ("", "example", "org")),
        ("sub.example.org", ("sub", "example", "org")),
        ("a.b.c.d.example.org", ("a.b.c.d", "example", "org")),
        ("example.co.uk", ("", "example", "co.uk")),
        ("www.example.co.uk", ("www", "example", "co.uk")),
        ("bbc.uk", ("", "bbc", "uk")),
        ("☂.☃.org", ("☂", "☃", "org")),
        ("пример.рф", ("", "пример", "рф")),
        ("EXAMPLE.ORG", ("", "EXAMPLE", "ORG")),
    ],
)
def test_split(tlds, hostname, expected):
    """Test subdomain/host/TLD splitting."""
    assert classify_host(hostname, tlds) == HostParts(*expected)


def test_single_label(tlds):
    """Test that a single label is the whole host."""
    assert classify_host("localhost", tlds) == HostParts("", "localhost", "")


def test_compound_suffix_needs_a_host_label(tlds):
    """Test that a bare compound suffix is split on its last label."""
    assert classify_host("co.uk", tlds) == HostParts("", "co", "uk")


def test_unknown_suffix_keeps_whole_host(tlds):
    """Test that an unrecognized suffix folds everything into host."""
    assert classify_host("redisbox.local", tlds) == HostParts("", "redisbox.local", "")
    assert classify_host("a.b.internal", tlds) == HostParts("", "a.b.internal", "")
    assert classify_host("127.0.0.1", tlds) == HostParts("", "127.0.0.1", "")


def test_ipv6_bypasses_classification(tlds):
    """Test that IPv6 literals are returned verbatim."""
    assert classify_host("[2001:db8::1]", tlds) == HostParts("", "[2001:db8::1]", "")


def test_empty(tlds):
    """Test that an empty host stays empty."""
    assert classify_host("", tlds) == HostParts("", "", "")


def test_named_fields(tlds):
    """Test HostParts field access."""
    parts = classify_host("sub.example.com", tlds)
    assert parts.subdomain == "sub"
    assert parts.host == "example"
    assert parts.tld == "com"
