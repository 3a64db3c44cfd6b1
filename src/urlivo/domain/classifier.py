"""src/urlivo/domain/classifier.py

Split a hostname into subdomain, registrable host and TLD.
"""

from typing import List, NamedTuple

from urlivo.domain.tlds import TldTable

__all__ = ["HostParts", "classify_host"]


class HostParts(NamedTuple):
    """Three-way split of a hostname."""

    subdomain: str
    host: str
    tld: str


def _suffix_length(labels: List[str], tlds: TldTable) -> int:
    # A compound suffix must leave at least one label for the host.
    if len(labels) > 2 and tlds.is_known_tld(".".join(labels[-2:])):
        return 2
    if tlds.is_known_tld(labels[-1]):
        return 1
    return 0


def classify_host(hostname: str, tlds: TldTable) -> HostParts:
    """
    Classify a Unicode hostname against a TLD table.

    ``a.b.example.co.uk`` splits into ``("a.b", "example", "co.uk")``.
    A hostname with a single label, or with no recognized suffix, is kept
    whole as the host. IPv6 literals are returned verbatim as the host.

    Args:
        hostname: Hostname with ``xn--`` labels already decoded.
        tlds: Table of known suffixes.

    Returns:
        HostParts for the hostname.
    """
    if not hostname or hostname.startswith("["):
        return HostParts("", hostname, "")

    labels = hostname.split(".")
    if len(labels) == 1:
        return HostParts("", hostname, "")

    k = _suffix_length(labels, tlds)
    if k == 0:
        return HostParts("", hostname, "")

    tld = ".".join(labels[-k:])
    remaining = labels[:-k]
    if len(remaining) > 1:
        return HostParts(".".join(remaining[:-1]), remaining[-1], tld)
    return HostParts("", remaining[0], tld)
