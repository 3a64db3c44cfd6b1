"""src/urlivo/url/parser.py

URL parser for Urlivo.

Parses URLs the way people actually type them: the scheme is optional,
``user:pass@`` is recognized, IPv6 literals are kept verbatim, and the
hostname is split into subdomain, host and TLD.
"""

import functools
import re
from typing import Optional

from urlivo.codec.percent import percent_decode
from urlivo.codec.punycode import decode_host
from urlivo.domain.classifier import classify_host
from urlivo.domain.tlds import TldTable
from urlivo.exceptions import MalformedURL, URLError, UnterminatedIPv6Literal
from urlivo.url.model import URL
from urlivo.utils.validators import parse_port, validate_host_characters

__all__ = [
    "URLParser",
    "default_parser",
    "parse_url",
    "try_parse_url",
    "parse_path_and_query",
]

# scheme:// or a bare leading //
_SCHEME_PREFIX = re.compile(r"(?:(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*):)?//")


def _find_first(value: str, chars: str) -> int:
    """Index of the first occurrence of any of ``chars``, or len(value)."""
    end = len(value)
    for char in chars:
        found = value.find(char, 0, end)
        if found >= 0:
            end = found
    return end


def parse_path_and_query(url: URL, value: str) -> None:
    """
    Parse ``path[?query][#fragment]`` into an existing URL.

    Query parameters are appended to ``url.query_params`` in order; pieces
    without ``=`` get an empty value and empty pieces are skipped.

    Raises:
        MalformedPercentEncoding: If any component fails to decode.
    """
    i = _find_first(value, "?#")
    url.path = percent_decode(value[:i])
    if i == len(value):
        return

    marker = value[i]
    value = value[i + 1 :]
    if marker == "?":
        query, _, value = value.partition("#")
        for piece in query.split("&"):
            if not piece:
                continue
            key, _, param = piece.partition("=")
            url.query_params.add(percent_decode(key), percent_decode(param))

    url.fragment = percent_decode(value)


class URLParser:
    """
    URL parser.

    Handles:
    - Optional scheme (``default_scheme`` when absent).
    - ``user:pass@`` credentials, percent-decoded.
    - IPv6 literals and ports.
    - Subdomain/host/TLD split against a TLD table.
    """

    __slots__ = ("tlds", "default_scheme")

    def __init__(
        self,
        tlds: Optional[TldTable] = None,
        default_scheme: str = "http",
    ):
        self.tlds = tlds if tlds is not None else TldTable.default()
        self.default_scheme = default_scheme

    def parse(self, value: str) -> URL:
        """
        Parse a URL from a string.

        Returns:
            The parsed URL. No partially parsed URL is ever returned.

        Raises:
            MalformedPercentEncoding: If user, password, path, query or
                fragment is badly percent-encoded.
            InvalidPort: If the port is not an unsigned 16-bit integer.
            UnterminatedIPv6Literal: If ``[`` has no matching ``]``.
            MalformedURL: If the authority is structurally invalid.
            PunycodeError: If an ``xn--`` label cannot be decoded.
            IllegalHostCharacter: If the hostname contains a disallowed ASCII
                character.
        """
        url = URL(self.default_scheme)

        # scheme:[//[user:password@]host[:port]][/]path[?query][#fragment]
        match = _SCHEME_PREFIX.match(value)
        if match:
            if match.group("scheme"):
                url.scheme = match.group("scheme").lower()
            value = value[match.end() :]

        end = _find_first(value, "/?#")
        authority, value = value[:end], value[end:]

        # A colon may separate user from password or host from port; only an
        # @ tells them apart.
        at = authority.find("@")
        if at >= 0:
            user, _, password = authority[:at].partition(":")
            url.user = percent_decode(user)
            url.password = percent_decode(password)
            authority = authority[at + 1 :]

        if authority.startswith("["):
            close = authority.find("]")
            if close < 0:
                raise UnterminatedIPv6Literal(
                    f"Unterminated IPv6 literal in {authority!r}"
                )
            # includes the square brackets
            host = authority[: close + 1]
            rest = authority[close + 1 :]
            if rest and rest[0] != ":":
                raise MalformedURL(f"Unexpected {rest!r} after IPv6 literal {host}")
        elif "[" in authority:
            raise MalformedURL(f"Misplaced '[' in authority {authority!r}")
        else:
            host, colon, port = authority.partition(":")
            rest = colon + port

        if rest:
            url.provided_port = parse_port(rest[1:])

        self._split_host(url, host)
        parse_path_and_query(url, value)
        return url

    def try_parse(self, value: str) -> Optional[URL]:
        """Parse a URL, returning None instead of raising on malformed input."""
        try:
            return self.parse(value)
        except URLError:
            return None

    def _split_host(self, url: URL, host: str) -> None:
        """Decode Punycode labels, validate and classify the hostname."""
        hostname = decode_host(host)
        if not hostname.startswith("["):
            validate_host_characters(hostname)
        parts = classify_host(hostname, self.tlds)
        url.subdomain, url.host, url.tld = parts


@functools.lru_cache(maxsize=None)
def default_parser() -> URLParser:
    """Return the process-wide parser using the packaged TLD table."""
    return URLParser()


def parse_url(value: str) -> URL:
    """
    Parse the input string as a URL.

    This attempts to parse a wide range of URLs as people might actually
    type them. Any URL in a correct format is parsed correctly.

    Raises:
        URLError: If the string was in an incorrect format.
    """
    return default_parser().parse(value)


def try_parse_url(value: str) -> Optional[URL]:
    """Parse the input string as a URL, or return None if it is malformed."""
    return default_parser().try_parse(value)
