"""src/urlivo/url/model.py

Structured URL value for Urlivo.

A URL is a plain read/write record. It can be built field by field or parsed
with :func:`urlivo.url.parser.parse_url`, and serialized back in a
machine-usable ASCII form or a human-readable Unicode form.
"""

# pylint: disable=too-many-instance-attributes,too-many-arguments

import functools
import types
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Tuple

from urlivo.codec.percent import percent_encode
from urlivo.codec.punycode import encode_host
from urlivo.url.query import QueryParams

if TYPE_CHECKING:  # pragma: no cover
    from urlivo.url.parser import URLParser

__all__ = ["URL", "SCHEME_DEFAULT_PORTS"]

# Best guesses only: not every scheme uses a port.
SCHEME_DEFAULT_PORTS: Mapping[str, int] = types.MappingProxyType(
    {
        "http": 80,
        "https": 443,
    }
)


def _format_path(path: str, human_readable: bool) -> str:
    if not path or path == "/":
        return "/"
    if human_readable:
        return path if path.startswith("/") else "/" + path
    if path.startswith("/"):
        path = path[1:]
    return "".join("/" + percent_encode(segment) for segment in path.split("/"))


def _collapse_parent_segments(path: str) -> str:
    """
    Remove ``..`` segments together with the nearest preceding segment.

    A ``..`` with no segment left to consume is dropped. Empty segments are
    dropped as well.
    """
    parts: List[Optional[str]] = list(path.split("/"))
    for i, part in enumerate(parts):
        if part != "..":
            continue
        parts[i] = None
        for j in range(i - 1, -1, -1):
            if parts[j]:
                parts[j] = None
                break
    return "/" + "/".join(part for part in parts if part)


@functools.total_ordering
class URL:
    """
    A Uniform Resource Locator.

    Attributes:
        scheme: Lowercase scheme, e.g. ``https``.
        user: Decoded username, empty when absent.
        password: Decoded password, only meaningful with a user.
        subdomain: Labels preceding the registrable host (Unicode).
        host: Registrable host label (Unicode), or a bracketed IPv6 literal.
        tld: Recognized public suffix (Unicode), e.g. ``org`` or ``co.uk``.
        provided_port: Port given explicitly in the URL, None if absent.
        path: Decoded path.
        query_params: Ordered query parameters.
        fragment: Decoded fragment, without ``#``.
    """

    __slots__ = (
        "scheme",
        "user",
        "password",
        "subdomain",
        "host",
        "tld",
        "provided_port",
        "path",
        "query_params",
        "fragment",
    )

    def __init__(
        self,
        scheme: str = "http",
        host: str = "",
        *,
        user: str = "",
        password: str = "",
        subdomain: str = "",
        tld: str = "",
        port: Optional[int] = None,
        path: str = "",
        query_params: Optional[QueryParams] = None,
        fragment: str = "",
    ) -> None:
        self.scheme: str = scheme
        self.user: str = user
        self.password: str = password
        self.subdomain: str = subdomain
        self.host: str = host
        self.tld: str = tld
        self.provided_port: Optional[int] = port
        self.path: str = path
        self.query_params: QueryParams = (
            query_params.copy() if query_params is not None else QueryParams()
        )
        self.fragment: str = fragment

    @classmethod
    def parse(cls, value: str) -> "URL":
        """Parse a URL string. See :func:`urlivo.url.parser.parse_url`."""
        # pylint: disable=import-outside-toplevel
        from urlivo.url.parser import parse_url

        return parse_url(value)

    @property
    def port(self) -> int:
        """
        The port.

        Inferred from the scheme when not present in the URL itself; 0 if the
        scheme has no known default. Check ``provided_port`` to detect whether
        a port was given explicitly.
        """
        if self.provided_port is not None:
            return self.provided_port
        return SCHEME_DEFAULT_PORTS.get(self.scheme, 0)

    @port.setter
    def port(self, value: Optional[int]) -> None:
        self.provided_port = value

    @property
    def hostname(self) -> str:
        """Subdomain, host and TLD joined back together (Unicode)."""
        return self._join_host(self.subdomain, self.host, self.tld)

    @staticmethod
    def _join_host(subdomain: str, host: str, tld: str) -> str:
        result = subdomain + ("." if subdomain else "") + host
        if tld:
            result += "." + tld
        return result

    def to_string(self, human_readable: bool = False) -> str:
        """
        Convert this URL to a string.

        Args:
            human_readable: Emit hostname, user and path as literal Unicode
                instead of Punycode/percent-encoded ASCII.

        Returns:
            ``scheme://[user[:pass]@]host[:port]/path[?query][#fragment]``.
            The port is omitted when it is the scheme default or absent.

        Raises:
            IllegalHostCharacter: If the hostname contains a disallowed ASCII
                character (machine form only).
        """
        parts = [self.scheme, "://"]
        if self.user:
            parts.append(self.user if human_readable else percent_encode(self.user))
            if self.password:
                parts.append(":")
                parts.append(
                    self.password if human_readable else percent_encode(self.password)
                )
            parts.append("@")

        if human_readable:
            parts.append(self.hostname)
        else:
            parts.append(
                self._join_host(
                    encode_host(self.subdomain),
                    encode_host(self.host),
                    encode_host(self.tld),
                )
            )

        if (
            self.provided_port is not None
            and SCHEME_DEFAULT_PORTS.get(self.scheme) != self.provided_port
        ):
            parts.append(f":{self.provided_port}")

        parts.append(_format_path(self.path, human_readable))
        if self.query_params:
            parts.append("?")
            parts.append(self.query_params.to_string())
        if self.fragment:
            parts.append("#")
            parts.append(percent_encode(self.fragment))
        return "".join(parts)

    def to_human_readable_string(self) -> str:
        """Convert this URL to a string intended for people rather than machines."""
        return self.to_string(True)

    def to_path_and_query_string(self) -> str:
        """
        Convert the path and query string of this URL to a string.

        ``http://example.org/index?page=12`` gives ``/index?page=12``.
        """
        result = _format_path(self.path, False)
        if self.query_params:
            result += "?" + self.query_params.to_string()
        return result

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"URL({self.to_human_readable_string()!r})"

    def copy(self) -> "URL":
        """Return an independent copy, query parameters included."""
        return URL(
            self.scheme,
            self.host,
            user=self.user,
            password=self.password,
            subdomain=self.subdomain,
            tld=self.tld,
            port=self.provided_port,
            path=self.path,
            query_params=self.query_params,
            fragment=self.fragment,
        )

    def __copy__(self) -> "URL":
        return self.copy()

    def __deepcopy__(self, memo: Any) -> "URL":
        return self.copy()

    def _as_tuple(self) -> Tuple[Any, ...]:
        # Host ranks above scheme, scheme above port, credentials below both.
        # An empty path and "/" serialize the same, so they compare the same.
        return (
            self.host,
            self.scheme,
            self.port,
            self.user,
            self.password,
            self.path or "/",
            self.query_params,
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            # pylint: disable=import-outside-toplevel
            from urlivo.url.parser import try_parse_url

            parsed = try_parse_url(other)
            if parsed is None:
                return False
            other = parsed
        if not isinstance(other, URL):
            return NotImplemented
        return self._as_tuple() == other._as_tuple()

    def __lt__(self, other: "URL") -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return self._as_tuple() < other._as_tuple()

    __hash__ = None  # type: ignore[assignment]

    def extend_path(self, segment: str) -> "URL":
        """
        Append a path element to this URL in place.

        Exactly one ``/`` separates the old path and the new segment, whether
        or not either side already has one.

        Returns:
            This URL.
        """
        self.path = self.path.rstrip("/") + "/" + segment.lstrip("/")
        return self

    def append_path(self, segment: str) -> "URL":
        """
        Return a new URL with a path element appended.

        Query parameters are copied.

        Example::

            random = parse_url("http://testdata.org/random")
            random.append_path("int")  # http://testdata.org/random/int
        """
        result = self.copy()
        result.extend_path(segment)
        return result

    __truediv__ = append_path
    __itruediv__ = extend_path

    def resolve(self, reference: str, parser: Optional["URLParser"] = None) -> "URL":
        """
        Convert a relative URL to an absolute URL, using this URL as the base.

        ``//host/path`` keeps this URL's scheme. A reference containing
        ``://`` before its first ``/`` is parsed on its own. Anything else is
        a path relative to this URL's directory (or to the root when it starts
        with ``/``); ``..`` segments are collapsed. Query parameters and the
        fragment of this URL are never carried over, and the fragment of the
        reference is dropped.

        Args:
            reference: Link text, e.g. taken from a scraped page.
            parser: Parser used for absolute references. Defaults to the
                process-wide parser.

        Returns:
            A new URL.

        Raises:
            URLError: If the result cannot be parsed.
        """
        # pylint: disable=import-outside-toplevel
        from urlivo.url.parser import default_parser, parse_path_and_query

        if not reference:
            return self.copy()
        if parser is None:
            parser = default_parser()

        if reference.startswith("//"):
            return parser.parse(f"{self.scheme}:{reference}")

        scheme_sep = reference.find("://")
        if 0 <= scheme_sep < reference.find("/"):
            return parser.parse(reference)

        result = self.copy()
        result.path = ""
        result.query_params = QueryParams()

        if not reference.startswith("/"):
            if not self.path:
                reference = "/" + reference
            elif self.path.endswith("/"):
                reference = self.path + reference
            else:
                reference = self.path[: self.path.rfind("/") + 1] + reference
            if not reference.startswith("/"):
                reference = "/" + reference

        end = len(reference)
        for marker in "?#":
            found = reference.find(marker)
            if 0 <= found < end:
                end = found
        path, tail = reference[:end], reference[end:]
        if "/../" in path or path.endswith("/.."):
            path = _collapse_parent_segments(path)

        parse_path_and_query(result, path + tail)
        result.fragment = ""
        return result
