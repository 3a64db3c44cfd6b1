"""src/urlivo/url/__init__.py

URL value type, query parameters and parser.
"""

from .model import SCHEME_DEFAULT_PORTS, URL
from .parser import URLParser, default_parser, parse_url, try_parse_url
from .query import QueryParams

__all__ = [
    "URL",
    "QueryParams",
    "URLParser",
    "SCHEME_DEFAULT_PORTS",
    "default_parser",
    "parse_url",
    "try_parse_url",
]
