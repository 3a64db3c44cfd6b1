"""src/urlivo/codec/__init__.py

Encoding layer for Urlivo.

This module provides the two transfer syntaxes used when serializing URLs:
percent-encoding for components and Punycode for domain labels.
"""

from .percent import percent_decode, percent_decode_bytes, percent_encode
from .punycode import decode_host, encode_host, punycode_decode, punycode_encode

__all__ = [
    "percent_encode",
    "percent_decode",
    "percent_decode_bytes",
    "punycode_encode",
    "punycode_decode",
    "encode_host",
    "decode_host",
]
