"""src/urlivo/exceptions.py

Urlivo Exceptions hierarchy.
"""


class URLError(Exception):
    """Base exception for all Urlivo errors."""


class ParseError(URLError):
    """
    Base exception for structural parse failures.
    Raised when a string cannot be read as a URL.
    """


class MalformedURL(ParseError):
    """Structurally invalid authority (e.g. garbage after an IPv6 literal)."""


class InvalidPort(ParseError):
    """Port substring is not a valid unsigned 16-bit integer."""


class UnterminatedIPv6Literal(ParseError):
    """An IPv6 literal was opened with ``[`` but never closed."""

    def __init__(self, message: str = "Unterminated IPv6 literal"):
        super().__init__(message)


class EncodingError(URLError):
    """
    Base exception for encoding and decoding of URL components.
    """


class MalformedPercentEncoding(EncodingError):
    """
    Truncated ``%`` escape, non-hex digits after ``%``, or decoded bytes
    that are not valid UTF-8.
    """


class IllegalHostCharacter(EncodingError):
    """A host contains an ASCII character that is not allowed in a domain name."""


class PunycodeError(EncodingError):
    """Base exception for Punycode failures."""


class PunycodeOverflow(PunycodeError):
    """
    Integer overflow while encoding or decoding a Punycode label.
    """

    def __init__(self, message: str = "Overflow during punycode processing"):
        super().__init__(message)


class MalformedPunycode(PunycodeError):
    """An ``xn--`` label that is not valid Punycode."""
