"""utils/validators.py

Validation utilities for Urlivo.
"""

from urlivo.exceptions import IllegalHostCharacter, InvalidPort

__all__ = ["is_hex_digit", "parse_port", "validate_host_characters", "MAX_PORT"]

MAX_PORT = 0xFFFF

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_ASCII_DIGITS = frozenset("0123456789")


def is_hex_digit(char: str) -> bool:
    """Check whether a single character is an ASCII hex digit."""
    return char in _HEX_DIGITS


def parse_port(text: str) -> int:
    """
    Parse a port number as an unsigned 16-bit integer.

    Args:
        text: Digits found between ``:`` and the end of the authority.

    Returns:
        The port as an integer.

    Raises:
        InvalidPort: If the text is empty, contains non-digits or overflows.
    """
    # int() would also accept whitespace, signs, underscores and non-ASCII digits
    if not text or any(c not in _ASCII_DIGITS for c in text):
        raise InvalidPort(f"Invalid port: {text!r}")

    port = int(text)
    if port > MAX_PORT:
        raise InvalidPort(f"Port out of range: {port}")
    return port


def _is_illegal_ascii(code: int) -> bool:
    return (
        code < 0x2C
        or 0x3A <= code <= 0x40
        or 0x5B <= code <= 0x60
        or 0x7B <= code <= 0x7F
    )


def validate_host_characters(hostname: str) -> bool:
    """
    Check a hostname for ASCII characters that cannot appear in a domain name.

    Non-ASCII characters are allowed; they are Punycode-encoded later.

    Returns:
        True if the hostname contains any non-ASCII character.

    Raises:
        IllegalHostCharacter: On the first disallowed ASCII character.
    """
    needs_encoding = False
    for position, char in enumerate(hostname):
        code = ord(char)
        if code >= 0x80:
            needs_encoding = True
        elif _is_illegal_ascii(code):
            raise IllegalHostCharacter(
                f"domain name {hostname!r} contains illegal character "
                f"{char!r} at position {position}"
            )
    return needs_encoding
