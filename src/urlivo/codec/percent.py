"""src/urlivo/codec/percent.py

Percent-encoding of URL components.

URL components cannot contain non-ASCII characters, and very few ASCII
characters are safe to include literally. Domain names use Punycode
(see :mod:`urlivo.codec.punycode`); everything else uses percent-encoding.
"""

from urlivo.exceptions import MalformedPercentEncoding
from urlivo.utils.validators import is_hex_digit

__all__ = ["percent_encode", "percent_decode", "percent_decode_bytes"]

# Unreserved characters are never encoded.
_SAFE = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
)


def percent_encode(raw: str) -> str:
    """
    Percent-encode a string.

    Letters, digits and ``-._~`` are emitted as-is. Every other character is
    encoded as the ``%XX`` escapes of its UTF-8 bytes, uppercase hex.

    Args:
        raw: Decoded component text.

    Returns:
        Encoded text, pure ASCII.
    """
    parts = []
    for char in raw:
        if char in _SAFE:
            parts.append(char)
            continue
        for byte in char.encode("utf-8"):
            parts.append(f"%{byte:02X}")
    return "".join(parts)


def percent_decode_bytes(encoded: str) -> bytes:
    """
    Percent-decode a string into raw bytes.

    The output is not validated as UTF-8. Characters outside ``%XX`` escapes
    are taken as their UTF-8 bytes.

    Args:
        encoded: Percent-encoded text.

    Returns:
        Decoded bytes.

    Raises:
        MalformedPercentEncoding: If a ``%`` is not followed by two hex digits.
    """
    data = bytearray()
    i = 0
    length = len(encoded)
    while i < length:
        char = encoded[i]
        if char != "%":
            data += char.encode("utf-8")
            i += 1
            continue

        if i + 2 >= length:
            raise MalformedPercentEncoding(
                "Invalid percent encoded value: expected two characters after "
                f"percent symbol. Error at index {i}"
            )

        high, low = encoded[i + 1], encoded[i + 2]
        if not (is_hex_digit(high) and is_hex_digit(low)):
            raise MalformedPercentEncoding(
                "Invalid percent encoded value: expected two hex digits after "
                f"percent symbol. Error at index {i}"
            )

        data.append(int(high + low, 16))
        i += 3
    return bytes(data)


def percent_decode(encoded: str) -> str:
    """
    Percent-decode a string, ensuring the result is valid UTF-8.

    Hex digits are accepted in either case.

    Raises:
        MalformedPercentEncoding: On a bad escape, or when the reassembled
            bytes are not valid UTF-8.
    """
    if "%" not in encoded:
        return encoded

    raw = percent_decode_bytes(encoded)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedPercentEncoding(
            f"The percent-encoded data {encoded!r} does not represent "
            "a valid UTF-8 sequence."
        ) from exc
