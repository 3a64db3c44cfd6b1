"""src/urlivo/codec/punycode.py

Punycode (RFC 3492 Bootstring) encoding of internationalized domain labels.

Each label of a domain name is encoded separately. For instance, ``☂.☃.com``
becomes ``xn--m3h.xn--n3h.com``. Use :func:`encode_host` and
:func:`decode_host` to work on whole hostnames.
"""

from typing import List

from urlivo.exceptions import MalformedPunycode, PunycodeOverflow
from urlivo.utils.validators import validate_host_characters

__all__ = [
    "MARKER",
    "adapt",
    "punycode_encode",
    "punycode_decode",
    "encode_host",
    "decode_host",
]

MARKER = "xn--"
DELIMITER = "-"

BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 128

# Largest value delta/i may reach (32-bit unsigned).
MAX_INT = 0xFFFFFFFF

_MAX_CODE_POINT = 0x10FFFF


def adapt(delta: int, num_points: int, first_time: bool) -> int:
    """
    Bias adaptation function.

    Args:
        delta: Delta just encoded or decoded.
        num_points: Number of code points handled so far, including this one.
        first_time: True for the very first delta of the label.

    Returns:
        New bias.
    """
    delta //= DAMP if first_time else 2
    delta += delta // num_points
    k = 0
    while delta > ((BASE - TMIN) * TMAX) // 2:
        delta //= BASE - TMIN
        k += BASE
    return k + ((BASE - TMIN + 1) * delta) // (delta + SKEW)


def _threshold(k: int, bias: int) -> int:
    if k <= bias:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def _digit_to_basic(digit: int) -> str:
    # 0..25 map to a..z, 26..35 map to 0..9
    return chr(digit + 22 + 75 * (digit < 26))


def _basic_to_digit(char: str) -> int:
    code = ord(char)
    if 0x30 <= code <= 0x39:
        return code - 22
    if 0x41 <= code <= 0x5A:
        return code - 0x41
    if 0x61 <= code <= 0x7A:
        return code - 0x61
    return BASE


def punycode_encode(label: str) -> str:
    """
    Encode a single domain label using the Punycode algorithm.

    An all-ASCII label is returned unchanged, without the ``xn--`` marker.

    Args:
        label: Unicode label (no dots).

    Returns:
        The ``xn--``-prefixed ASCII form, or ``label`` itself.

    Raises:
        PunycodeOverflow: If the label is too long to represent.
    """
    code_points = [ord(c) for c in label]
    basic = [c for c in label if ord(c) < INITIAL_N]
    if len(basic) == len(code_points):
        return label

    output: List[str] = [MARKER]
    output.extend(basic)
    if basic:
        output.append(DELIMITER)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS
    basic_count = handled = len(basic)

    while handled < len(code_points):
        best = min(c for c in code_points if c >= n)
        delta += (best - n) * (handled + 1)
        if delta > MAX_INT:
            raise PunycodeOverflow("overflow during punycode encoding")
        n = best

        for code in code_points:
            if code < n:
                delta += 1
                if delta > MAX_INT:
                    raise PunycodeOverflow("overflow during punycode encoding")
            elif code == n:
                q = delta
                k = BASE
                while True:
                    t = _threshold(k, bias)
                    if q < t:
                        break
                    output.append(_digit_to_basic(t + (q - t) % (BASE - t)))
                    q = (q - t) // (BASE - t)
                    k += BASE
                output.append(_digit_to_basic(q))
                handled += 1
                bias = adapt(delta, handled, handled == basic_count + 1)
                delta = 0

        delta += 1
        n += 1

    return "".join(output)


def punycode_decode(label: str) -> str:
    """
    Decode a single ``xn--`` domain label using the Punycode algorithm.

    Labels without the marker (compared case-insensitively) are returned
    unchanged.

    Raises:
        MalformedPunycode: If the label is not valid Punycode.
        PunycodeOverflow: If a decoded integer overflows.
    """
    if label[: len(MARKER)].lower() != MARKER:
        return label
    encoded = label[len(MARKER) :]

    # Everything before the last delimiter is copied as basic code points.
    output: List[str] = []
    end = encoded.rfind(DELIMITER)
    if end >= 0:
        output.extend(encoded[:end])
        encoded = encoded[end + 1 :]
        if any(ord(c) >= INITIAL_N for c in output):
            raise MalformedPunycode(f"non-basic code point before delimiter in {label!r}")

    n = INITIAL_N
    i = 0
    bias = INITIAL_BIAS
    pos = 0
    while pos < len(encoded):
        old_i = i
        w = 1
        k = BASE
        while True:
            if pos >= len(encoded):
                raise MalformedPunycode(f"truncated punycode label {label!r}")
            digit = _basic_to_digit(encoded[pos])
            pos += 1
            if digit >= BASE:
                raise MalformedPunycode(
                    f"invalid punycode digit {encoded[pos - 1]!r} in {label!r}"
                )
            i += digit * w
            if i > MAX_INT:
                raise PunycodeOverflow("overflow during punycode decoding")
            t = _threshold(k, bias)
            if digit < t:
                break
            w *= BASE - t
            if w > MAX_INT:
                raise PunycodeOverflow("overflow during punycode decoding")
            k += BASE

        size = len(output) + 1
        bias = adapt(i - old_i, size, old_i == 0)
        n += i // size
        i %= size
        if n > _MAX_CODE_POINT or 0xD800 <= n <= 0xDFFF:
            raise MalformedPunycode(f"decoded value {n:#x} is not a Unicode scalar value")
        output.insert(i, chr(n))
        i += 1

    return "".join(output)


def encode_host(hostname: str) -> str:
    """
    Convert a Unicode hostname to its ASCII form.

    IPv6 literals (``[...]``) pass through verbatim. All-ASCII hostnames are
    returned unchanged; otherwise each dot-separated label is encoded.

    Raises:
        IllegalHostCharacter: If an ASCII character is not allowed in a host.
        PunycodeOverflow: If a label cannot be encoded.
    """
    if not hostname or hostname.startswith("["):
        return hostname
    if not validate_host_characters(hostname):
        return hostname
    return ".".join(punycode_encode(label) for label in hostname.split("."))


def decode_host(hostname: str) -> str:
    """Convert an ASCII hostname with ``xn--`` labels to Unicode."""
    if not hostname or hostname.startswith("["):
        return hostname
    return ".".join(punycode_decode(label) for label in hostname.split("."))
