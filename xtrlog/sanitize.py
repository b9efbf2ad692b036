"""Escaping of non-printable characters for safe inclusion in log output.

Bytes outside the printable ASCII range, and the backslash itself, are
written as ``\\xHH`` so that log text cannot inject terminal escape
sequences.
"""

from typing import Union

_HEX = "0123456789ABCDEF"

CharLike = Union[int, str, bytes, bytearray]
TextLike = Union[str, bytes, bytearray, memoryview]


def _sanitize_byte(b: int) -> str:
    if 0x20 <= b <= 0x7E and b != 0x5C:
        return chr(b)
    return "\\x" + _HEX[(b >> 4) & 0xF] + _HEX[b & 0xF]


def _to_bytes(text: TextLike) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def sanitize_char(c: CharLike) -> str:
    """Return the sanitized form of a single character.

    ``c`` may be a byte value (signed values from -128 are accepted and
    treated as their unsigned equivalent), a one-character string or a
    one-byte bytes object. A non-ASCII character is sanitized byte by byte
    in its UTF-8 encoding.
    """
    if isinstance(c, int):
        if not -128 <= c <= 255:
            raise ValueError(f"byte value out of range: {c}")
        return _sanitize_byte(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return "".join(_sanitize_byte(b) for b in _to_bytes(c))


def sanitize(text: TextLike) -> str:
    """Return ``text`` with every unsafe byte escaped as ``\\xHH``."""
    return "".join(_sanitize_byte(b) for b in _to_bytes(text))