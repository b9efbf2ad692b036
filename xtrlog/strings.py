"""Small string helpers: bounded copies, suffixes and reverse search."""

from typing import TypeVar, Union

S = TypeVar("S", str, bytes)


def strzcpy(src: S, size: int) -> S:
    """Return ``src`` truncated to fit a nul-terminated field of ``size`` slots.

    At most ``size - 1`` characters are kept, leaving room for the
    terminator.
    """
    if size < 1:
        raise ValueError(f"destination size must be at least 1, got {size}")
    return src[: size - 1]


def rcut(s: S, pos: int) -> S:
    """Return the part of ``s`` starting at ``pos``."""
    if not 0 <= pos <= len(s):
        raise ValueError(f"position {pos} outside string of length {len(s)}")
    return s[pos:]


def rindex(s: Union[str, bytes], c: Union[str, bytes]) -> int:
    """Return the index of the last occurrence of ``c`` in ``s``, or -1."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return s.rfind(c)