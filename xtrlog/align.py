"""Alignment of unsigned integer values to power-of-two boundaries."""


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def align(value: int, alignment: int) -> int:
    """Round ``value`` up to the next multiple of ``alignment``.

    ``alignment`` must be a power of two and ``value`` must be unsigned.
    A value that is already aligned is returned unchanged.
    """
    if value < 0:
        raise ValueError(f"value must be unsigned, got {value}")
    if not _is_power_of_two(alignment):
        raise ValueError(f"alignment must be a power of two, got {alignment}")
    mask = alignment - 1
    return (value + mask) & ~mask