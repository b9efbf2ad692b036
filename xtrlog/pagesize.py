"""System page size and page alignment."""

import functools
import mmap

from .align import align


@functools.lru_cache(maxsize=None)
def page_size() -> int:
    """Return the size in bytes of a virtual memory page."""
    return mmap.PAGESIZE


def align_to_page_size(length: int) -> int:
    """Round ``length`` up to a whole number of pages."""
    return align(length, page_size())