"""An owning wrapper around an operating-system file descriptor."""

import contextlib
import os
from typing import Optional, Union

PathLike = Union[str, bytes, "os.PathLike[str]"]


class FileDescriptor:
    """Owns a file descriptor and closes it when reset, closed or collected.

    A value of -1 means no descriptor is held.
    """

    def __init__(self, fd: int = -1) -> None:
        self._fd = fd

    @classmethod
    def open(cls, path: PathLike, flags: int, mode: int = 0) -> "FileDescriptor":
        """Open ``path`` with ``os.open`` and wrap the resulting descriptor.

        Raises ``OSError`` if the file cannot be opened.
        """
        # os.open retries automatically when interrupted by a signal.
        return cls(os.open(path, flags, mode))

    @property
    def fd(self) -> int:
        """The held descriptor, or -1."""
        return self._fd

    def fileno(self) -> int:
        """Return the held descriptor, for use with select and similar."""
        return self._fd

    def is_open(self) -> bool:
        """True if a descriptor is held."""
        return self._fd != -1

    def __bool__(self) -> bool:
        return self.is_open()

    def reset(self, fd: int = -1) -> None:
        """Close the held descriptor, if any, and take ownership of ``fd``."""
        old, self._fd = self._fd, fd
        if old != -1 and old != fd:
            with contextlib.suppress(OSError):
                os.close(old)

    def release(self) -> int:
        """Give up ownership of the descriptor without closing it."""
        fd, self._fd = self._fd, -1
        return fd

    def close(self) -> None:
        """Close the held descriptor, if any."""
        self.reset()

    def __enter__(self) -> "FileDescriptor":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None

    def __del__(self) -> None:
        fd = getattr(self, "_fd", -1)
        if fd != -1:
            with contextlib.suppress(OSError):
                os.close(fd)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fd})"