"""The interface that log output back-ends implement."""

import abc
from typing import Union

NULL_REOPEN_PATH = ""
"""Reopen path meaning the output has no file name and is never reopened."""

Buffer = Union[bytearray, memoryview]


class StorageInterface(abc.ABC):
    """A destination for formatted log data, such as a file or a socket."""

    @abc.abstractmethod
    def allocate_buffer(self) -> Buffer:
        """Return a writable buffer for formatted log data.

        It is not called again until the buffer has been submitted.
        """

    @abc.abstractmethod
    def submit_buffer(self, data: Buffer) -> None:
        """Write the filled part ``data`` of the allocated buffer."""

    @abc.abstractmethod
    def flush(self) -> None:
        """Write any buffered data to the backing store."""

    @abc.abstractmethod
    def sync(self) -> None:
        """Ensure written data has reached permanent storage."""

    @abc.abstractmethod
    def reopen(self) -> None:
        """Reopen the output file, if there is one.

        Raises ``OSError`` if the file cannot be reopened.
        """