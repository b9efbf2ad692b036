"""Helpers for an asynchronous logger: sanitising, alignment, storage and command frames."""

__version__ = "0.1.0"