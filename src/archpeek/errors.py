"""Exceptions raised by archpeek."""

from __future__ import annotations


class ArchpeekError(Exception):
    """Base class for all archpeek runtime failures."""


class SniffError(ArchpeekError):
    """The content type of a file or stream could not be evaluated."""


class ArchiveError(ArchpeekError):
    """A ZIP or TAR container could not be enumerated."""


class StreamReadError(ArchpeekError):
    """Reading from a byte source failed while previewing it.

    :param name: Display name of the file or archive entry being read.
    :param cause: The underlying exception reported by the source.
    """

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"error reading {name!r}: {cause}")
        self.name = name
        self.cause = cause
