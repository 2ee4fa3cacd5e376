"""Iteration over the members of TAR and ZIP archives."""

from __future__ import annotations

import dataclasses
import io
import logging
import tarfile
import zipfile
import zlib
from collections.abc import Iterator
from typing import BinaryIO

from archpeek.errors import ArchiveError

logger = logging.getLogger(__name__)

# Name marker of AppleDouble files that macOS adds to archives it creates.
_METADATA_MARKER = "._"


@dataclasses.dataclass(frozen=True, slots=True)
class Entry:
    """A single archive member.

    The *source* stream is only valid until the walker that produced the
    entry advances to the next one.
    """

    name: str
    size: int
    source: BinaryIO


def is_metadata_entry(name: str) -> bool:
    """Return True for platform metadata members that hold no user content."""
    return _METADATA_MARKER in name


def iter_tar_entries(archive: tarfile.TarFile) -> Iterator[Entry]:
    """Yield the file members of a TAR archive in archive order.

    Directories and macOS metadata members are skipped.  Members without
    content of their own (links, devices, FIFOs) yield an empty stream.
    Works with both random-access and stream (``r|``) archives.

    :param archive: An open archive.
    :raises ArchiveError: If a member header cannot be parsed.
    """
    try:
        for member in archive:
            if member.isdir():
                continue
            if is_metadata_entry(member.name):
                logger.debug("skipping metadata member %s", member.name)
                continue
            if member.isreg():
                source = archive.extractfile(member)
            else:
                source = io.BytesIO()
            yield Entry(name=member.name, size=member.size, source=source)
    except tarfile.TarError as exc:
        msg = f"invalid TAR archive: {exc}"
        raise ArchiveError(msg) from exc
    except (OSError, EOFError, zlib.error) as exc:
        msg = f"error reading TAR archive: {exc}"
        raise ArchiveError(msg) from exc


def iter_zip_entries(archive: zipfile.ZipFile) -> Iterator[Entry]:
    """Yield the file members of a ZIP archive in directory order.

    :param archive: An open archive.
    :raises ArchiveError: If a member cannot be opened.
    """
    for info in archive.infolist():
        if info.is_dir():
            continue
        try:
            source = archive.open(info)
        except (zipfile.BadZipFile, NotImplementedError, RuntimeError) as exc:
            msg = f"cannot open {info.filename!r}: {exc}"
            raise ArchiveError(msg) from exc
        with source:
            yield Entry(name=info.filename, size=info.file_size, source=source)
