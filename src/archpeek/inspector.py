"""Per-file dispatch: unpack an input file and hand its streams on.

Two families of handlers share the same container dispatch: ``show_file``
renders every stream's content, ``list_file`` prints a tree entry with the
size of each stream.
"""

from __future__ import annotations

import bz2
import gzip
import logging
import os
import tarfile
import zipfile
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, TextIO

from archpeek._utils import _READ_ERRORS, BUFFER_SIZE, format_file_size
from archpeek.archives import Entry, iter_tar_entries, iter_zip_entries
from archpeek.enums import ContainerKind
from archpeek.errors import ArchiveError, StreamReadError
from archpeek.renderer import ContentRenderer
from archpeek.sniffer import sniff_container

logger = logging.getLogger(__name__)

# Single-extension spellings of compressed TAR archives.
_TAR_SHORTHAND_SUFFIXES = frozenset({".tgz", ".tbz", ".tbz2"})

# tarfile reports a stream that ends before the first header this way.
_EMPTY_TAR_MESSAGE = "empty file"


def display_file_info(out: TextIO, name: str, size: int) -> None:
    """Write one tree-style listing entry for a file and its size."""
    out.write(f"|\n├── File: {name}\n|   Size: {format_file_size(size)}\n")


def _inner_name(path: Path) -> str:
    """Name of the payload of a compressed file: its path minus the last extension."""
    return os.path.splitext(str(path))[0]


def _is_compressed_tar(path: Path) -> bool:
    return (
        _inner_name(path).endswith(".tar")
        or path.suffix.lower() in _TAR_SHORTHAND_SUFFIXES
    )


def _open_decompressed(path: Path, kind: ContainerKind) -> BinaryIO:
    if kind is ContainerKind.GZIP:
        return gzip.open(path, "rb")
    return bz2.open(path, "rb")


def _open_tar(path: Path) -> tarfile.TarFile:
    try:
        return tarfile.open(path, mode="r:")
    except tarfile.TarError as exc:
        msg = f"invalid TAR archive: {exc}"
        raise ArchiveError(msg) from exc


def _iter_tar_stream(name: str, fileobj: BinaryIO) -> Iterator[Entry]:
    """Yield the members of a TAR archive read sequentially from *fileobj*.

    A stream holding no data at all is an archive without members.
    """
    try:
        archive = tarfile.open(fileobj=fileobj, mode="r|")
    except tarfile.ReadError as exc:
        if str(exc) != _EMPTY_TAR_MESSAGE:
            msg = f"invalid TAR archive: {exc}"
            raise ArchiveError(msg) from exc
        logger.debug("%s: empty TAR stream", name)
        return
    except tarfile.TarError as exc:
        msg = f"invalid TAR archive: {exc}"
        raise ArchiveError(msg) from exc
    except _READ_ERRORS as exc:
        raise StreamReadError(name, exc) from exc
    with archive:
        yield from iter_tar_entries(archive)


def _open_zip(path: Path) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(path)
    except zipfile.BadZipFile as exc:
        msg = f"invalid ZIP archive: {exc}"
        raise ArchiveError(msg) from exc


def show_file(path: str | Path, renderer: ContentRenderer) -> None:
    """Render the content of every stream held by the file at *path*.

    :param path: A plain file, a ZIP or TAR archive, or a GZIP/BZIP2
        compressed file (possibly wrapping a TAR archive).
    :param renderer: Renderer writing to the console.
    :raises SniffError: If the file type cannot be determined.
    :raises ArchiveError: If an archive is corrupt.
    :raises StreamReadError: If reading a stream fails.
    :raises OSError: If the file cannot be opened.
    """
    path = Path(path)
    kind = sniff_container(path)

    if kind is ContainerKind.ZIP:
        with _open_zip(path) as archive:
            for entry in iter_zip_entries(archive):
                renderer.render(entry.name, entry.source)
    elif kind is ContainerKind.TAR:
        with _open_tar(path) as archive:
            for entry in iter_tar_entries(archive):
                renderer.render(entry.name, entry.source)
    elif kind in (ContainerKind.GZIP, ContainerKind.BZIP2):
        name = _inner_name(path)
        with _open_decompressed(path, kind) as stream:
            if _is_compressed_tar(path):
                logger.debug("%s: reading compressed TAR stream", path)
                for entry in _iter_tar_stream(name, stream):
                    renderer.render(entry.name, entry.source)
            else:
                renderer.render(name, stream)
    else:
        with path.open("rb") as f:
            renderer.render(str(path), f)


def _measure_stream(name: str, stream: BinaryIO) -> int:
    """Count the bytes of *stream* by reading it to the end."""
    total = 0
    try:
        while chunk := stream.read(BUFFER_SIZE):
            total += len(chunk)
    except _READ_ERRORS as exc:
        raise StreamReadError(name, exc) from exc
    return total


def list_file(path: str | Path, out: TextIO) -> None:
    """Print the name and size of every stream held by the file at *path*.

    Takes the same inputs and raises the same errors as :func:`show_file`.
    """
    path = Path(path)
    kind = sniff_container(path)

    if kind is ContainerKind.ZIP:
        with _open_zip(path) as archive:
            for entry in iter_zip_entries(archive):
                display_file_info(out, entry.name, entry.size)
    elif kind is ContainerKind.TAR:
        with _open_tar(path) as archive:
            for entry in iter_tar_entries(archive):
                display_file_info(out, entry.name, entry.size)
    elif kind in (ContainerKind.GZIP, ContainerKind.BZIP2):
        name = _inner_name(path)
        with _open_decompressed(path, kind) as stream:
            if _is_compressed_tar(path):
                for entry in _iter_tar_stream(name, stream):
                    display_file_info(out, entry.name, entry.size)
            else:
                display_file_info(out, name, _measure_stream(name, stream))
    else:
        display_file_info(out, str(path), path.stat().st_size)
