"""Magic-byte content sniffing.

Classification looks only at a stream's leading bytes, never at file names.
Signatures come from the :mod:`filetype` catalog, extended with the few
textual formats it does not know about.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import filetype

from archpeek._utils import MAGIC_BYTES_SIZE
from archpeek.enums import CONTAINER_MIME_TYPES, ContainerKind, ContentCategory
from archpeek.errors import SniffError

logger = logging.getLogger(__name__)

#: MIME labels that are safe to print on a console.
PREVIEWABLE_MIME_TYPES: frozenset[str] = frozenset(
    {
        "text/plain",
        "text/markdown",
        "text/csv",
        "application/json",
        "application/xml",
        "text/xml",
    }
)

_UTF8_BOM = b"\xef\xbb\xbf"

# Text signatures checked after the binary catalog.  XML is reported as
# text/xml with or without a leading UTF-8 BOM.
_TEXT_SIGNATURES: tuple[tuple[bytes, str], ...] = ((b"<?xml", "text/xml"),)


def _match_text_signature(window: bytes) -> str | None:
    head = window.removeprefix(_UTF8_BOM)
    for prefix, mime in _TEXT_SIGNATURES:
        if head.startswith(prefix):
            return mime
    return None


def guess_mime(window: bytes | bytearray) -> str | None:
    """Return the MIME label matching the signature of *window*.

    :param window: Leading bytes of a stream; may be empty.
    :returns: A MIME type such as ``"image/png"``, or ``None`` if no
        signature matches.
    :raises SniffError: If the signature catalog could not be evaluated.
    """
    if not window:
        return None
    data = bytes(window)
    try:
        kind = filetype.guess(data)
    except (TypeError, ValueError) as exc:
        msg = f"signature matching failed: {exc}"
        raise SniffError(msg) from exc
    if kind is not None:
        return kind.mime
    return _match_text_signature(data)


def classify(window: bytes | bytearray) -> ContentCategory:
    """Classify the leading bytes of a stream.

    Empty and unrecognised windows are :attr:`ContentCategory.UNKNOWN`,
    which is rendered like text.

    :param window: The magic window (at most a few hundred bytes).
    :returns: The :class:`ContentCategory` of the stream.
    """
    mime = guess_mime(window)
    if mime is None:
        return ContentCategory.UNKNOWN
    if mime in PREVIEWABLE_MIME_TYPES:
        return ContentCategory.PREVIEWABLE_TEXT
    return ContentCategory.NON_PREVIEWABLE


def read_window(source: BinaryIO, size: int = MAGIC_BYTES_SIZE) -> bytes:
    """Read up to *size* leading bytes from *source*.

    Keeps reading after short reads so that sources delivering data in small
    pieces are still sniffed on a full window.  Stops early only when the
    source is exhausted.
    """
    window = bytearray()
    while len(window) < size:
        chunk = source.read(size - len(window))
        if not chunk:
            break
        window += chunk
    return bytes(window)


def sniff_container(path: str | Path) -> ContainerKind:
    """Decide which handler unpacks the file at *path*.

    :param path: Path to a file on disk.
    :returns: The :class:`ContainerKind` for the file's signature.
    :raises SniffError: If the file cannot be read or classified.
    """
    try:
        with Path(path).open("rb") as f:
            window = read_window(f)
    except OSError as exc:
        msg = f"could not read {str(path)!r}: {exc.strerror or exc}"
        raise SniffError(msg) from exc

    mime = guess_mime(window)
    kind = CONTAINER_MIME_TYPES.get(mime, ContainerKind.PLAIN)
    logger.debug("%s: signature %s, handled as %s", path, mime, kind.value)
    return kind
