"""Preview text inside plain files, archives and compressed streams."""

from __future__ import annotations

from archpeek.enums import ContainerKind, ContentCategory, OutputMode
from archpeek.errors import ArchiveError, ArchpeekError, SniffError, StreamReadError
from archpeek.renderer import ContentRenderer, RenderOptions
from archpeek.sniffer import classify, guess_mime

__version__ = "0.1.0"
__all__ = [
    "ArchiveError",
    "ArchpeekError",
    "ContainerKind",
    "ContentCategory",
    "ContentRenderer",
    "OutputMode",
    "RenderOptions",
    "SniffError",
    "StreamReadError",
    "classify",
    "guess_mime",
]
