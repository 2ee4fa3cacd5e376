"""ContentRenderer: boundary-aware streaming of text content."""

from __future__ import annotations

import dataclasses
import logging
from typing import BinaryIO, TextIO

from archpeek._utils import (
    _READ_ERRORS,
    BUFFER_SIZE,
    MAGIC_BYTES_SIZE,
    _validate_buffer_sizes,
)
from archpeek.enums import ContentCategory
from archpeek.errors import StreamReadError
from archpeek.sniffer import classify, read_window
from archpeek.utf8 import safe_prefix_length

#: Written instead of the content of streams that are not text.
NOT_AVAILABLE_NOTICE = "Preview not available in console."

_RULE = "─" * 40


@dataclasses.dataclass(frozen=True, slots=True)
class RenderOptions:
    """Settings for a :class:`ContentRenderer`.

    :param with_styling: Print a header naming the file before its content
        and a horizontal rule after it.
    :param magic_bytes_size: How many leading bytes are used to classify a
        stream.
    :param buffer_size: Capacity of the streaming buffer; also the largest
        read issued to a source.
    """

    with_styling: bool = True
    magic_bytes_size: int = MAGIC_BYTES_SIZE
    buffer_size: int = BUFFER_SIZE

    def __post_init__(self) -> None:
        _validate_buffer_sizes(self.magic_bytes_size, self.buffer_size)


class ContentRenderer:
    """Print the content of byte streams to a text console.

    Each stream is classified from its first bytes and either replaced by a
    short notice or decoded as UTF-8 chunk by chunk.  A multi-byte character
    cut by a chunk boundary is held back and completed by the next read, so
    no emitted fragment ever ends inside a character.
    """

    def __init__(self, out: TextIO, options: RenderOptions | None = None) -> None:
        """Initialize the renderer.

        :param out: Text stream receiving the rendered output.
        :param options: Rendering settings.  Defaults to
            :class:`RenderOptions` with styling enabled.
        """
        self.out = out
        self.options = options if options is not None else RenderOptions()
        self.logger = logging.getLogger(__name__)

    def render(self, name: str, source: BinaryIO) -> None:
        """Render one stream.

        :param name: Display name of the file or archive entry.
        :param source: Byte source positioned at the start of the content.
            Only its ``read(n)`` method is used.
        :raises StreamReadError: If reading from *source* fails.
        """
        if self.options.with_styling:
            self.out.write(f'📄 Content from "{name}":\n{_RULE}\n')

        window = self._read_window(name, source)
        category = classify(window)
        self.logger.debug(
            "%s: %d-byte window classified as %s", name, len(window), category.value
        )
        if category.previewable:
            self._stream(name, source, window)
        else:
            self.out.write(NOT_AVAILABLE_NOTICE)

        if self.options.with_styling:
            self.out.write(f"\n{_RULE}\n")

    def _read_window(self, name: str, source: BinaryIO) -> bytes:
        try:
            return read_window(source, self.options.magic_bytes_size)
        except _READ_ERRORS as exc:
            raise StreamReadError(name, exc) from exc

    def _read(self, name: str, source: BinaryIO, size: int) -> bytes:
        try:
            return source.read(size)
        except _READ_ERRORS as exc:
            raise StreamReadError(name, exc) from exc

    def _stream(self, name: str, source: BinaryIO, window: bytes) -> None:
        """Decode *source* to the output, starting with the already-read *window*."""
        capacity = self.options.buffer_size
        buffer = bytearray(capacity)
        filled = len(window)
        buffer[:filled] = window

        while True:
            if filled == 0:
                chunk = self._read(name, source, capacity)
                if not chunk:
                    return
                filled = len(chunk)
                buffer[:filled] = chunk

            cut = safe_prefix_length(buffer, filled)
            if cut is None:
                self.logger.warning(
                    "%s: %d bytes without a character start, stopping preview",
                    name,
                    filled,
                )
                return

            if cut:
                self._emit(name, bytes(buffer[:cut]))

            tail = filled - cut
            buffer[:tail] = buffer[cut:filled]

            chunk = self._read(name, source, capacity - tail)
            if not chunk:
                if tail:
                    self.logger.debug(
                        "%s: discarding %d bytes of a truncated final character",
                        name,
                        tail,
                    )
                return
            filled = tail + len(chunk)
            buffer[tail:filled] = chunk

    def _emit(self, name: str, data: bytes) -> None:
        """Write *data* as text, substituting U+FFFD for malformed sequences."""
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            self.logger.debug(
                "%s: malformed UTF-8 (%s), substituting", name, exc.reason
            )
            text = data.decode("utf-8", errors="replace")
        self.out.write(text)
