"""Internal shared utilities for archpeek."""

from __future__ import annotations

import tarfile
import zipfile
import zlib

#: Number of leading bytes inspected to classify a stream.
MAGIC_BYTES_SIZE: int = 512

#: Capacity of the buffer used to stream content to the console.
BUFFER_SIZE: int = 8192

#: A carried partial character is at most 3 bytes, so the buffer needs room
#: for one more byte to always make progress.
MIN_BUFFER_SIZE: int = 4

_SIZE_UNITS: tuple[str, ...] = ("Bytes", "KB", "MB", "GB")

# Exceptions a byte source may raise for a failed or corrupt read.
_READ_ERRORS = (OSError, EOFError, zlib.error, zipfile.BadZipFile, tarfile.TarError)


def _validate_positive_int(value: int, name: str) -> None:
    """Raise ValueError if *value* is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"{name} must be a positive integer"
        raise ValueError(msg)


def _validate_buffer_sizes(magic_bytes_size: int, buffer_size: int) -> None:
    """Raise ValueError unless the buffer can hold the magic window and a tail."""
    _validate_positive_int(magic_bytes_size, "magic_bytes_size")
    _validate_positive_int(buffer_size, "buffer_size")
    if buffer_size < MIN_BUFFER_SIZE:
        msg = f"buffer_size must be at least {MIN_BUFFER_SIZE}"
        raise ValueError(msg)
    if buffer_size < magic_bytes_size:
        msg = "buffer_size must not be smaller than magic_bytes_size"
        raise ValueError(msg)


def format_file_size(num_bytes: int) -> str:
    """Format a byte count for humans.

    Plain byte counts are shown without decimals; larger values use the
    biggest unit up to GB with two decimals.  Sizes beyond the GB range stay
    expressed in GB.

    :param num_bytes: Size in bytes.
    :returns: A string such as ``"512 Bytes"`` or ``"1.46 KB"``.
    """
    if num_bytes < 1024:
        return f"{num_bytes} Bytes"

    exponent = 0
    while exponent < len(_SIZE_UNITS) - 1 and num_bytes >= 1024 ** (exponent + 1):
        exponent += 1
    value = num_bytes / 1024**exponent
    return f"{value:.2f} {_SIZE_UNITS[exponent]}"
