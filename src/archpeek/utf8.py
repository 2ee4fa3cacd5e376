"""UTF-8 character boundary arithmetic for chunked rendering."""

from __future__ import annotations


def sequence_length(byte: int) -> int:
    """Return the character length announced by *byte*.

    Lead bytes are recognised by their top bits only (``110xxxxx``,
    ``1110xxxx``, ``11110xxx``); whether the resulting sequence is valid is
    left to the decoder.

    :param byte: A single byte value.
    :returns: 1 for ASCII, 2 to 4 for a multi-byte lead, 0 for a
        continuation byte or a byte that can never start a character.
    """
    if byte >> 7 == 0:
        return 1
    if byte >> 5 == 0b110:
        return 2
    if byte >> 4 == 0b1110:
        return 3
    if byte >> 3 == 0b11110:
        return 4
    return 0


def safe_prefix_length(data: bytes | bytearray, end: int | None = None) -> int | None:
    """Find how much of ``data[:end]`` can be decoded without splitting a character.

    Scans backward from the last byte for the nearest ASCII or lead byte.
    Everything up to an ASCII byte is complete.  A lead byte whose announced
    sequence runs past *end* starts an unfinished character, so the prefix
    stops right before it; if the sequence fits, it is complete (or
    malformed, which is the decoder's concern) and the whole region counts.

    :param data: Buffer holding the bytes read so far.
    :param end: Number of filled bytes in *data*.  Defaults to ``len(data)``.
    :returns: The length of the safe prefix (``end`` minus the carry tail),
        or ``None`` if no byte in the region can start a character.
    """
    if end is None:
        end = len(data)

    for pos in range(end - 1, -1, -1):
        seq_len = sequence_length(data[pos])
        if seq_len == 1:
            return end
        if seq_len:
            return pos if end - pos < seq_len else end

    return None
