"""Stage 2: UTF-8 structural validation.

Only the byte structure is checked: lead bytes and the number of
``10xxxxxx`` continuation bytes that follow them.  Code point ranges such as
surrogates are not validated.
"""

from __future__ import annotations

from encdetect.enums import Encoding


def _sequence_length(lead: int) -> int:
    """Return the total length of the sequence started by *lead*, or 0 if invalid.

    0xC0 and 0xC1 can only start overlong encodings of ASCII and 0xF5-0xFF
    would encode code points above U+10FFFF, so none of them may lead.
    """
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    # Stray continuation byte (0x80-0xBF) or invalid lead
    return 0


def detect_utf8(data: bytes) -> Encoding | None:
    """Validate UTF-8 byte structure.

    Returns :attr:`Encoding.UTF8_NOBOM` only if the whole buffer is
    well-formed and at least one multi-byte sequence was seen.  Pure ASCII is
    left to the text classifier.

    A sequence cut short by the end of the buffer is tolerated, since buffers
    are often sampled prefixes of larger files.  It counts as multi-byte
    evidence only if at least one of its continuation bytes is present, so a
    lone trailing lead byte proves nothing.

    :param data: The raw byte data to examine.
    :returns: :attr:`Encoding.UTF8_NOBOM`, or ``None``.
    """
    length = len(data)
    saw_multibyte = False
    i = 0

    while i < length:
        byte = data[i]

        if byte < 0x80:
            i += 1
            continue

        seq_len = _sequence_length(byte)
        if seq_len == 0:
            return None

        end = min(i + seq_len, length)
        for j in range(i + 1, end):
            if not 0x80 <= data[j] <= 0xBF:
                return None
            saw_multibyte = True

        i += seq_len

    if not saw_multibyte:
        return None
    return Encoding.UTF8_NOBOM
