"""Stage 3: UTF-16 detection for data without BOM.

UTF-16 text made mostly of code points below U+0100 stores one zero byte per
code unit, always at the same parity: odd offsets for little-endian, even
offsets for big-endian.  8-bit text has no zero bytes at all, so the
distribution of zero bytes across the two parities tells the encodings apart.
"""

from __future__ import annotations

from encdetect.enums import Encoding
from encdetect.pipeline import DEFAULT_CONFIG, DetectorConfig, NullAnalysis

_NEWLINES = frozenset({0x0A, 0x0D})

# A single zero byte is not enough to claim UTF-16, whatever ratio it yields
# in a tiny sample.
_MIN_EXPECTED_NULLS = 2

_UNDECIDED = NullAnalysis(encoding=None, null_ratio=0.0)


def analyze_utf16(
    data: bytes, config: DetectorConfig = DEFAULT_CONFIG
) -> NullAnalysis:
    """Infer BOM-less UTF-16 endianness from the zero-byte pattern of *data*.

    Only the first ``config.sample_size(len(data))`` bytes are examined,
    rounded down to a whole number of code units.  When neither endianness
    matches, the returned analysis still carries the overall null ratio so the
    text classifier can decide between binary and 8-bit text.

    :param data: The raw byte data to examine.
    :param config: Thresholds to apply.
    :returns: A :class:`NullAnalysis`; its ``encoding`` is ``None`` when
        undecided.
    """
    sample_len = config.sample_size(len(data))
    sample_len -= sample_len % 2
    if sample_len < 2:
        return _UNDECIDED

    sample = data[:sample_len]
    num_units = sample_len // 2

    # Slicing by parity keeps the counting in C.
    even_nulls = sample[0::2].count(0)
    odd_nulls = sample[1::2].count(0)
    null_ratio = (odd_nulls + even_nulls) / sample_len

    encoding = None
    if config.utf16_newline_check:
        encoding = _check_newlines(sample)
    if encoding is None:
        encoding = _check_null_ratios(odd_nulls, even_nulls, num_units, config)

    return NullAnalysis(
        encoding=encoding,
        null_ratio=null_ratio,
        odd_nulls=odd_nulls,
        even_nulls=even_nulls,
        sample_size=sample_len,
    )


def _check_null_ratios(
    odd_nulls: int, even_nulls: int, num_units: int, config: DetectorConfig
) -> Encoding | None:
    odd_frac = odd_nulls / num_units
    even_frac = even_nulls / num_units
    expected = config.utf16_expected_null_ratio
    unexpected = config.utf16_unexpected_null_ratio

    # Lots of odd nulls, few even nulls: ASCII-range code units stored LE
    if (
        odd_nulls >= _MIN_EXPECTED_NULLS
        and odd_frac >= expected
        and even_frac <= unexpected
    ):
        return Encoding.UTF16_LE_NOBOM
    # Lots of even nulls, few odd nulls
    if (
        even_nulls >= _MIN_EXPECTED_NULLS
        and even_frac >= expected
        and odd_frac <= unexpected
    ):
        return Encoding.UTF16_BE_NOBOM
    return None


def _check_newlines(sample: bytes) -> Encoding | None:
    """Look for CR or LF code units, which appear even in non-Latin UTF-16 text.

    A newline stored little-endian is ``0A 00``; big-endian it is ``00 0A``.
    Seeing both forms means the data is not UTF-16 at all.
    """
    le_newlines = 0
    be_newlines = 0
    for first, second in zip(sample[0::2], sample[1::2]):
        if first == 0:
            if second in _NEWLINES:
                be_newlines += 1
        elif second == 0 and first in _NEWLINES:
            le_newlines += 1

        if le_newlines and be_newlines:
            return None

    if le_newlines:
        return Encoding.UTF16_LE_NOBOM
    if be_newlines:
        return Encoding.UTF16_BE_NOBOM
    return None
