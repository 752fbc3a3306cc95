"""Stage 4b: ASCII / ANSI / binary classification."""

from __future__ import annotations

from encdetect.enums import Encoding
from encdetect.pipeline import DEFAULT_CONFIG, DetectorConfig
from encdetect.pipeline.binary import exceeds_null_ratio, has_control_anomaly

# Deleting every byte below 0x80 leaves only the high bytes.
_LOW_BYTES: bytes = bytes(range(0x80))


def has_high_bytes(data: bytes) -> bool:
    """Return True if any byte of *data* has its high bit set."""
    return bool(data.translate(None, _LOW_BYTES))


def classify_text(
    data: bytes,
    null_ratio: float = 0.0,
    config: DetectorConfig = DEFAULT_CONFIG,
) -> Encoding:
    """Decide between pure ASCII, extended 8-bit text and binary.

    :param data: The raw byte data to examine.
    :param null_ratio: Fraction of zero bytes reported by the UTF-16 stage.
    :param config: Thresholds to apply.
    :returns: :attr:`Encoding.ASCII`, :attr:`Encoding.ANSI` or
        :attr:`Encoding.NONE`.
    """
    allow_nulls = not config.null_suggests_binary
    if has_control_anomaly(data, allow_nulls=allow_nulls):
        return Encoding.NONE

    # Printable bytes interleaved with many zeros still look binary, even
    # when single zero bytes are tolerated.
    if exceeds_null_ratio(null_ratio, config.null_suspicious_ratio):
        return Encoding.NONE

    if has_high_bytes(data):
        return Encoding.ANSI
    return Encoding.ASCII
