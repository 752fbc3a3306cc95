"""Stage 4a: Control-byte scan for binary content."""

from __future__ import annotations

# Text-safe bytes: TAB, LF, FF, CR, ESC and printable ASCII (0x20-0x7E).
# bytes.translate deletes these, plus every high byte, from the input; any
# byte left over is a control anomaly.
_TEXT_SAFE: bytes = bytes([0x09, 0x0A, 0x0C, 0x0D, 0x1B, *range(0x20, 0x7F)])
_HIGH_BYTES: bytes = bytes(range(0x80, 0x100))

_NOT_ANOMALY = _TEXT_SAFE + _HIGH_BYTES
_NOT_ANOMALY_ALLOW_NULLS = b"\x00" + _NOT_ANOMALY


def has_control_anomaly(data: bytes, allow_nulls: bool = False) -> bool:
    """Return True if *data* holds a control byte that plain text would not contain.

    :param data: The raw byte data to examine.
    :param allow_nulls: Treat zero bytes as ordinary text.
    """
    delete = _NOT_ANOMALY_ALLOW_NULLS if allow_nulls else _NOT_ANOMALY
    return bool(data.translate(None, delete))


def exceeds_null_ratio(null_ratio: float, threshold: float) -> bool:
    """Return True if the observed zero-byte fraction marks the data as binary."""
    return null_ratio > threshold
