"""Internal shared utilities for encdetect."""

from __future__ import annotations

import numbers

#: Default cap on the prefix examined by the UTF-16 null-pattern analyzer.
DEFAULT_NULL_SUSPICIOUS_BYTES: int = 1024 * 1024

#: Default minimum null fraction at the expected UTF-16 parity.
DEFAULT_UTF16_EXPECTED_NULL_RATIO: float = 0.1

#: Default maximum null fraction at the opposite UTF-16 parity.
DEFAULT_UTF16_UNEXPECTED_NULL_RATIO: float = 0.05

#: Default total null fraction above which text degrades to binary.
DEFAULT_NULL_SUSPICIOUS_RATIO: float = 0.1


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_ratio(name: str, value: float) -> None:
    """Raise ValueError if *value* is not a real number in ``[0, 1]``."""
    if (
        isinstance(value, bool)
        or not isinstance(value, numbers.Real)
        or not 0.0 <= value <= 1.0
    ):
        msg = f"{name} must be a number between 0 and 1, got {value!r}"
        raise ValueError(msg)


def _validate_positive_int(name: str, value: int | None) -> None:
    """Raise ValueError if *value* is neither ``None`` nor a positive integer."""
    if value is not None and (not _is_int(value) or value < 1):
        msg = f"{name} must be a positive integer"
        raise ValueError(msg)


def _as_bytes(data: bytes | bytearray | memoryview, length: int | None) -> bytes:
    """Return the first *length* bytes of *data* as an immutable ``bytes``.

    :raises TypeError: If *data* is not bytes-like.
    :raises ValueError: If *length* is negative or larger than the buffer.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        msg = f"expected a bytes-like object, got {type(data).__name__}"
        raise TypeError(msg)
    buf = data if isinstance(data, bytes) else bytes(data)
    if length is None:
        return buf
    if not _is_int(length) or length < 0:
        msg = "length must be a non-negative integer"
        raise ValueError(msg)
    if length > len(buf):
        msg = f"length {length} exceeds buffer size {len(buf)}"
        raise ValueError(msg)
    return buf[:length]
