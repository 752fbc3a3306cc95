"""Heuristic text encoding detection for byte buffers."""

from __future__ import annotations

from encdetect._utils import _as_bytes
from encdetect.detector import EncodingDetector
from encdetect.enums import Encoding
from encdetect.pipeline import DEFAULT_CONFIG, DetectorConfig
from encdetect.pipeline.orchestrator import run_pipeline

__version__ = "1.0.0"
__all__ = [
    "DetectorConfig",
    "Encoding",
    "EncodingDetector",
    "bom_length",
    "detect",
]


def detect(
    byte_str: bytes | bytearray | memoryview,
    length: int | None = None,
    config: DetectorConfig | None = None,
) -> Encoding:
    """Detect the encoding of the given byte string.

    :param byte_str: The buffer to classify.  It is neither modified nor kept.
    :param length: Classify only the first *length* bytes.  Defaults to the
        whole buffer.
    :param config: Detection thresholds.  Defaults to :class:`DetectorConfig`
        with its default values.
    :returns: The :class:`Encoding` verdict.  An empty buffer is ASCII.
    :raises ValueError: If *length* is negative or larger than the buffer.
    """
    data = _as_bytes(byte_str, length)
    return run_pipeline(data, config if config is not None else DEFAULT_CONFIG)


def bom_length(encoding: Encoding) -> int:
    """Return the number of BOM bytes implied by *encoding*: 3, 2 or 0."""
    return encoding.bom_length
