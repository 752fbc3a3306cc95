"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from encdetect._utils import (
    DEFAULT_NULL_SUSPICIOUS_BYTES,
    DEFAULT_NULL_SUSPICIOUS_RATIO,
    DEFAULT_UTF16_EXPECTED_NULL_RATIO,
    DEFAULT_UTF16_UNEXPECTED_NULL_RATIO,
    _validate_positive_int,
    _validate_ratio,
)
from encdetect.enums import Encoding


@dataclasses.dataclass(frozen=True, slots=True)
class DetectorConfig:
    """Tunable thresholds for a single detection run.

    Instances are immutable and validated on construction, so a config can be
    built once and shared freely between threads.

    :param null_suspicious_bytes: Maximum prefix examined by the UTF-16
        null-pattern analyzer.  ``None`` caps it at 1 MiB.
    :param utf16_expected_null_ratio: Minimum fraction of zero bytes at the
        expected parity for a BOM-less UTF-16 verdict.
    :param utf16_unexpected_null_ratio: Maximum fraction of zero bytes allowed
        at the opposite parity for a BOM-less UTF-16 verdict.
    :param null_suspicious_ratio: Total zero-byte fraction above which an
        ASCII or ANSI verdict is downgraded to binary.
    :param null_suggests_binary: If ``False``, a single zero byte is not a
        control anomaly; only a zero-byte fraction above
        *null_suspicious_ratio* makes the buffer binary.
    :param utf16_newline_check: If ``True``, look for CR/LF code units before
        applying the null-ratio rules.
    """

    null_suspicious_bytes: int | None = None
    utf16_expected_null_ratio: float = DEFAULT_UTF16_EXPECTED_NULL_RATIO
    utf16_unexpected_null_ratio: float = DEFAULT_UTF16_UNEXPECTED_NULL_RATIO
    null_suspicious_ratio: float = DEFAULT_NULL_SUSPICIOUS_RATIO
    null_suggests_binary: bool = True
    utf16_newline_check: bool = False

    def __post_init__(self) -> None:
        _validate_positive_int("null_suspicious_bytes", self.null_suspicious_bytes)
        _validate_ratio("utf16_expected_null_ratio", self.utf16_expected_null_ratio)
        _validate_ratio(
            "utf16_unexpected_null_ratio", self.utf16_unexpected_null_ratio
        )
        _validate_ratio("null_suspicious_ratio", self.null_suspicious_ratio)

    def sample_size(self, length: int) -> int:
        """Return how many bytes of a *length*-byte buffer the UTF-16 analyzer reads."""
        limit = self.null_suspicious_bytes
        if limit is None:
            limit = DEFAULT_NULL_SUSPICIOUS_BYTES
        return min(length, limit)

    def replace(self, **changes: object) -> DetectorConfig:
        """Return a copy of this config with *changes* applied."""
        return dataclasses.replace(self, **changes)


#: Config used when the caller does not supply one.
DEFAULT_CONFIG = DetectorConfig()


@dataclasses.dataclass(frozen=True, slots=True)
class NullAnalysis:
    """Outcome of the UTF-16 null-pattern analysis.

    *encoding* is a BOM-less UTF-16 verdict or ``None`` when undecided;
    *null_ratio* is the fraction of zero bytes in the analysed prefix and is
    what the text classifier uses to tell binary from 8-bit text.
    """

    encoding: Encoding | None
    null_ratio: float
    odd_nulls: int = 0
    even_nulls: int = 0
    sample_size: int = 0
