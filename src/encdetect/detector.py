"""EncodingDetector: streaming encoding detection."""

from __future__ import annotations

import logging

from encdetect._utils import _validate_positive_int
from encdetect.enums import Encoding
from encdetect.pipeline import DEFAULT_CONFIG, DetectorConfig
from encdetect.pipeline.bom import detect_bom
from encdetect.pipeline.orchestrator import run_pipeline

logger = logging.getLogger(__name__)

# Longest BOM the sniffer recognises.
_BOM_PROBE_BYTES = 3


class EncodingDetector:
    """Streaming encoding detector.

    Implements a feed/close pattern for callers that read a stream in
    chunks.  Bytes are buffered until :meth:`close`, except that a leading
    BOM decides the verdict as soon as it is seen.

    The verdict is the same one :func:`encdetect.detect` gives for the
    concatenated chunks (truncated to *max_bytes*).
    """

    def __init__(
        self,
        config: DetectorConfig | None = None,
        max_bytes: int | None = None,
    ) -> None:
        """Initialize the detector.

        :param config: Detection thresholds, defaulting to
            :class:`DetectorConfig` defaults.
        :param max_bytes: Maximum number of bytes to buffer from :meth:`feed`
            calls.  ``None`` buffers everything.
        """
        _validate_positive_int("max_bytes", max_bytes)
        self._config = config if config is not None else DEFAULT_CONFIG
        self._max_bytes = max_bytes
        self._buffer = bytearray()
        self._done = False
        self._closed = False
        self._result: Encoding | None = None
        self._bom_checked = False

    def feed(self, byte_str: bytes | bytearray | memoryview) -> None:
        """Feed a chunk of bytes to the detector.

        :param byte_str: The next chunk of bytes to examine.
        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        if self._done:
            return
        if self._max_bytes is None:
            self._buffer.extend(byte_str)
        else:
            remaining = self._max_bytes - len(self._buffer)
            if remaining > 0:
                self._buffer.extend(byte_str[:remaining])
        self._check_bom()
        if self._max_bytes is not None and len(self._buffer) >= self._max_bytes:
            self._done = True

    def _check_bom(self) -> None:
        """Finish early once the leading bytes hold a BOM."""
        if self._bom_checked:
            return
        full = self._max_bytes is not None and len(self._buffer) >= self._max_bytes
        if len(self._buffer) < _BOM_PROBE_BYTES and not full:
            # FF FE and FE FF are already decisive after two bytes, but EF BB
            # needs a third byte to tell UTF-8 from anything else.
            if self._buffer[:2] not in (b"\xff\xfe", b"\xfe\xff"):
                return
        self._bom_checked = True
        bom_result = detect_bom(bytes(self._buffer[:_BOM_PROBE_BYTES]))
        if bom_result is not None:
            logger.debug("BOM found while streaming: %s", bom_result.name)
            self._result = bom_result
            self._done = True

    def close(self) -> Encoding:
        """Finalize detection and return the verdict.

        :returns: The :class:`Encoding` for all data fed so far.
        """
        if not self._closed:
            self._closed = True
            if self._result is None:
                self._result = run_pipeline(bytes(self._buffer), self._config)
                self._done = True
        return self.result

    def reset(self) -> None:
        """Reset the detector to its initial state for reuse."""
        self._buffer = bytearray()
        self._done = False
        self._closed = False
        self._result = None
        self._bom_checked = False

    @property
    def done(self) -> bool:
        """Whether detection is complete and no more data is needed."""
        return self._done

    @property
    def result(self) -> Encoding | None:
        """The verdict, or ``None`` while detection is still in progress."""
        return self._result
