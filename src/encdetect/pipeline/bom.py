"""Stage 1: BOM (Byte Order Mark) detection."""

from __future__ import annotations

from encdetect.enums import Encoding

# UTF-32 is not detected: FF FE 00 00 is reported as UTF-16-LE.
_BOMS: tuple[tuple[bytes, Encoding], ...] = (
    (b"\xef\xbb\xbf", Encoding.UTF8_BOM),
    (b"\xff\xfe", Encoding.UTF16_LE_BOM),
    (b"\xfe\xff", Encoding.UTF16_BE_BOM),
)


def detect_bom(data: bytes) -> Encoding | None:
    """Check for a BOM at the start of data. Returns the verdict or None."""
    for bom_bytes, encoding in _BOMS:
        if data.startswith(bom_bytes):
            return encoding
    return None
