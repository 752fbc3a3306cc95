"""Enumerations for encdetect."""

import enum


class Encoding(enum.Enum):
    """The closed set of verdicts returned by :func:`encdetect.detect`.

    ``NONE`` means the buffer looks binary (or its text encoding could not be
    determined).
    """

    NONE = "none"
    ASCII = "ascii"
    ANSI = "ansi"
    UTF8_BOM = "utf8_bom"
    UTF8_NOBOM = "utf8_nobom"
    UTF16_LE_BOM = "utf16_le_bom"
    UTF16_LE_NOBOM = "utf16_le_nobom"
    UTF16_BE_BOM = "utf16_be_bom"
    UTF16_BE_NOBOM = "utf16_be_nobom"

    @property
    def bom_length(self) -> int:
        """Number of signature bytes a caller must skip before the payload."""
        return _BOM_LENGTHS.get(self, 0)

    @property
    def has_bom(self) -> bool:
        return self in _BOM_LENGTHS

    @property
    def label(self) -> str:
        """Human-readable name, as printed by the ``encdetect`` tool."""
        return _LABELS[self]

    @property
    def codec(self) -> str | None:
        """Python codec for the payload after the BOM, or ``None``.

        ANSI has no codec because the code page is not identified.
        """
        return _CODECS.get(self)


_BOM_LENGTHS: dict[Encoding, int] = {
    Encoding.UTF8_BOM: 3,
    Encoding.UTF16_LE_BOM: 2,
    Encoding.UTF16_BE_BOM: 2,
}

_LABELS: dict[Encoding, str] = {
    Encoding.NONE: "Binary",
    Encoding.ASCII: "ASCII (chars in the 0-127 range)",
    Encoding.ANSI: "ANSI (chars in the 0-255 range)",
    Encoding.UTF8_BOM: "UTF-8",
    Encoding.UTF8_NOBOM: "UTF-8",
    Encoding.UTF16_LE_BOM: "UTF-16 Little Endian",
    Encoding.UTF16_LE_NOBOM: "UTF-16 Little Endian",
    Encoding.UTF16_BE_BOM: "UTF-16 Big Endian",
    Encoding.UTF16_BE_NOBOM: "UTF-16 Big Endian",
}

_CODECS: dict[Encoding, str] = {
    Encoding.ASCII: "ascii",
    Encoding.UTF8_BOM: "utf-8",
    Encoding.UTF8_NOBOM: "utf-8",
    Encoding.UTF16_LE_BOM: "utf-16-le",
    Encoding.UTF16_LE_NOBOM: "utf-16-le",
    Encoding.UTF16_BE_BOM: "utf-16-be",
    Encoding.UTF16_BE_NOBOM: "utf-16-be",
}
