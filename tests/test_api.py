from __future__ import annotations

import pytest

import encdetect
from encdetect import DetectorConfig, Encoding


def test_detect_returns_encoding():
    assert isinstance(encdetect.detect(b"Hello world"), Encoding)


def test_detect_ascii():
    assert encdetect.detect(b"Hello world") == Encoding.ASCII


def test_detect_empty():
    assert encdetect.detect(b"") == Encoding.ASCII


def test_detect_utf8_bom():
    assert encdetect.detect(b"\xef\xbb\xbfHello") == Encoding.UTF8_BOM


def test_detect_utf8_multibyte():
    assert encdetect.detect("Héllo wörld café".encode()) == Encoding.UTF8_NOBOM


def test_detect_accepts_bytearray():
    assert encdetect.detect(bytearray(b"H\xe9llo")) == Encoding.ANSI


def test_detect_accepts_memoryview():
    data = memoryview("Héllo".encode("utf-16-le"))
    assert encdetect.detect(data) == Encoding.UTF16_LE_NOBOM


def test_detect_does_not_mutate_input():
    data = bytearray(b"\xff\xfeh\x00i\x00")
    encdetect.detect(data)
    assert data == bytearray(b"\xff\xfeh\x00i\x00")


def test_detect_with_length():
    assert encdetect.detect(b"hello\x00\x01\x02", length=5) == Encoding.ASCII
    assert encdetect.detect(b"hello\x00\x01\x02") == Encoding.NONE


def test_detect_zero_length():
    assert encdetect.detect(b"\x00\x01", length=0) == Encoding.ASCII


def test_detect_length_cuts_bom():
    # EF BB alone is a truncated three-byte UTF-8 sequence, not a BOM.
    assert encdetect.detect(b"\xef\xbb\xbf", length=2) == Encoding.UTF8_NOBOM


@pytest.mark.parametrize("length", [-1, 4, 1.5, True])
def test_detect_invalid_length(length: object):
    with pytest.raises(ValueError, match="length"):
        encdetect.detect(b"abc", length=length)


def test_detect_rejects_str():
    with pytest.raises(TypeError):
        encdetect.detect("Hello")


def test_detect_with_config():
    data = b"a\x00" * 9 + b"ab" * 91
    assert encdetect.detect(data) == Encoding.NONE
    config = DetectorConfig(utf16_expected_null_ratio=0.05)
    assert encdetect.detect(data, config=config) == Encoding.UTF16_LE_NOBOM


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        (Encoding.UTF8_BOM, 3),
        (Encoding.UTF16_LE_BOM, 2),
        (Encoding.UTF16_BE_BOM, 2),
        (Encoding.UTF8_NOBOM, 0),
        (Encoding.UTF16_LE_NOBOM, 0),
        (Encoding.UTF16_BE_NOBOM, 0),
        (Encoding.ASCII, 0),
        (Encoding.ANSI, 0),
        (Encoding.NONE, 0),
    ],
)
def test_bom_length(encoding: Encoding, expected: int):
    assert encdetect.bom_length(encoding) == expected


def test_bom_length_skips_signature():
    data = b"\xef\xbb\xbf" + "naïve".encode()
    encoding = encdetect.detect(data)
    payload = data[encdetect.bom_length(encoding) :]
    assert payload.decode(encoding.codec) == "naïve"


def test_version():
    assert encdetect.__version__ == "1.0.0"


@pytest.mark.parametrize(
    "data",
    [b"Hello world!\x00" * 10, b"A\x00BCDEFGHIJKLMNOPQRST", b"caf\xe9\x00 au lait"],
)
def test_null_suspicious_ratio_decides_null_tolerant_mode(data: bytes):
    strict = DetectorConfig(null_suggests_binary=False, null_suspicious_ratio=0.0)
    lenient = strict.replace(null_suspicious_ratio=1.0)
    assert encdetect.detect(data, config=strict) == Encoding.NONE
    assert encdetect.detect(data, config=lenient) in {Encoding.ASCII, Encoding.ANSI}


def test_sparse_nulls_under_default_ratio():
    # Ten zero bytes in 130, split evenly across both parities: 7.7% nulls.
    data = b"Hello world!\x00" * 10
    tolerant = DetectorConfig(null_suggests_binary=False)
    assert encdetect.detect(data, config=tolerant) == Encoding.ASCII
    tighter = tolerant.replace(null_suspicious_ratio=0.05)
    assert encdetect.detect(data, config=tighter) == Encoding.NONE
    assert encdetect.detect(data) == Encoding.NONE
