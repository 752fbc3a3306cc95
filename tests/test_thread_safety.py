"""Thread-safety integration tests for concurrent detect() calls."""

from __future__ import annotations

import threading

from encdetect import DetectorConfig, Encoding, detect

_SAMPLES: list[tuple[bytes, DetectorConfig, Encoding]] = [
    ("Größe und Gebäude".encode(), DetectorConfig(), Encoding.UTF8_NOBOM),
    (
        "Concurrent UTF-16 text".encode("utf-16-le") * 50,
        DetectorConfig(),
        Encoding.UTF16_LE_NOBOM,
    ),
    ("Größe".encode("latin-1") * 40, DetectorConfig(), Encoding.ANSI),
    (
        b"ab\x00\x00" * 100,
        DetectorConfig(null_suggests_binary=False, null_suspicious_ratio=0.6),
        Encoding.ASCII,
    ),
    (b"\x01\x02\x03\x04" * 100, DetectorConfig(), Encoding.NONE),
]


def _run_concurrent_detect(n_workers: int, iterations: int) -> list[str]:
    """Spawn *n_workers* threads per sample, each calling detect() *iterations* times.

    Returns a list of error strings (empty = success).
    """
    errors: list[str] = []
    barrier = threading.Barrier(n_workers * len(_SAMPLES))

    def worker(data: bytes, config: DetectorConfig, expected: Encoding) -> None:
        barrier.wait()
        for _ in range(iterations):
            result = detect(data, config=config)
            if result is not expected:
                errors.append(f"Expected {expected!r}, got {result!r}")

    threads = []
    for _ in range(n_workers):
        for data, config, expected in _SAMPLES:
            t = threading.Thread(target=worker, args=(data, config, expected))
            threads.append(t)
            t.start()

    for t in threads:
        t.join()

    return errors


def test_concurrent_detect_no_corruption():
    """Multiple threads calling detect() simultaneously must not corrupt results."""
    errors = _run_concurrent_detect(n_workers=3, iterations=20)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])


def test_concurrent_detect_high_concurrency():
    errors = _run_concurrent_detect(n_workers=8, iterations=10)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])
