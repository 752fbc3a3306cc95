"""Command-line interface for encdetect."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import encdetect
from encdetect.enums import Encoding
from encdetect.pipeline import DetectorConfig


def _format(name: str, encoding: Encoding, minimal: bool) -> str:
    if minimal:
        return encoding.name
    return f"{name}: {encoding.label}"


def _build_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> DetectorConfig:
    try:
        return DetectorConfig(
            null_suspicious_bytes=args.null_suspicious_bytes,
            utf16_expected_null_ratio=args.expected_null_ratio,
            utf16_unexpected_null_ratio=args.unexpected_null_ratio,
            null_suspicious_ratio=args.null_suspicious_ratio,
            null_suggests_binary=not args.allow_nulls,
            utf16_newline_check=args.newline_check,
        )
    except ValueError as e:
        parser.error(str(e))


def main(argv: list[str] | None = None) -> None:
    """Run the ``encdetect`` command-line tool.

    Exits with status 1 if any file could not be read.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    defaults = DetectorConfig()
    parser = argparse.ArgumentParser(description="Detect the text encoding of files.")
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the verdict name"
    )
    parser.add_argument(
        "--expected-null-ratio",
        type=float,
        default=defaults.utf16_expected_null_ratio,
        help="Minimum null fraction at the expected UTF-16 parity",
    )
    parser.add_argument(
        "--unexpected-null-ratio",
        type=float,
        default=defaults.utf16_unexpected_null_ratio,
        help="Maximum null fraction at the opposite UTF-16 parity",
    )
    parser.add_argument(
        "--null-suspicious-ratio",
        type=float,
        default=defaults.null_suspicious_ratio,
        help="Null fraction above which text is reported as binary",
    )
    parser.add_argument(
        "--null-suspicious-bytes",
        type=int,
        default=None,
        help="Bytes examined for UTF-16 null patterns (default: 1 MiB)",
    )
    parser.add_argument(
        "--allow-nulls",
        action="store_true",
        help="Report binary only when null bytes exceed --null-suspicious-ratio",
    )
    parser.add_argument(
        "--newline-check",
        action="store_true",
        help="Use CR/LF code units to detect BOM-less UTF-16",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection steps"
    )
    parser.add_argument(
        "--version", action="version", version=f"encdetect {encdetect.__version__}"
    )

    args = parser.parse_args(argv)
    config = _build_config(parser, args)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if not args.files:
        data = sys.stdin.buffer.read()
        print(_format("stdin", encdetect.detect(data, config=config), args.minimal))
        return

    failed = False
    for filepath in args.files:
        try:
            with Path(filepath).open("rb") as f:
                data = f.read()
        except OSError as e:
            print(f"encdetect: {filepath}: {e}", file=sys.stderr)
            failed = True
            continue
        result = encdetect.detect(data, config=config)
        print(_format(filepath, result, args.minimal))

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
