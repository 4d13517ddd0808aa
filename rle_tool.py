#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Run-length encoding compressor.

Usage:
    rle compress   input.bin output.rle
    rle decompress output.rle input.bin
    rle -v compress input.bin output.rle
"""

import argparse
import sys

from rle_codec import FileResult, compress_file, decompress_file


class UsageParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def print_summary(command: str, in_path: str, result: FileResult):
    """Print sizes of a finished operation."""
    if not result.written:
        print(f"{command}: {in_path}: no output written")
        return

    print(f"{command}: {in_path}")
    print(f"  Input:  {result.input_size} bytes")
    print(f"  Output: {result.output_size} bytes")
    if result.input_size:
        pct = result.output_size * 100 / result.input_size
        print(f"  Ratio:  {pct:.1f}%")
    print(f"  Status: {result.status}")


def main(argv=None) -> int:
    parser = UsageParser(
        prog="rle",
        description="Run-length encoding compressor",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print sizes of processed files"
    )

    subparsers = parser.add_subparsers(
        dest="command", required=True, parser_class=UsageParser
    )

    # compress / decompress commands
    for name, help_text in (
        ("compress", "Compress a file"),
        ("decompress", "Decompress a file"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("in_path", help="Input file")
        sub.add_argument("out_path", help="Output file")

    args = parser.parse_args(argv)

    try:
        if args.command == "compress":
            result = compress_file(args.in_path, args.out_path)
        elif args.command == "decompress":
            result = decompress_file(args.in_path, args.out_path)
    except OSError as e:
        print(f"Error writing {args.out_path}: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print_summary(args.command, args.in_path, result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
