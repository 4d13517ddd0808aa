# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Compression and decompression of whole files.

Inputs are loaded into memory in full, transformed in one pass and
written back in one call.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

from .buffers import RawBuffer, Status, TransformResult, max_encoded_size
from .container import MalformedContainerError, pack_container, unpack_container
from .decoder import decode
from .encoder import encode

PathLike = Union[str, Path]


class RleError(Exception):
    """Base exception for RLE file errors."""
    pass


class InputUnreadableError(RleError):
    """Input file could not be opened or read."""
    pass


@dataclass
class FileResult:
    """Outcome of a file operation."""
    written: bool
    input_size: int = 0
    output_size: int = 0
    status: Status = Status.OK
    size_mismatch: bool = False

    @property
    def is_ok(self) -> bool:
        return self.written and self.status == Status.OK and not self.size_mismatch


def read_whole_file(path: PathLike) -> RawBuffer:
    """
    Read a whole file into memory.

    Raises:
        InputUnreadableError: If the file cannot be opened or read
    """
    try:
        with open(path, "rb") as f:
            return RawBuffer(f.read())
    except OSError as e:
        raise InputUnreadableError(f"Could not read file at path: {path} ({e.strerror})") from e


def write_whole_file(path: PathLike, data: bytes) -> None:
    """Write data to path, replacing any existing file."""
    with open(path, "wb") as f:
        f.write(data)


def compress_bytes(raw: bytes) -> Tuple[bytes, TransformResult]:
    """
    Compress raw bytes into a container.

    Returns:
        Tuple of (container bytes, encoder result)
    """
    result = encode(raw, max_encoded_size(len(raw)))
    return pack_container(len(raw), result.data), result


def decompress_bytes(data: bytes) -> Tuple[bytes, TransformResult]:
    """
    Decompress a container.

    A produced length that differs from the declared size is reported,
    and the produced bytes are returned anyway.

    Returns:
        Tuple of (decompressed bytes, decoder result)

    Raises:
        MalformedContainerError: If data is shorter than the header
    """
    container = unpack_container(data)
    result = decode(container.payload, container.original_size)

    if result.written != container.original_size:
        print(
            f"Container specified a decompressed size of {container.original_size} "
            f"bytes, but {result.written} were produced",
            file=sys.stderr,
        )
    return result.data, result


def compress_file(in_path: PathLike, out_path: PathLike) -> FileResult:
    """
    Compress in_path into a container at out_path.

    Nothing is written if the input cannot be read. A truncated encoding
    is still written.

    Raises:
        OSError: If the output file cannot be written
    """
    try:
        raw = read_whole_file(in_path)
    except InputUnreadableError as e:
        print(e, file=sys.stderr)
        return FileResult(written=False)

    container, result = compress_bytes(raw)
    write_whole_file(out_path, container)

    return FileResult(
        written=True,
        input_size=len(raw),
        output_size=len(container),
        status=result.status,
    )


def decompress_file(in_path: PathLike, out_path: PathLike) -> FileResult:
    """
    Decompress the container at in_path into out_path.

    Nothing is written if the input cannot be read, is empty, or is
    shorter than the size header. A size mismatch is reported and the
    produced bytes are still written.

    Raises:
        OSError: If the output file cannot be written
    """
    try:
        data = read_whole_file(in_path)
    except InputUnreadableError as e:
        print(e, file=sys.stderr)
        return FileResult(written=False)

    # Empty input is not an error
    if not data:
        return FileResult(written=False)

    try:
        container = unpack_container(data)
    except MalformedContainerError as e:
        print(f"{in_path}: {e}", file=sys.stderr)
        return FileResult(written=False, input_size=len(data))

    result = decode(container.payload, container.original_size)
    mismatch = result.written != container.original_size
    if mismatch:
        print(
            f"The file '{in_path}' specified a decompressed size of "
            f"{container.original_size} bytes, but {result.written} were produced",
            file=sys.stderr,
        )

    write_whole_file(out_path, result.data)

    return FileResult(
        written=True,
        input_size=len(data),
        output_size=result.written,
        status=result.status,
        size_mismatch=mismatch,
    )
