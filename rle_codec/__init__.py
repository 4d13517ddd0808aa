# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Run-length encoding codec.

Runs of identical bytes are stored as (value, count) pairs behind an
8-byte header holding the original size.

Example usage:
    from rle_codec import encode, decode, compress_file, decompress_file

    result = encode(b"aaab", out_capacity=8)
    assert result.data == b"a\\x03b\\x01"

    restored = decode(result.data, out_capacity=4)
    assert restored.data == b"aaab"

    compress_file("image.bmp", "image.rle")
    decompress_file("image.rle", "image.out.bmp")
"""

from .buffers import (
    MAX_RUN,
    PAIR_SIZE,
    PayloadBuffer,
    RawBuffer,
    Status,
    TransformResult,
    max_encoded_size,
)
from .container import (
    HEADER_SIZE,
    Container,
    MalformedContainerError,
    container_capacity,
    pack_container,
    unpack_container,
)
from .decoder import decode, iter_pairs
from .encoder import encode, iter_runs
from .files import (
    FileResult,
    InputUnreadableError,
    RleError,
    compress_bytes,
    compress_file,
    decompress_bytes,
    decompress_file,
    read_whole_file,
    write_whole_file,
)

__version__ = "0.1.0"

__all__ = [
    # Buffers
    "MAX_RUN",
    "PAIR_SIZE",
    "PayloadBuffer",
    "RawBuffer",
    "Status",
    "TransformResult",
    "max_encoded_size",
    # Container
    "HEADER_SIZE",
    "Container",
    "MalformedContainerError",
    "container_capacity",
    "pack_container",
    "unpack_container",
    # Transforms
    "encode",
    "decode",
    "iter_runs",
    "iter_pairs",
    # Files
    "FileResult",
    "RleError",
    "InputUnreadableError",
    "compress_bytes",
    "compress_file",
    "decompress_bytes",
    "decompress_file",
    "read_whole_file",
    "write_whole_file",
]
