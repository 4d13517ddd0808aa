# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Container format for compressed files.

Layout:
    offset 0..8   : original size, unsigned 64-bit little-endian
    offset 8..end : payload, a sequence of (value, count) pairs

There is no magic number, version field or checksum.
"""

import struct
from dataclasses import dataclass

from .buffers import PayloadBuffer, max_encoded_size

_HEADER = struct.Struct("<Q")
HEADER_SIZE = _HEADER.size


class MalformedContainerError(ValueError):
    """Container is too short to hold its size header."""
    pass


@dataclass
class Container:
    """Parsed container."""
    original_size: int
    payload: PayloadBuffer


def container_capacity(raw_size: int) -> int:
    """Worst-case container size for raw_size bytes of input."""
    return HEADER_SIZE + max_encoded_size(raw_size)


def pack_container(original_size: int, payload: bytes) -> bytes:
    """
    Prepend the size header to an encoded payload.

    Args:
        original_size: Length of the raw data that produced payload
        payload: Encoded pairs

    Returns:
        Container bytes

    Raises:
        ValueError: If original_size does not fit in 64 bits
    """
    try:
        header = _HEADER.pack(original_size)
    except struct.error as e:
        raise ValueError(f"Original size out of range: {original_size}") from e
    return header + payload


def unpack_container(data: bytes) -> Container:
    """
    Split a container into its declared size and payload.

    Args:
        data: Container bytes

    Returns:
        Container with original_size and payload

    Raises:
        MalformedContainerError: If data is shorter than the header
    """
    if len(data) < HEADER_SIZE:
        raise MalformedContainerError(
            "Incorrect format, the first 8 bytes should represent "
            "the size of the decompressed file"
        )

    (original_size,) = _HEADER.unpack_from(data)
    return Container(
        original_size=original_size,
        payload=PayloadBuffer(data[HEADER_SIZE:]),
    )
