# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Run-length decoder."""

import sys
from typing import Iterator, Tuple

from .buffers import (
    PAIR_SIZE,
    RawBuffer,
    Status,
    TransformResult,
    check_capacity,
)


def iter_pairs(payload: bytes) -> Iterator[Tuple[int, int]]:
    """
    Yield the (value, count) pairs of an encoded payload.

    A trailing byte that does not form a complete pair is skipped.
    """
    for i in range(0, len(payload) - PAIR_SIZE + 1, PAIR_SIZE):
        yield payload[i], payload[i + 1]


def decode(payload: bytes, out_capacity: int) -> TransformResult:
    """
    Decode (value, count) pairs back into raw bytes.

    Decoding stops before the first pair whose run would overflow
    out_capacity. The bytes produced so far are returned as-is.

    Args:
        payload: Encoded pairs
        out_capacity: Maximum number of output bytes

    Returns:
        TransformResult holding a RawBuffer; status is
        CAPACITY_EXCEEDED if the output was truncated

    Raises:
        ValueError: If out_capacity is negative
    """
    check_capacity(out_capacity)

    output = bytearray()
    status = Status.OK

    for value, count in iter_pairs(payload):
        if len(output) + count > out_capacity:
            print(
                "Output buffer is not big enough to contain the decompressed content "
                f"(capacity {out_capacity} bytes)",
                file=sys.stderr,
            )
            status = Status.CAPACITY_EXCEEDED
            break
        output.extend(bytes([value]) * count)

    return TransformResult(data=RawBuffer(output), status=status)
