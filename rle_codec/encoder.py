# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Run-length encoder.

Each run of identical bytes becomes a (value, count) pair. Runs longer
than 255 bytes are split into several pairs.
"""

import sys
from typing import Iterator, Tuple

from .buffers import (
    MAX_RUN,
    PAIR_SIZE,
    PayloadBuffer,
    Status,
    TransformResult,
    check_capacity,
)


def iter_runs(raw: bytes) -> Iterator[Tuple[int, int]]:
    """
    Yield the encoded runs of raw data.

    Args:
        raw: Uncompressed bytes

    Yields:
        (value, count) tuples with 1 <= count <= 255
    """
    i = 0
    size = len(raw)

    while i < size:
        value = raw[i]
        end = min(i + MAX_RUN, size)
        j = i + 1
        while j < end and raw[j] == value:
            j += 1
        yield value, j - i
        i = j


def encode(raw: bytes, out_capacity: int) -> TransformResult:
    """
    Encode raw bytes into (value, count) pairs.

    Encoding stops as soon as the next pair would not fit in
    out_capacity. The pairs written so far are returned as-is.

    Args:
        raw: Uncompressed bytes
        out_capacity: Maximum number of output bytes

    Returns:
        TransformResult holding a PayloadBuffer; status is
        CAPACITY_EXCEEDED if the output was truncated

    Raises:
        ValueError: If out_capacity is negative
    """
    check_capacity(out_capacity)

    output = bytearray()
    status = Status.OK

    for value, count in iter_runs(raw):
        if len(output) + PAIR_SIZE > out_capacity:
            print(
                "Output buffer is not big enough to contain the compressed content "
                f"(capacity {out_capacity} bytes)",
                file=sys.stderr,
            )
            status = Status.CAPACITY_EXCEEDED
            break
        output.append(value)
        output.append(count)

    return TransformResult(data=PayloadBuffer(output), status=status)
