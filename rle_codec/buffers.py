# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Buffer types and transform results shared by the encoder and decoder.

Raw content and encoded payloads are both plain byte strings, but they
mean different things, so each role gets its own type.
"""

from dataclasses import dataclass
from enum import IntEnum

# A pair is one value byte followed by one count byte
PAIR_SIZE = 2
MAX_RUN = 255


class RawBuffer(bytes):
    """Uncompressed content."""


class PayloadBuffer(bytes):
    """Encoded content: a sequence of (value, count) pairs."""


class Status(IntEnum):
    """Outcome of a transform."""
    OK = 0
    CAPACITY_EXCEEDED = 1

    def __str__(self) -> str:
        return self.name


@dataclass
class TransformResult:
    """Bytes produced by a transform and how the transform ended."""
    data: bytes
    status: Status = Status.OK

    @property
    def is_ok(self) -> bool:
        return self.status == Status.OK

    @property
    def written(self) -> int:
        return len(self.data)


def max_encoded_size(raw_size: int) -> int:
    """Worst-case payload size: every byte becomes its own pair."""
    return PAIR_SIZE * raw_size


def check_capacity(out_capacity: int) -> None:
    """Reject capacities that cannot describe a buffer."""
    if out_capacity < 0:
        raise ValueError(f"Output capacity must be non-negative, got {out_capacity}")
