# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Shared fixtures for codec tests."""

import random

import pytest


def mixed_data(size: int, seed: int = 0) -> bytes:
    """
    Build data with a mix of long runs, short runs and noise.

    Args:
        size: Exact length of the returned data
        seed: Random seed

    Returns:
        Bytes of the given length
    """
    rng = random.Random(seed)
    out = bytearray()
    while len(out) < size:
        kind = rng.randrange(3)
        if kind == 0:
            out.extend(bytes([rng.randrange(256)]) * rng.randint(256, 1000))
        elif kind == 1:
            out.extend(bytes([rng.randrange(256)]) * rng.randint(2, 20))
        else:
            out.extend(rng.randbytes(rng.randint(1, 50)))
    return bytes(out[:size])


def alternating(size: int) -> bytes:
    """Data with no two equal adjacent bytes."""
    return bytes(i % 2 for i in range(size))


@pytest.fixture
def random_data():
    """Random bytes with few runs."""
    return random.Random(1234).randbytes(5000)


@pytest.fixture
def write_file(tmp_path):
    """Write bytes to a file under tmp_path and return its path."""
    def _write(name: str, data: bytes):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write
