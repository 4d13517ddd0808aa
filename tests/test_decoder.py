# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for the run-length decoder."""


import pytest
from rle_codec.buffers import RawBuffer, Status, max_encoded_size
from rle_codec.decoder import decode, iter_pairs
from rle_codec.encoder import encode

from conftest import alternating, mixed_data


class TestIterPairs:
    """Tests for iter_pairs."""

    def test_empty(self):
        """Empty payload has no pairs."""
        assert list(iter_pairs(b"")) == []

    def test_pairs(self):
        """Bytes are read two at a time."""
        assert list(iter_pairs(b"a\x03b\x01")) == [(0x61, 3), (0x62, 1)]

    def test_dangling_byte_skipped(self):
        """Incomplete trailing pair is not yielded."""
        assert list(iter_pairs(b"a\x03b")) == [(0x61, 3)]

    def test_single_byte(self):
        """One byte is not a pair."""
        assert list(iter_pairs(b"a")) == []


class TestDecode:
    """Tests for decode function."""

    def test_empty_payload(self):
        """Empty payload produces empty output."""
        result = decode(b"", 0)
        assert result.data == b""
        assert result.written == 0
        assert result.is_ok

    def test_returns_raw_buffer(self):
        """Decoded output is typed as raw content."""
        assert isinstance(decode(b"a\x01", 1).data, RawBuffer)

    def test_standard_example(self):
        """Pairs expand to runs."""
        assert decode(b"a\x03b\x01", 4).data == b"aaab"

    def test_max_count(self):
        """Count of 255 expands fully."""
        assert decode(b"\x00\xff", 255).data == b"\x00" * 255

    def test_odd_length_payload(self):
        """Dangling final byte is ignored, not an error."""
        result = decode(b"a\x02\x7f", 10)
        assert result.data == b"aa"
        assert result.is_ok

    def test_zero_count_contributes_nothing(self):
        """Zero-count pair produces no bytes."""
        assert decode(b"a\x00b\x02", 10).data == b"bb"

    def test_negative_capacity_raises(self):
        """Negative capacity is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            decode(b"a\x01", -5)


class TestDecodeCapacity:
    """Tests for decode when the output does not fit."""

    def test_stops_before_overflowing_pair(self):
        """Output holds only the runs that fit completely."""
        result = decode(b"a\x03b\x05", 6)
        assert result.status == Status.CAPACITY_EXCEEDED
        assert result.data == b"aaa"

    def test_zero_capacity(self):
        """Zero capacity writes nothing."""
        result = decode(b"a\x01", 0)
        assert result.status == Status.CAPACITY_EXCEEDED
        assert result.written == 0

    def test_exact_capacity_is_ok(self):
        """Capacity equal to the output size is enough."""
        result = decode(b"a\x03b\x05", 8)
        assert result.is_ok
        assert result.data == b"aaabbbbb"

    @pytest.mark.parametrize("capacity", [0, 1, 254, 255, 509])
    def test_never_exceeds_capacity(self, capacity):
        """Written length stays within capacity and below the full size."""
        result = decode(b"x\xff" * 2, capacity)
        assert result.written <= capacity
        assert result.written < 510
        assert result.status == Status.CAPACITY_EXCEEDED

    def test_reports_diagnostic(self, capsys):
        """Truncation is reported."""
        decode(b"a\x09", 3)
        assert "not big enough" in capsys.readouterr().err


class TestRoundtrip:
    """Encode then decode returns the original data."""

    @pytest.mark.parametrize("data", [
        b"",
        b"\x00",
        b"\xff",
        b"\x00" * 1000,
        b"Hello, World!",
        bytes(range(256)),
        alternating(300),
        mixed_data(10000),
    ])
    def test_roundtrip(self, data):
        encoded = encode(data, max_encoded_size(len(data)))
        decoded = decode(encoded.data, len(data))
        assert encoded.is_ok
        assert decoded.is_ok
        assert decoded.data == data

    def test_roundtrip_random(self, random_data):
        encoded = encode(random_data, max_encoded_size(len(random_data)))
        assert decode(encoded.data, len(random_data)).data == random_data
