"""Тесты для диагностического дампа и probe_offsets"""

import struct

import pytest

from src.feedscan import (
    PROBE_DECIMALS,
    ProbeField,
    hex_ascii_rows,
    hex_dump,
    probe_offsets,
    tail_rows,
)


# =============================================================================
# HEX DUMP
# =============================================================================


class TestHexDump:
    """Тесты hex_dump."""

    def test_window(self) -> None:
        assert hex_dump(struct.pack("<i", 999), 0, 4) == "e7 03 00 00"

    def test_clamped_to_buffer(self) -> None:
        assert hex_dump(b"\x01\x02", 1, 8) == "02"

    def test_out_of_range_is_empty(self) -> None:
        assert hex_dump(b"\x01\x02", 5, 4) == ""

    def test_none_buffer(self) -> None:
        assert hex_dump(None) == ""


class TestHexAsciiRows:
    """Тесты hex_ascii_rows / tail_rows."""

    def test_single_row_layout(self) -> None:
        rows = hex_ascii_rows(b"ABC\x00")

        assert len(rows) == 1
        assert rows[0].startswith("0x0000: 41 42 43 00 ")
        assert rows[0].endswith(" | ABC.")
        assert len(rows[0]) == len("0x0000: ") + 48 + len(" | ") + 4

    def test_rows_split_by_width(self) -> None:
        rows = hex_ascii_rows(bytes(range(40)), row_width=16)

        assert [r[:6] for r in rows] == ["0x0000", "0x0010", "0x0020"]

    def test_range(self) -> None:
        rows = hex_ascii_rows(b"0123456789abcdefXYZ", start=16, end=18)

        assert rows == ["0x0010: " + "58 59".ljust(48) + " | XY"]

    def test_non_printable_dot(self) -> None:
        rows = hex_ascii_rows(b"\x1f\x7f~ ")

        assert rows[0].endswith("| ..~ ")

    def test_invalid_row_width(self) -> None:
        with pytest.raises(ValueError):
            hex_ascii_rows(b"abc", row_width=0)

    def test_tail_rows(self) -> None:
        data = bytes(2048)

        rows = tail_rows(data, span=32)

        assert [r[:6] for r in rows] == ["0x07e0", "0x07f0"]

    def test_tail_rows_short_buffer(self) -> None:
        assert len(tail_rows(b"abc")) == 1
        assert tail_rows(None) == []


# =============================================================================
# PROBE
# =============================================================================


class TestProbeOffsets:
    """Тесты probe_offsets."""

    @pytest.fixture
    def buffer(self) -> bytes:
        header = bytes.fromhex("d8 92 6b 5e 68 4b b6 b1")
        version = b"\x02"
        price_i32 = struct.pack("<i", 999)
        price_i64 = struct.pack("<q", 9_990_000_000)
        return header + version + price_i32 + price_i64 + bytes(32)

    def test_u8_field(self, buffer: bytes) -> None:
        (reading,) = probe_offsets(buffer, [ProbeField("version", 8, 1)])

        assert reading.value == 2
        assert reading.display == "2 (0x02)"

    def test_int32_field(self, buffer: bytes) -> None:
        (reading,) = probe_offsets(buffer, [ProbeField("price32", 9, 4)])

        assert reading.value["int32"] == 999
        assert reading.hex == "e7 03 00 00"
        assert reading.display.startswith("int32: 999, float: ")

    def test_int64_field_scaled(self, buffer: bytes) -> None:
        (reading,) = probe_offsets(buffer, [ProbeField("price64", 13, 8)])

        assert reading.value == "9990000000"
        assert set(reading.scaled) == set(PROBE_DECIMALS)
        assert reading.scaled[9] == pytest.approx(9.99)
        assert "9.990000000 (decimal: 9)" in reading.display

    def test_long_field_hex(self, buffer: bytes) -> None:
        (reading,) = probe_offsets(buffer, [ProbeField("blob", 21, 32)])

        assert reading.value == "00" * 32
        assert reading.display == "0x" + "00" * 32

    def test_out_of_range_fields_skipped(self, buffer: bytes) -> None:
        readings = probe_offsets(
            buffer,
            [
                ProbeField("header", 0, 8),
                ProbeField("beyond", len(buffer) - 2, 8),
                ProbeField("negative", -1, 4),
            ],
        )

        assert [r.name for r in readings] == ["header"]

    def test_none_buffer(self) -> None:
        assert probe_offsets(None, [ProbeField("header", 0, 8)]) == []
