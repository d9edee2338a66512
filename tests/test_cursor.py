"""Tests for the byte cursor."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from midireader.exceptions import TruncatedInputError
from midireader.formats.smf.cursor import ByteCursor


class TestByteCursor:
    """Test cases for ByteCursor reads and positioning."""

    def test_read_exact(self):
        cursor = ByteCursor(b"MThd\x00\x00\x00\x06")
        assert cursor.read_exact(4) == b"MThd"
        assert cursor.position == 4
        assert cursor.remaining == 4

    def test_big_endian_integers(self):
        """Test u8/u16/u32 reads are big-endian."""
        cursor = ByteCursor(bytes([0x01, 0x01, 0xE0, 0x00, 0x00, 0x00, 0x06]))
        assert cursor.read_u8() == 0x01
        assert cursor.read_u16() == 0x01E0
        assert cursor.read_u32() == 6
        assert cursor.at_end()

    def test_truncated_read_keeps_position(self):
        """Test that a short read fails and leaves the cursor untouched."""
        cursor = ByteCursor(b"\x00\x01\x02")
        cursor.read_u8()

        with pytest.raises(TruncatedInputError):
            cursor.read_u32()

        assert cursor.position == 1
        assert cursor.read_u16() == 0x0102

    def test_truncated_is_eof_error(self):
        """Test TruncatedInputError can be caught as EOFError."""
        with pytest.raises(EOFError):
            ByteCursor(b"").read_u8()

    def test_peek_does_not_consume(self):
        cursor = ByteCursor(b"\x90\x3c")
        assert cursor.peek_u8() == 0x90
        assert cursor.position == 0

    def test_peek_at_end(self):
        with pytest.raises(TruncatedInputError):
            ByteCursor(b"").peek_u8()

    def test_unread_single_byte(self):
        """Test pushing the last byte back."""
        cursor = ByteCursor(b"\x3c\x40")
        assert cursor.read_u8() == 0x3C
        cursor.unread_u8()
        assert cursor.position == 0
        assert cursor.read_u8() == 0x3C

    def test_unread_only_one_slot(self):
        """Test that two unreads without a read in between fail."""
        cursor = ByteCursor(b"\x01\x02\x03")
        cursor.read_exact(2)
        cursor.unread_u8()

        with pytest.raises(RuntimeError):
            cursor.unread_u8()

    def test_unread_slot_freed_by_read(self):
        cursor = ByteCursor(b"\x01\x02\x03")
        cursor.read_u8()
        cursor.unread_u8()
        cursor.read_u8()
        cursor.unread_u8()
        assert cursor.position == 0

    def test_unread_at_start(self):
        with pytest.raises(RuntimeError):
            ByteCursor(b"\x01").unread_u8()

    def test_seek(self):
        cursor = ByteCursor(b"\x00\x01\x02\x03")
        cursor.seek(2)
        assert cursor.read_u8() == 0x02
        cursor.seek(0)
        assert cursor.read_u8() == 0x00

    def test_seek_past_end(self):
        """Test seeking beyond the buffer is allowed but reads fail."""
        cursor = ByteCursor(b"\x00\x01")
        cursor.seek(10)
        assert cursor.position == 10
        assert cursor.remaining == 0
        with pytest.raises(TruncatedInputError):
            cursor.read_u8()

    def test_seek_negative(self):
        with pytest.raises(ValueError):
            ByteCursor(b"\x00").seek(-1)

    def test_len(self):
        assert len(ByteCursor(bytearray(12))) == 12
