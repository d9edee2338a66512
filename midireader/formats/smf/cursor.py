"""
Byte cursor over an immutable MIDI file image.

The cursor is the only piece of mutable state shared by header parsing,
track scanning and event decoding. It is owned by a reader session and
passed explicitly to every function that consumes bytes.
"""

import struct
from typing import Union

from midireader.exceptions import TruncatedInputError


class ByteCursor:
    """
    Sequential/random-access reader over a byte buffer.

    Supports exact-length reads, a single-slot unread, absolute seeks and
    position queries. Reads past the end raise TruncatedInputError and
    leave the position unchanged.

    Example:
        cursor = ByteCursor(b"MThd\\x00\\x00\\x00\\x06")
        tag = cursor.read_exact(4)
        length = cursor.read_u32()
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview]):
        self._data = bytes(data)
        self._pos = 0
        self._unread_pending = False

    def __len__(self) -> int:
        return len(self._data)

    @property
    def position(self) -> int:
        """Current absolute offset."""
        return self._pos

    @property
    def remaining(self) -> int:
        """Bytes left before the end of the buffer."""
        return max(0, len(self._data) - self._pos)

    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def seek(self, offset: int) -> None:
        """
        Move to an absolute offset.

        Offsets past the end are accepted; the next read fails as truncated.
        """
        if offset < 0:
            raise ValueError(f"Cannot seek to negative offset {offset}")

        self._pos = offset
        self._unread_pending = False

    def read_exact(self, n: int) -> bytes:
        """
        Read exactly n bytes.

        Raises:
            TruncatedInputError: If fewer than n bytes remain
        """
        if n < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {n}")

        if self.remaining < n:
            raise TruncatedInputError(
                f"Needed {n} bytes at offset {self._pos}, only {self.remaining} left"
            )

        chunk = self._data[self._pos : self._pos + n]
        self._pos += n
        self._unread_pending = False
        return chunk

    def read_u8(self) -> int:
        return self.read_exact(1)[0]

    def read_u16(self) -> int:
        """Read a big-endian unsigned 16-bit integer."""
        return struct.unpack(">H", self.read_exact(2))[0]

    def read_u32(self) -> int:
        """Read a big-endian unsigned 32-bit integer."""
        return struct.unpack(">I", self.read_exact(4))[0]

    def peek_u8(self) -> int:
        """Return the next byte without consuming it."""
        if self.remaining < 1:
            raise TruncatedInputError(f"Nothing to peek at offset {self._pos}")
        return self._data[self._pos]

    def unread_u8(self) -> None:
        """
        Push the last read byte back.

        Only one byte can be pending at a time; the slot is freed by the
        next read or seek.
        """
        if self._unread_pending:
            raise RuntimeError("Only one byte can be unread at a time")
        if self._pos == 0:
            raise RuntimeError("Nothing to unread at start of buffer")

        self._pos -= 1
        self._unread_pending = True
