"""
MIDI variable-length quantity (VLQ) encoding/decoding utilities.

Delta times and the lengths of meta and SysEx payloads are stored as
variable-length quantities: 7 bits of value per byte, most significant
group first, with bit 7 set on every byte except the last.

Encoding scheme:
- Split the value into 7-bit groups
- Emit the groups from most to least significant
- Set the high bit on all but the final byte
- Values are limited to 28 bits (4 bytes) in Standard MIDI Files

Example:
    Value:  0x100000  (1048576)
    Groups: 0b1000000 0b0000000 0b0000000
    Output: [0xC0, 0x80, 0x00]
"""

from typing import List, Tuple, Union

from midireader.exceptions import MalformedVarintError, TruncatedInputError

MAX_VLQ_BYTES = 4
MAX_VLQ_VALUE = 0x0FFFFFFF


def read_vlq(cursor) -> int:
    """
    Read a variable-length quantity from a byte cursor.

    Args:
        cursor: Object providing ``read_u8()`` (normally a ByteCursor)

    Returns:
        Decoded integer value

    Raises:
        MalformedVarintError: If the value runs past 4 bytes or the
            source ends in the middle of it
    """
    value = 0

    for _ in range(MAX_VLQ_BYTES):
        try:
            byte = cursor.read_u8()
        except TruncatedInputError as e:
            raise MalformedVarintError("Variable-length quantity truncated") from e

        value = (value << 7) | (byte & 0x7F)

        if not byte & 0x80:
            return value

    raise MalformedVarintError(
        f"Variable-length quantity longer than {MAX_VLQ_BYTES} bytes"
    )


def decode_vlq(data: Union[bytes, List[int]], offset: int = 0) -> Tuple[int, int]:
    """
    Decode a variable-length quantity from raw bytes.

    Args:
        data: Bytes containing the encoded value
        offset: Position of the first byte of the value

    Returns:
        Tuple of (value, number of bytes consumed)

    Example:
        >>> decode_vlq(bytes([0x81, 0x48]))
        (200, 2)
    """
    if isinstance(data, list):
        data = bytes(data)

    value = 0

    for i in range(MAX_VLQ_BYTES):
        if offset + i >= len(data):
            raise MalformedVarintError("Variable-length quantity truncated")

        byte = data[offset + i]
        value = (value << 7) | (byte & 0x7F)

        if not byte & 0x80:
            return value, i + 1

    raise MalformedVarintError(
        f"Variable-length quantity longer than {MAX_VLQ_BYTES} bytes"
    )


def encode_vlq(value: int) -> bytes:
    """
    Encode an integer as a variable-length quantity.

    Args:
        value: Integer in the range 0-0x0FFFFFFF

    Returns:
        1 to 4 encoded bytes

    Raises:
        ValueError: If value is negative or needs more than 28 bits

    Example:
        >>> encode_vlq(0x100000)
        b'\\xc0\\x80\\x00'
    """
    if not 0 <= value <= MAX_VLQ_VALUE:
        raise ValueError(f"VLQ value must be 0-{MAX_VLQ_VALUE:#x}, got {value}")

    groups = [value & 0x7F]
    value >>= 7

    while value:
        groups.append((value & 0x7F) | 0x80)
        value >>= 7

    return bytes(reversed(groups))
