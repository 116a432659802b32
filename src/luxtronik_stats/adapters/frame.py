"""
Wire format of the Luxtronik "read calculations" exchange.

Request:  command(4) | reserved(4)
Response: command(4) | status(4) | count(4) | value_1(4) ... value_count(4)

All fields are big-endian 32-bit integers.
"""

import struct

from luxtronik_stats.domain.exceptions import MalformedField, ProtocolExchangeFailed

READ_CALCULATIONS = 3004
STATUS_OK = 0
FIELD_SIZE = 4
HEADER_SIZE = 3 * FIELD_SIZE

_FIELD = struct.Struct(">i")
_COMMAND_FRAME = struct.pack(">ii", READ_CALCULATIONS, 0)


def encode_read_calculations_command() -> bytes:
    return _COMMAND_FRAME


def decode_int(data: bytes) -> int:
    """Decode exactly one 4-byte big-endian signed integer."""
    if len(data) < FIELD_SIZE:
        raise MalformedField(f"Expected {FIELD_SIZE} bytes, got {len(data)}")
    return _FIELD.unpack_from(data)[0]


class FrameReader:
    """Cursor over a response buffer, one 4-byte field at a time."""

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def read_int(self) -> int:
        if self.remaining < FIELD_SIZE:
            raise MalformedField(f"Field at byte {self._pos} truncated: {self.remaining} bytes left")
        value = decode_int(self._data[self._pos : self._pos + FIELD_SIZE])
        self._pos += FIELD_SIZE
        return value

    def read_ints(self, count: int) -> list[int]:
        return [self.read_int() for _ in range(count)]


def decode_header(data: bytes) -> int:
    """
    Validate the response header and return the declared calculation count.
    """
    reader = FrameReader(data)
    command = reader.read_int()
    status = reader.read_int()
    count = reader.read_int()

    if command != READ_CALCULATIONS:
        raise ProtocolExchangeFailed(f"Unexpected command echo {command}, expected {READ_CALCULATIONS}")
    if status != STATUS_OK:
        raise ProtocolExchangeFailed(f"Controller returned status {status}")
    if count < 0:
        raise ProtocolExchangeFailed(f"Negative calculation count {count}")
    return count


def decode_response(data: bytes) -> list[int]:
    """Decode a complete response buffer into its calculation values."""
    try:
        count = decode_header(data[:HEADER_SIZE])
        return FrameReader(data[HEADER_SIZE:]).read_ints(count)
    except MalformedField as e:
        raise ProtocolExchangeFailed(f"Malformed response: {e}") from e
