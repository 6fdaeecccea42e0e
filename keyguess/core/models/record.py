from dataclasses import dataclass
from typing import Any

from keyguess.core.codec import endian
from keyguess.core.errors import InvalidRecordFormat

TABLE_PREFIX = ord("t")
ROW_SEPARATOR = ord("_")
ROW_MARKER = ord("r")
SIGN_MASK = 0x8000000000000000
RECORD_KEY_SIZE = 19


def _to_signed(u: int) -> int:
    return u - (1 << 64) if u & SIGN_MASK else u


def _flip(n: int) -> int:
    """Map a signed 64-bit integer onto its order-preserving unsigned form."""
    return (n & 0xFFFFFFFFFFFFFFFF) ^ SIGN_MASK


@dataclass(frozen=True, slots=True)
class Record:
    """
    A row key, identified by its table and row handle.

    Layout (19 bytes):
        't' || flip(table_id:8 BE) || '_' || 'r' || flip(row_id:8 BE)

    `flip` xors the sign bit so that signed ids sort correctly when
    compared as unsigned big-endian bytes.
    """
    table_id: int
    row_id: int

    def encode(self) -> bytes:
        buf = bytearray(RECORD_KEY_SIZE)
        buf[0] = TABLE_PREFIX
        endian.write_u64_be(buf, 1, _flip(self.table_id))
        buf[9] = ROW_SEPARATOR
        buf[10] = ROW_MARKER
        endian.write_u64_be(buf, 11, _flip(self.row_id))
        return bytes(buf)

    def to_dict(self) -> dict[str, Any]:
        return {"table_id": self.table_id, "row_id": self.row_id}


def parse_record(code: bytes) -> Record:
    if len(code) != RECORD_KEY_SIZE:
        raise InvalidRecordFormat(
            f"invalid record bytes: expected {RECORD_KEY_SIZE} bytes, got {len(code)}"
        )

    if (
        code[0] != TABLE_PREFIX
        or code[9] != ROW_SEPARATOR
        or code[10] != ROW_MARKER
    ):
        raise InvalidRecordFormat("invalid record bytes: missing t/_r markers")

    table_id = endian.decode_u64_be(code, 1) ^ SIGN_MASK
    row_id = endian.decode_u64_be(code, 11) ^ SIGN_MASK

    return Record(table_id=_to_signed(table_id), row_id=_to_signed(row_id))
