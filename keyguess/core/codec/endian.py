import struct

from keyguess.core.errors import TruncatedInput

U64_SIZE = 8
U64_MAX = (1 << 64) - 1

_BE = struct.Struct(">Q")
_LE = struct.Struct("<Q")


def _check_value(n: int) -> None:
    if n < 0 or n > U64_MAX:
        raise ValueError(f"u64 value out of range: {n}")


def _check(data: bytes, offset: int) -> None:
    if len(data) - offset < U64_SIZE:
        raise TruncatedInput(
            f"need {U64_SIZE} bytes at offset {offset}, "
            f"got {max(len(data) - offset, 0)}"
        )


def encode_u64_be(n: int) -> bytes:
    _check_value(n)
    return _BE.pack(n)


def encode_u64_le(n: int) -> bytes:
    _check_value(n)
    return _LE.pack(n)


def write_u64_be(buf: bytearray, offset: int, n: int) -> None:
    """Write `n` into `buf[offset:offset + 8]` in big-endian order."""
    _check_value(n)
    _check(buf, offset)
    _BE.pack_into(buf, offset, n)


def write_u64_le(buf: bytearray, offset: int, n: int) -> None:
    _check_value(n)
    _check(buf, offset)
    _LE.pack_into(buf, offset, n)


def decode_u64_be(data: bytes, offset: int = 0) -> int:
    _check(data, offset)
    return _BE.unpack_from(data, offset)[0]


def decode_u64_le(data: bytes, offset: int = 0) -> int:
    _check(data, offset)
    return _LE.unpack_from(data, offset)[0]
