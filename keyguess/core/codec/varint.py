from keyguess.core.errors import MalformedVarint

MAX_VARINT_LEN = 10
U64_MAX = (1 << 64) - 1


def encode_u64(n: int) -> bytes:
    """
    Encode an unsigned 64-bit integer as a LEB128 varint.

    Each byte carries 7 value bits, least-significant group first; the
    high bit is set on every byte except the last.
    """
    if n < 0 or n > U64_MAX:
        raise ValueError(f"varint value out of u64 range: {n}")

    out = bytearray()
    while n >= 0x80:
        out.append((n & 0x7F) | 0x80)
        n >>= 7
    out.append(n)
    return bytes(out)


def decode_u64(code: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Decode a varint starting at `offset`.

    Returns:
        (value, bytes_consumed)
    """
    result = 0
    shift = 0
    pos = offset

    while True:
        if pos >= len(code):
            raise MalformedVarint("varint is not terminated")
        if pos - offset >= MAX_VARINT_LEN:
            raise MalformedVarint(f"varint longer than {MAX_VARINT_LEN} bytes")

        byte = code[pos]
        pos += 1
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            break
        shift += 7

    if result > U64_MAX:
        raise MalformedVarint("varint overflows 64 bits")

    return result, pos - offset
