from keyguess.core.errors import MalformedEncoding

GROUP_SIZE = 8
ENCODED_GROUP_SIZE = GROUP_SIZE + 1
MARKER = 0xFF
PAD = b"\x00" * GROUP_SIZE


def encode(key: bytes) -> bytes:
    """
    Encode `key` into its memcomparable form.

    The key is cut into 8-byte groups, each zero-padded and followed by a
    marker byte `0xFF - padding`:

        [1, 2, 3]   -> 01 02 03 00 00 00 00 00 | FA
        [1 .. 8]    -> 01 .. 08                | FF
                       00 00 00 00 00 00 00 00 | F7

    A full group (marker 0xFF) is never the last one, so a proper prefix
    of a key always sorts before the key itself.
    """
    out = bytearray()

    for pos in range(0, len(key), GROUP_SIZE):
        chunk = key[pos: pos + GROUP_SIZE]
        fill = GROUP_SIZE - len(chunk)
        out += chunk
        out += PAD[:fill]
        out.append(MARKER - fill)

    if not out or out[-1] == MARKER:
        out += PAD
        out.append(MARKER - GROUP_SIZE)

    return bytes(out)


def could_be_encoded(code: bytes) -> bool:
    """Tell whether `code` is a well-formed memcomparable encoding."""
    if not code or len(code) % ENCODED_GROUP_SIZE:
        return False

    return all(
        code[pos + GROUP_SIZE] >= MARKER - GROUP_SIZE
        for pos in range(0, len(code), ENCODED_GROUP_SIZE)
    )


def decode(code: bytes) -> bytes:
    if code and not could_be_encoded(code):
        raise MalformedEncoding(
            f"not a memcomparable encoding ({len(code)} bytes)"
        )

    out = bytearray()
    for pos in range(0, len(code), ENCODED_GROUP_SIZE):
        marker = code[pos + GROUP_SIZE]
        length = GROUP_SIZE - (MARKER - marker)
        out += code[pos: pos + length]

    return bytes(out)
