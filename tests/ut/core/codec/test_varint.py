import pytest

from keyguess.core.codec import varint
from keyguess.core.errors import MalformedVarint


@pytest.mark.ut
@pytest.mark.parametrize("n, encoded", [
    (0, b"\x00"),
    (1, b"\x01"),
    (127, b"\x7f"),
    (128, b"\x80\x01"),
    (300, b"\xac\x02"),
    (2**64 - 1, b"\xff" * 9 + b"\x01"),
])
def test_encode_known_values(n, encoded):
    assert varint.encode_u64(n) == encoded


@pytest.mark.ut
@pytest.mark.parametrize("n", [0, 1, 127, 128, 16383, 16384, 2**32, 2**63, 2**64 - 1])
def test_decode_reports_consumed_bytes(n):
    code = varint.encode_u64(n)
    assert varint.decode_u64(code) == (n, len(code))


@pytest.mark.ut
def test_decode_stops_at_terminator():
    assert varint.decode_u64(b"\xac\x02\xff\xff") == (300, 2)


@pytest.mark.ut
def test_decode_from_offset():
    assert varint.decode_u64(b"P\xac\x02", 1) == (300, 2)


@pytest.mark.ut
@pytest.mark.parametrize("code", [
    b"",
    b"\x80",
    b"\xff\xff",
    b"\x80" * 10 + b"\x00",
    b"\xff" * 9 + b"\x02",
])
def test_decode_rejects_malformed(code):
    with pytest.raises(MalformedVarint):
        varint.decode_u64(code)


@pytest.mark.ut
@pytest.mark.parametrize("n", [-1, 2**64])
def test_encode_rejects_out_of_range(n):
    with pytest.raises(ValueError):
        varint.encode_u64(n)
