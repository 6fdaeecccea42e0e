import pytest

from keyguess.core.codec import memcomparable, varint
from keyguess.core.guess import Guesser


def kinds(guesses):
    return [g.kind for g in guesses]


@pytest.mark.ut
def test_guess_row_key(record_key):
    guesses = Guesser().guess(record_key)

    assert kinds(guesses) == ["record"]
    assert guesses[0].to_dict() == {"kind": "record", "table_id": 53, "row_id": 1}


@pytest.mark.ut
def test_guess_write(write_put):
    guesses = Guesser().guess(write_put)

    assert kinds(guesses) == ["write"]
    assert guesses[0].value["short_value"] == b"\x00"
    assert "trace" not in guesses[0].value


@pytest.mark.ut
def test_guess_write_with_trace(write_put):
    guesses = Guesser(trace=True).guess(write_put)

    assert len(guesses[0].value["trace"]) == 5


@pytest.mark.ut
def test_guess_memcomparable_row_key(record_key):
    guesses = Guesser().guess(memcomparable.encode(record_key))

    assert kinds(guesses) == ["memcomparable"]
    assert guesses[0].value["key"] == record_key
    assert guesses[0].value["record"] == {"table_id": 53, "row_id": 1}


@pytest.mark.ut
def test_guess_memcomparable_plain_key():
    guesses = Guesser().guess(memcomparable.encode(b"hello"))

    assert guesses[0].value == {"key": b"hello"}


@pytest.mark.ut
def test_guess_varint():
    guesses = Guesser().guess(varint.encode_u64(300))

    assert kinds(guesses) == ["varint"]
    assert guesses[0].value == {"value": 300}


@pytest.mark.ut
def test_guess_u64():
    guesses = Guesser().guess(b"\x00" * 7 + b"\x2a")

    assert kinds(guesses) == ["u64_be"]
    assert guesses[0].value == {"value": 42}


@pytest.mark.ut
def test_guess_nothing():
    assert Guesser().guess(b"") == []
    assert Guesser().guess(b"\x80\x80") == []


@pytest.mark.ut
def test_guess_row_key_with_suffix_is_not_a_record(record_key):
    guesses = Guesser().guess(record_key + b"\x00" * 8)

    assert "record" not in kinds(guesses)
