import contextlib
import logging
from dataclasses import dataclass
from typing import Any

from keyguess.core.codec import endian, memcomparable, varint
from keyguess.core.errors import KeyGuessError
from keyguess.core.models.record import parse_record
from keyguess.core.models.trace import ParsingTrace
from keyguess.core.models.write import Write


@dataclass(frozen=True, slots=True)
class Guess:
    kind: str
    """
    Interpretation that succeeded: "record", "write", "memcomparable",
    "varint" or "u64_be".
    """

    value: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **self.value}


class Guesser:
    """
    Tries every known interpretation on a byte string and keeps the ones
    that decode cleanly. A byte string may legitimately match several.
    """

    def __init__(self, trace: bool = False) -> None:
        self._trace = trace
        self._logger = logging.getLogger("core.guess")

    def guess(self, data: bytes) -> list[Guess]:
        guesses: list[Guess] = []

        for kind, attempt in (
            ("record", self._as_record),
            ("write", self._as_write),
            ("memcomparable", self._as_memcomparable),
            ("varint", self._as_varint),
            ("u64_be", self._as_u64),
        ):
            try:
                value = attempt(data)
            except KeyGuessError as ex:
                self._logger.debug(f"Not a {kind}: {ex}")
                continue
            guesses.append(Guess(kind=kind, value=value))

        self._logger.debug(f"{len(guesses)} interpretation(s) for {data.hex()}")
        return guesses

    @staticmethod
    def _as_record(data: bytes) -> dict[str, Any]:
        return parse_record(data).to_dict()

    def _as_write(self, data: bytes) -> dict[str, Any]:
        trace = ParsingTrace() if self._trace else None
        value = Write.parse(data, trace).to_dict()
        if trace is not None:
            value["trace"] = trace.to_list()
        return value

    @staticmethod
    def _as_memcomparable(data: bytes) -> dict[str, Any]:
        if not memcomparable.could_be_encoded(data):
            raise KeyGuessError("not a memcomparable encoding")

        key = memcomparable.decode(data)
        value: dict[str, Any] = {"key": key}
        with contextlib.suppress(KeyGuessError):
            value["record"] = parse_record(key).to_dict()
        return value

    @staticmethod
    def _as_varint(data: bytes) -> dict[str, Any]:
        n, consumed = varint.decode_u64(data)
        if consumed != len(data):
            raise KeyGuessError(f"varint ends after {consumed} of {len(data)} bytes")
        return {"value": n}

    @staticmethod
    def _as_u64(data: bytes) -> dict[str, Any]:
        if len(data) != endian.U64_SIZE:
            raise KeyGuessError(f"expected {endian.U64_SIZE} bytes, got {len(data)}")
        return {"value": endian.decode_u64_be(data)}
