from dataclasses import dataclass, field, asdict
from enum import StrEnum
from typing import Any, Iterator


class EncodingMethod(StrEnum):
    """How the bytes of a traced field were laid out on the wire."""
    tag = "tag"
    single_byte = "single-byte"
    raw_bytes = "raw-bytes"
    big_endian = "big-endian"
    varint = "varint"


@dataclass(frozen=True, slots=True)
class TraceEntry:
    start: int
    """
    Offset of the first byte of the field in the parsed input.
    """

    width: int
    """
    Number of bytes the field occupies. Zero-width entries are legal.
    """

    description: str
    """
    Human readable field name, e.g. "start_ts".
    """

    method: EncodingMethod

    @property
    def end(self) -> int:
        return self.start + self.width

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["method"] = str(self.method)
        return data


@dataclass
class ParsingTrace:
    """
    Accumulator describing which byte range produced which field.

    It is handed to a parser by the caller and only ever appended to;
    parsing results never depend on it.
    """
    entries: list[TraceEntry] = field(default_factory=list)

    def record(
        self,
        start: int,
        width: int,
        description: str,
        method: EncodingMethod
    ) -> None:
        self.entries.append(TraceEntry(start, width, description, method))

    def __iter__(self) -> Iterator[TraceEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def to_list(self) -> list[dict[str, Any]]:
        return [entry.to_dict() for entry in self.entries]
