from dataclasses import dataclass
from enum import Enum
from typing import Any

from keyguess.core.codec import endian, varint
from keyguess.core.errors import (
    MalformedVarint,
    TruncatedInput,
    TruncatedShortValue,
    UnknownWriteType,
)
from keyguess.core.models.trace import EncodingMethod, ParsingTrace

SHORT_VALUE_MAX_LEN = 0xFF


class WriteType(Enum):
    """
    Outcome of a transaction recorded in the write column family.
    Each member's value is its one-byte tag on the wire.
    """
    put = b"P"
    delete = b"D"
    lock = b"L"
    rollback = b"R"

    @property
    def tag(self) -> int:
        return self.value[0]

    @classmethod
    def from_tag(cls, tag: int) -> "WriteType":
        try:
            return _WRITE_TYPE_BY_TAG[tag]
        except KeyError:
            raise UnknownWriteType(f"unknown write type tag 0x{tag:02x}") from None


_WRITE_TYPE_BY_TAG = {wt.tag: wt for wt in WriteType}


class FieldTag(Enum):
    """
    Prefix bytes of the optional fields following start_ts.

    `overlapped_rollback` shares its byte with `WriteType.rollback`; both
    are 'R' on the wire and must stay that way.
    """
    short_value = b"v"
    overlapped_rollback = b"R"
    gc_fence = b"F"

    @property
    def tag(self) -> int:
        return self.value[0]

    @classmethod
    def lookup(cls, tag: int) -> "FieldTag | None":
        return _FIELD_TAG_BY_BYTE.get(tag)


_FIELD_TAG_BY_BYTE = {ft.tag: ft for ft in FieldTag}


def _check_short_value(value: bytes | None) -> None:
    if value is not None and len(value) > SHORT_VALUE_MAX_LEN:
        raise ValueError(
            f"short value is {len(value)} bytes, "
            f"at most {SHORT_VALUE_MAX_LEN} allowed"
        )


def _check_timestamp(name: str, ts: int | None) -> None:
    if ts is not None and not 0 <= ts <= endian.U64_MAX:
        raise ValueError(f"{name} out of u64 range: {ts}")


@dataclass
class Write:
    """
    MVCC write record.

    Wire format:
        write_type:1 || varint(start_ts)
        [ 'v' || len:1 || short_value:len ]
        [ 'R' ]
        [ 'F' || gc_fence:8 BE ]

    Optional fields appear in that order. Parsing stops silently at the
    first byte that is not a known field tag, so records written by a
    newer format version remain readable.
    """
    write_type: WriteType
    start_ts: int
    short_value: bytes | None = None
    has_overlapped_rollback: bool = False
    gc_fence: int | None = None

    def __post_init__(self) -> None:
        if self.short_value is not None:
            self.short_value = bytes(self.short_value)
        _check_short_value(self.short_value)
        _check_timestamp("start_ts", self.start_ts)
        _check_timestamp("gc_fence", self.gc_fence)

    @classmethod
    def parse(cls, data: bytes, trace: ParsingTrace | None = None) -> "Write":
        """
        Parse a write record.

        Parameters:
            data: raw value bytes read from the write column family.
            trace: optional accumulator receiving one entry per consumed
                   field; it has no effect on the result.

        Raises:
            UnknownWriteType, MalformedVarint, TruncatedShortValue,
            TruncatedInput
        """
        if not data:
            raise TruncatedInput("cannot parse write: empty input")

        write_type = WriteType.from_tag(data[0])
        if trace is not None:
            trace.record(0, 1, "write_type", EncodingMethod.tag)

        try:
            start_ts, width = varint.decode_u64(data, 1)
        except MalformedVarint as ex:
            raise MalformedVarint(f"cannot parse write: start_ts {ex}") from ex
        if trace is not None:
            trace.record(1, width, "start_ts", EncodingMethod.varint)

        pos = 1 + width
        short_value = None
        has_overlapped_rollback = False
        gc_fence = None

        while pos < len(data):
            field_tag = FieldTag.lookup(data[pos])
            if field_tag is None:
                break   # written by a newer version

            if trace is not None:
                trace.record(pos, 1, f"{field_tag.name} flag", EncodingMethod.tag)
            pos += 1

            match field_tag:
                case FieldTag.short_value:
                    if pos >= len(data):
                        raise TruncatedShortValue(
                            "cannot parse write: short value length missing"
                        )
                    length = data[pos]
                    if trace is not None:
                        trace.record(
                            pos, 1, "short_value length", EncodingMethod.single_byte
                        )
                    pos += 1
                    if len(data) - pos < length:
                        raise TruncatedShortValue(
                            f"cannot parse write: short value declares {length} "
                            f"bytes, {len(data) - pos} remain"
                        )
                    short_value = bytes(data[pos: pos + length])
                    if trace is not None:
                        trace.record(pos, length, "short_value", EncodingMethod.raw_bytes)
                    pos += length

                case FieldTag.overlapped_rollback:
                    has_overlapped_rollback = True

                case FieldTag.gc_fence:
                    try:
                        gc_fence = endian.decode_u64_be(data, pos)
                    except TruncatedInput as ex:
                        raise TruncatedInput(f"cannot parse write: gc_fence {ex}") from ex
                    if trace is not None:
                        trace.record(
                            pos, endian.U64_SIZE, "gc_fence", EncodingMethod.big_endian
                        )
                    pos += endian.U64_SIZE

        return cls(
            write_type=write_type,
            start_ts=start_ts,
            short_value=short_value,
            has_overlapped_rollback=has_overlapped_rollback,
            gc_fence=gc_fence,
        )

    def to_bytes(self) -> bytes:
        out = bytearray()
        out.append(self.write_type.tag)
        out += varint.encode_u64(self.start_ts)

        _check_short_value(self.short_value)
        if self.short_value is not None:
            out.append(FieldTag.short_value.tag)
            out.append(len(self.short_value))
            out += self.short_value

        if self.has_overlapped_rollback:
            out.append(FieldTag.overlapped_rollback.tag)

        if self.gc_fence is not None:
            out.append(FieldTag.gc_fence.tag)
            out += endian.encode_u64_be(self.gc_fence)

        return bytes(out)

    def to_dict(self) -> dict[str, Any]:
        return {
            "write_type": self.write_type.name,
            "start_ts": self.start_ts,
            "short_value": self.short_value,
            "has_overlapped_rollback": self.has_overlapped_rollback,
            "gc_fence": self.gc_fence,
        }
