import pytest

from keyguess.core.models.trace import EncodingMethod, ParsingTrace, TraceEntry


@pytest.mark.ut
def test_record_appends_in_order():
    trace = ParsingTrace()
    trace.record(0, 1, "write_type", EncodingMethod.tag)
    trace.record(1, 3, "start_ts", EncodingMethod.varint)

    assert len(trace) == 2
    assert list(trace)[1] == TraceEntry(1, 3, "start_ts", EncodingMethod.varint)
    assert list(trace)[1].end == 4


@pytest.mark.ut
def test_to_list_uses_plain_values():
    trace = ParsingTrace()
    trace.record(5, 8, "gc_fence", EncodingMethod.big_endian)

    assert trace.to_list() == [
        {"start": 5, "width": 8, "description": "gc_fence", "method": "big-endian"}
    ]
