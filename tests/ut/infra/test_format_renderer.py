import json

import pytest
import yaml

from keyguess.core.models.message import Message
from keyguess.infra.format_renderer import JsonRenderer, MsgPackRenderer, YamlRenderer, normalize
from keyguess.infra.msgpack_serializer import MsgPackSerializer


@pytest.fixture
def message() -> dict:
    return Message.ok(key=b"\x74\x80", guesses=[{"kind": "varint", "value": 1}]).to_dict()


@pytest.mark.ut
def test_normalize_turns_bytes_into_hex():
    assert normalize({b"k": [b"\x00\xff", (1, bytearray(b"\x01"))]}) == {"6b": ["00ff", [1, "01"]]}


@pytest.mark.ut
def test_yaml_renderer(message):
    rendered = yaml.safe_load(YamlRenderer().render(message))

    assert rendered == {
        "type": "ok",
        "data": {"key": "7480", "guesses": [{"kind": "varint", "value": 1}]},
    }


@pytest.mark.ut
def test_yaml_keeps_field_order(message):
    text = YamlRenderer().render(message).decode()
    assert text.index("type:") < text.index("data:")


@pytest.mark.ut
def test_json_renderer(message):
    rendered = json.loads(JsonRenderer().render(message))

    assert rendered["data"]["key"] == "7480"


@pytest.mark.ut
def test_msgpack_renderer_keeps_bytes(message):
    serializer = MsgPackSerializer()
    rendered = MsgPackRenderer(serializer).render(message)

    assert serializer.deserialize(rendered) == message


@pytest.mark.ut
def test_msgpack_handles_u64():
    serializer = MsgPackSerializer()
    data = {"start_ts": 2**64 - 1, "gc_fence": None}

    assert serializer.deserialize(serializer.serialize(data)) == data
