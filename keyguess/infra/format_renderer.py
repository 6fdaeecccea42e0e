import json

import yaml

from keyguess.core.ports.render import Renderer
from keyguess.core.ports.serializer import Serializer


def normalize(obj):
    """Replace bytes with their hex form so text formats can show them."""
    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj).hex()

    if isinstance(obj, dict):
        return {normalize(k): normalize(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [normalize(x) for x in obj]

    return obj


class JsonRenderer(Renderer):
    def render(self, data: dict) -> bytes:
        text = json.dumps(normalize(data), indent=2, sort_keys=False)
        return (text + "\n").encode("utf-8")


class YamlRenderer(Renderer):
    def render(self, data: dict) -> bytes:
        text = yaml.safe_dump(normalize(data), sort_keys=False)
        return text.encode("utf-8")


class MsgPackRenderer(Renderer):
    def __init__(self, serializer: Serializer) -> None:
        self._serializer = serializer

    def render(self, data: dict) -> bytes:
        return self._serializer.serialize(data)
