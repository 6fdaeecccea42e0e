from functools import lru_cache

from keyguess.bootstrap.config.settings import OutputFormat
from keyguess.core.cmd import GuessCmd
from keyguess.core.dispatcher import CommandDispatcher
from keyguess.core.ports.render import Renderer
from keyguess.infra.format_renderer import JsonRenderer, MsgPackRenderer, YamlRenderer
from keyguess.infra.msgpack_serializer import MsgPackSerializer


@lru_cache
def get_dispatcher() -> CommandDispatcher:
    return CommandDispatcher()


@lru_cache
def get_renderers() -> dict[OutputFormat, Renderer]:
    serializer = MsgPackSerializer()
    return {
        OutputFormat.yaml: YamlRenderer(),
        OutputFormat.json: JsonRenderer(),
        OutputFormat.msgpack: MsgPackRenderer(serializer),
    }


@lru_cache
def get_cli() -> GuessCmd:
    return GuessCmd(get_dispatcher(), get_renderers())
