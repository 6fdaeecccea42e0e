import argparse

from keyguess.bootstrap.config.settings import KeyGuessConfig
from keyguess.bootstrap.deps import get_dispatcher
from keyguess.core.input import parse_input
from keyguess.core.models.message import Message
from keyguess.core.models.record import parse_record
from keyguess.core.models.trace import ParsingTrace
from keyguess.core.models.write import Write

dispatcher = get_dispatcher()


def read_bytes(config: KeyGuessConfig, namespace: argparse.Namespace) -> bytes:
    return parse_input(" ".join(namespace.text), config.input.order)


@dispatcher.command("record")
def cmd_record(config: KeyGuessConfig, namespace: argparse.Namespace) -> Message:
    record = parse_record(read_bytes(config, namespace))
    return Message.ok(record=record.to_dict())


@dispatcher.command("write")
def cmd_write(config: KeyGuessConfig, namespace: argparse.Namespace) -> Message:
    data = read_bytes(config, namespace)
    traced = namespace.trace if namespace.trace is not None else config.write.trace
    trace = ParsingTrace() if traced else None

    write = Write.parse(data, trace)

    result = {"write": write.to_dict()}
    if trace is not None:
        result["trace"] = trace.to_list()
    return Message.ok(**result)
