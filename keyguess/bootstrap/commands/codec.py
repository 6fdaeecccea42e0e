import argparse

from keyguess.bootstrap.commands.mvcc import read_bytes
from keyguess.bootstrap.config.settings import KeyGuessConfig
from keyguess.bootstrap.deps import get_dispatcher
from keyguess.core.codec import memcomparable, varint
from keyguess.core.models.message import Message

dispatcher = get_dispatcher()


@dispatcher.command("memcmp", "encode")
def cmd_memcmp_encode(config: KeyGuessConfig, namespace: argparse.Namespace) -> Message:
    return Message.ok(encoded=memcomparable.encode(read_bytes(config, namespace)))


@dispatcher.command("memcmp", "decode")
def cmd_memcmp_decode(config: KeyGuessConfig, namespace: argparse.Namespace) -> Message:
    return Message.ok(decoded=memcomparable.decode(read_bytes(config, namespace)))


@dispatcher.command("varint", "encode")
def cmd_varint_encode(config: KeyGuessConfig, namespace: argparse.Namespace) -> Message:
    _ = config
    return Message.ok(encoded=varint.encode_u64(namespace.value))


@dispatcher.command("varint", "decode")
def cmd_varint_decode(config: KeyGuessConfig, namespace: argparse.Namespace) -> Message:
    value, consumed = varint.decode_u64(read_bytes(config, namespace))
    return Message.ok(value=value, consumed=consumed)
