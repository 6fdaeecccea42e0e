import argparse

from keyguess.bootstrap.commands.mvcc import read_bytes
from keyguess.bootstrap.config.settings import KeyGuessConfig
from keyguess.bootstrap.deps import get_dispatcher
from keyguess.core.guess import Guesser
from keyguess.core.models.message import Message

dispatcher = get_dispatcher()


@dispatcher.command("guess")
def cmd_guess(config: KeyGuessConfig, namespace: argparse.Namespace) -> Message:
    data = read_bytes(config, namespace)
    guesses = Guesser(trace=config.write.trace).guess(data)
    return Message.ok(
        input=data,
        guesses=[g.to_dict() for g in guesses]
    )
