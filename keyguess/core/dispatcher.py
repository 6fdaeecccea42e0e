import argparse
import functools
from typing import Protocol

from keyguess.bootstrap.config.settings import KeyGuessConfig
from keyguess.core.models.message import Message


class CommandHandler(Protocol):
    def __call__(
        self,
        config: KeyGuessConfig,
        namespace: argparse.Namespace,
    ) -> Message:
        ...


class CommandDispatcher:
    def __init__(self) -> None:
        self._commands: dict[tuple[str, ...], CommandHandler] = {}

    def dispatch(
        self,
        *arguments: str,
        config: KeyGuessConfig,
        namespace: argparse.Namespace
    ) -> Message:
        command = self._commands.get(arguments)
        if command is None:
            raise RuntimeError(f"Unknown '{' '.join(arguments)}' Command")
        return command(config, namespace)

    def command(self, *arguments: str):
        def decorator(func: CommandHandler):

            @functools.wraps(func)
            def wrapper(
                config: KeyGuessConfig,
                namespace: argparse.Namespace,
            ) -> Message:
                return func(config, namespace)

            self._commands[arguments] = wrapper

            return wrapper

        return decorator
