import argparse
import cmd
import logging
import shlex
import sys
from typing import BinaryIO

from keyguess.bootstrap.config.loader import get_configfile
from keyguess.bootstrap.config.settings import KeyGuessConfig, OutputFormat
from keyguess.core.dispatcher import CommandDispatcher
from keyguess.core.models.message import Message
from keyguess.core.ports.render import Renderer


class GuessCmd(cmd.Cmd):
    intro = (
        "Entering keyguess interactive mode. "
        "Type 'help' for commands, 'exit' or 'quit' to leave."
    )
    prompt = "keyguess> "

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        renderers: dict[OutputFormat, Renderer],
        argv: list[str] | None = None,
        out: BinaryIO | None = None,
    ) -> None:
        super().__init__()

        self._dispatcher = dispatcher
        self._argparser = self._argparse()
        self._args = self._argparser.parse_args(argv)
        self._config = self._load_config()
        self._renderer = renderers[self._config.output.format]
        self._out = out if out is not None else sys.stdout.buffer
        self._logger = logging.getLogger("core.cmd")
        self.failed = False

    @property
    def args(self) -> argparse.Namespace:
        return self._args

    @property
    def config(self) -> KeyGuessConfig:
        return self._config

    @property
    def interactive(self) -> bool:
        return self._args.command is None

    def handle(self, *arguments: str, namespace: argparse.Namespace) -> Message:
        try:
            msg = self._dispatcher.dispatch(
                *arguments,
                config=self._config,
                namespace=namespace
            )
        except (ValueError, RuntimeError) as ex:
            self._logger.debug(f"'{' '.join(arguments)}' failed: {ex}")
            msg = Message.error(str(ex))

        self.failed = msg.type == "error"
        self._out.write(self._renderer.render(msg.to_dict()))
        self._out.flush()
        return msg

    def do_guess(self, line):
        """guess <bytes>: try every known interpretation of the bytes."""
        self._run("guess", line)

    def do_record(self, line):
        """record <bytes>: parse a row key into table and row ids."""
        self._run("record", line)

    def do_write(self, line):
        """write <bytes> [--trace]: parse an MVCC write record."""
        self._run("write", line)

    def do_memcmp(self, line):
        """memcmp <encode|decode> <bytes>: memcomparable transform."""
        self._run("memcmp", line)

    def do_varint(self, line):
        """varint encode <int> | varint decode <bytes>"""
        self._run("varint", line)

    def do_exit(self, arg):
        return True

    def do_quit(self, arg):
        return True

    def do_EOF(self, arg):
        print()
        return True

    def emptyline(self):
        return False

    def _run(self, command: str, line: str) -> None:
        if self.interactive:
            try:
                namespace = self._argparser.parse_args([command, *shlex.split(line)])
            except SystemExit:
                # argparse already printed the usage
                return
            except ValueError as ex:
                print(f"Cannot split arguments: {ex}")
                return
        else:
            namespace = self._args

        arguments = [command]
        sub = getattr(namespace, f"{command}_cmd", None)
        if sub is not None:
            arguments.append(sub)

        self.handle(*arguments, namespace=namespace)

    def _load_config(self) -> KeyGuessConfig:
        config = KeyGuessConfig.load(get_configfile(self._args))

        # CLI flags take precedence over env and file
        overrides = {}
        if self._args.format is not None:
            overrides["output"] = config.output.model_copy(
                update={"format": OutputFormat(self._args.format)}
            )
        if self._args.log_level is not None:
            overrides["log_level"] = self._args.log_level

        return config.model_copy(update=overrides) if overrides else config

    @staticmethod
    def _argparse() -> argparse.ArgumentParser:
        global_opts = argparse.ArgumentParser(
            prog="keyguess",
            description=(
                "Guess what raw storage-engine bytes are.\n\n"
                "Bytes are given as text: '[116, 128, 0]', '[116 128 0]' or '748000'.\n"
                "Without a command, an interactive shell is started."
            ),
            formatter_class=argparse.RawTextHelpFormatter
        )
        global_opts.add_argument("-c", "--config", help="Path to a keyguess configuration file")
        global_opts.add_argument(
            "-f", "--format",
            choices=[f.value for f in OutputFormat],
            help="Output format (default: yaml)"
        )
        global_opts.add_argument(
            "-l", "--log-level",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Logging verbosity (default: WARNING)"
        )

        sub = global_opts.add_subparsers(dest="command")

        guess = sub.add_parser("guess", help="try every known interpretation")
        guess.add_argument("text", nargs="+")

        record = sub.add_parser("record", help="parse a row key")
        record.add_argument("text", nargs="+")

        write = sub.add_parser("write", help="parse an MVCC write record")
        write.add_argument("--trace", action="store_true", default=None)
        write.add_argument("text", nargs="+")

        memcmp = sub.add_parser("memcmp", help="memcomparable encode/decode")
        memcmp_sub = memcmp.add_subparsers(dest="memcmp_cmd", required=True)
        memcmp_sub.add_parser("encode").add_argument("text", nargs="+")
        memcmp_sub.add_parser("decode").add_argument("text", nargs="+")

        varint = sub.add_parser("varint", help="varint encode/decode")
        varint_sub = varint.add_subparsers(dest="varint_cmd", required=True)
        varint_sub.add_parser("encode").add_argument("value", type=int)
        varint_sub.add_parser("decode").add_argument("text", nargs="+")

        return global_opts
