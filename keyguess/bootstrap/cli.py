from keyguess.bootstrap.deps import get_cli
from keyguess.core.helpers.utils import scan, setup_logging


@scan("keyguess.bootstrap.commands")
def main():
    cli = get_cli()
    setup_logging(cli.config.log_level)

    if cli.interactive:
        cli.cmdloop()
        return

    cli.onecmd(cli.args.command)
    if cli.failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
