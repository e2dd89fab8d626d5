""" Command-line entry point. """
import argparse

from command import Outcome
from constants import DEFAULT_PROMPT
from shell import Shell, run_line


def build_parser():
    parser = argparse.ArgumentParser(
        prog="quill-sh",
        description="A minimal interactive command interpreter"
    )
    parser.add_argument(
        "--prompt",
        default=DEFAULT_PROMPT,
        help="Prompt written to stderr before each line (default: %(default)r)"
    )
    parser.add_argument(
        "-c",
        metavar="COMMAND",
        dest="command",
        help="Run a single command line and exit"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    sh = Shell(prompt=args.prompt)

    if args.command is not None:
        outcome = run_line(args.command, sh.state)
        if outcome is Outcome.EXIT:
            raise SystemExit(0)
        raise SystemExit(sh.state.last_status)

    raise SystemExit(sh.run())


if __name__ == "__main__":
    main()
