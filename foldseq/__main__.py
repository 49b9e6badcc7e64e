"""Fold sequences of values from the command line.

"""
import argparse
import logging
import sys

from .config import load_config
from .command import ReduceCommand, TraceCommand
from .operators import OPERATORS

logging.basicConfig()


log = logging.getLogger("main")


config = load_config()


def create_parser():

    parser = argparse.ArgumentParser(prog="foldseq", description="Fold a sequence of values into a single result")

    common_parser = argparse.ArgumentParser(add_help=False)

    common_parser.add_argument(
        "-f", "--file", metavar="Filepath", default=None, help="Read the sequence from a .csv or .json file"
    )

    common_parser.add_argument(
        "-c", "--column", metavar="column", default=None, help="CSV column to read, default the first column"
    )

    common_parser.add_argument(
        "-p",
        "--operator",
        choices=sorted(OPERATORS),
        default=None,
        help="Combining function, default %s" % config.get("FOLDSEQ_OPERATOR"),
    )

    common_parser.add_argument(
        "-i", "--initial", metavar="value", default=None, help="Initial value (JSON), default the first element"
    )

    common_parser.add_argument("values", metavar="value", nargs="*", help="Values to fold (JSON or plain strings)")

    subparsers = parser.add_subparsers(
        title="Available commands", description="Commands to fold sequences.", dest="command"
    )
    subparsers.required = True

    reduce_parser = subparsers.add_parser(
        "reduce",
        aliases=["r"],
        parents=[common_parser],
        help="Print the folded result.",
    )
    reduce_parser.set_defaults(func=ReduceCommand)

    trace_parser = subparsers.add_parser(
        "trace",
        aliases=["t"],
        parents=[common_parser],
        help="Report every step of the fold in the given report format.",
    )

    trace_parser.add_argument(
        "-r", "--report", choices=["csv", "plot"], default="csv", help="Specify output report type"
    )

    trace_parser.add_argument(
        "-o", "--outfile", metavar="Filepath", nargs="?", default=None, help="File to output or default"
    )

    trace_parser.set_defaults(func=TraceCommand)

    return parser


def main(args=None):
    logging.getLogger().setLevel(config.get("FOLDSEQ_LOG_LEVEL", "INFO").upper())

    parser = create_parser()
    prog_args = parser.parse_args(args)

    if bool(prog_args.file) == bool(prog_args.values):
        parser.error("exactly one of --file or values is required")

    cmd = prog_args.func(config, prog_args)
    cmd.execute()


if __name__ == "__main__":  # pragma: no cover
    main(args=sys.argv[1:])
