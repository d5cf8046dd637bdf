"""
Command line front end: load a program, answer a query, or read
statements and queries line by line.
"""
import argparse
import logging
import sys
from typing import Optional, TextIO

from .engine.config import config
from .engine.data_set import DataSet
from .engine.errors import DatalogError
from .model.program import Program, Query
from .parser.datalog_parser import DatalogParser

logger = logging.getLogger(__name__)

PROMPT = ">> "


def print_answers(answers, out: TextIO) -> None:
    if not answers:
        print("<no answers>", file=out)
        return
    for answer in answers:
        print(answer, file=out)


def repl_step(line: str, data: DataSet, parser: DatalogParser, out: TextIO) -> None:
    """Ingest a line holding statements, or saturate and answer a line holding a query."""
    syntax = parser.parse(line)
    match syntax:
        case Program():
            data.ingest(syntax)
        case Query():
            data.run()
            print_answers(data.query(syntax), out)


def repl(data: DataSet, parser: DatalogParser, inp: TextIO, out: TextIO) -> int:
    interactive = inp.isatty()
    line_count = 1
    while True:
        if interactive:
            out.write(PROMPT)
            out.flush()
        line = inp.readline()
        if not line:
            print("goodbye!", file=out)
            return 0
        line = line.strip()
        if line:
            try:
                repl_step(line, data, parser, out)
            except DatalogError as e:
                if line in ("quit", "exit"):
                    print("hint: use control-d to leave", file=out)
                print(f"<repl:{line_count}>: {e}", file=out)
        line_count += 1


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinydatalog", description="Minimal Datalog evaluator")
    parser.add_argument("filename", nargs="?", help="A file of facts and rules to load.")
    parser.add_argument("-q", "--query", help="A query to run. If this is not given, a repl is started.")
    parser.add_argument("-r", "--repl", action="store_true",
                        help="Start the repl after loading FILENAME. This is the default when no FILENAME is given.")
    parser.add_argument("--config", help="Path to a YAML configuration file.")
    return parser


def main(argv: Optional[list[str]] = None, inp: TextIO = None, out: TextIO = None) -> int:
    inp = inp or sys.stdin
    out = out or sys.stdout
    args = build_arg_parser().parse_args(argv)
    if args.query is not None and args.repl:
        print("error: --query and --repl cannot be used together", file=sys.stderr)
        return 2

    if args.config:
        config.load_from_file(args.config)

    data = DataSet()
    parser = DatalogParser()

    if args.filename:
        try:
            data.load_program_from_file(args.filename)
        except (OSError, DatalogError) as e:
            print(f"{args.filename}: {e}", file=sys.stderr)
            return 1
        if args.query is None:
            print(f"...loaded file {args.filename} successfully.", file=out)

    if args.query is not None:
        try:
            query = parser.parse_query(args.query)
            data.run()
            print_answers(data.query(query), out)
        except DatalogError as e:
            print(f"--query: {e}", file=sys.stderr)
            return 1
        return 0

    if args.repl or not args.filename:
        return repl(data, parser, inp, out)

    try:
        data.run()
    except DatalogError as e:
        print(f"{args.filename}: {e}", file=sys.stderr)
        return 1
    out.write(data.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
