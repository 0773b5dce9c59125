"""Command line entry: run a source file, or start the interactive loop."""

from __future__ import annotations

import getpass
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from .environment import Environment
from .interpreter import evaluate
from .objects import Object
from .parser import parse
from .repl import print_parser_errors, start

SOURCE_EXTENSION = ".sp"


def _extension(filename: str) -> str:
    base = os.path.basename(filename)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def read_source(filename: str) -> str:
    """Return the text of a source file.

    Raises ValueError if the file does not end in ``.sp``, and OSError if it
    cannot be read.
    """
    ext = _extension(filename)
    if ext != SOURCE_EXTENSION:
        raise ValueError(
            f"error: invalid file extension {ext} (expected {SOURCE_EXTENSION})"
        )
    with open(filename, "rb") as handle:
        return handle.read().decode("utf-8")


def run_source(source: str, output: TextIO) -> Object | None:
    """Parse and run ``source`` in a fresh environment.

    Parser errors are written to ``output`` and nothing is run; otherwise the
    value of the program is returned.
    """
    program, errors = parse(source)
    if errors:
        print_parser_errors(output, errors)
        return None
    return evaluate(program, Environment())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the file named first in ``argv``, or the interactive loop if none."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args:
        username = getpass.getuser()
        sys.stdout.write(
            f"Hello {username}! This is the Saphire programming language!\n"
        )
        sys.stdout.write("Feel free to type in commands\n")
        start(sys.stdin, sys.stdout)
        return 0

    try:
        source = read_source(args[0])
    except (ValueError, OSError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    run_source(source, sys.stdout)
    return 0