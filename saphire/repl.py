"""Interactive read-evaluate-print loop."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from .environment import Environment
from .interpreter import evaluate
from .parser import parse

PROMPT = ">>"


def print_parser_errors(output: TextIO, errors: Iterable[str]) -> None:
    """Write each parser error to ``output`` under its own heading."""
    for message in errors:
        output.write(" parser errors:\n")
        output.write(f"\t{message}\n")


def start(input_stream: TextIO, output: TextIO) -> None:
    """Read lines from ``input_stream`` until it ends, printing each result.

    All lines share one environment, so bindings persist between them.
    """
    env = Environment()
    while True:
        output.write(PROMPT)
        output.flush()
        line = input_stream.readline()
        if not line:
            return

        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]

        program, errors = parse(line)
        if errors:
            print_parser_errors(output, errors)
            continue

        result = evaluate(program, env)
        if result is not None:
            output.write(result.inspect())
            output.write("\n")