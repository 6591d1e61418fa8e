"""Command line entry: read numbers, sort them and print the operations used."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from pushswap.chunks import bring_max_to_top_b, move_to_top
from pushswap.parsing import InputError, check_arguments, parse_stack
from pushswap.stack import Stacks


def run(args: Sequence[str], out: TextIO | None = None) -> int:
    """Sort the numbers in ``args``, writing each operation to ``out``.

    Returns the exit status. Messages and operations go to ``out``, which
    defaults to standard error.
    """
    stream = out if out is not None else sys.stderr
    try:
        message = check_arguments(args)
        if message is not None:
            stream.write(message)
            return 0
        items = parse_stack(args)
    except InputError:
        stream.write("Error\n")
        return 1

    stacks = Stacks(items, out=stream)
    while len(stacks.a) >= 5:
        move_to_top(stacks)
        stacks.push_b()
    while stacks.a:
        stacks.push_b()
    while len(stacks.b) > 1:
        bring_max_to_top_b(stacks)
        stacks.push_a()
    stacks.push_a()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run with the given arguments, or with the process's own."""
    args = sys.argv[1:] if argv is None else list(argv)
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())