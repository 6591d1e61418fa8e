"""Reading and checking the numbers given on the command line."""

from __future__ import annotations

from typing import Sequence

from pushswap.stack import Item

_WHITESPACE = "\t\n\v\f\r "


class InputError(ValueError):
    """The arguments are not a valid list of distinct integers."""


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def parse_int(text: str) -> int:
    """Read a leading integer from ``text``, wrapping it to 32 bits.

    Leading whitespace and one sign are allowed, and reading stops at the
    first non-digit; at least one digit must follow the sign.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits += char
    if not digits:
        raise InputError(f"not a number: {text!r}")
    return _wrap_int32(sign * int(digits))


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def check_duplicates(args: Sequence[str]) -> None:
    """Raise InputError if any argument is invalid or two read as the same number.

    A lone argument is left for the caller to check.
    """
    if len(args) < 2:
        return
    seen: set[int] = set()
    for arg in args:
        value = parse_int(arg)
        if value in seen:
            raise InputError(f"duplicate number: {value}")
        seen.add(value)


def check_arguments(args: Sequence[str]) -> str | None:
    """Validate the arguments before sorting.

    Returns None when sorting should go ahead. Otherwise the program has
    nothing to sort and should stop successfully after writing the returned
    text (possibly empty) to standard error.
    """
    check_duplicates(args)
    if not args:
        return ""
    if len(args) == 1:
        return f"{parse_int(args[0])}\n"
    if len(args) > 2 and args[0].startswith('"'):
        if len(split_words(args[0], " ")) > 1:
            raise InputError("quoted list mixed with other arguments")
    return None


def assign_indices(items: Sequence[Item]) -> None:
    """Give every item its rank among the numbers, counting from 0."""
    for item in items:
        item.index = -1
    ranked = sorted(items, key=lambda item: item.nbr)
    for rank, item in enumerate(ranked):
        item.index = rank


def parse_stack(args: Sequence[str]) -> list[Item]:
    """Build stack ``a`` from the arguments, with ranks assigned.

    A single argument is read as a space-separated list of numbers.
    """
    words = split_words(args[0], " ") if len(args) == 1 else list(args)
    if not words:
        raise InputError("no numbers given")
    items = [Item(parse_int(word), pos=pos) for pos, word in enumerate(words)]
    assign_indices(items)
    return items