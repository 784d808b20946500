"""
Module used to read union-find inputs and allowlists

Connection streams are whitespace-separated integers: the size of the
universe followed by pairs of elements. Line breaks carry no meaning.
"""

import logging
import os
from collections.abc import Iterable, Iterator
from typing import TextIO

from constants import DATA
from unionfind import Connection

logger = logging.getLogger(__name__)


class MalformedInput(ValueError):
    """The universe size is missing or invalid, or an allowlist line is not an integer."""


def _tokens(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    for line_number, line in enumerate(lines, start=1):
        for token in line.split():
            yield line_number, token


def _integers(tokens: Iterator[tuple[int, str]]) -> Iterator[int]:
    for line_number, token in tokens:
        try:
            yield int(token)
        except ValueError:
            logger.warning(
                f"line {line_number}: stopped reading at non-integer {token!r}"
            )
            return


def read_integers(lines: Iterable[str]) -> Iterator[int]:
    """
    Integers of the stream, up to the first token that is not one.

    Reading stops there with a warning, the way stream extraction does.
    """
    return _integers(_tokens(lines))


def read_connections(lines: Iterable[str]) -> tuple[int, Iterator[Connection]]:
    """
    Read the universe size and the pairs that follow it.

    Pairs are produced lazily and end at the first token that is not an
    integer. A trailing unpaired integer is ignored.

    Returns:
        Tuple of (n, iterator over (p, q) pairs).

    Raises:
        MalformedInput: if the stream holds no leading integer, or a
            negative one.
    """
    tokens = _tokens(lines)
    first = next(tokens, None)
    if first is None:
        raise MalformedInput("missing universe size")
    line_number, token = first
    try:
        n = int(token)
    except ValueError:
        raise MalformedInput(
            f"line {line_number}: expected the universe size, got {token!r}"
        ) from None
    if n < 0:
        raise MalformedInput(f"universe size must be non-negative, got {n}")

    integers = _integers(tokens)

    def pairs() -> Iterator[Connection]:
        for p in integers:
            q = next(integers, None)
            if q is None:
                logger.warning(f"ignoring trailing unpaired element {p}")
                return
            yield p, q

    return n, pairs()


def read_allowlist(stream: TextIO) -> list[int]:
    """One integer per line; reading stops at the first blank line."""
    values = []
    for line_number, line in enumerate(stream, start=1):
        line = line.strip()
        if not line:
            break
        try:
            values.append(int(line))
        except ValueError:
            raise MalformedInput(
                f"line {line_number}: expected an integer, got {line!r}"
            ) from None
    return values


def path_to_data(name: str) -> str:
    return os.path.join(DATA, name)


def data_to_connections(name: str = "tinyUF.txt") -> tuple[int, list[Connection]]:
    """Load a bundled connection file eagerly."""
    with open(path_to_data(name), "r") as file:
        n, pairs = read_connections(file)
        return n, list(pairs)
