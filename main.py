"""
Command-line driver for the union-find variants.

Subcommands:
- connect: read n and pairs of elements; print each pair that joins two
  different sets, then the number of sets
- allowlist: print the input integers that appear in an allowlist file
- generate: write a random or adversarial connection file
- benchmark: time every variant on the same random input
"""

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from constants import (
    BENCHMARK_M,
    BENCHMARK_N,
    DEFAULT_SEED,
    DEFAULT_VARIANT,
    LOG_FORMAT,
)
from unionfind import Connection, OutOfRange, Variant, make_union_find
from utils.analysis import partition, reference_partition
from utils.benchmark import render_results, run_benchmark
from utils.generators import (
    binomial_connections,
    chain_connections,
    random_connections,
    write_connections,
)
from utils.loader import (
    MalformedInput,
    read_allowlist,
    read_connections,
    read_integers,
)
from utils.search import AllowList

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MALFORMED = 2


def connect(
    lines: Iterable[str],
    variant: Variant | str = DEFAULT_VARIANT,
    out: TextIO = sys.stdout,
    verify: bool = False,
) -> int:
    """
    Feed every pair of the stream to a fresh union-find.

    Reading ends quietly at the first token that is not an integer, and
    the count is still printed. Processing stops at the first element
    outside the universe: the error is printed in place of the count.

    Returns:
        The exit status.
    """
    try:
        n, pairs = read_connections(lines)
        uf = make_union_find(variant, n)
        accepted: list[Connection] = []
        for p, q in pairs:
            if uf.find(p) == uf.find(q):
                continue
            uf.merge(p, q)
            accepted.append((p, q))
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"merged {p} {q}, {uf.count()} sets left")
            print(f"{p} {q}", file=out)
        print(f"{uf.count()} components", file=out)
    except OutOfRange as error:
        print(error, file=out)
        return EXIT_FAILURE
    except MalformedInput as error:
        logger.error(f"Malformed input: {error}")
        return EXIT_MALFORMED

    if verify:
        expected = reference_partition(n, accepted)
        if partition(uf) != expected:
            logger.error(f"{Variant(variant).value} disagrees with the reference partition")
            return EXIT_FAILURE
        logger.info(f"Verified {len(expected)} components against the reference")
    return EXIT_OK


def allowlist(allowlist_path: str, keys: Iterable[str], out: TextIO = sys.stdout) -> int:
    try:
        with open(allowlist_path, "r") as file:
            allowed = AllowList(read_allowlist(file))
    except OSError:
        print(f"failed to open {allowlist_path}", file=out)
        return EXIT_FAILURE
    except MalformedInput as error:
        logger.error(f"Malformed allowlist: {error}")
        return EXIT_MALFORMED

    logger.debug(f"Allowlist of {len(allowed)} values")
    for key in allowed.filter(read_integers(keys)):
        print(key, file=out)
    return EXIT_OK


def generate(
    n: int,
    m: int,
    kind: str = "random",
    seed: int | None = DEFAULT_SEED,
    out: TextIO = sys.stdout,
) -> int:
    if kind == "chain":
        pairs = chain_connections(n)
    elif kind == "binomial":
        pairs = binomial_connections(n)
    else:
        pairs = random_connections(n, m, seed)
    write_connections(out, n, pairs)
    return EXIT_OK


def _open_input(path: str | None) -> TextIO:
    if path is None or path == "-":
        return sys.stdin
    return open(path, "r")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Union-find driver")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    connect_parser = subparsers.add_parser("connect", help="Merge pairs of elements")
    connect_parser.add_argument(
        "input", nargs="?", default=None, help="Connection file (default: stdin)"
    )
    connect_parser.add_argument(
        "--variant",
        choices=[variant.value for variant in Variant],
        default=DEFAULT_VARIANT,
        help="Union-find implementation",
    )
    connect_parser.add_argument(
        "--verify",
        action="store_true",
        help="Check the final partition against a reference",
    )

    allowlist_parser = subparsers.add_parser(
        "allowlist", help="Print the input integers found in an allowlist"
    )
    allowlist_parser.add_argument("allowlist", help="Allowlist file")
    allowlist_parser.add_argument(
        "input", nargs="?", default=None, help="Keys file (default: stdin)"
    )

    generate_parser = subparsers.add_parser("generate", help="Write a connection file")
    generate_parser.add_argument("n", type=int, help="Number of elements")
    generate_parser.add_argument(
        "m", type=int, nargs="?", default=0, help="Number of random pairs"
    )
    generate_parser.add_argument(
        "--kind", choices=["random", "chain", "binomial"], default="random"
    )
    generate_parser.add_argument("--seed", type=int, default=DEFAULT_SEED)

    benchmark_parser = subparsers.add_parser("benchmark", help="Time every variant")
    benchmark_parser.add_argument("--n", type=int, default=BENCHMARK_N)
    benchmark_parser.add_argument("--m", type=int, default=BENCHMARK_M)
    benchmark_parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    benchmark_parser.add_argument(
        "--variant",
        dest="variants",
        action="append",
        choices=[variant.value for variant in Variant],
        help="Variant to time (repeatable, default: all)",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command in ("connect", "allowlist"):
        try:
            stream = _open_input(args.input)
        except OSError:
            print(f"failed to open {args.input}")
            return EXIT_FAILURE

    if args.command == "connect":
        try:
            return connect(stream, args.variant, verify=args.verify)
        finally:
            if stream is not sys.stdin:
                stream.close()

    if args.command == "allowlist":
        try:
            return allowlist(args.allowlist, stream)
        finally:
            if stream is not sys.stdin:
                stream.close()

    if args.command == "generate":
        try:
            return generate(args.n, args.m, args.kind, args.seed)
        except ValueError as error:
            logger.error(str(error))
            return EXIT_MALFORMED

    variants = [Variant(name) for name in args.variants or [v.value for v in Variant]]
    results = run_benchmark(args.n, args.m, variants, args.seed)
    render_results(results)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
