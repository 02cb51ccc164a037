# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

import argparse
import logging
import random
import sys
from typing import IO, List, Optional

from .driver import replay
from .generator import DEFAULT_ROUNDS, generate_workload
from .query import DEFAULT_K, UnknownQueryModeError, parse_query_mode
from .store import NotFoundError
from .workload import MalformedRecordError, read_operations, write_operations

logger = logging.getLogger("spatialoracle")


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {n}")
    return n


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spatialoracle",
        description="Exhaustive intersection and nearest-neighbor oracle for spatial index workloads",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log progress (repeat for debug messages)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="write a random workload")
    generate.add_argument("number_of_objects", type=_non_negative_int)
    generate.add_argument("--rounds", type=_non_negative_int, default=DEFAULT_ROUNDS)
    generate.add_argument("--seed", type=int, default=None)
    generate.add_argument("-o", "--output", default=None, help="output file (default stdout)")

    replay = subparsers.add_parser("replay", help="print query results of a workload")
    replay.add_argument("workload", help="workload file, optionally .gz or .bz2 compressed")
    replay.add_argument("mode", help="'intersection', 'knn' or '<k>NN', like '10NN'")
    replay.add_argument("-k", type=int, default=None, help=f"number of neighbors (default {DEFAULT_K})")

    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _generate(args: argparse.Namespace) -> None:
    operations = generate_workload(args.number_of_objects, args.rounds, random.Random(args.seed))

    if args.output is None:
        count = write_operations(sys.stdout, operations)
    else:
        with open(args.output, mode="w", encoding="utf-8") as f:
            count = write_operations(f, operations)

    logger.info("Generated %d operations", count)


def _replay(args: argparse.Namespace, out: IO[str]) -> None:
    mode, mode_k = parse_query_mode(args.mode)
    k = args.k if args.k is not None else mode_k if mode_k is not None else DEFAULT_K

    with open(args.workload, mode="rb") as f:
        for result in replay(read_operations(f), mode, k):
            for id in result.ids:
                out.write(f"{id}\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command == "generate":
            _generate(args)
        else:
            _replay(args, sys.stdout)
    except (MalformedRecordError, NotFoundError, UnknownQueryModeError, OSError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
