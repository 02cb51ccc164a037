# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

import random
from logging import getLogger
from typing import Dict, Iterable, Optional

from .geometry import Rectangle
from .workload import Delete, Insert, Operation, QueryRecord

logger = getLogger("spatialoracle.generator")

QUERY_ID = 9999999
"""Identifier written in query records. Query records never refer to stored objects,
so the identifier is informative only."""

DEFAULT_ROUNDS = 100
"""Default number of update-then-query rounds generated by :py:func:`generate_workload`."""

MOVED_FRACTION = 0.1
"""Fraction of all objects moved in every round of :py:func:`generate_workload`."""

QUERY_SIZE = 0.01
"""Width and height of the query windows generated by :py:func:`generate_workload`."""


def _random_rectangle(rng: random.Random) -> Rectangle:
    return Rectangle.from_corners((rng.random(), rng.random()), (rng.random(), rng.random()))


def generate_workload(
    number_of_objects: int,
    rounds: int = DEFAULT_ROUNDS,
    rng: Optional[random.Random] = None,
) -> Iterable[Operation]:
    """generate_workload produces a random operation stream over the unit square.

    First, objects ``0`` to ``number_of_objects - 1`` are inserted at random rectangles.
    Then, in each of ``rounds`` rounds, 10% of distinct objects are moved (a delete
    followed by an insert at a new random rectangle), and a single query record over
    a small window at a random position is emitted.

    Pass a seeded ``rng`` to get a reproducible workload.
    """
    if number_of_objects < 0:
        raise ValueError(f"number_of_objects must not be negative, got {number_of_objects}")
    if rounds < 0:
        raise ValueError(f"rounds must not be negative, got {rounds}")

    if rng is None:
        rng = random.Random()

    return _generate(number_of_objects, rounds, rng)


def _generate(number_of_objects: int, rounds: int, rng: random.Random) -> Iterable[Operation]:
    data: Dict[int, Rectangle] = {}
    for id in range(number_of_objects):
        r = _random_rectangle(rng)
        data[id] = r
        yield Insert(id, r.low, r.high)

    moved = int(number_of_objects * MOVED_FRACTION)
    for round_no in range(1, rounds + 1):
        logger.debug("Generating round %d of %d", round_no, rounds)

        for id in rng.sample(range(number_of_objects), moved):
            old = data[id]
            yield Delete(id, old.low, old.high)

            new = _random_rectangle(rng)
            data[id] = new
            yield Insert(id, new.low, new.high)

        x = rng.random()
        y = rng.random()
        yield QueryRecord(QUERY_ID, (x, y), (x + QUERY_SIZE, y + QUERY_SIZE))
