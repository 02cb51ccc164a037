# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

from typing_extensions import Literal

from .geometry import Rectangle, intersects, min_squared_distance
from .protocols import Point, WithRectangle
from .store import ObjectStore

QUERY_MODE_T = Literal["intersection", "knn"]
"""Type of the query ``mode`` used by the workload driver. Query mode is a whole-run
setting: all query records of a workload are evaluated the same way.
"""

DEFAULT_QUERY_MODE: QUERY_MODE_T = "intersection"
"""Default query mode of the workload driver."""

DEFAULT_K = 10
"""Default number of neighbors requested by nearest-neighbor queries."""

_LEGACY_KNN_MODE = re.compile(r"([1-9][0-9]*)NN")


class UnknownQueryModeError(ValueError):
    """Exception raised by :py:func:`parse_query_mode` on an unrecognized query mode."""

    def __init__(self, mode: str) -> None:
        super().__init__(
            f"unknown query mode {mode!r} - expected 'intersection', 'knn' or '<k>NN' (e.g. '10NN')"
        )
        self.mode = mode


def parse_query_mode(text: str) -> Tuple[QUERY_MODE_T, Optional[int]]:
    """parse_query_mode converts a textual query mode into a ``(mode, k)`` pair.

    Accepts ``intersection``, ``knn`` and the ``<k>NN`` spelling (like ``10NN``),
    which additionally fixes the number of requested neighbors. ``k`` is ``None``
    unless given by the mode itself.
    """
    if text == "intersection":
        return "intersection", None
    elif text == "knn":
        return "knn", None
    elif m := _LEGACY_KNN_MODE.fullmatch(text):
        return "knn", int(m[1])
    raise UnknownQueryModeError(text)


@dataclass(frozen=True)
class IntersectionQuery:
    """IntersectionQuery asks for all objects overlapping ``rectangle``."""

    rectangle: Rectangle


@dataclass(frozen=True)
class NearestNeighborQuery:
    """NearestNeighborQuery asks for the ``k`` objects closest to ``point``,
    extended by all objects tied with the k-th one."""

    point: Point
    k: int = DEFAULT_K


Query = Union[IntersectionQuery, NearestNeighborQuery]


@dataclass(frozen=True, order=True)
class NNEntry:
    """NNEntry pairs an object id with the squared distance between its rectangle
    and the query point. Entries are ordered by distance only."""

    id: int = field(compare=False)
    distance: float = field(compare=True)


def intersection_query(objects: Iterable[WithRectangle], rect: Rectangle) -> List[int]:
    """Returns the ids of all objects whose rectangle intersects ``rect``,
    in the iteration order of ``objects``."""
    return [obj.id for obj in objects if intersects(obj.rectangle, rect)]


def nearest_neighbor_entries(
    objects: Iterable[WithRectangle],
    point: Point,
    k: int = DEFAULT_K,
) -> List[NNEntry]:
    """nearest_neighbor_entries finds the ``k`` objects closest to ``point``,
    by exhaustively scoring and sorting all provided objects.

    The result is extended with every object whose distance equals the distance
    of the k-th object, so it may contain more than ``k`` entries. An index may
    legitimately return any ``k`` of such tied objects, and only the full tied set
    allows checking all of those answers. If there are fewer than ``k`` objects,
    all of them are returned. If ``k`` is not positive, an empty list is returned.

    Entries are returned by ascending distance; the order of tied entries is unspecified.
    """
    if k <= 0:
        return []

    queue = sorted(NNEntry(obj.id, min_squared_distance(obj.rectangle, point)) for obj in objects)

    result: List[NNEntry] = []
    knearest = 0.0
    for entry in queue:
        # After k entries, only take entries tied with the last one
        if len(result) >= k and entry.distance > knearest:
            break
        result.append(entry)
        knearest = entry.distance

    return result


def nearest_neighbor_query(
    objects: Iterable[WithRectangle],
    point: Point,
    k: int = DEFAULT_K,
) -> List[int]:
    """Returns the ids of the entries found by :py:func:`nearest_neighbor_entries`."""
    return [entry.id for entry in nearest_neighbor_entries(objects, point, k)]


def evaluate(store: ObjectStore, query: Query) -> List[int]:
    """evaluate runs a single query against a snapshot of the provided store."""
    objects = store.snapshot()
    if isinstance(query, IntersectionQuery):
        return intersection_query(objects, query.rectangle)
    else:
        return nearest_neighbor_query(objects, query.point, query.k)
