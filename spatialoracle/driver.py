# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from logging import getLogger
from typing import Iterable, List, Optional

from .query import (
    DEFAULT_K,
    DEFAULT_QUERY_MODE,
    QUERY_MODE_T,
    IntersectionQuery,
    NearestNeighborQuery,
    Query,
    UnknownQueryModeError,
    evaluate,
)
from .store import NotFoundError, ObjectStore
from .workload import Delete, Insert, Operation, QueryRecord

logger = getLogger("spatialoracle.driver")

PROGRESS_INTERVAL = 1000
"""Number of operations between progress messages logged by :py:class:`Replayer`."""


@dataclass
class QueryResult:
    """QueryResult holds the ids found by a single query record.

    ``index`` is the 1-based position of the query in the operation stream.
    """

    index: int
    query_id: int
    ids: List[int]


@dataclass
class Replayer:
    """Replayer applies a stream of operations to its own :py:class:`ObjectStore`,
    evaluating every query record according to ``mode``.

    In ``"knn"`` mode only the first corner of a query record is used,
    as the query point of a nearest-neighbor query for ``k`` objects.
    """

    mode: QUERY_MODE_T = DEFAULT_QUERY_MODE
    k: int = DEFAULT_K
    store: ObjectStore = field(default_factory=ObjectStore)

    operations: int = 0
    queries: int = 0
    results: int = 0

    def __post_init__(self) -> None:
        if self.mode not in ("intersection", "knn"):
            raise UnknownQueryModeError(self.mode)

    def apply(self, op: Operation, index: Optional[int] = None) -> Optional[QueryResult]:
        """Applies a single operation. Returns a :py:class:`QueryResult` for query records,
        ``None`` otherwise.

        Raises :py:exc:`NotFoundError` if a deleted object is not in the store.
        """
        self.operations += 1
        if index is None:
            index = self.operations

        if isinstance(op, Delete):
            try:
                self.store.delete(op.id)
            except NotFoundError as e:
                raise NotFoundError(e.id, index) from None
            return None

        elif isinstance(op, Insert):
            self.store.insert(op.id, op.rectangle)
            return None

        ids = evaluate(self.store, self._make_query(op, index))
        self.queries += 1
        self.results += len(ids)
        return QueryResult(index, op.id, ids)

    def _make_query(self, op: QueryRecord, index: int) -> Query:
        if self.mode == "intersection":
            return IntersectionQuery(op.rectangle)

        if op.first != op.rectangle.low:
            logger.warning(
                "query %d: query point (%s) is not the lowest corner of the query record",
                index,
                ", ".join(map(str, op.first)),
            )
        return NearestNeighborQuery(op.first, self.k)

    def replay(self, operations: Iterable[Operation]) -> Iterable[QueryResult]:
        """Applies all operations, in order, generating results of every query record."""
        for op in operations:
            result = self.apply(op)
            if result is not None:
                yield result

            if self.operations % PROGRESS_INTERVAL == 0:
                logger.info("Processed %d operations", self.operations)

        logger.info(
            "Replayed %d operations: %d queries with %d results, %d objects stored",
            self.operations,
            self.queries,
            self.results,
            len(self.store),
        )


def replay(
    operations: Iterable[Operation],
    mode: QUERY_MODE_T = DEFAULT_QUERY_MODE,
    k: int = DEFAULT_K,
) -> Iterable[QueryResult]:
    """Replays an operation stream against a new, empty :py:class:`ObjectStore`.
    See :py:class:`Replayer`."""
    return Replayer(mode, k).replay(operations)
