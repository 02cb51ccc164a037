# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

"""Helpers for checking results of an index under test against the oracle."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .query import NNEntry


@dataclass
class Mismatch:
    """Mismatch describes the difference between an expected and an actual query result.

    ``missing`` lists ids which should have been reported, ``unexpected`` lists
    ids which should not have been reported (or were reported more than once).
    """

    missing: List[int] = field(default_factory=list)
    unexpected: List[int] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.missing or self.unexpected)


def _duplicates(ids: Iterable[int]) -> List[int]:
    return sorted(id for id, count in Counter(ids).items() if count > 1)


def check_intersection(expected: Iterable[int], actual: Iterable[int]) -> Optional[Mismatch]:
    """Compares two intersection query results as sets.
    Returns ``None`` if they are equivalent, or a :py:class:`Mismatch` otherwise.
    """
    actual_ids = list(actual)
    expected_set = set(expected)
    actual_set = set(actual_ids)

    mismatch = Mismatch(
        missing=sorted(expected_set - actual_set),
        unexpected=sorted(actual_set - expected_set) + _duplicates(actual_ids),
    )
    return mismatch if mismatch else None


def check_nearest_neighbors(
    expected: Sequence[NNEntry],
    actual: Iterable[int],
    k: int,
) -> Optional[Mismatch]:
    """Checks a nearest-neighbor query result against the tie-extended result
    from :py:func:`nearest_neighbor_entries`.

    The actual result is correct if it:

    * contains every expected object strictly closer than the k-th expected object,
    * contains only ids from the expected (tie-extended) result, each once, and
    * has at least ``min(k, len(expected))`` ids.

    In other words, both "exactly k" and "k plus some or all ties" are accepted.
    Returns ``None`` if the result is correct, or a :py:class:`Mismatch` otherwise.
    When the result is too short, the tied ids which were not reported are listed
    as ``missing``.
    """
    actual_ids = list(actual)
    actual_set = set(actual_ids)
    expected_ids = {entry.id for entry in expected}
    required = min(k, len(expected)) if k > 0 else 0

    mismatch = Mismatch(unexpected=sorted(actual_set - expected_ids) + _duplicates(actual_ids))

    if required > 0:
        cutoff = expected[required - 1].distance
        mismatch.missing = sorted(
            entry.id
            for entry in expected
            if entry.distance < cutoff and entry.id not in actual_set
        )

        if not mismatch.missing and len(actual_set & expected_ids) < required:
            mismatch.missing = sorted(
                entry.id
                for entry in expected
                if entry.distance == cutoff and entry.id not in actual_set
            )

    return mismatch if mismatch else None
