# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

import random
from typing import Dict
from unittest import TestCase

from .generator import QUERY_ID, QUERY_SIZE, generate_workload
from .geometry import Rectangle, contains_point
from .workload import Delete, Insert, QueryRecord

UNIT_SQUARE = Rectangle((0.0, 0.0), (1.0, 1.0))


class TestGenerateWorkload(TestCase):
    def test_structure(self) -> None:
        ops = list(generate_workload(50, rounds=3, rng=random.Random(1)))

        # 50 inserts, then 3 rounds of 5 moves (delete + insert) and 1 query
        self.assertEqual(len(ops), 50 + 3 * (5 * 2 + 1))
        self.assertTrue(all(isinstance(op, Insert) for op in ops[:50]))
        self.assertListEqual([op.id for op in ops[:50]], list(range(50)))

        queries = [i for i, op in enumerate(ops) if isinstance(op, QueryRecord)]
        self.assertListEqual(queries, [60, 71, 82])

    def test_moves_are_consistent(self) -> None:
        current: Dict[int, Rectangle] = {}

        for op in generate_workload(40, rounds=10, rng=random.Random(2)):
            if isinstance(op, Insert):
                current[op.id] = op.rectangle
                self.assertTrue(contains_point(UNIT_SQUARE, op.rectangle.low))
                self.assertTrue(contains_point(UNIT_SQUARE, op.rectangle.high))

            elif isinstance(op, Delete):
                # Deletes always refer to the current rectangle of an existing object
                self.assertEqual(current.pop(op.id), op.rectangle)

            else:
                self.assertEqual(op.id, QUERY_ID)
                self.assertEqual(len(current), 40)
                self.assertAlmostEqual(op.second[0] - op.first[0], QUERY_SIZE)
                self.assertAlmostEqual(op.second[1] - op.first[1], QUERY_SIZE)

    def test_distinct_moves_per_round(self) -> None:
        ops = list(generate_workload(100, rounds=1, rng=random.Random(3)))
        deleted = [op.id for op in ops if isinstance(op, Delete)]
        self.assertEqual(len(deleted), 10)
        self.assertEqual(len(set(deleted)), 10)

    def test_reproducible(self) -> None:
        self.assertListEqual(
            list(generate_workload(20, rounds=5, rng=random.Random(4))),
            list(generate_workload(20, rounds=5, rng=random.Random(4))),
        )

    def test_small(self) -> None:
        # Less than 10 objects - no moves, only queries
        ops = list(generate_workload(5, rounds=2, rng=random.Random(5)))
        self.assertEqual(len(ops), 7)
        self.assertTrue(all(isinstance(op, QueryRecord) for op in ops[5:]))

    def test_negative(self) -> None:
        with self.assertRaises(ValueError):
            list(generate_workload(-1))

    def test_negative_is_checked_eagerly(self) -> None:
        with self.assertRaises(ValueError):
            generate_workload(-1)
        with self.assertRaises(ValueError):
            generate_workload(10, rounds=-1)
