# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

from unittest import TestCase

from .geometry import Rectangle
from .store import NotFoundError, ObjectStore, StoredObject


class TestObjectStore(TestCase):
    A = Rectangle((0.0, 0.0), (1.0, 1.0))
    B = Rectangle((10.0, 10.0), (11.0, 11.0))

    def test_insert(self) -> None:
        s = ObjectStore()
        s.insert(1, self.A)
        s.insert(2, self.B)

        self.assertEqual(len(s), 2)
        self.assertIn(1, s)
        self.assertIn(2, s)
        self.assertEqual(s.get(1), self.A)
        self.assertSetEqual(set(s), {1, 2})

    def test_insert_replaces(self) -> None:
        s = ObjectStore()
        s.insert(7, self.A)
        s.insert(7, self.B)

        self.assertEqual(len(s), 1)
        self.assertEqual(s.get(7), self.B)
        self.assertListEqual(s.snapshot(), [StoredObject(7, self.B)])

    def test_delete(self) -> None:
        s = ObjectStore()
        s.insert(5, self.A)
        s.delete(5)

        self.assertEqual(len(s), 0)
        self.assertNotIn(5, s)
        self.assertIsNone(s.get(5))

    def test_delete_unknown(self) -> None:
        s = ObjectStore()
        s.insert(1, self.A)

        with self.assertRaises(NotFoundError) as cm:
            s.delete(2)
        self.assertEqual(cm.exception.id, 2)
        self.assertIsNone(cm.exception.index)
        self.assertIsInstance(cm.exception, KeyError)

        # The store must be left untouched
        self.assertEqual(len(s), 1)

    def test_snapshot_is_independent(self) -> None:
        s = ObjectStore()
        s.insert(1, self.A)
        snapshot = s.snapshot()

        s.insert(2, self.B)
        s.delete(1)

        self.assertListEqual(snapshot, [StoredObject(1, self.A)])
        self.assertListEqual(s.snapshot(), [StoredObject(2, self.B)])


class TestNotFoundError(TestCase):
    def test_message(self) -> None:
        self.assertEqual(str(NotFoundError(3)), "object 3 does not exist")
        self.assertEqual(str(NotFoundError(3, 42)), "operation 42: object 3 does not exist")
