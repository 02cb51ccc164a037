# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from .geometry import Rectangle


class NotFoundError(KeyError):
    """Exception raised when deleting an object which is not in an :py:class:`ObjectStore`.

    This always means the workload and the store went out of sync - every delete
    must be preceded by an insert of the same id. ``index`` is the position of
    the offending operation in the stream, if known.
    """

    def __init__(self, id: int, index: Optional[int] = None) -> None:
        super().__init__(id)
        self.id = id
        self.index = index

    def __str__(self) -> str:
        if self.index is None:
            return f"object {self.id} does not exist"
        return f"operation {self.index}: object {self.id} does not exist"


@dataclass(frozen=True)
class StoredObject:
    """StoredObject pairs an object identifier with its current :py:class:`Rectangle`."""

    id: int
    rectangle: Rectangle


@dataclass
class ObjectStore:
    """ObjectStore is a mutable mapping from object ids to their rectangles.

    Queries should not read the store directly, but through a :py:meth:`snapshot`.
    """

    objects: Dict[int, Rectangle] = field(default_factory=dict)

    def insert(self, id: int, rect: Rectangle) -> None:
        """Inserts a new object, or replaces the rectangle of an existing one."""
        self.objects[id] = rect

    def delete(self, id: int) -> None:
        """Removes an object from the store. Raises :py:exc:`NotFoundError` if it doesn't exist."""
        try:
            del self.objects[id]
        except KeyError:
            raise NotFoundError(id) from None

    def get(self, id: int) -> Optional[Rectangle]:
        return self.objects.get(id)

    def snapshot(self) -> List[StoredObject]:
        """snapshot returns a copy of all currently stored objects, unaffected by
        any later changes to the store. The order of the objects is unspecified.
        """
        return [StoredObject(id, rect) for id, rect in self.objects.items()]

    def __len__(self) -> int:
        return len(self.objects)

    def __contains__(self, id: object) -> bool:
        return id in self.objects

    def __iter__(self) -> Iterator[int]:
        return iter(self.objects)
