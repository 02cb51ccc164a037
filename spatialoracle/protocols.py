# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import TYPE_CHECKING, Protocol, Tuple

if TYPE_CHECKING:
    from .geometry import Rectangle

Coordinates = Tuple[float, ...]
"""Coordinates describes a point in a space of arbitrary dimensionality.
Workloads replayed by spatialoracle are two-dimensional, ``(x, y)``.
"""

Point = Coordinates
"""Point describes the anchor of a nearest-neighbor query. Points are never stored."""


class WithRectangle(Protocol):
    """WithRectangle describes any object with an ``id`` and a ``rectangle`` property."""

    @property
    def id(self) -> int: ...

    @property
    def rectangle(self) -> "Rectangle": ...
