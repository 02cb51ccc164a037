# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

"""Exhaustive spatial query oracle for validating spatial index implementations"""

__title__ = "spatialoracle"
__description__ = "Exhaustive spatial query oracle for validating spatial index implementations"
__author__ = "Mikołaj Kuranowski"
__copyright__ = "© Copyright 2024 Mikołaj Kuranowski"
__license__ = "GPL-3.0-or-later"
__version__ = "1.0.0"
__email__ = "mkuranowski+pypackages@gmail.com"

from . import protocols, workload
from .compare import Mismatch, check_intersection, check_nearest_neighbors
from .driver import QueryResult, Replayer, replay
from .generator import generate_workload
from .geometry import Rectangle, contains_point, intersects, min_squared_distance
from .query import (
    DEFAULT_K,
    IntersectionQuery,
    NearestNeighborQuery,
    NNEntry,
    UnknownQueryModeError,
    evaluate,
    intersection_query,
    nearest_neighbor_entries,
    nearest_neighbor_query,
    parse_query_mode,
)
from .store import NotFoundError, ObjectStore, StoredObject
from .workload import MalformedRecordError

__all__ = [
    "check_intersection",
    "check_nearest_neighbors",
    "contains_point",
    "DEFAULT_K",
    "evaluate",
    "generate_workload",
    "intersection_query",
    "IntersectionQuery",
    "intersects",
    "MalformedRecordError",
    "min_squared_distance",
    "Mismatch",
    "nearest_neighbor_entries",
    "nearest_neighbor_query",
    "NearestNeighborQuery",
    "NNEntry",
    "NotFoundError",
    "ObjectStore",
    "parse_query_mode",
    "protocols",
    "QueryResult",
    "Rectangle",
    "replay",
    "Replayer",
    "StoredObject",
    "UnknownQueryModeError",
    "workload",
]
