# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

import bz2
import gzip
import re
from dataclasses import dataclass
from math import isfinite
from typing import IO, Iterable, Optional, Union

from typing_extensions import Literal

from .geometry import Rectangle
from .protocols import Coordinates

OP_DELETE = 0
OP_INSERT = 1
OP_QUERY = 2

FILE_FORMAT_T = Optional[Literal["txt", "gz", "bz2"]]
"""Type of the ``format`` argument of :py:func:`read_operations`.

Useful when passing this argument forward from custom functions.
"""

DEFAULT_FILE_FORMAT = None
"""Default value for the ``format`` argument of :py:func:`read_operations`.

Useful when passing this argument forward from custom functions.
"""


class MalformedRecordError(ValueError):
    """Exception raised on a record of the operation stream which can't be parsed.

    ``index`` is the 1-based line number of the record, and ``line`` its content.
    """

    def __init__(self, reason: str, index: int, line: str) -> None:
        super().__init__(f"record {index}: {reason}: {line.strip()!r}")
        self.reason = reason
        self.index = index
        self.line = line


@dataclass(frozen=True)
class _Record:
    id: int
    first: Coordinates
    second: Coordinates

    @property
    def rectangle(self) -> Rectangle:
        return Rectangle.from_corners(self.first, self.second)


@dataclass(frozen=True)
class Delete(_Record):
    """Delete removes object ``id``. Its coordinates are carried, but unused."""

    op = OP_DELETE


@dataclass(frozen=True)
class Insert(_Record):
    """Insert adds object ``id``, or moves it to a new rectangle."""

    op = OP_INSERT


@dataclass(frozen=True)
class QueryRecord(_Record):
    """QueryRecord requests a query over :py:attr:`rectangle`. Nearest-neighbor
    queries only use the :py:attr:`first` corner as the query point."""

    op = OP_QUERY


Operation = Union[Delete, Insert, QueryRecord]
"""Operation represents a single record of the operation stream:
a :py:class:`Delete`, :py:class:`Insert` or :py:class:`QueryRecord`.
"""

_OPERATION_TYPES = {OP_DELETE: Delete, OP_INSERT: Insert, OP_QUERY: QueryRecord}

_INTEGER = re.compile(r"-?[0-9]+")
_DECIMAL = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")


def _parse_coordinate(value: str, index: int, line: str) -> float:
    if not _DECIMAL.fullmatch(value):
        raise MalformedRecordError(f"invalid coordinate {value!r}", index, line)

    x = float(value)
    if not isfinite(x):
        raise MalformedRecordError(f"non-finite coordinate {value!r}", index, line)
    return x


def parse_operation(line: str, index: int = 0) -> Operation:
    """parse_operation parses a single ``op id x1 y1 x2 y2`` record.

    ``op`` is 0 for delete, 1 for insert and 2 for query. ``index`` is only used
    for error reporting. Raises :py:exc:`MalformedRecordError` on invalid input.
    """
    fields = line.split()
    if len(fields) != 6:
        raise MalformedRecordError(f"expected 6 fields, got {len(fields)}", index, line)

    if not _INTEGER.fullmatch(fields[0]):
        raise MalformedRecordError(f"invalid operation {fields[0]!r}", index, line)
    op = int(fields[0])

    type = _OPERATION_TYPES.get(op)
    if type is None:
        raise MalformedRecordError(f"unknown operation {op}", index, line)

    if not _INTEGER.fullmatch(fields[1]):
        raise MalformedRecordError(f"invalid id {fields[1]!r}", index, line)
    id = int(fields[1])

    x1, y1, x2, y2 = (_parse_coordinate(f, index, line) for f in fields[2:])
    return type(id, (x1, y1), (x2, y2))


def format_operation(op: Operation) -> str:
    """Formats an :py:obj:`Operation` back into an ``op id x1 y1 x2 y2`` record,
    without the trailing newline."""
    return f"{op.op} {op.id} {op.first[0]!r} {op.first[1]!r} {op.second[0]!r} {op.second[1]!r}"


def _read_operations_from_lines(buf: IO[bytes]) -> Iterable[Operation]:
    for index, raw_line in enumerate(buf, start=1):
        try:
            line = raw_line.decode("utf-8")
        except UnicodeDecodeError:
            raise MalformedRecordError(
                "invalid UTF-8",
                index,
                raw_line.decode("utf-8", errors="replace"),
            ) from None

        if line.strip():
            yield parse_operation(line, index)


def read_operations(
    buf: IO[bytes],
    format: FILE_FORMAT_T = DEFAULT_FILE_FORMAT,
) -> Iterable[Operation]:
    """read_operations generates :py:obj:`Operation` instances from a possibly-compressed
    workload file, one record per line. Blank lines are skipped.

    If ``format`` is not provided, this function will check if ``buf.name`` ends with
    ``.gz`` or ``.bz2`` to determine whether the provided buffer needs to be decompressed.
    If the file format cannot be determined, assumes uncompressed text.

    Records must be UTF-8 encoded. Raises :py:exc:`MalformedRecordError` on the first
    invalid record, including records which are not valid UTF-8.
    """
    name: str = getattr(buf, "name", "")
    if not isinstance(name, str):
        name = ""

    if format == "gz" or (format is None and name.endswith(".gz")):
        with gzip.open(buf, mode="rb") as decompressed_buffer:
            yield from _read_operations_from_lines(decompressed_buffer)  # type: ignore
    elif format == "bz2" or (format is None and name.endswith(".bz2")):
        with bz2.open(buf, mode="rb") as decompressed_buffer:
            yield from _read_operations_from_lines(decompressed_buffer)
    else:
        yield from _read_operations_from_lines(buf)


def write_operations(buf: IO[str], operations: Iterable[Operation]) -> int:
    """Writes operations to a text buffer, one record per line.
    Returns the number of written records."""
    count = 0
    for op in operations:
        buf.write(format_operation(op))
        buf.write("\n")
        count += 1
    return count

