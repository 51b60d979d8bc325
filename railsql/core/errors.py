"""Failure taxonomy for the CSV -> SQL pipeline.

Every expected failure derives from `TransformFailed`, so the driver can turn
any of them into a `ROLLBACK;` with a single `except` clause.
"""

from __future__ import annotations


class TransformFailed(Exception):
    """Base class: the run cannot produce a committed script."""


class MalformedInput(TransformFailed):
    """CSV syntax violation, missing header or a record of the wrong width."""


class SchemaError(TransformFailed):
    """Structural violation: no line columns, empty line or station name."""


class InvalidBoolean(TransformFailed, ValueError):
    """A flag column holds something other than a recognised boolean literal."""

    def __init__(self, value: str, *, station: str, line: str) -> None:
        self.value = value
        self.station = station
        self.line = line
        super().__init__(
            f"invalid boolean {value!r} for station {station!r}, line {line!r}"
        )


class SinkWriteError(TransformFailed):
    """Writing to (or flushing) the output channel failed."""
