"""Render statement models as a transactional SQL script.

The script is written as it is produced: `BEGIN;`, one line per statement,
then `COMMIT;` on success or `ROLLBACK;` on any failure. The sink is flushed
on every exit path.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TextIO

from railsql.core.config import BEGIN_MARKER, COMMIT_MARKER, ROLLBACK_MARKER, SQL_ESCAPES
from railsql.core.errors import SinkWriteError, TransformFailed
from railsql.models.schemas import (
    DEFAULT_TABLES,
    LineInsert,
    MembershipInsert,
    Statement,
    StationInsert,
    TableSchema,
    TargetTables,
)

LOGGER = logging.getLogger(__name__)


def escape_sql(text: str) -> str:
    """Escape a value for use inside a single-quoted SQL string literal.

    Only NUL (dropped) and the single quote (doubled) are handled. Anything a
    particular database treats specially beyond standard SQL (e.g. backslashes
    in MySQL) must already be escaped in the input.
    """
    for old, new in SQL_ESCAPES:
        text = text.replace(old, new)
    return text


def _quote(text: str) -> str:
    return f"'{escape_sql(text)}'"


def _insert(table: TableSchema, values: tuple[str, ...], with_columns: bool) -> str:
    target = table.name
    if with_columns:
        target = f"{target} ({', '.join(table.columns)})"
    return f"INSERT INTO {target} VALUES ({', '.join(values)});"


def render_statement(
    statement: Statement,
    tables: TargetTables = DEFAULT_TABLES,
    *,
    with_columns: bool = False,
) -> str:
    if isinstance(statement, LineInsert):
        values = (str(statement.line_id), _quote(statement.name))
        return _insert(tables.rail_line, values, with_columns)
    if isinstance(statement, StationInsert):
        values = (str(statement.station_id), _quote(statement.name))
        return _insert(tables.station, values, with_columns)
    if isinstance(statement, MembershipInsert):
        values = (str(statement.station_id), str(statement.line_id))
        return _insert(tables.membership, values, with_columns)
    raise TypeError(f"cannot render {type(statement).__name__}")


class ScriptWriter:
    """Line-oriented writer over a text sink.

    `write_line` and `flush` raise `SinkWriteError`; `rollback` and
    `force_flush` only log, so they are safe inside failure handling.
    """

    def __init__(self, sink: TextIO) -> None:
        self._sink = sink
        self.lines_written = 0

    def write_line(self, text: str) -> None:
        try:
            self._sink.write(text + "\n")
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"failed to write {text!r}: {exc}") from exc
        self.lines_written += 1

    def flush(self) -> None:
        try:
            self._sink.flush()
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"failed to flush output: {exc}") from exc

    def rollback(self) -> None:
        try:
            self.write_line(ROLLBACK_MARKER)
        except SinkWriteError as exc:
            LOGGER.warning("%s", exc)

    def force_flush(self) -> None:
        try:
            self.flush()
        except SinkWriteError as exc:
            LOGGER.warning("%s", exc)


@contextmanager
def open_script(sink: TextIO) -> Iterator[ScriptWriter]:
    """Scope a `ScriptWriter`; the sink is flushed however the block exits."""
    writer = ScriptWriter(sink)
    try:
        yield writer
    finally:
        writer.force_flush()


@dataclass(frozen=True)
class ScriptOutcome:
    """Result of one emission: committed, or rolled back with a cause."""

    committed: bool
    statements: int
    cause: TransformFailed | None = None


def emit_script(
    statements: Iterable[Statement],
    sink: TextIO,
    tables: TargetTables = DEFAULT_TABLES,
    *,
    with_columns: bool = False,
) -> ScriptOutcome:
    """Write `statements` to `sink` inside a transaction.

    Expected failures (`TransformFailed`, including sink errors) are returned
    as a rolled-back outcome. Anything else is rolled back and re-raised.
    """
    count = 0
    with open_script(sink) as writer:
        try:
            writer.write_line(BEGIN_MARKER)
            for statement in statements:
                writer.write_line(render_statement(statement, tables, with_columns=with_columns))
                count += 1
            # Surface pending sink errors while ROLLBACK can still replace COMMIT.
            writer.flush()
            writer.write_line(COMMIT_MARKER)
            writer.flush()
        except TransformFailed as exc:
            writer.rollback()
            return ScriptOutcome(committed=False, statements=count, cause=exc)
        except Exception:
            writer.rollback()
            raise
    return ScriptOutcome(committed=True, statements=count)
