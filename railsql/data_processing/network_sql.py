"""Turn a station/line membership table into a stream of INSERT statements.

Design goals:
- Single pass, row at a time: nothing but the header is held in memory.
- Deterministic ids: lines are numbered by column, stations by row, both from 1.
- Fail fast: the first bad row ends the stream with a `TransformFailed`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from railsql.core.config import FALSEY_LITERALS, TRUTHY_LITERALS
from railsql.core.errors import InvalidBoolean, SchemaError
from railsql.io import TabularReader
from railsql.models.schemas import LineInsert, MembershipInsert, Statement, StationInsert

LOGGER = logging.getLogger(__name__)

MIN_HEADER_WIDTH = 2  # station name column + at least one line


def parse_bool(text: str) -> bool | None:
    """Parse a flag literal; None if it is not one of the accepted spellings."""
    if text in TRUTHY_LITERALS:
        return True
    if text in FALSEY_LITERALS:
        return False
    return None


class TransformEngine:
    """Owns the id counters for one run over one reader."""

    def __init__(self, reader: TabularReader) -> None:
        self._reader = reader
        self.line_count = 0
        self.station_count = 0
        self.membership_count = 0

    def _line_statements(self, header: list[str]) -> Iterator[LineInsert]:
        if len(header) < MIN_HEADER_WIDTH:
            raise SchemaError("no rail lines: header needs at least one line column")
        for line_id, name in enumerate(header[1:], start=1):
            if not name:
                raise SchemaError(f"empty line name in header column {line_id + 1}")
            self.line_count = line_id
            yield LineInsert(line_id=line_id, name=name)

    def _station_statements(self, header: list[str], record: list[str]) -> Iterator[Statement]:
        station_id = self.station_count + 1
        name = record[0]
        if not name:
            raise SchemaError(f"empty station name for station {station_id}")
        yield StationInsert(station_id=station_id, name=name)

        for line_id, flag in enumerate(record[1:], start=1):
            on_line = parse_bool(flag)
            if on_line is None:
                raise InvalidBoolean(flag, station=name, line=header[line_id])
            if on_line:
                self.membership_count += 1
                yield MembershipInsert(station_id=station_id, line_id=line_id)
        self.station_count = station_id

    def statements(self) -> Iterator[Statement]:
        """Lazily yield every statement of the script, lines first."""
        header = self._reader.read_header()
        yield from self._line_statements(header)
        LOGGER.debug("Declared %d rail lines", self.line_count)

        for record in self._reader.records():
            yield from self._station_statements(header, record)
            LOGGER.debug("Station %d (%s) done", self.station_count, record[0])
