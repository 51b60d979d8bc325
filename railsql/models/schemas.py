"""Schema definitions for the emitted SQL script.

This module contains only:
- `TableSchema` / `TargetTables` (target relation metadata)
- the statement models produced by the transform (`LineInsert`, ...)
- `ScriptConfig` (the validated YAML config file)
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class TableSchema(BaseModel):
    """A target relation: name plus the column order used by its INSERTs."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    columns: tuple[str, ...] = Field(min_length=1)

    def renamed(self, name: str) -> TableSchema:
        return TableSchema(name=name, columns=self.columns)


RAIL_LINE = TableSchema(name="RailLine", columns=("id", "name"))
STATION = TableSchema(name="Station", columns=("id", "name"))
# Values are written station first, then line.
LINE_STATION = TableSchema(name="LineStation", columns=("station_id", "line_id"))


class TargetTables(BaseModel):
    model_config = ConfigDict(frozen=True)

    rail_line: TableSchema = RAIL_LINE
    station: TableSchema = STATION
    membership: TableSchema = LINE_STATION

    def with_names(
        self,
        *,
        rail_line: str | None = None,
        station: str | None = None,
        membership: str | None = None,
    ) -> TargetTables:
        """Return a copy with the given tables renamed (None keeps the current name)."""
        return TargetTables(
            rail_line=self.rail_line if rail_line is None else self.rail_line.renamed(rail_line),
            station=self.station if station is None else self.station.renamed(station),
            membership=(
                self.membership if membership is None else self.membership.renamed(membership)
            ),
        )


DEFAULT_TABLES = TargetTables()


class LineInsert(BaseModel):
    model_config = ConfigDict(frozen=True)

    line_id: int = Field(ge=1)
    name: str = Field(min_length=1)


class StationInsert(BaseModel):
    model_config = ConfigDict(frozen=True)

    station_id: int = Field(ge=1)
    name: str = Field(min_length=1)


class MembershipInsert(BaseModel):
    """A station lies on a line."""

    model_config = ConfigDict(frozen=True)

    station_id: int = Field(ge=1)
    line_id: int = Field(ge=1)


Statement = Union[LineInsert, StationInsert, MembershipInsert]


class TableNames(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rail_line: str | None = Field(default=None, min_length=1)
    station: str | None = Field(default=None, min_length=1)
    membership: str | None = Field(default=None, min_length=1)


class RenderOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    with_columns: bool = False


class ScriptConfig(BaseModel):
    """Contents of `config/csv2sql_config.yaml` (every key optional)."""

    model_config = ConfigDict(extra="forbid")

    tables: TableNames = Field(default_factory=TableNames)
    render: RenderOptions = Field(default_factory=RenderOptions)

    def target_tables(self) -> TargetTables:
        return DEFAULT_TABLES.with_names(
            rail_line=self.tables.rail_line,
            station=self.tables.station,
            membership=self.tables.membership,
        )
