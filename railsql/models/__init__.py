"""Pydantic models for the script generator.

These are contracts between the pipeline stages:
- the transform yields statement models, never SQL text;
- the emitter is the only place that knows table names and SQL syntax.
"""

from __future__ import annotations

from railsql.models.schemas import (
    DEFAULT_TABLES,
    LINE_STATION,
    RAIL_LINE,
    STATION,
    LineInsert,
    MembershipInsert,
    ScriptConfig,
    Statement,
    StationInsert,
    TableSchema,
    TargetTables,
)

__all__ = [
    "TableSchema",
    "TargetTables",
    "ScriptConfig",
    "Statement",
    "LineInsert",
    "StationInsert",
    "MembershipInsert",
    "RAIL_LINE",
    "STATION",
    "LINE_STATION",
    "DEFAULT_TABLES",
]
