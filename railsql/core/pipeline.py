"""Reader -> transform -> emitter wiring for one run."""

from __future__ import annotations

import logging
from typing import TextIO

from railsql.data_processing.network_sql import TransformEngine
from railsql.io import TabularReader
from railsql.io.sql_script import ScriptOutcome, emit_script
from railsql.models.schemas import DEFAULT_TABLES, TargetTables

LOGGER = logging.getLogger(__name__)


def run_pipeline(
    source: TextIO,
    sink: TextIO,
    *,
    tables: TargetTables = DEFAULT_TABLES,
    with_columns: bool = False,
) -> ScriptOutcome:
    """Convert the CSV on `source` into a SQL script on `sink`.

    Logs the failure cause (or a one-line summary) exactly once.
    """
    engine = TransformEngine(TabularReader(source))
    outcome = emit_script(engine.statements(), sink, tables, with_columns=with_columns)

    if outcome.committed:
        LOGGER.info(
            "Script committed: %d rail lines, %d stations, %d memberships",
            engine.line_count,
            engine.station_count,
            engine.membership_count,
        )
    else:
        LOGGER.error(
            "Script rolled back after %d statements (%s): %s",
            outcome.statements,
            type(outcome.cause).__name__,
            outcome.cause,
        )
    return outcome
