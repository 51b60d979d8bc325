"""Common CLI utilities for the csv2sql script."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from railsql.io import sha256_file
from railsql.io.sql_script import ScriptOutcome


def create_base_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="CSV file to read (default: standard input).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="SQL file to write (default: standard output).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: config/csv2sql_config.yaml if present).",
    )
    parser.add_argument(
        "--checkpoint",
        action="store_true",
        help="Log a checkpoint summary including the output hash (with --output).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def add_table_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--line-table", default=None, help="Override the rail line table name.")
    parser.add_argument("--station-table", default=None, help="Override the station table name.")
    parser.add_argument(
        "--membership-table",
        default=None,
        help="Override the station/line membership table name.",
    )
    parser.add_argument(
        "--with-columns",
        action="store_true",
        default=None,
        help="Render explicit column lists, e.g. INSERT INTO Station (id, name) VALUES ...",
    )


def checkpoint_summary(outcome: ScriptOutcome, output: Path | None) -> dict[str, Any]:
    summary: dict[str, Any] = {
        "committed": outcome.committed,
        "statements": outcome.statements,
        "cause": None if outcome.cause is None else str(outcome.cause),
    }
    if output is not None and output.exists():
        summary["output"] = str(output)
        summary["output_sha256"] = sha256_file(output)
    return summary
