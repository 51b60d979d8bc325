"""Project configuration (paths, SQL constants, logging)."""

from __future__ import annotations

import logging
from pathlib import Path

# Transaction markers
BEGIN_MARKER: str = "BEGIN;"
COMMIT_MARKER: str = "COMMIT;"
ROLLBACK_MARKER: str = "ROLLBACK;"

# Accepted flag literals (same set as Go's strconv.ParseBool)
FALSEY_LITERALS: frozenset[str] = frozenset({"0", "f", "F", "false", "False", "FALSE"})
TRUTHY_LITERALS: frozenset[str] = frozenset({"1", "t", "T", "true", "True", "TRUE"})

# (replacee, replacement) pairs applied in order to every quoted string literal
SQL_ESCAPES: tuple[tuple[str, str], ...] = (("\x00", ""), ("'", "''"))

CONFIG_FILE = "csv2sql_config.yaml"


def project_root() -> Path:
    """Return repository root assuming this file lives in `<root>/railsql/core/config.py`."""
    return Path(__file__).resolve().parents[2]


def default_config_path() -> Path:
    return project_root() / "config" / CONFIG_FILE


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
