"""Lightweight I/O helpers.

This module centralises:
- the streaming CSV reader (`TabularReader`) at the pipeline input boundary
- YAML config loading (`load_script_config`)
- small file helpers used by `scripts/csv2sql.py`
"""

from __future__ import annotations

import csv
import hashlib
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

import yaml

from railsql.core.errors import MalformedInput
from railsql.models.schemas import ScriptConfig

LOGGER = logging.getLogger(__name__)


class TabularReader:
    """Read-once CSV reader: a header row, then a lazy stream of records.

    Every record must be as wide as the header; nothing is padded or truncated.
    Blank lines are skipped. A quote inside an unquoted field (`Fo"o`) is kept
    as a literal character rather than rejected, which is how `csv` parses it.
    """

    def __init__(self, stream: TextIO) -> None:
        self._reader = csv.reader(stream, strict=True)
        self._header: list[str] | None = None

    @property
    def line_num(self) -> int:
        """Number of physical input lines consumed so far."""
        return self._reader.line_num

    def _next_row(self) -> list[str] | None:
        while True:
            try:
                row = next(self._reader)
            except StopIteration:
                return None
            except (csv.Error, UnicodeDecodeError) as exc:
                raise MalformedInput(f"line {self.line_num}: {exc}") from exc
            if row:
                return row

    def read_header(self) -> list[str]:
        if self._header is not None:
            raise RuntimeError("header has already been read")
        row = self._next_row()
        if row is None:
            raise MalformedInput("missing header row")
        self._header = row
        return row

    def records(self) -> Iterator[list[str]]:
        if self._header is None:
            raise RuntimeError("read_header() must be called before records()")
        width = len(self._header)
        while (row := self._next_row()) is not None:
            if len(row) != width:
                raise MalformedInput(
                    f"line {self.line_num}: expected {width} fields, got {len(row)}"
                )
            yield row


def load_script_config(path: Path) -> ScriptConfig:
    """Load and validate a YAML config file (an empty file means all defaults)."""
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(raw).__name__}")
    LOGGER.debug("Loaded config from %s", path)
    return ScriptConfig.model_validate(raw)


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def sha256_file(path: Path) -> str:
    """Return SHA256 hex digest for a file."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b""):
            h.update(chunk)
    return h.hexdigest()
