"""Convert a station/rail-line CSV into a transactional SQL insert script.

The CSV header is `<ignored>,<line name>,<line name>,...` and every row is
`<station name>,<bool>,<bool>,...`. The script targets empty RailLine, Station
and LineStation tables; ids start at 1.

The output only escapes NUL and single quotes. Review it before piping it into
a database.

Run:
  cat network.csv | uv run python scripts/csv2sql.py > network.sql
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from contextlib import ExitStack
from pathlib import Path

# Ensure repo root is on sys.path so `import railsql...` works when executing this file directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import yaml
from pydantic import ValidationError
from railsql.core.cli_utils import add_table_flags, checkpoint_summary, create_base_parser
from railsql.core.config import configure_logging, default_config_path
from railsql.core.pipeline import run_pipeline
from railsql.io import ensure_parent_dir, load_script_config
from railsql.models.schemas import ScriptConfig

LOGGER = logging.getLogger("csv2sql")

EXIT_OK = 0
EXIT_ROLLED_BACK = 1
EXIT_BAD_CONFIG = 2


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = create_base_parser("Convert a rail network CSV into SQL INSERT statements.")
    add_table_flags(parser)
    return parser.parse_args(argv)


def _load_config(path: Path | None) -> ScriptConfig:
    if path is None:
        path = default_config_path()
        if not path.exists():
            return ScriptConfig()
    return load_script_config(path)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = _load_config(args.config)
        tables = config.target_tables().with_names(
            rail_line=args.line_table,
            station=args.station_table,
            membership=args.membership_table,
        )
    except (OSError, ValueError, yaml.YAMLError, ValidationError) as exc:
        LOGGER.error("Invalid config: %s", exc)
        return EXIT_BAD_CONFIG

    with_columns = config.render.with_columns if args.with_columns is None else args.with_columns

    with ExitStack() as stack:
        try:
            if args.input is None:
                source = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", newline="")
                stack.callback(source.detach)
            else:
                source = stack.enter_context(args.input.open(encoding="utf-8", newline=""))
            if args.output is None:
                # Same encoding as the input, whatever the locale says.
                if isinstance(sys.stdout, io.TextIOWrapper):
                    sys.stdout.reconfigure(encoding="utf-8")
                sink = sys.stdout
            else:
                ensure_parent_dir(args.output)
                sink = stack.enter_context(args.output.open("w", encoding="utf-8"))
        except OSError as exc:
            LOGGER.error("Cannot open stream: %s", exc)
            return EXIT_ROLLED_BACK

        outcome = run_pipeline(source, sink, tables=tables, with_columns=with_columns)

    if args.checkpoint:
        LOGGER.info("Checkpoint: %s", checkpoint_summary(outcome, args.output))

    return EXIT_OK if outcome.committed else EXIT_ROLLED_BACK


if __name__ == "__main__":
    sys.exit(main())
