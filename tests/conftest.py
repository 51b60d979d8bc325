"""Shared fixtures for the csv2sql tests."""

from __future__ import annotations

import io

import pytest

NETWORK_CSV = ",Red,Green,Blue\nFoo,0,f,false\nBar,1,F,True\nBaz,FALSE,t,False\n"

NETWORK_SQL = (
    "BEGIN;\n"
    "INSERT INTO RailLine VALUES (1, 'Red');\n"
    "INSERT INTO RailLine VALUES (2, 'Green');\n"
    "INSERT INTO RailLine VALUES (3, 'Blue');\n"
    "INSERT INTO Station VALUES (1, 'Foo');\n"
    "INSERT INTO Station VALUES (2, 'Bar');\n"
    "INSERT INTO LineStation VALUES (2, 1);\n"
    "INSERT INTO LineStation VALUES (2, 3);\n"
    "INSERT INTO Station VALUES (3, 'Baz');\n"
    "INSERT INTO LineStation VALUES (3, 2);\n"
    "COMMIT;\n"
)


class FailingSink(io.StringIO):
    """StringIO that starts failing after `fail_after` successful writes."""

    def __init__(self, fail_after: int, *, fail_flush: bool = False) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.fail_flush = fail_flush
        self.writes = 0
        self.flushes = 0

    def write(self, text: str) -> int:
        if self.writes >= self.fail_after:
            raise OSError("disk full")
        self.writes += 1
        return super().write(text)

    def flush(self) -> None:
        self.flushes += 1
        if self.fail_flush:
            raise OSError("broken pipe")
        super().flush()


@pytest.fixture
def network_csv() -> io.StringIO:
    return io.StringIO(NETWORK_CSV, newline="")
