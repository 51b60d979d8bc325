from __future__ import annotations

import io

import pytest

from railsql.core.errors import MalformedInput
from railsql.io import TabularReader


def _reader(text: str) -> TabularReader:
    return TabularReader(io.StringIO(text, newline=""))


def test_header_then_records(network_csv):
    reader = TabularReader(network_csv)
    assert reader.read_header() == ["", "Red", "Green", "Blue"]
    assert list(reader.records()) == [
        ["Foo", "0", "f", "false"],
        ["Bar", "1", "F", "True"],
        ["Baz", "FALSE", "t", "False"],
    ]


def test_records_are_lazy():
    reader = _reader(",Red\nA,1\nB,1,extra\n")
    reader.read_header()
    records = reader.records()
    assert next(records) == ["A", "1"]
    with pytest.raises(MalformedInput, match="expected 2 fields, got 3"):
        next(records)


def test_quoted_fields_keep_delimiters_quotes_and_newlines():
    reader = _reader(',"Red, North"\n"Say ""hi""\nthere",1\n')
    assert reader.read_header() == ["", "Red, North"]
    assert list(reader.records()) == [['Say "hi"\nthere', "1"]]


def test_short_row_is_rejected_not_padded():
    reader = _reader(",Red,Green\nFoo,1\n")
    reader.read_header()
    with pytest.raises(MalformedInput, match="line 2: expected 3 fields, got 2"):
        list(reader.records())


def test_unterminated_quote_is_malformed():
    reader = _reader(',Red\n"Foo,1\n')
    reader.read_header()
    with pytest.raises(MalformedInput):
        list(reader.records())


def test_empty_input_has_no_header():
    with pytest.raises(MalformedInput, match="missing header row"):
        _reader("").read_header()


def test_blank_lines_are_skipped():
    reader = _reader(",Red\n\nFoo,1\n\n\nBar,0\n")
    reader.read_header()
    assert [r[0] for r in reader.records()] == ["Foo", "Bar"]


def test_crlf_line_endings():
    reader = _reader(",Red\r\nFoo,1\r\n")
    assert reader.read_header() == ["", "Red"]
    assert list(reader.records()) == [["Foo", "1"]]


def test_header_is_read_once():
    reader = _reader(",Red\n")
    reader.read_header()
    with pytest.raises(RuntimeError):
        reader.read_header()


def test_records_require_header():
    with pytest.raises(RuntimeError):
        next(_reader(",Red\n").records())


def test_undecodable_bytes_are_malformed():
    stream = io.TextIOWrapper(io.BytesIO(b",Red\nFo\xffo,1\n"), encoding="utf-8", newline="")
    reader = TabularReader(stream)
    with pytest.raises(MalformedInput, match="can't decode byte 0xff"):
        reader.read_header()
        list(reader.records())


def test_quote_inside_unquoted_field_is_literal():
    reader = _reader(',Red\nFo"o,1\n')
    reader.read_header()
    assert list(reader.records()) == [['Fo"o', "1"]]
