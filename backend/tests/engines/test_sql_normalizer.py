"""Unit tests for engines.sql.normalizer."""

import re
from datetime import datetime

from oraclequery.engines.sql.normalizer import (
    GENERIC_MESSAGE,
    normalize,
    normalize_value,
    operation_kind,
)
from oraclequery.schemas import GenericResult, MutationResult, SelectResult
from tests.utils.cursor import FakeLob, make_cursor

_HEX = re.compile(r"^[0-9A-F]*$")


class TestOperationKind:
    def test_select(self):
        assert operation_kind("SELECT 1 FROM dual") == "SELECT"

    def test_case_insensitive_and_trimmed(self):
        assert operation_kind("   update t set x = 1") == "UPDATE"

    def test_newline_after_keyword(self):
        assert operation_kind("delete\nFROM t") == "DELETE"

    def test_blank(self):
        assert operation_kind("   ") == ""

    def test_leading_comment_is_not_skipped(self):
        assert operation_kind("/* hint */ SELECT 1 FROM dual") == "/*"

    def test_with_query_is_not_select(self):
        assert operation_kind("WITH c AS (SELECT 1 FROM dual) SELECT * FROM c") == "WITH"


class TestNormalizeValue:
    def test_bytes_to_upper_hex(self):
        assert normalize_value(b"\xab\xcd") == "ABCD"

    def test_bytearray_and_memoryview(self):
        assert normalize_value(bytearray(b"\x01\xff")) == "01FF"
        assert normalize_value(memoryview(b"\x0a")) == "0A"

    def test_blob_locator_is_read_then_hex(self):
        assert normalize_value(FakeLob(b"\xab\xcd")) == "ABCD"

    def test_clob_locator_is_read_as_text(self):
        assert normalize_value(FakeLob("long text")) == "long text"

    def test_empty_bytes(self):
        assert normalize_value(b"") == ""

    def test_other_types_pass_through(self):
        ts = datetime(2024, 5, 1, 12, 0)
        for value in ("text", 42, 1.5, True, None, ts):
            assert normalize_value(value) is value

    def test_hex_is_even_length_uppercase(self):
        for raw in (b"\x00", b"\xde\xad\xbe\xef", bytes(range(256))):
            out = normalize_value(raw)
            assert len(out) % 2 == 0
            assert _HEX.match(out)


def test_select_converts_binary_columns() -> None:
    cur = make_cursor(["ID", "DATA"], [(1, b"\xab\xcd")])
    result = normalize("SELECT", cur)
    assert isinstance(result, SelectResult)
    assert result.model_dump(by_alias=True) == {
        "operation": "SELECT",
        "rows": [{"ID": 1, "DATA": "ABCD"}],
        "rowCount": 1,
    }


def test_select_row_count_equals_rows_returned() -> None:
    rows = [(i, f"name-{i}") for i in range(7)]
    cur = make_cursor(["ID", "NAME"], rows)
    cur.rowcount = 1000
    result = normalize("SELECT", cur)
    assert result.row_count == 7
    assert len(result.rows) == 7


def test_select_no_rows() -> None:
    result = normalize("SELECT", make_cursor(["ID"], []))
    assert result.rows == []
    assert result.row_count == 0


def test_update_reports_affected_rows() -> None:
    result = normalize("UPDATE", make_cursor(rowcount=3))
    assert isinstance(result, MutationResult)
    assert result.model_dump(by_alias=True) == {
        "operation": "UPDATE",
        "rowCount": 3,
        "message": "3 linha(s) afetada(s)",
    }


def test_insert_and_delete_message_contains_count() -> None:
    for kind, count in (("INSERT", 1), ("DELETE", 12)):
        result = normalize(kind, make_cursor(rowcount=count))
        assert result.operation == kind
        assert str(count) in result.message


def test_mutation_without_rowcount_is_zero() -> None:
    result = normalize("DELETE", make_cursor(rowcount=None))
    assert result.row_count == 0


def test_other_statements_get_generic_ack() -> None:
    cur = make_cursor(["X"], [(1,)])
    result = normalize("MERGE", cur)
    assert isinstance(result, GenericResult)
    assert result.model_dump(by_alias=True) == {
        "operation": "MERGE",
        "message": GENERIC_MESSAGE,
    }
    cur.fetchall.assert_not_called()


def test_select_reads_lob_columns() -> None:
    cur = make_cursor(["ID", "DOC", "NOTE"], [(1, FakeLob(b"\x00\x10"), FakeLob("abc"))])
    result = normalize("SELECT", cur)
    assert result.rows == [{"ID": 1, "DOC": "0010", "NOTE": "abc"}]
