"""Tests for yummi.rows -- extracting values from rows of any shape."""

from __future__ import annotations

from dataclasses import dataclass

from yummi.rows import IndexedRow, RowKind, classify_row, extract_row, row_values


@dataclass
class Entry:
    name: str
    value: float


class TestClassifyRow:
    def test_list(self) -> None:
        assert classify_row([1, 2]) is RowKind.SEQUENCE

    def test_tuple(self) -> None:
        assert classify_row(("a",)) is RowKind.SEQUENCE

    def test_dict(self) -> None:
        assert classify_row({"a": 1}) is RowKind.MAPPING

    def test_string_is_an_object(self) -> None:
        assert classify_row("abc") is RowKind.OBJECT

    def test_dataclass(self) -> None:
        assert classify_row(Entry("a", 1)) is RowKind.OBJECT


class TestRowValues:
    """Values come out in column order."""

    def test_sequence(self) -> None:
        assert row_values(("a", 1), ["name", "value"]) == ["a", 1]

    def test_mapping_by_alias(self) -> None:
        assert row_values({"value": 2, "name": "x"}, ["name", "value"]) == ["x", 2]

    def test_mapping_missing_key_is_none(self) -> None:
        assert row_values({"name": "x"}, ["name", "value"]) == ["x", None]

    def test_mapping_without_aliases(self) -> None:
        assert row_values({"b": 2, "a": 1}) == [2, 1]

    def test_object_by_alias(self) -> None:
        assert row_values(Entry("x", 3.5), ["name", "value", "other"]) == ["x", 3.5, None]

    def test_object_without_aliases(self) -> None:
        assert row_values("plain") == ["plain"]


class TestExtractRow:
    def test_positions(self) -> None:
        values = extract_row(["a", None], ["name", "value"], row_index=3)
        assert [v.value for v in values] == ["a", None]
        assert [v.column_index for v in values] == [0, 1]
        assert all(v.row_index == 3 for v in values)

    def test_null_status(self) -> None:
        values = extract_row(["a", None])
        assert values[0].is_null is False
        assert values[1].is_null is True


class TestIndexedRow:
    """Access by alias and by index resolve identically."""

    def test_alias_and_index(self) -> None:
        row = IndexedRow(["name", "value"], ["a", 1])
        assert row["value"] == row[1] == 1

    def test_unknown_alias_is_none(self) -> None:
        row = IndexedRow(["name"], ["a"])
        assert row["nope"] is None

    def test_out_of_range_is_none(self) -> None:
        row = IndexedRow(["name"], ["a"])
        assert row[5] is None

    def test_iterates_values(self) -> None:
        assert list(IndexedRow([], [1, 2])) == [1, 2]
        assert len(IndexedRow([], [1, 2])) == 2
