import pytest

from vesselsim.symbol_table import SymbolTable


def test_insert_and_lookup():
    table = SymbolTable()
    table.insert("A", 3)
    assert table.lookup("A") == 3
    assert "A" in table
    assert len(table) == 1


def test_duplicate_insert_raises():
    table = SymbolTable()
    table.insert("A", 3)
    with pytest.raises(KeyError):
        table.insert("A", 5)
    assert table.lookup("A") == 3


def test_lookup_missing_is_none():
    assert SymbolTable().lookup("missing") is None


def test_increment_and_decrement_round_trip():
    table = SymbolTable()
    table.insert("A", 7)
    table.increment("A")
    table.decrement("A")
    assert table.lookup("A") == 7


def test_increment_missing_raises():
    with pytest.raises(KeyError):
        SymbolTable().increment("nope")


def test_decrement_missing_raises():
    with pytest.raises(KeyError):
        SymbolTable().decrement("nope")


def test_to_dict_is_sorted_copy():
    table = SymbolTable()
    for name, value in [("R", 5), ("A", 3), ("C", 5)]:
        table.insert(name, value)
    snapshot = table.to_dict()
    assert list(snapshot) == ["A", "C", "R"]
    snapshot["A"] = 100
    assert table.lookup("A") == 3


def test_format_lines():
    table = SymbolTable()
    table.insert("A", 3)
    assert list(table.format_lines()) == ["Key: A, Value: 3"]