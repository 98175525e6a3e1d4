import pytest

from asrdecode.symbols import (
    SymbolTable,
    load_symbol_table_pair,
    load_symbol_tables,
)


def _table(*symbols):
    table = SymbolTable()
    for symbol in symbols:
        table.add_symbol(symbol, len(table) + 1)
    return table


def test_add_and_lookup_both_ways():
    table = _table("a", "b")
    assert table.label_of("b") == 2
    assert table.symbol_of(1) == "a"
    assert "a" in table and "z" not in table
    assert len(table) == 2


def test_existing_symbol_keeps_label():
    table = _table("a")
    assert table.add_symbol("a", 7) == 1
    assert table.label_of("a") == 1
    assert len(table) == 1


def test_missing_lookups_raise():
    table = _table("a")
    with pytest.raises(KeyError):
        table.label_of("q")
    with pytest.raises(KeyError):
        table.symbol_of(99)


def test_invalid_symbol_rejected():
    with pytest.raises(ValueError):
        SymbolTable().add_symbol("a b", 1)


def test_iteration_in_insertion_order():
    table = SymbolTable()
    table.add_symbol("<eps>", 0)
    table.add_symbol("x", 5)
    table.add_symbol("c", 2)
    assert list(table) == [("<eps>", 0), ("x", 5), ("c", 2)]


def test_write_read_round_trip(tmp_path):
    table = _table("h", "e", "l", "o")
    path = tmp_path / "t.sym"
    table.write(path)
    assert list(SymbolTable.read(path)) == list(table)


def test_read_malformed(tmp_path):
    path = tmp_path / "bad.sym"
    path.write_text("a\t1\nb\n", encoding="utf-8")
    with pytest.raises(ValueError):
        SymbolTable.read(path)


def test_load_symbol_tables_from_directory(tmp_path):
    isyms = _table("a", "b")
    osyms = SymbolTable()
    osyms.add_symbol("<eps>", 0)
    isyms.write(tmp_path / "isymbols.sym")
    osyms.write(tmp_path / "osymbols.sym")
    loaded_in, loaded_out = load_symbol_tables(tmp_path)
    assert list(loaded_in) == list(isyms)
    assert list(loaded_out) == list(osyms)


def test_load_symbol_tables_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_symbol_tables(tmp_path / "nowhere")


def test_load_pair_missing_file(tmp_path):
    _table("a").write(tmp_path / "i.sym")
    with pytest.raises(FileNotFoundError):
        load_symbol_table_pair(tmp_path / "i.sym", tmp_path / "o.sym")


def test_load_pair_empty_path(tmp_path):
    with pytest.raises(ValueError):
        load_symbol_table_pair("", tmp_path / "o.sym")