"""Symbol tables mapping token strings to integer labels."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Iterator

ISYMBOLS_FILE = "isymbols.sym"
OSYMBOLS_FILE = "osymbols.sym"


class SymbolTable:
    """A bidirectional mapping between symbols and labels, kept in insertion order."""

    def __init__(self) -> None:
        self._labels: dict[str, int] = {}
        self._symbols: dict[int, str] = {}

    def add_symbol(self, symbol: str, label: int) -> int:
        """Add ``symbol`` with ``label``; an existing symbol keeps its label."""
        if not symbol or any(ch.isspace() for ch in symbol):
            raise ValueError(f"invalid symbol: {symbol!r}")
        if symbol in self._labels:
            return self._labels[symbol]
        self._labels[symbol] = label
        self._symbols.setdefault(label, symbol)
        return label

    def label_of(self, symbol: str) -> int:
        return self._labels[symbol]

    def symbol_of(self, label: int) -> str:
        return self._symbols[label]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self._labels.items())

    def write(self, path: str | PathLike) -> None:
        """Write the table as ``symbol<TAB>label`` lines."""
        with open(path, "w", encoding="utf-8") as handle:
            for symbol, label in self:
                handle.write(f"{symbol}\t{label}\n")

    @classmethod
    def read(cls, path: str | PathLike) -> "SymbolTable":
        """Read a table written by :meth:`write`."""
        table = cls()
        with open(path, encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                parts = line.split()
                if len(parts) != 2:
                    raise ValueError(f"{path}:{line_number}: expected 'symbol label'")
                symbol, label_text = parts
                try:
                    label = int(label_text)
                except ValueError as exc:
                    raise ValueError(f"{path}:{line_number}: bad label {label_text!r}") from exc
                table.add_symbol(symbol, label)
        return table


def load_symbol_table_pair(isymbols_path: str | PathLike,
                           osymbols_path: str | PathLike) -> tuple[SymbolTable, SymbolTable]:
    """Load an input and an output symbol table."""
    if not str(isymbols_path) or not str(osymbols_path):
        raise ValueError("paths to input and output symbols are empty")
    ipath, opath = Path(isymbols_path), Path(osymbols_path)
    if not (ipath.exists() and opath.exists()):
        raise FileNotFoundError(f"symbol tables {ipath} and {opath} do not both exist")
    return SymbolTable.read(ipath), SymbolTable.read(opath)


def load_symbol_tables(target_directory: str | PathLike) -> tuple[SymbolTable, SymbolTable]:
    """Load ``isymbols.sym`` and ``osymbols.sym`` from a directory."""
    directory = Path(target_directory)
    if not directory.exists():
        raise FileNotFoundError(f"{directory} does not exist")
    return load_symbol_table_pair(directory / ISYMBOLS_FILE, directory / OSYMBOLS_FILE)