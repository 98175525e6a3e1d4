"""Lexicon acceptor built from a grapheme lexicon through a letter trie."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Iterable

from asrdecode.fst import Arc, Fst
from asrdecode.symbols import ISYMBOLS_FILE, OSYMBOLS_FILE, SymbolTable, load_symbol_tables

logger = logging.getLogger(__name__)

EPSILON = "<eps>"
ARC_WEIGHT = 1.0
PROJECT_ROOT_VAR = "PROJECT_ROOT"


@dataclass
class TrieNode:
    """A node of the letter trie; ``is_end_word`` marks the end of a lexicon entry."""

    children: dict[str, "TrieNode"] = field(default_factory=dict)
    is_end_word: bool = False


def _project_root() -> Path:
    root = os.environ.get(PROJECT_ROOT_VAR)
    if not root:
        raise RuntimeError(f"cannot save the fst: {PROJECT_ROOT_VAR} is not defined")
    return Path(root)


class LexiconFst:
    """Build, save, load and query an acceptor of the words of a grapheme lexicon.

    The lexicon file holds lines ``word<TAB>w o r d``; the letters after the tab
    become the arcs of the acceptor.
    """

    def __init__(self, lexicon_file_path: str | PathLike | None = None) -> None:
        self.lexicon_path: Path | None = None
        if lexicon_file_path is not None:
            path = Path(lexicon_file_path)
            try:
                with open(path, encoding="utf-8"):
                    pass
            except OSError as exc:
                raise FileNotFoundError(f"could not open the lexicon file {path}") from exc
            self.lexicon_path = path
        self.input_symbols = SymbolTable()
        self.output_symbols = SymbolTable()
        self.output_symbols.add_symbol(EPSILON, 0)
        self.fst: Fst | None = None
        self.trie = TrieNode()

    # symbol table
    def update_symbol_table_from_word(self, word: str) -> None:
        """Give every new letter of ``word`` the next free input label, starting at 1."""
        for letter in word:
            if letter.isspace():
                continue
            if letter not in self.input_symbols:
                self.input_symbols.add_symbol(letter, len(self.input_symbols) + 1)

    def update_symbol_table_from_words(self, words: Iterable[str]) -> None:
        for word in words:
            self.update_symbol_table_from_word(word)

    # trie
    def update_trie_with_word(self, word: str) -> None:
        """Insert the letters of ``word`` (spaces ignored) into the trie."""
        node = self.trie
        for letter in word:
            if letter.isspace():
                continue
            node = node.children.setdefault(letter, TrieNode())
        node.is_end_word = True

    def _populate(self, node: TrieNode, fst: Fst, state: int) -> None:
        eps_label = self.output_symbols.label_of(EPSILON)
        for letter, child in node.children.items():
            try:
                label = self.input_symbols.label_of(letter)
            except KeyError as exc:
                raise ValueError(f"letter {letter!r} is not in the input symbol table") from exc
            next_state = fst.num_states()
            fst.add_arc(state, Arc(label, eps_label, ARC_WEIGHT, next_state))
            fst.add_state()
            if child.is_end_word:
                fst.set_final(next_state)
            self._populate(child, fst, next_state)

    def construct_fst_from_trie(self, root: TrieNode | None) -> Fst:
        """Turn a trie into an acceptor whose final states end the words."""
        if root is None or not root.children:
            status = "empty" if root is not None else "missing"
            raise ValueError(f"invalid trie node ({status})")
        fst = Fst()
        fst.add_state()
        fst.set_start(0)
        self._populate(root, fst, 0)
        if len(self.input_symbols):
            fst.input_symbols = self.input_symbols
        if len(self.output_symbols):
            fst.output_symbols = self.output_symbols
        self.fst = fst
        return fst

    def construct_fst_from_lex_file(self) -> Fst | None:
        """Read the lexicon file and build the acceptor; an empty file builds nothing."""
        if self.lexicon_path is None:
            raise RuntimeError("no lexicon file open")
        with open(self.lexicon_path, encoding="utf-8") as handle:
            text = handle.read()
        if not text:
            logger.error("lexicon file %s is empty", self.lexicon_path)
            return None
        for line in text.splitlines():
            _, tab, spelling = line.partition("\t")
            components = spelling if tab else line
            self.update_symbol_table_from_word(components)
            self.update_trie_with_word(components)
        return self.construct_fst_from_trie(self.trie)

    # persistence
    def _save_symbol_tables(self, directory: Path) -> None:
        self.input_symbols.write(directory / ISYMBOLS_FILE)
        self.output_symbols.write(directory / OSYMBOLS_FILE)

    def write_fst(self, fst_path: str | PathLike, sort: bool = False) -> Path:
        """Write the acceptor and its symbol tables; return the path of the fst file.

        An absolute path is used as is. A relative path with a directory is taken
        relative to ``$PROJECT_ROOT``; a bare file name goes to
        ``$PROJECT_ROOT/data/lexicon``, which is created if needed.
        """
        if self.fst is None:
            raise RuntimeError("no fst has been built")
        if sort:
            self.fst.arc_sort()
        path = Path(fst_path)
        if len(path.parts) > 1:
            parent = path.parent
            target_dir = parent if parent.is_absolute() else _project_root() / parent
            if not target_dir.exists():
                raise FileNotFoundError(f"no directory {target_dir} found")
        else:
            target_dir = _project_root() / "data" / "lexicon"
            target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / path.name
        self.fst.write(target)
        self._save_symbol_tables(target_dir)
        return target

    def load_fst(self, path_to_fst: str | PathLike) -> Fst:
        """Load an acceptor and the symbol tables saved next to it."""
        path = Path(path_to_fst)
        fst = Fst.read(path)
        try:
            self.input_symbols, self.output_symbols = load_symbol_tables(path.parent)
        except FileNotFoundError as exc:
            logger.warning("symbol tables not loaded: %s", exc)
        fst.input_symbols = self.input_symbols
        fst.output_symbols = self.output_symbols
        self.fst = fst
        return fst

    # queries
    def is_sequence_valid_fst(self, sequence: str) -> bool:
        """True if ``sequence`` spells a whole word of the acceptor."""
        if self.fst is None:
            raise RuntimeError("no fst has been built or loaded")
        state = self.fst.start
        for symbol in sequence:
            if symbol not in self.input_symbols:
                return False
            label = self.input_symbols.label_of(symbol)
            next_state = next(
                (arc.nextstate for arc in self.fst.arcs(state) if arc.ilabel == label), None
            )
            if next_state is None:
                return False
            state = next_state
        return self.fst.is_final(state)

    def is_sequence_valid_trie(self, sequence: str) -> bool:
        """True if ``sequence`` spells a whole word of the trie."""
        node = self.trie
        for letter in sequence:
            if letter.isspace():
                continue
            child = node.children.get(letter)
            if child is None:
                return False
            node = child
        return node.is_end_word