"""Build a grapheme lexicon (word -> spelled-out letters) from a word list."""

from __future__ import annotations

import logging
import string
from os import PathLike
from pathlib import Path

logger = logging.getLogger(__name__)

MAX_WORD_SIZE = 100
_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def spell_word(word: str) -> str:
    """Break a word into its letters separated by single spaces."""
    return " ".join(word)


def _check_readable(path: Path) -> None:
    try:
        with open(path, encoding="utf-8"):
            pass
    except OSError as exc:
        raise FileNotFoundError(f"failed to open the lexicon file at {path}") from exc


class GraphemeLexiconBuilder:
    """Read a dictionary file whose lines start with a word and write a grapheme lexicon.

    Each distinct word is written once as ``word<TAB>w o r d``.
    """

    def __init__(self, path_to_lexicon: str | PathLike) -> None:
        path = Path(path_to_lexicon)
        _check_readable(path)
        self._read_path: Path | None = path
        self._write_path: Path | None = None
        self._lexicon: dict[str, str] = {}
        self._word_count: dict[str, int] = {}
        self._dictionary: set[str] = set()
        logger.debug("created a lexicon builder for %s", path)

    @property
    def lexicon(self) -> dict[str, str]:
        """Word to spelling, as built by the last :meth:`generate_lexicon`."""
        return dict(self._lexicon)

    @property
    def dictionary(self) -> set[str]:
        """Every word seen so far."""
        return set(self._dictionary)

    def set_lexicon_path(self, path_to_lexicon: str | PathLike) -> None:
        """Switch to another source file; on failure no source file remains set."""
        path = Path(path_to_lexicon)
        logger.debug("changing source file from %s to %s", self._read_path, path)
        self._read_path = None
        _check_readable(path)
        self._read_path = path

    def generate_lexicon(self, path_to_write_file: str | PathLike) -> None:
        """Read the source file and write the lexicon to ``path_to_write_file``."""
        self._write_path = Path(path_to_write_file)
        with open(self._write_path, "w", encoding="utf-8", newline="\n") as out:
            self._lexicon.clear()
            if self._read_path is None:
                raise FileNotFoundError("no lexicon file open")

            with open(self._read_path, encoding="utf-8") as source:
                for raw_line in source:
                    line = raw_line.rstrip("\n")
                    if not line:
                        logger.debug("skipping empty line")
                        continue
                    fields = line.translate(_LOWER_TABLE).split()
                    word = fields[0] if fields else ""
                    if not word or len(word) > MAX_WORD_SIZE:
                        logger.debug("skipping invalid word: %r", word)
                        continue

                    spelling = spell_word(word)
                    self._dictionary.add(word)
                    self._lexicon[word] = spelling
                    self._word_count[word] = self._word_count.get(word, 0) + 1
                    if self._word_count[word] <= 1:
                        out.write(f"{word}\t{spelling}\n")
            out.flush()