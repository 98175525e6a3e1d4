"""Decoding hypotheses (beams) and their ordering."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable

NEG_INF_DOUBLE = -sys.float_info.max


@dataclass
class WordWindow:
    """Half-open ``[word_begin, word_end)`` span of a word inside a beam's sequence."""

    word_begin: int = 0
    word_end: int = 0

    def shift(self, new_begin: int, new_end: int) -> None:
        self.word_begin = new_begin
        self.word_end = new_end


class Beam:
    """A character sequence together with its score."""

    def __init__(self, sequence: str | Iterable[str] = "", score: float = 1.0) -> None:
        self.sequence: list[str] = list(sequence)
        self.score = score
        self.last_word_window = WordWindow()

    def __copy__(self) -> "Beam":
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.sequence = list(self.sequence)
        clone.last_word_window = WordWindow(self.last_word_window.word_begin,
                                            self.last_word_window.word_end)
        return clone

    def extend_sequence(self, symbol: str) -> None:
        self.sequence.append(symbol)

    def update_score(self, score: float) -> None:
        """Multiply the score by ``score``."""
        self.score *= score

    def discount(self, discount_amount: float) -> None:
        self.score -= discount_amount

    def zero_out_score(self) -> None:
        self.score *= 0

    def increase_score_by(self, add_amount: float) -> None:
        self.score += add_amount

    def remove_last_char(self) -> None:
        self.sequence.pop()

    def at(self, begin: int | WordWindow, end: int | None = None) -> str:
        """Return the text between ``begin`` and ``end``, or inside a :class:`WordWindow`."""
        if isinstance(begin, WordWindow):
            begin, end = begin.word_begin, begin.word_end
        if end is None:
            raise TypeError("at() needs an end position or a WordWindow")
        size = len(self.sequence)
        if begin > size or end > size or begin < 0 or end < 0:
            raise IndexError("position out of bound")
        return "".join(self.sequence[begin:end])

    def last_word(self) -> str:
        return self.at(self.last_word_window)

    def text(self) -> str:
        return "".join(self.sequence)

    def __len__(self) -> int:
        return len(self.sequence)

    def __lt__(self, other: "Beam") -> bool:
        if not isinstance(other, Beam):
            return NotImplemented
        return self.score < other.score

    def __gt__(self, other: "Beam") -> bool:
        if not isinstance(other, Beam):
            return NotImplemented
        return self.score > other.score

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Beam):
            return NotImplemented
        return self.text() == other.text()

    __hash__ = None  # type: ignore[assignment]

    def __iadd__(self, other: "Beam") -> "Beam":
        """Merge the score of a beam holding the same sequence; others are ignored."""
        if self == other:
            self.increase_score_by(other.score)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text()!r}, score={self.score!r})"


class CtcBeam(Beam):
    """A beam carrying CTC blank / non-blank log probabilities."""

    separator_token = "|"

    def __init__(self, sequence: str | Iterable[str] = "") -> None:
        super().__init__(sequence, 0.0)
        self.dict_state = 0
        self.prob_nb_cur = NEG_INF_DOUBLE
        self.prob_b_cur = NEG_INF_DOUBLE
        self.prob_nb_prev = NEG_INF_DOUBLE
        self.prob_b_prev = NEG_INF_DOUBLE
        self.score = NEG_INF_DOUBLE

    def copy(self) -> "CtcBeam":
        """A fresh beam with the same sequence and dictionary state but reset scores."""
        clone = CtcBeam(self.sequence)
        clone.dict_state = self.dict_state
        return clone

    def prev_probs(self) -> tuple[float, float]:
        """Return ``(p_blank, p_non_blank)`` of the previous step."""
        return self.prob_b_prev, self.prob_nb_prev

    def current_probs(self) -> tuple[float, float]:
        """Return ``(p_blank, p_non_blank)`` of the current step."""
        return self.prob_b_cur, self.prob_nb_cur

    def is_full_word_formed(self) -> bool:
        return bool(self.sequence) and self.sequence[-1] == self.separator_token


def _last_char(beam: Beam) -> str:
    return beam.sequence[-1] if beam.sequence else ""


def prefix_compare(x: Beam, y: Beam) -> bool:
    """True when ``x`` sorts before ``y``: higher score first, ties broken by last character."""
    if x.score == y.score:
        x_last, y_last = _last_char(x), _last_char(y)
        if x_last == y_last:
            return False
        return x_last < y_last
    return x.score > y.score