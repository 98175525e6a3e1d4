"""Greedy (best-path) decoding of CTC emissions."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)

BLANK_TOKEN = "-"
START_TOKEN = "|"


def _read_tokens(tokens_path: str | PathLike) -> list[str]:
    """Read one single-character token per line; an empty line stands for NUL."""
    with open(tokens_path, encoding="utf-8") as handle:
        lines = handle.read().splitlines()
    tokens: list[str] = []
    for line_number, line in enumerate(lines, start=1):
        if len(line) > 1:
            raise ValueError(
                f"{tokens_path}:{line_number}: the file should contain one char per line"
            )
        tokens.append(line if line else "\0")
    return tokens


class GreedyDecoder:
    """Pick the highest-scoring token at every time step."""

    def __init__(self) -> None:
        self.tokens: list[str] = []

    @property
    def num_tokens(self) -> int:
        return len(self.tokens)

    def init_vocab(self, tokens_path: str | PathLike) -> None:
        """Append the tokens listed in ``tokens_path`` to the vocabulary.

        Raises ``FileNotFoundError``/``OSError`` if the file cannot be opened and
        ``ValueError`` if a line holds more than one character.
        """
        tokens = _read_tokens(tokens_path)
        self.tokens.extend(tokens)
        logger.debug("number of tokens is: %d", self.num_tokens)

    def best_sequence(self, emissions) -> np.ndarray:
        """Return the index of the best token for each time step.

        ``emissions`` is ``[time, tokens]``; axes of length one are removed first.
        """
        squeezed = np.squeeze(np.asarray(emissions))
        if squeezed.ndim != 2 or squeezed.shape[1] != self.num_tokens:
            raise ValueError(
                f"input has incompatible shape {squeezed.shape}; "
                f"the number of tokens is {self.num_tokens}"
            )
        return np.argmax(squeezed, axis=-1)

    def decode_chars(self, emissions) -> list[str]:
        """Return the best token of every time step, without collapsing."""
        return [self.tokens[int(index)] for index in self.best_sequence(emissions)]

    def vocabulary(self) -> list[str] | None:
        """Return a copy of the tokens, or ``None`` if none have been loaded."""
        if not self.tokens:
            logger.warning("decoder has no tokens; call init_vocab first")
            return None
        return list(self.tokens)


def collapse_greedy(emissions, vocab: Sequence[str]) -> list[str]:
    """Best-path decode ``[time, tokens]`` emissions applying the CTC rules.

    Repeated tokens are merged and a blank is dropped once it is followed by a
    different token. The result starts with the ``|`` separator.
    """
    scores = np.asarray(emissions)
    sequence = [START_TOKEN]
    for step in scores:
        top_char = vocab[int(np.argmax(step))]
        if sequence[-1] == top_char:
            continue
        if sequence[-1] == BLANK_TOKEN:
            sequence.pop()
        sequence.append(top_char)
    return sequence