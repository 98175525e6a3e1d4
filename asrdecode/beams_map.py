"""Collections that merge beams holding the same prefix."""

from __future__ import annotations

import copy
import logging
from typing import Iterator

from asrdecode.beam import CtcBeam
from asrdecode.utils import map_to_range

logger = logging.getLogger(__name__)


class BeamPtrMap:
    """Unique beams keyed by their sequence.

    Adding a different object whose sequence is already present keeps the first
    one and sets the newcomer aside until :meth:`clean_garbage`.
    """

    def __init__(self) -> None:
        self._beams: dict[str, CtcBeam] = {}
        self._garbage: dict[int, CtcBeam] = {}

    def add_beam(self, beam: CtcBeam) -> None:
        key = beam.text()
        existing = self._beams.get(key)
        if existing is None:
            self._beams[key] = beam
        elif existing is not beam:
            self._garbage[id(beam)] = beam
            logger.debug("beam %r set aside as duplicate", key)

    def clear(self) -> None:
        self._beams.clear()

    def find_beam(self, sequence: str) -> CtcBeam | None:
        return self._beams.get(sequence)

    def clean_garbage(self) -> list[CtcBeam]:
        """Drop the duplicates set aside so far and return them."""
        discarded = list(self._garbage.values())
        self._garbage.clear()
        return discarded

    def __iter__(self) -> Iterator[tuple[str, CtcBeam]]:
        return iter(list(self._beams.items()))

    def __len__(self) -> int:
        return len(self._beams)


class BeamsMapWrapper:
    """Beams keyed by sequence, accumulating the scores of identical sequences."""

    def __init__(self, beams_width: int = 10) -> None:
        self.beams_width = beams_width
        self._beams: dict[str, CtcBeam] = {}
        self._scores: list[float] = []
        logger.info("beams map created with %d beams", beams_width)

    @property
    def beams(self) -> dict[str, CtcBeam]:
        return dict(self._beams)

    def get_min(self) -> float | None:
        if not self._scores:
            logger.warning("scores have not been updated; there might not be beams")
            return None
        return min(self._scores)

    def get_max(self) -> float | None:
        if not self._scores:
            logger.warning("scores have not been updated; there might not be beams")
            return None
        return max(self._scores)

    def __len__(self) -> int:
        return len(self._beams)

    def is_empty(self) -> bool:
        return not self._beams

    def scale_beams_score(self, lower_bound: float, upper_bound: float) -> None:
        """Map every beam's score linearly onto ``[lower_bound, upper_bound]``."""
        min_val = self.get_min()
        max_val = self.get_max()
        if min_val is None or max_val is None:
            return
        for beam in self._beams.values():
            if beam.score > max_val:
                logger.warning("score %r is greater than the recorded maximum", beam.score)
            beam.score = map_to_range(beam.score, min_val, max_val, lower_bound, upper_bound)
        self._scores.clear()

    def clear_beams_map(self) -> None:
        self._beams.clear()
        self._scores.clear()

    def update_beams_map(self, beam: CtcBeam) -> None:
        """Store a copy of ``beam``, or add its score to the beam with the same sequence."""
        key = beam.text()
        existing = self._beams.get(key)
        if existing is None:
            self._beams[key] = copy.copy(beam)
            self._scores.append(beam.score)
        else:
            existing += beam
            self._scores.append(existing.score)