"""A small weighted finite-state acceptor/transducer over the tropical semiring."""

from __future__ import annotations

import math
from dataclasses import dataclass
from os import PathLike

from asrdecode.symbols import SymbolTable

TROPICAL_ONE = 0.0
NO_STATE = -1


@dataclass(frozen=True)
class Arc:
    """A transition from a state to ``nextstate`` reading ``ilabel`` and writing ``olabel``."""

    ilabel: int
    olabel: int
    weight: float
    nextstate: int


class Fst:
    """Mutable FST with integer states numbered from zero."""

    def __init__(self) -> None:
        self._arcs: list[list[Arc]] = []
        self._finals: dict[int, float] = {}
        self.start: int = NO_STATE
        self.input_symbols: SymbolTable | None = None
        self.output_symbols: SymbolTable | None = None

    def _check_state(self, state: int) -> None:
        if not 0 <= state < len(self._arcs):
            raise IndexError(f"state {state} does not exist")

    def add_state(self) -> int:
        """Add a state and return its id."""
        self._arcs.append([])
        return len(self._arcs) - 1

    def set_start(self, state: int) -> None:
        self._check_state(state)
        self.start = state

    def add_arc(self, state: int, arc: Arc) -> None:
        """Add ``arc`` leaving ``state``; its target may be a state added later."""
        self._check_state(state)
        self._arcs[state].append(arc)

    def set_final(self, state: int) -> None:
        """Mark ``state`` as final with the tropical one weight."""
        self._set_final_weight(state, TROPICAL_ONE)

    def _set_final_weight(self, state: int, weight: float) -> None:
        self._check_state(state)
        if math.isinf(weight) and weight > 0:
            self._finals.pop(state, None)
        else:
            self._finals[state] = weight

    def final_weight(self, state: int) -> float:
        """Final weight of ``state``; infinity (tropical zero) if it is not final."""
        self._check_state(state)
        return self._finals.get(state, math.inf)

    def is_final(self, state: int) -> bool:
        self._check_state(state)
        return state in self._finals

    def arcs(self, state: int) -> tuple[Arc, ...]:
        self._check_state(state)
        return tuple(self._arcs[state])

    def num_states(self) -> int:
        return len(self._arcs)

    def arc_sort(self) -> None:
        """Sort the arcs of every state by input label."""
        for arcs in self._arcs:
            arcs.sort(key=lambda arc: arc.ilabel)

    def write(self, path: str | PathLike) -> None:
        """Write the FST in a line-oriented text format."""
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(f"fst {len(self._arcs)} {self.start}\n")
            for state, arcs in enumerate(self._arcs):
                for arc in arcs:
                    handle.write(
                        f"arc {state} {arc.nextstate} {arc.ilabel} {arc.olabel} {arc.weight!r}\n"
                    )
            for state, weight in sorted(self._finals.items()):
                handle.write(f"final {state} {weight!r}\n")

    @classmethod
    def read(cls, path: str | PathLike) -> "Fst":
        """Read an FST written by :meth:`write`."""
        with open(path, encoding="utf-8") as handle:
            lines = [line.split() for line in handle if line.strip()]
        if not lines or lines[0][0] != "fst" or len(lines[0]) != 3:
            raise ValueError(f"{path}: missing fst header")
        fst = cls()
        try:
            num_states, start = int(lines[0][1]), int(lines[0][2])
            for _ in range(num_states):
                fst.add_state()
            if start != NO_STATE:
                fst.set_start(start)
            for fields in lines[1:]:
                kind = fields[0]
                if kind == "arc" and len(fields) == 6:
                    src, dst, ilabel, olabel = (int(v) for v in fields[1:5])
                    fst.add_arc(src, Arc(ilabel, olabel, float(fields[5]), dst))
                elif kind == "final" and len(fields) == 3:
                    fst._set_final_weight(int(fields[1]), float(fields[2]))
                else:
                    raise ValueError(f"{path}: malformed line {' '.join(fields)!r}")
        except IndexError as exc:
            raise ValueError(f"{path}: {exc}") from exc
        return fst