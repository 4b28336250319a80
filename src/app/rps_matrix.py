from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Literal, Mapping

from rps_errors import UnknownMove
from rps_protocol import Move, MoveSet, Outcome, determine_outcome

Verdict = Literal["draw", "win", "lose"]

_VERDICTS: dict[Outcome, Verdict] = {
    "draw": "draw",
    "first_wins": "win",
    "second_wins": "lose",
}


@dataclass(frozen=True)
class OutcomeMatrix:
    move_set: MoveSet
    # (row, col) -> verdict from the row move's perspective
    cells: Mapping[tuple[Move, Move], Verdict]

    @property
    def moves(self) -> tuple[Move, ...]:
        return self.move_set.moves

    def get(self, row: Move, col: Move) -> Verdict:
        try:
            return self.cells[(row, col)]
        except KeyError:
            missing = row if row not in self.move_set else col
            raise UnknownMove(missing, self.moves) from None

    def row(self, move: Move) -> list[Verdict]:
        return [self.get(move, col) for col in self.moves]

    def tally(self, move: Move) -> Counter[Verdict]:
        return Counter(self.row(move))


def build_matrix(move_set: MoveSet) -> OutcomeMatrix:
    cells: dict[tuple[Move, Move], Verdict] = {}
    for row in move_set:
        for col in move_set:
            cells[(row, col)] = _VERDICTS[determine_outcome(row, col, move_set)]
    return OutcomeMatrix(move_set=move_set, cells=cells)
