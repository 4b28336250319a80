from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Literal

from rps_errors import InvalidMoveSet, UnknownMove

Move = str
Outcome = Literal["draw", "first_wins", "second_wins"]

MIN_MOVES = 3


@dataclass(frozen=True)
class MoveSet:
    moves: tuple[Move, ...]
    _index: dict[Move, int] = field(init=False, repr=False, compare=False)

    def __init__(self, moves: Iterable[Move]) -> None:
        candidate = tuple(moves)
        _validate(candidate)
        object.__setattr__(self, "moves", candidate)
        object.__setattr__(self, "_index", {m: i for i, m in enumerate(candidate)})

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __contains__(self, move: object) -> bool:
        try:
            return move in self._index
        except TypeError:
            return False

    def __getitem__(self, position: int) -> Move:
        return self.moves[position]

    @property
    def half(self) -> int:
        return (len(self.moves) - 1) // 2

    def index(self, move: Move) -> int:
        try:
            return self._index[move]
        except (KeyError, TypeError):
            raise UnknownMove(move, self.moves) from None

    def is_valid_move(self, value: object) -> bool:
        return value in self


def _validate(moves: tuple[object, ...]) -> None:
    for m in moves:
        if not isinstance(m, str):
            raise InvalidMoveSet(moves, f"move {m!r} is not a string")
        if not m.strip():
            raise InvalidMoveSet(moves, "moves must be non-empty")
    if len(moves) < MIN_MOVES:
        raise InvalidMoveSet(moves, f"need at least {MIN_MOVES} moves, got {len(moves)}")
    if len(moves) % 2 == 0:
        raise InvalidMoveSet(moves, f"need an odd number of moves, got {len(moves)}")
    if len(set(moves)) != len(moves):
        dupes = [str(m) for m in dict.fromkeys(moves) if moves.count(m) > 1]
        raise InvalidMoveSet(moves, f"duplicate moves: {', '.join(dupes)}")


def determine_outcome(first: Move, second: Move, move_set: MoveSet) -> Outcome:
    i_first = move_set.index(first)
    i_second = move_set.index(second)
    if i_first == i_second:
        return "draw"

    # first beats the `half` moves that precede it cyclically.
    offset = (i_first - i_second) % len(move_set)
    return "first_wins" if offset <= move_set.half else "second_wins"


def beats(first: Move, second: Move, move_set: MoveSet) -> bool:
    return determine_outcome(first, second, move_set) == "first_wins"
