from __future__ import annotations

from typing import Sequence


class GameError(Exception):
    """Base exception for all game errors."""


class InvalidMoveSet(GameError, ValueError):
    def __init__(self, moves: Sequence[object], reason: str) -> None:
        self.moves = tuple(moves)
        self.reason = reason
        super().__init__(f"invalid move set {list(self.moves)!r}: {reason}")


class UnknownMove(GameError, KeyError):
    def __init__(self, move: object, moves: Sequence[str] = ()) -> None:
        self.move = move
        self.moves = tuple(moves)
        super().__init__(move)

    def __str__(self) -> str:
        if self.moves:
            return f"unknown move {self.move!r} (expected one of: {', '.join(self.moves)})"
        return f"unknown move {self.move!r}"


class EntropyUnavailable(GameError, RuntimeError):
    """The secure random source failed; never substituted with a weaker one."""
