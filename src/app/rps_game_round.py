from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from rps_commit_reveal import commit, generate_secret, secret_hex
from rps_commit_reveal import verify as verify_commitment
from rps_errors import UnknownMove
from rps_protocol import Move, MoveSet, Outcome, determine_outcome
from rps_randomness import RandomSource, default_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundContext:
    # Owned by whoever runs the round; the secret stays out of repr/logs
    # until finish_round reveals it.
    move_set: MoveSet
    opponent_move: Move = field(repr=False)
    secret: bytes = field(repr=False)
    digest: str


@dataclass(frozen=True)
class RoundResult:
    human_move: Move
    opponent_move: Move
    # From the human's perspective: the human is the first party.
    outcome: Outcome
    digest: str
    secret_hex: str

    def verify(self) -> bool:
        return verify_commitment(self.secret_hex, self.opponent_move, self.digest)


def start_round(move_set: MoveSet, rng: RandomSource | None = None) -> RoundContext:
    source = rng if rng is not None else default_source()
    opponent_move = source.choice(move_set.moves)
    if opponent_move not in move_set:
        raise UnknownMove(opponent_move, move_set.moves)

    secret = generate_secret(source)
    digest = commit(secret, opponent_move, move_set=move_set)
    logger.debug("round started: %d moves, digest=%s", len(move_set), digest)
    return RoundContext(move_set=move_set, opponent_move=opponent_move, secret=secret, digest=digest)


def finish_round(context: RoundContext, human_move: Move) -> RoundResult:
    outcome = determine_outcome(human_move, context.opponent_move, context.move_set)
    logger.debug("round finished: outcome=%s digest=%s", outcome, context.digest)
    return RoundResult(
        human_move=human_move,
        opponent_move=context.opponent_move,
        outcome=outcome,
        digest=context.digest,
        secret_hex=secret_hex(context.secret),
    )


def play_round(
    move_set: MoveSet,
    choose_move: Callable[[str], Move],
    rng: RandomSource | None = None,
) -> RoundResult:
    """Run one full round.

    `choose_move` receives the published digest and returns the human's
    move; it never sees the opponent move or the secret.
    """
    context = start_round(move_set, rng)
    return finish_round(context, choose_move(context.digest))
