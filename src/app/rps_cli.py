from __future__ import annotations

import argparse
import logging
import os

from rps_commit_reveal import verify
from rps_errors import EntropyUnavailable, InvalidMoveSet, UnknownMove
from rps_game_round import RoundResult, finish_round, start_round
from rps_matrix import build_matrix
from rps_protocol import Move, MoveSet
from rps_randomness import RandomSource
from rps_table import format_matrix

EXAMPLE = "Example: rps play rock paper scissors"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: list[str] | None = None, *, rng: RandomSource | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rps")
    parser.add_argument("--log-level", default=_default_log_level(), type=str.upper, choices=LOG_LEVELS)
    sub = parser.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play against the computer with a committed (HMAC) move")
    play.add_argument("moves", nargs="*", help="Odd number (>= 3) of distinct moves, in cyclic order")
    play.add_argument("--rounds", type=int, default=1, help="Number of independent rounds, each with a fresh key")

    table = sub.add_parser("table", help="Print who beats whom for a move set")
    table.add_argument("moves", nargs="*")

    check = sub.add_parser("verify", help="Check a revealed HMAC key against the published HMAC")
    check.add_argument("--key", required=True, help="Revealed HMAC key (hex)")
    check.add_argument("--move", required=True, help="Revealed computer move")
    check.add_argument("--hmac", required=True, help="HMAC shown before you chose")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "verify":
        if verify(args.key, args.move, args.hmac.strip().lower()):
            print("OK")
            return 0
        print("MISMATCH")
        return 1

    move_set = _parse_move_set(args.moves)

    if args.cmd == "table":
        print(format_matrix(build_matrix(move_set)))
        return 0

    if args.rounds < 1:
        raise SystemExit("--rounds must be at least 1")
    for round_no in range(1, args.rounds + 1):
        if args.rounds > 1:
            print(f"\nRound {round_no} of {args.rounds}")
        try:
            if not _play_one(move_set, rng):
                break
        except EntropyUnavailable as exc:
            raise SystemExit(f"Round aborted: {exc}") from exc
        except UnknownMove as exc:
            # Ends this round only; the next one starts with a fresh key.
            print(f"Round aborted: {exc}")
    return 0


def _play_one(move_set: MoveSet, rng: RandomSource | None) -> bool:
    """Play a single round; returns False if the player chose to exit."""
    context = start_round(move_set, rng)
    print(f"HMAC: {context.digest}")
    _print_menu(move_set)

    move = _prompt_for_move(move_set)
    if move is None:
        print("Exiting the game.")
        return False

    _show_round_result(finish_round(context, move))
    return True


def _parse_move_set(moves: list[str]) -> MoveSet:
    try:
        return MoveSet(moves)
    except InvalidMoveSet as exc:
        raise SystemExit(f"Incorrect input: {exc.reason}.\n{EXAMPLE}") from exc


def _default_log_level() -> str:
    level = os.environ.get("RPS_LOG_LEVEL", "WARNING").upper()
    return level if level in LOG_LEVELS else "WARNING"


def _print_menu(move_set: MoveSet) -> None:
    print("Available moves:")
    for number, move in enumerate(move_set, start=1):
        print(f"{number} - {move}")
    print("0 - exit")
    print("? - help")


def _prompt_for_move(move_set: MoveSet) -> Move | None:
    """Interactive prompt; None means the player asked to exit."""
    while True:
        try:
            choice = input("Enter your move: ").strip()
        except EOFError:
            return None
        if choice == "?":
            print(format_matrix(build_matrix(move_set)))
            continue
        if choice == "0":
            return None
        position = _menu_position(choice, len(move_set))
        if position is not None:
            return move_set[position]
        if move_set.is_valid_move(choice):
            return choice
        print("Invalid input.")


def _menu_position(choice: str, count: int) -> int | None:
    # ASCII digits only, and never longer than the biggest menu number.
    if not (choice.isascii() and choice.isdecimal()) or len(choice) > len(str(count)):
        return None
    number = int(choice)
    return number - 1 if 1 <= number <= count else None


def _show_round_result(result: RoundResult) -> None:
    print(f"Your move: {result.human_move}")
    print(f"Computer move: {result.opponent_move}")
    if result.outcome == "first_wins":
        print("You win!")
    elif result.outcome == "second_wins":
        print("You lose!")
    else:
        print("Draw!")
    print(f"HMAC key: {result.secret_hex}")


if __name__ == "__main__":
    raise SystemExit(main())
