from __future__ import annotations

from rps_matrix import OutcomeMatrix, Verdict

CORNER = "You v  PC >"

_LABELS: dict[Verdict, str] = {"win": "Win", "lose": "Lose", "draw": "Draw"}


def format_matrix(matrix: OutcomeMatrix) -> str:
    moves = matrix.moves
    first_w = max(len(CORNER), *(len(m) for m in moves))
    col_w = max(len("Draw"), *(len(m) for m in moves))

    lines: list[str] = []
    header = f"{CORNER:<{first_w}}  " + "  ".join(f"{m:^{col_w}}" for m in moves)
    lines.append(header.rstrip())
    lines.append("-" * len(header.rstrip()))
    for row in moves:
        cells = "  ".join(f"{_LABELS[v]:^{col_w}}" for v in matrix.row(row))
        lines.append(f"{row:<{first_w}}  {cells}".rstrip())
    return "\n".join(lines)
