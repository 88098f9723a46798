from __future__ import annotations

from rules import Outcome, OutcomeEngine

# Result for the row move played against the column move.
_CELL: dict[Outcome, str] = {"house_win": "Win", "user_win": "Lose", "draw": "Draw"}

LEGEND = 'Rows are your move, columns the opponent\'s: "Win", "Lose" or "Draw" for you.'


def format_table(engine: OutcomeEngine) -> str:
    names = list(engine.moves)
    width = max(len(n) for n in names + ["Draw"])

    lines: list[str] = []
    header = f"{'':{width}} | " + " | ".join(f"{n:{width}}" for n in names)
    lines.append(header)
    lines.append("-" * len(header))
    for name, row in zip(names, engine.matrix()):
        cells = " | ".join(f"{_CELL[outcome]:{width}}" for outcome in row)
        lines.append(f"{name:{width}} | {cells}")
    lines.append("")
    lines.append(LEGEND)
    return "\n".join(lines)
