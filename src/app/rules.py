from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, Literal, Sequence

from errors import InvalidMoveSet, UnknownMove

Outcome = Literal["house_win", "user_win", "draw"]

MIN_MOVES = 3


@dataclass(frozen=True)
class MoveSet:
    names: tuple[str, ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        names = tuple(self.names)
        if len(names) < MIN_MOVES:
            raise InvalidMoveSet(f"need at least {MIN_MOVES} moves, got {len(names)}")
        if len(names) % 2 == 0:
            raise InvalidMoveSet(f"number of moves must be odd, got {len(names)}")
        dupes = [name for name, count in Counter(names).items() if count > 1]
        if dupes:
            raise InvalidMoveSet("moves must be unique, repeated: " + ", ".join(dupes))

        object.__setattr__(self, "names", names)
        object.__setattr__(self, "_index", {name: i for i, name in enumerate(names)})

    @property
    def half(self) -> int:
        return len(self.names) // 2

    def index_of(self, move: str) -> int:
        try:
            return self._index[move]
        except KeyError:
            raise UnknownMove(move) from None

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, move: object) -> bool:
        return move in self._index


class OutcomeEngine:
    """Decides rounds over a cyclic move order.

    Every move beats the ``half`` moves that precede it in the cycle and loses
    to the ``half`` moves that follow it. With ``rock paper scissors`` that is
    the classic game; ``rock spock paper lizard scissors`` gives the
    lizard-Spock variant.
    """

    def __init__(self, moves: Sequence[str]) -> None:
        self.moves = moves if isinstance(moves, MoveSet) else MoveSet(tuple(moves))
        self.size = len(self.moves)
        self.half = self.moves.half

    def classify(self, house: str, user: str) -> Outcome:
        # Python's % is already a true modulo for a positive divisor.
        d = (self.moves.index_of(house) - self.moves.index_of(user)) % self.size
        if d == 0:
            return "draw"
        return "house_win" if d <= self.half else "user_win"

    def beats(self, a: str, b: str) -> bool:
        return self.classify(a, b) == "house_win"

    def matrix(self) -> tuple[tuple[Outcome, ...], ...]:
        return tuple(tuple(self.classify(row, col) for col in self.moves) for row in self.moves)
