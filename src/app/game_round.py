from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from commit_reveal import choose_move, commit, to_hex, verify_commitment
from errors import CommitmentVerificationFailed, RoundAbandoned, RoundAlreadyResolved
from rules import Outcome, OutcomeEngine

RoundStatus = Literal["created", "committed", "revealed", "abandoned"]


@dataclass(frozen=True)
class Reveal:
    outcome: Outcome
    secret: bytes = field(repr=False)
    house_move: str
    user_move: str
    commitment: bytes

    @property
    def secret_hex(self) -> str:
        return to_hex(self.secret)

    @property
    def commitment_hex(self) -> str:
        return to_hex(self.commitment)

    def verify(self) -> bool:
        return verify_commitment(
            secret=self.secret,
            move=self.house_move,
            expected_commitment=self.commitment,
        )


def check_reveal(reveal: Reveal) -> Reveal:
    if not reveal.verify():
        raise CommitmentVerificationFailed(
            f"disclosed key and move {reveal.house_move!r} do not match HMAC {reveal.commitment_hex}"
        )
    return reveal


class Round:
    """One commit-then-reveal exchange between the house and the user.

    The house move and secret are drawn on construction, so a new round is
    already ``committed`` and its commitment can be published immediately.
    ``repr`` never shows the secret or the house move.
    """

    def __init__(self, engine: OutcomeEngine) -> None:
        self.engine = engine
        self.status: RoundStatus = "created"
        house_move = choose_move(engine.moves)
        secret, self._commitment = commit(house_move)
        self._house_move: str | None = house_move
        self._secret: bytes | None = secret
        self._reveal: Reveal | None = None
        self.status = "committed"

    @property
    def commitment(self) -> bytes:
        return self._commitment

    @property
    def commitment_hex(self) -> str:
        return to_hex(self._commitment)

    def resolve(self, user_move: str) -> Reveal:
        if self.status == "abandoned":
            raise RoundAbandoned("round was abandoned before a move was submitted")
        if self._reveal is not None:
            if self._reveal.user_move != user_move:
                raise RoundAlreadyResolved(
                    f"round already resolved with {self._reveal.user_move!r}, cannot replay with {user_move!r}"
                )
            return self._reveal

        house_move, secret = self._house_move, self._secret
        if house_move is None or secret is None:
            raise RoundAbandoned("round has no committed move to reveal")

        # Raises UnknownMove before any state changes; the caller may re-prompt.
        outcome = self.engine.classify(house_move, user_move)
        self._reveal = Reveal(
            outcome=outcome,
            secret=secret,
            house_move=house_move,
            user_move=user_move,
            commitment=self._commitment,
        )
        self.status = "revealed"
        return self._reveal

    def abandon(self) -> None:
        if self.status == "revealed":
            return
        self._secret = None
        self._house_move = None
        self.status = "abandoned"

    def __repr__(self) -> str:
        return f"Round(status={self.status!r}, commitment={self.commitment_hex})"


def new_round(engine: OutcomeEngine) -> Round:
    return Round(engine)
