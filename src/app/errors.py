from __future__ import annotations


class GameError(Exception):
    """Base class for every error raised by the game core."""


class InvalidMoveSet(GameError, ValueError):
    """Move list is even-sized, shorter than 3, or has duplicate names."""


class UnknownMove(GameError, ValueError):
    def __init__(self, move: str) -> None:
        super().__init__(f"unknown move: {move!r}")
        self.move = move


class InsufficientEntropy(GameError, RuntimeError):
    """The secure random source could not deliver the requested bytes."""


class DigestComputationFailed(GameError, RuntimeError):
    """The keyed digest primitive is unavailable."""


class CommitmentVerificationFailed(GameError):
    """Disclosed secret and move do not reproduce the published commitment."""


class RoundAlreadyResolved(GameError):
    pass


class RoundAbandoned(GameError):
    pass
