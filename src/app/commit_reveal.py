from __future__ import annotations

import hmac
import secrets
from typing import Final, Iterable

from errors import DigestComputationFailed, InsufficientEntropy

SCHEME_ID: Final[str] = "hmac-sha256"
DIGEST_NAME: Final[str] = "sha256"
SECRET_BYTES: Final[int] = 32


def generate_secret(num_bytes: int = SECRET_BYTES) -> bytes:
    try:
        raw = secrets.token_bytes(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise InsufficientEntropy(f"secure random source failed: {exc}") from exc
    if len(raw) != num_bytes:
        raise InsufficientEntropy(f"secure random source returned {len(raw)} of {num_bytes} bytes")
    return raw


def choose_move(moves: Iterable[str]) -> str:
    # OS CSPRNG, same source as generate_secret().
    try:
        return secrets.choice(tuple(moves))
    except (OSError, NotImplementedError) as exc:
        raise InsufficientEntropy(f"secure random source failed: {exc}") from exc


def compute_commitment(*, secret: bytes, move: str) -> bytes:
    try:
        mac = hmac.new(secret, move.encode("utf-8"), DIGEST_NAME)
    except ValueError as exc:
        raise DigestComputationFailed(f"{SCHEME_ID} unavailable: {exc}") from exc
    return mac.digest()


def commit(move: str) -> tuple[bytes, bytes]:
    """Draw a fresh secret and bind it to ``move``.

    The commitment may be published right away; the secret must be withheld
    until the other side has answered.
    """
    secret = generate_secret()
    return secret, compute_commitment(secret=secret, move=move)


def verify_commitment(*, secret: bytes, move: str, expected_commitment: bytes | str) -> bool:
    if isinstance(expected_commitment, str):
        try:
            expected_commitment = from_hex(expected_commitment)
        except ValueError:
            return False
    computed = compute_commitment(secret=secret, move=move)
    return hmac.compare_digest(expected_commitment, computed)


def to_hex(data: bytes) -> str:
    return data.hex().upper()


def from_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text.strip())
    except ValueError as exc:
        raise ValueError(f"not a hex string: {text!r}") from exc
