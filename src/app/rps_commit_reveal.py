from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Final

from rps_errors import EntropyUnavailable, UnknownMove
from rps_protocol import Move, MoveSet
from rps_randomness import RandomSource, default_source

SECRET_BYTES: Final[int] = 32
DIGEST_HEX_LEN: Final[int] = 64


def generate_secret(rng: RandomSource | None = None) -> bytes:
    source = rng if rng is not None else default_source()
    raw = source.token_bytes(SECRET_BYTES)
    if not isinstance(raw, bytes) or len(raw) != SECRET_BYTES:
        raise EntropyUnavailable(f"expected {SECRET_BYTES} random bytes from {type(source).__name__}")
    return raw


def commit(secret: bytes, move: Move, *, move_set: MoveSet | None = None) -> str:
    if move_set is not None and move not in move_set:
        raise UnknownMove(move, move_set.moves)
    return hmac.new(secret, move.encode("utf-8"), hashlib.sha256).hexdigest()


def verify(secret: bytes | str, move: Move, digest: str) -> bool:
    """Recompute the digest from a revealed secret and move.

    `secret` is either the raw key or the hex string shown to the player
    after the round. Malformed input never verifies.
    """
    key = _secret_bytes(secret)
    if key is None or not isinstance(digest, str) or not digest.isascii():
        return False
    return secrets.compare_digest(commit(key, move), digest)


def secret_hex(secret: bytes) -> str:
    return secret.hex()


def _secret_bytes(secret: bytes | str) -> bytes | None:
    if isinstance(secret, bytes):
        return secret
    try:
        return bytes.fromhex(secret.strip())
    except (ValueError, AttributeError):
        return None
