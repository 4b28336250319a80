from __future__ import annotations

import re
import secrets
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from rps_commit_reveal import (  # type: ignore[import-not-found]  # noqa: E402
    DIGEST_HEX_LEN,
    SECRET_BYTES,
    commit,
    generate_secret,
    secret_hex,
    verify,
)
from rps_errors import EntropyUnavailable, UnknownMove  # type: ignore[import-not-found]  # noqa: E402
from rps_protocol import MoveSet  # type: ignore[import-not-found]  # noqa: E402
from rps_randomness import SystemRandomSource  # type: ignore[import-not-found]  # noqa: E402

KEY = bytes(range(32))


class ShortSource:
    def token_bytes(self, num_bytes: int) -> bytes:
        return b"\x00" * (num_bytes - 1)

    def choice(self, items):
        return items[0]


def test_hmac_sha256_known_vector() -> None:
    # RFC 4231, test case 2
    digest = commit(b"Jefe", "what do ya want for nothing?")
    assert digest == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"


def test_commit_is_deterministic_lowercase_hex() -> None:
    first = commit(KEY, "rock")
    second = commit(KEY, "rock")
    assert first == second
    assert len(first) == DIGEST_HEX_LEN
    assert re.fullmatch(r"[0-9a-f]{64}", first)


def test_commit_depends_on_key_and_move() -> None:
    assert commit(KEY, "rock") != commit(KEY, "paper")
    assert commit(KEY, "rock") != commit(bytes(32), "rock")


def test_commit_encodes_move_as_utf8() -> None:
    assert commit(KEY, "piedra") != commit(KEY, "piédra")
    assert len(commit(KEY, "石头")) == DIGEST_HEX_LEN


def test_commit_checks_membership_when_given_move_set() -> None:
    ms = MoveSet(["rock", "paper", "scissors"])
    assert commit(KEY, "paper", move_set=ms) == commit(KEY, "paper")
    with pytest.raises(UnknownMove):
        commit(KEY, "lizard", move_set=ms)


def test_verify_roundtrip_with_bytes_and_hex_key() -> None:
    digest = commit(KEY, "scissors")
    assert verify(KEY, "scissors", digest)
    assert verify(secret_hex(KEY), "scissors", digest)
    assert verify(secret_hex(KEY).upper(), "scissors", digest)


def test_verify_rejects_other_move_or_key() -> None:
    digest = commit(KEY, "scissors")
    assert not verify(KEY, "rock", digest)
    assert not verify(bytes(32), "scissors", digest)
    assert not verify(KEY, "scissors", commit(KEY, "paper"))


def test_verify_rejects_malformed_input() -> None:
    digest = commit(KEY, "rock")
    assert not verify("not-hex", "rock", digest)
    assert not verify(KEY, "rock", "")
    assert not verify(KEY, "rock", "é" * 64)
    assert not verify(KEY, "rock", digest[:-1])


def test_generate_secret_is_32_fresh_bytes() -> None:
    a = generate_secret()
    b = generate_secret(SystemRandomSource())
    assert len(a) == SECRET_BYTES == 32
    assert isinstance(a, bytes)
    assert a != b
    assert len(secret_hex(a)) == 64


def test_generate_secret_rejects_short_read() -> None:
    with pytest.raises(EntropyUnavailable):
        generate_secret(ShortSource())


def test_system_source_wraps_os_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(num_bytes: int) -> bytes:
        raise OSError("no entropy")

    monkeypatch.setattr(secrets, "token_bytes", broken)
    with pytest.raises(EntropyUnavailable) as info:
        generate_secret()
    assert isinstance(info.value.__cause__, OSError)
