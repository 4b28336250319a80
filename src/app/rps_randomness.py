from __future__ import annotations

import secrets
from typing import Protocol, Sequence, TypeVar

from rps_errors import EntropyUnavailable

T = TypeVar("T")


class RandomSource(Protocol):
    def token_bytes(self, num_bytes: int) -> bytes: ...

    def choice(self, items: Sequence[T]) -> T: ...


class SystemRandomSource:
    """Backed by the OS CSPRNG through `secrets`."""

    def token_bytes(self, num_bytes: int) -> bytes:
        try:
            raw = secrets.token_bytes(num_bytes)
        except (OSError, NotImplementedError) as exc:
            raise EntropyUnavailable(f"secure random source failed: {exc}") from exc
        if len(raw) != num_bytes:
            raise EntropyUnavailable(f"secure random source returned {len(raw)} of {num_bytes} bytes")
        return raw

    def choice(self, items: Sequence[T]) -> T:
        try:
            return secrets.choice(items)
        except (OSError, NotImplementedError) as exc:
            raise EntropyUnavailable(f"secure random source failed: {exc}") from exc


def default_source() -> RandomSource:
    return SystemRandomSource()
