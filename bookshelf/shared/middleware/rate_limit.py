# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock

from flask import Request

from bookshelf.shared.errors.base import RateLimitedError
from bookshelf.shared.logging import logger

_MAX_ENTRIES = 10_000


@dataclass(slots=True)
class RateLimitEntry:
    count: int
    window_start: float


@dataclass(slots=True, frozen=True)
class RateLimitPolicy:
    max_attempts: int = 5
    window_ms: int = 15 * 60 * 1000
    enabled: bool = True

    @property
    def window_seconds(self) -> float:
        return self.window_ms / 1000.0


@dataclass(slots=True, frozen=True)
class RateLimitDecision:
    limit: int
    remaining: int
    reset_after: float


class FixedWindowRateLimiter:
    """Counts attempts per (client key, route) inside fixed windows.

    The first request of a window opens it with a count of one. Requests whose
    count exceeds ``max_attempts`` are rejected until the window has elapsed.
    Counters live in process memory only.
    """

    def __init__(
        self,
        policy: RateLimitPolicy | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._policy = policy or RateLimitPolicy()
        self._limit = max(1, int(self._policy.max_attempts))
        self._window = max(0.001, self._policy.window_seconds)
        self._clock = clock
        self._entries: dict[tuple[str, str], RateLimitEntry] = {}
        self._lock = Lock()

    @property
    def enabled(self) -> bool:
        return self._policy.enabled

    def check(self, client_key: str, route: str) -> RateLimitDecision:
        if not self._policy.enabled:
            return RateLimitDecision(limit=self._limit, remaining=self._limit, reset_after=0.0)

        key = (client_key, route)
        with self._lock:
            now = self._clock()
            entry = self._entries.get(key)
            if entry is None or (now - entry.window_start) >= self._window:
                if entry is None and len(self._entries) >= _MAX_ENTRIES:
                    self._purge_expired(now)
                entry = RateLimitEntry(count=1, window_start=now)
                self._entries[key] = entry
            else:
                entry.count += 1

            reset_after = max(0.0, self._window - (now - entry.window_start))
            if entry.count > self._limit:
                logger.warning(
                    f"rate_limit: rejected route={route} client={client_key} "
                    f"count={entry.count} limit={self._limit} retry_after={reset_after:.0f}s"
                )
                raise RateLimitedError(retry_after=reset_after)

            return RateLimitDecision(
                limit=self._limit,
                remaining=self._limit - entry.count,
                reset_after=reset_after,
            )

    def reset(self, client_key: str | None = None) -> None:
        with self._lock:
            if client_key is None:
                self._entries.clear()
                return
            for key in [k for k in self._entries if k[0] == client_key]:
                del self._entries[key]

    def _purge_expired(self, now: float) -> None:
        expired = [
            key
            for key, entry in self._entries.items()
            if (now - entry.window_start) >= self._window
        ]
        for key in expired:
            del self._entries[key]
        logger.debug(f"rate_limit: purged {len(expired)} expired entries")


def client_key(req: Request) -> str:
    # Forwarded headers are honoured only through ProxyFix (TRUST_PROXY).
    return req.remote_addr or "unknown"


__all__ = [
    "FixedWindowRateLimiter",
    "RateLimitDecision",
    "RateLimitEntry",
    "RateLimitPolicy",
    "client_key",
]
