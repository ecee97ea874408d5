from __future__ import annotations

import pytest
from conftest import FakeClock

from bookshelf.shared.errors import RateLimitedError
from bookshelf.shared.middleware.rate_limit import (FixedWindowRateLimiter,
                                                    RateLimitPolicy)


@pytest.fixture()
def limiter(clock: FakeClock) -> FixedWindowRateLimiter:
    return FixedWindowRateLimiter(RateLimitPolicy(max_attempts=5, window_ms=60_000), clock=clock)


def test_allows_exactly_max_attempts_per_window(limiter: FixedWindowRateLimiter) -> None:
    decisions = [limiter.check("1.2.3.4", "login") for _ in range(5)]

    assert [d.remaining for d in decisions] == [4, 3, 2, 1, 0]
    with pytest.raises(RateLimitedError):
        limiter.check("1.2.3.4", "login")


def test_rejection_carries_retry_after_hint(
    limiter: FixedWindowRateLimiter, clock: FakeClock
) -> None:
    for _ in range(5):
        limiter.check("1.2.3.4", "login")
    clock.advance(20)

    with pytest.raises(RateLimitedError) as exc_info:
        limiter.check("1.2.3.4", "login")

    assert exc_info.value.retry_after_seconds == 40
    assert exc_info.value.to_dict()["message"].startswith("Too many")


def test_window_expiry_starts_new_window(
    limiter: FixedWindowRateLimiter, clock: FakeClock
) -> None:
    for _ in range(5):
        limiter.check("1.2.3.4", "login")
    with pytest.raises(RateLimitedError):
        limiter.check("1.2.3.4", "login")

    clock.advance(60)

    decision = limiter.check("1.2.3.4", "login")
    assert decision.remaining == 4


def test_keys_are_independent_per_client_and_route(limiter: FixedWindowRateLimiter) -> None:
    for _ in range(5):
        limiter.check("1.2.3.4", "login")

    assert limiter.check("1.2.3.4", "register").remaining == 4
    assert limiter.check("5.6.7.8", "login").remaining == 4


def test_disabled_limiter_always_allows(clock: FakeClock) -> None:
    limiter = FixedWindowRateLimiter(
        RateLimitPolicy(max_attempts=1, window_ms=60_000, enabled=False), clock=clock
    )

    for _ in range(50):
        limiter.check("1.2.3.4", "login")

    assert limiter.enabled is False


def test_reset_clears_one_client_or_all(limiter: FixedWindowRateLimiter) -> None:
    for client in ("a", "b"):
        for _ in range(5):
            limiter.check(client, "login")

    limiter.reset("a")
    assert limiter.check("a", "login").remaining == 4
    with pytest.raises(RateLimitedError):
        limiter.check("b", "login")

    limiter.reset()
    assert limiter.check("b", "login").remaining == 4
