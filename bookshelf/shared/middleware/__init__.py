from .auth import BearerAuth, bearer_token, current_user
from .rate_limit import FixedWindowRateLimiter, RateLimitPolicy, client_key

__all__ = [
    "BearerAuth",
    "FixedWindowRateLimiter",
    "RateLimitPolicy",
    "bearer_token",
    "client_key",
    "current_user",
]
