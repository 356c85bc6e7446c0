"""
Per-client request rate limiting (slowapi).

Only routes decorated with ``@limiter.limit(rate_limit)`` are limited.  The
limit string is read on every request, so ``configure_limiter`` can apply an
app's settings after the routes have been imported.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from rides_api.config import Settings, settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

_rate_limit = settings.rate_limit


def rate_limit() -> str:
    """Current limit string, e.g. ``"100 per 15 minutes"``."""
    return _rate_limit


def configure_limiter(settings: Settings) -> Limiter:
    """Apply *settings* to the shared limiter and clear its counters."""
    global _rate_limit
    _rate_limit = settings.rate_limit
    limiter.enabled = settings.rate_limit_enabled
    limiter.reset()
    return limiter
