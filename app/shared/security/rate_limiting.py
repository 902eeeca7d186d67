"""
Rate limiting setup.

Uses slowapi to enforce one per-client limit on every route. Each
application gets its own Limiter (and its own in-memory counters), built
from the Settings snapshot.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Create the limiter for one application instance.

    Args:
        settings: Application settings (rate_limit, rate_limit_enabled).

    Returns:
        A Limiter applying settings.rate_limit to every client address.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
        storage_uri="memory://",
    )
