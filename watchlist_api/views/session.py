"""Explicit session lookup for watchlist views."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Session:
    """The authenticated caller, as seen by the watchlist endpoints."""
    email: str


def get_session(request) -> Optional[Session]:
    """Return the caller's session, or None when not signed in.

    Works for both Django ``HttpRequest`` and DRF ``Request`` objects.
    """
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return None

    email = getattr(user, 'email', '') or ''
    if not email:
        return None
    return Session(email=email)
