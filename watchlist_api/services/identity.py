"""Identity resolution: map an authenticated email to a watchlist owner id."""

import logging
from typing import Optional

from django.contrib.auth import get_user_model

logger = logging.getLogger(__name__)


def resolve_user_id(email: str) -> Optional[str]:
    """Return the identifier watchlist entries are stored under.

    See ``User.watchlist_owner_id``. Returns None when the email is blank
    or matches no user. Database errors propagate to the caller.
    """
    if not email:
        return None

    user = (
        get_user_model().objects
        .filter(email=email)
        .only('pk', 'external_id')
        .first()
    )
    if user is None:
        logger.debug(f"No user found for email: {email}")
        return None

    return user.watchlist_owner_id
