"""
Business logic for users.

``UserService`` wraps a ``UserStore`` and adds the cache‑miss policy:
an unknown id resolves to a placeholder name built from the id, and
the placeholder is never written back to the store.
"""

import logging

from ..core.store import UserStore

logger = logging.getLogger(__name__)

PLACEHOLDER_PREFIX = "user_"


class UserService:
    """Service for looking up and saving user display names.

    The store is supplied by the caller so that each application (and
    each test) owns its own data.  ``database_url`` is kept for
    configuration parity with a database‑backed deployment; users are
    always served from the in‑memory store.
    """

    def __init__(self, store: UserStore, database_url: str = "") -> None:
        self.store = store
        self.database_url = database_url
        logger.debug("UserService created (database_url=%s, %d seeded users)", database_url, len(store))

    async def get_user(self, user_id: str) -> str:
        """Return the display name for ``user_id``.

        Stored names are returned as is.  For unknown ids a placeholder
        ``"user_<id>"`` is synthesised on every call; the store is not
        modified.  Implementations backed by a real database raise
        ``UserLookupError`` when the lookup itself fails.
        """
        name, found = self.store.get(user_id)
        if found:
            return name
        logger.debug("User %s not found, using placeholder", user_id)
        return f"{PLACEHOLDER_PREFIX}{user_id}"

    async def save_user(self, user_id: str, name: str) -> None:
        """Store ``name`` for ``user_id``, replacing any previous value.

        No validation is performed; empty ids and names are accepted.
        """
        self.store.set(user_id, name)
        logger.info("Saved user %s", user_id)
