"""
Thread‑safe in‑memory user store.

``UserStore`` maps user identifiers to display names.  A single lock
guards the mapping and is held only for the duration of one ``get`` or
``set`` call.  Seed data is passed explicitly to the constructor; the
store never reads global state.
"""

import threading
from typing import Dict, Mapping, Optional, Tuple


class UserStore:
    """Mapping of user id to display name guarded by a lock."""

    def __init__(self, seed: Optional[Mapping[str, str]] = None) -> None:
        self._lock = threading.Lock()
        self._users: Dict[str, str] = dict(seed or {})

    def get(self, user_id: str) -> Tuple[Optional[str], bool]:
        """Return ``(name, found)`` for ``user_id``."""
        with self._lock:
            if user_id in self._users:
                return self._users[user_id], True
            return None, False

    def set(self, user_id: str, name: str) -> None:
        """Insert or overwrite the name stored for ``user_id``."""
        with self._lock:
            self._users[user_id] = name

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of the current mapping."""
        with self._lock:
            return dict(self._users)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
