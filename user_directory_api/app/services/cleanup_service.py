"""
Temporary file cleanup.

``TempFileCleaner`` removes entries from a single directory whose names
match a shell‑style pattern.  Removal failures are collected in a
``CleanupResult`` and logged; callers choose between continuing past
failures (the default) and stopping at the first one with
``fail_fast=True``.  Empty directories are removed; non‑empty ones
are reported as failures and never deleted recursively.
"""

import fnmatch
import logging
import os
from dataclasses import dataclass, field
from typing import List, Tuple

from ..core.errors import CleanupError

logger = logging.getLogger(__name__)


@dataclass
class CleanupResult:
    """Outcome of a cleanup run.

    Attributes:
        removed: Names of entries that were deleted.
        failures: ``(name, message)`` pairs for entries that could not
            be deleted.
    """

    removed: List[str] = field(default_factory=list)
    failures: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class TempFileCleaner:
    """Delete matching entries from a temporary directory."""

    def __init__(self, directory: str = "/tmp") -> None:
        self.directory = directory

    def delete_temp_files(self, pattern: str = "*", fail_fast: bool = False) -> CleanupResult:
        """Remove entries of ``directory`` whose names match ``pattern``.

        ``pattern`` uses ``fnmatch`` syntax; the default ``"*"`` matches
        every entry.  Raises ``CleanupError`` if the directory cannot be
        listed, or on the first removal failure when ``fail_fast`` is
        set.
        """
        try:
            names = sorted(os.listdir(self.directory))
        except OSError as exc:
            raise CleanupError(f"cannot list {self.directory}: {exc}") from exc

        result = CleanupResult()
        for name in names:
            if not fnmatch.fnmatch(name, pattern):
                continue
            path = os.path.join(self.directory, name)
            try:
                if os.path.isdir(path) and not os.path.islink(path):
                    os.rmdir(path)
                else:
                    os.remove(path)
            except OSError as exc:
                logger.warning("Failed to remove %s: %s", path, exc)
                result.failures.append((name, str(exc)))
                if fail_fast:
                    raise CleanupError(f"cannot remove {path}: {exc}", result) from exc
                continue
            result.removed.append(name)

        logger.info(
            "Cleaned %s (pattern %r): %d removed, %d failed",
            self.directory,
            pattern,
            len(result.removed),
            len(result.failures),
        )
        return result
