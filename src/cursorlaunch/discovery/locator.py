"""Installation locator for the Cursor executable.

Scans the platform candidate list once and memoizes the first hit for the
lifetime of the locator. A memoized path is never re-scanned, even if the
file is removed later; a failed lookup is not memoized, so installing the
editor while the host is running is picked up on the next request.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path, PurePath
from typing import Sequence

from cursorlaunch.discovery.install_registry import candidate_paths
from cursorlaunch.exceptions import InstallationNotFoundError

logger = logging.getLogger(__name__)


class InstallationLocator:
    """Finds and remembers the Cursor executable.

    Usage::

        locator = InstallationLocator()
        if locator.is_installed():
            exe = locator.locate()

    Args:
        candidates: Paths to scan, in order. Defaults to the running
            platform's conventional install locations.
        override: Explicit executable path. Replaces ``candidates``.
    """

    def __init__(
        self,
        candidates: Sequence[PurePath | str] | None = None,
        override: PurePath | str | None = None,
    ) -> None:
        if override is not None:
            self._candidates = [Path(override)]
        elif candidates is not None:
            self._candidates = [Path(c) for c in candidates]
        else:
            self._candidates = [Path(c) for c in candidate_paths()]
        self._cached: Path | None = None
        self._lock = threading.Lock()

    @property
    def candidates(self) -> list[Path]:
        """Return a copy of the candidate paths in scan order."""
        return list(self._candidates)

    @property
    def cached(self) -> Path | None:
        """Return the memoized executable path, or None before a hit."""
        return self._cached

    def _scan(self) -> Path | None:
        for candidate in self._candidates:
            try:
                if candidate.is_file():
                    return candidate
            except OSError:
                continue
        return None

    def find(self) -> Path | None:
        """Return the executable path, or None if Cursor is not installed."""
        if self._cached is not None:
            return self._cached
        with self._lock:
            if self._cached is None:
                found = self._scan()
                if found is None:
                    logger.warning("Could not find Cursor installation path")
                    return None
                logger.debug("Found Cursor at %s", found)
                self._cached = found
        return self._cached

    def locate(self) -> Path:
        """Return the executable path.

        Raises:
            InstallationNotFoundError: No candidate exists as a regular file.
        """
        found = self.find()
        if found is None:
            raise InstallationNotFoundError(
                "Cursor editor not found", candidates=self._candidates,
            )
        return found

    def is_installed(self) -> bool:
        """Return True when the executable can be located."""
        return self.find() is not None

    def reset(self) -> None:
        """Forget the memoized path so the next lookup scans again."""
        with self._lock:
            self._cached = None
