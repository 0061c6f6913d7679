"""cursorlaunch: Open files, solutions and addons in the Cursor editor."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
