"""cursorlaunch exception hierarchy.

All public exceptions inherit from CursorLaunchError, giving callers a single
base class to catch when they want to handle any launcher failure without
swallowing unrelated errors.
"""


class CursorLaunchError(Exception):
    """Base exception for all cursorlaunch errors."""


class InstallationNotFoundError(CursorLaunchError):
    """Raised when the Cursor executable is absent from every search path.

    Carries the candidate paths that were checked so callers can tell the
    user where the editor was expected.
    """

    def __init__(self, message: str, candidates: list | None = None) -> None:
        super().__init__(message)
        self.candidates = list(candidates or [])


class ManifestWriteError(CursorLaunchError, OSError):
    """Raised when the workspace manifest cannot be written to disk.

    Covers missing permissions, read-only filesystems and target paths
    that collide with an existing directory.
    """


class LaunchError(CursorLaunchError):
    """Raised when the operating system refuses to start the editor process.

    Covers missing executables, permission errors and executables that
    disappeared between lookup and launch.
    """
