"""Exception hierarchy for relgit."""

from typing import Optional, Sequence


class RelgitError(Exception):
    """Base class for all relgit errors."""


class ConfigError(RelgitError):
    """Raised when the app or its configuration cannot be determined."""


class APIError(RelgitError):
    """Raised when a platform API request fails."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class NotFoundError(APIError):
    """Raised when an app, release or commit does not exist."""

    def __init__(self, message: str):
        super().__init__(message, status=404)


class GitError(RelgitError):
    """
    Raised when a git subprocess exits with a non-zero status.

    The command layer exits with ``returncode`` so the user sees
    git's own status.
    """

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = ''):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        message = f"'{' '.join(self.command)}' exited with status {returncode}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
