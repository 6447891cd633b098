"""Translation of release names into git revisions."""

import enum
import logging
import re
from typing import Optional, Tuple

from relgit.core.context import InvocationContext

logger = logging.getLogger(__name__)

RELEASE_PATTERN = re.compile(r'^v\d+$')
RANGE_PATTERN = re.compile(r'^(.*?)(\.{2,3})(.*)$')


class TokenKind(enum.Enum):
    EMPTY = 'empty'
    RELEASE = 'release'
    OPAQUE = 'opaque'


def classify(token: Optional[str]) -> TokenKind:
    """
    Classify a user-supplied token.

    Examples:
        classify(None) -> TokenKind.EMPTY
        classify('v12') -> TokenKind.RELEASE
        classify('master') -> TokenKind.OPAQUE
        classify('v1..v2') -> TokenKind.OPAQUE
    """
    if not token:
        return TokenKind.EMPTY
    if RELEASE_PATTERN.match(token):
        return TokenKind.RELEASE
    return TokenKind.OPAQUE


def split_range(arg: str) -> Optional[Tuple[str, str, str]]:
    """
    Split a revision range into (left, separator, right).

    Returns None for flags, bare '..'/'...' and anything without dots.
    """
    if arg.startswith('-') or arg in ('..', '...'):
        return None
    match = RANGE_PATTERN.match(arg)
    if not match:
        return None
    return match.group(1), match.group(2), match.group(3)


class ReleaseResolver:
    """
    Resolves release tokens to commits usable as git revisions.

    Commits the local repository does not know trigger a fetch of the
    app's repository, at most once per invocation.
    """

    def __init__(self, context: InvocationContext):
        self.context = context

    def resolve(self, token: Optional[str] = None) -> str:
        """
        Resolve a token to a commit.

        Empty tokens mean the latest release, ``vN`` tokens name a release
        and anything else is returned untouched.

        Raises:
            NotFoundError: If the release (or any release) does not exist
            GitError: If fetching the app's repository fails
        """
        kind = classify(token)
        if kind is TokenKind.OPAQUE:
            return token

        name = token if kind is TokenKind.RELEASE else None
        commit = self.context.backend.release_commit(self.context.app, name)
        return self.materialize(commit)

    def materialize(self, commit: str) -> str:
        """
        Make sure a commit is available locally.

        Returns:
            The full SHA when git knows the commit, else ``commit`` unchanged
        """
        git = self.context.git
        sha = git.verify(commit)
        if sha:
            return sha

        if self.context.fetch_once():
            sha = git.verify(commit)
            if sha:
                return sha

        logger.debug("Commit %s not available locally", commit)
        return commit

    def resolve_range(self, arg: str) -> str:
        """Resolve both sides of 'A..B' or 'A...B', keeping the separator."""
        parts = split_range(arg)
        if parts is None:
            return self.resolve(arg)
        left, separator, right = parts
        return f"{self.resolve(left)}{separator}{self.resolve(right)}"

    def translate(self, arg: str) -> Tuple[str, bool]:
        """
        Translate one ``git log`` style argument.

        Returns:
            (translated argument, whether it referred to a release)
        """
        if arg.startswith('-') or arg in ('..', '...'):
            return arg, False
        if split_range(arg) is not None:
            return self.resolve_range(arg), True
        if classify(arg) is TokenKind.RELEASE:
            return self.resolve(arg), True
        return arg, False
