"""Mapping between local git remotes and platform apps."""

import re
from typing import Dict, Optional

from relgit.core.git import Git


def app_from_url(url: str, host: str) -> Optional[str]:
    """
    Extract the app name from a platform Git URL.

    Examples:
        git@heroku.com:myapp.git -> 'myapp'
        ssh://git@heroku.com/myapp.git -> 'myapp'
        https://git.heroku.com/myapp.git -> 'myapp'
        https://github.com/user/repo.git -> None
    """
    pattern = (
        r'^(?:git@|ssh://git@|https://git\.)'
        + re.escape(host)
        + r'[:/](?P<app>[^/]+?)\.git/?$'
    )
    match = re.match(pattern, url)
    return match.group('app') if match else None


class RemoteManager:
    """
    Reads the platform remotes configured in a local repository.

    Only remotes whose URL points at the platform Git host are considered.
    """

    def __init__(self, git: Git, host: str):
        self.git = git
        self.host = host

    def list_remotes(self) -> Dict[str, str]:
        """
        List platform remotes.

        Returns:
            Dict mapping remote names to app names
        """
        remotes = {}
        for name, url in self.git.remotes().items():
            app = app_from_url(url, self.host)
            if app:
                remotes[name] = app
        return remotes

    def app_for_remote(self, name: str) -> Optional[str]:
        return self.list_remotes().get(name)

    def remote_for_app(self, app: str) -> Optional[str]:
        """Name of the remote bound to ``app``, or None."""
        inverted = {bound_app: name for name, bound_app in self.list_remotes().items()}
        return inverted.get(app)

    def has_remote(self, name: str) -> bool:
        return name in self.git.remotes()
