"""Per-invocation state shared by the commands.

Everything here lives for exactly one command run: the app being worked
on, the chosen release backend, and the lazily computed remote name,
Git URL and fetch flag.
"""

import logging
from typing import Optional

from relgit.core.config import Config
from relgit.core.errors import ConfigError
from relgit.core.git import Git
from relgit.core.remote import RemoteManager

logger = logging.getLogger(__name__)

NO_APP_MESSAGE = (
    "No app specified.\n"
    "Run this command from an app folder or specify which app to use with --app APP."
)


def determine_app(config: Config, remotes: RemoteManager,
                  app: Optional[str] = None, remote: Optional[str] = None) -> str:
    """
    Work out which app a command applies to.

    Order: --app, --remote, RELGIT_CORE_APP / core.app, the remote named
    by ``git config relgit.remote``, then the only platform remote.

    Raises:
        ConfigError: If no app can be determined
    """
    if app:
        return app

    if remote:
        bound = remotes.app_for_remote(remote)
        if not bound:
            raise ConfigError(f"No app bound to remote '{remote}'")
        return bound

    configured = config.get('core', 'app')
    if configured:
        return configured

    default_remote = remotes.git.config_get('relgit.remote')
    if default_remote:
        bound = remotes.app_for_remote(default_remote)
        if bound:
            return bound

    apps = set(remotes.list_remotes().values())
    if len(apps) == 1:
        return apps.pop()

    raise ConfigError(NO_APP_MESSAGE)


class InvocationContext:
    """
    State for one command invocation.

    ``remote_name`` and ``git_url`` are computed on first use and cached;
    ``fetched`` records whether the app's repository has been fetched yet.
    """

    def __init__(self, app: str, git: Git, backend, remotes: RemoteManager):
        self.app = app
        self.git = git
        self.backend = backend
        self.remotes = remotes
        self.fetched = False
        self._remote_name = None
        self._remote_name_resolved = False
        self._git_url = None

    @property
    def remote_name(self) -> Optional[str]:
        """Name of the local remote bound to the app, or None."""
        if not self._remote_name_resolved:
            self._remote_name = self.remotes.remote_for_app(self.app)
            self._remote_name_resolved = True
        return self._remote_name

    @property
    def git_url(self) -> str:
        """The app's repository URL as reported by the API."""
        if self._git_url is None:
            self._git_url = self.backend.git_url(self.app)
        return self._git_url

    @property
    def fetch_target(self) -> str:
        """What to pass to git fetch/push: the remote name if bound, else the URL."""
        return self.remote_name or self.git_url

    def fetch_once(self) -> bool:
        """
        Fetch the app's repository unless this invocation already did.

        Returns:
            True if a fetch was performed
        """
        if self.fetched:
            return False
        target = self.fetch_target
        logger.debug("Fetching %s", target)
        self.git.fetch(target)
        self.fetched = True
        return True
