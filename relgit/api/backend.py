"""Release lookup backends.

A backend answers one question: which commit does a release of an app
point at? The two API generations shape their release records
differently, so each gets its own backend; callers only ever see the
commit string.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from relgit.api.client import LegacyClient, PlatformClient
from relgit.core.config import Config
from relgit.core.errors import NotFoundError

logger = logging.getLogger(__name__)


class ReleaseBackend:
    """Common interface for release lookups."""

    name = 'base'

    def __init__(self, client):
        self.client = client

    def get_release(self, app: str, name: Optional[str] = None) -> Dict[str, Any]:
        """
        Fetch a release record.

        Args:
            app: App name
            name: Release name (e.g. 'v12'), or None for the latest release

        Raises:
            NotFoundError: If the app has no releases or the release is unknown
        """
        if not name:
            releases = self.client.get_releases(app)
            if not releases:
                raise NotFoundError(f"No releases for {app}")
            # Server order: the last element is the latest release.
            return releases[-1]

        try:
            return self.client.get_release(app, name)
        except NotFoundError:
            raise NotFoundError(f"Release {name} not found for {app}")

    def commit_for(self, app: str, release: Dict[str, Any]) -> Optional[str]:
        raise NotImplementedError

    def release_commit(self, app: str, name: Optional[str] = None) -> str:
        """Return the commit the given (or latest) release was built from."""
        release = self.get_release(app, name)
        commit = self.commit_for(app, release)
        if not commit:
            label = name or release.get('name') or 'latest release'
            raise NotFoundError(f"No commit recorded for {label} of {app}")
        logger.debug("%s %s -> %s (%s backend)", app, name or 'latest', commit, self.name)
        return commit

    def git_url(self, app: str) -> str:
        info = self.client.get_app(app)
        url = info.get('git_url')
        if not url:
            raise NotFoundError(f"No Git URL for {app}")
        return url

    def apps(self) -> List[str]:
        return [app['name'] for app in self.client.get_apps()]


class DirectBackend(ReleaseBackend):
    """Legacy API: the release record carries the commit itself."""

    name = 'legacy'

    def commit_for(self, app: str, release: Dict[str, Any]) -> Optional[str]:
        return release.get('commit')


class SlugBackend(ReleaseBackend):
    """Platform API: the commit lives on the slug the release references."""

    name = 'platform'

    def commit_for(self, app: str, release: Dict[str, Any]) -> Optional[str]:
        slug = release.get('slug') or {}
        slug_id = slug.get('id')
        if not slug_id:
            return None
        return self.client.get_slug(app, slug_id).get('commit')


def select_backend(config: Config, session: Optional[requests.Session] = None) -> ReleaseBackend:
    """
    Pick the release backend for this invocation.

    The platform API is preferred. Any failure to set up its client means
    it is unavailable and the legacy API is used instead.
    """
    try:
        client = PlatformClient.from_config(config, session=session)
    except Exception as e:
        logger.debug("Platform API unavailable, using legacy API: %s", e)
        return DirectBackend(LegacyClient.from_config(config, session=session))
    return SlugBackend(client)
