"""HTTP clients for the platform API.

Two generations of the API are supported:

- ``LegacyClient`` talks to the original REST API, whose release records
  carry the commit directly.
- ``PlatformClient`` talks to the newer platform API, whose release records
  reference a slug that must be looked up to find the commit.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from relgit import __version__
from relgit.core.config import Config
from relgit.core.errors import APIError, NotFoundError

logger = logging.getLogger(__name__)

USER_AGENT = f"relgit/{__version__}"


class BaseClient:
    """Shared request handling for both API generations."""

    accept = 'application/json'

    def __init__(self, base_url: str, token: Optional[str] = None, timeout: float = 30,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'Accept': self.accept,
            'User-Agent': USER_AGENT,
        })
        self._authenticate()

    def _authenticate(self) -> None:
        raise NotImplementedError

    def _path(self, *parts: str) -> str:
        return '/'.join(quote(str(part), safe='') for part in parts)

    def get(self, path: str) -> Any:
        """
        Issue a GET request and decode the JSON body.

        Raises:
            NotFoundError: On a 404 response
            APIError: On any other HTTP or network failure
        """
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise APIError(f"Network error: {e!s}")

        if response.status_code == 404:
            raise NotFoundError(f"Not found: {path}")
        if response.status_code >= 400:
            raise APIError(
                f"API request failed: {response.status_code} - {response.text}",
                status=response.status_code,
            )

        try:
            return response.json()
        except ValueError:
            raise APIError(f"Invalid JSON in response from {url}", status=response.status_code)

    def get_app(self, app: str) -> Dict[str, Any]:
        return self.get(self._path('apps', app))

    def get_apps(self) -> List[Dict[str, Any]]:
        return self.get('apps')

    def get_releases(self, app: str) -> List[Dict[str, Any]]:
        return self.get(self._path('apps', app, 'releases'))


class LegacyClient(BaseClient):
    """Client for the legacy REST API (HTTP basic auth with the API key)."""

    def _authenticate(self) -> None:
        if self.token:
            self.session.auth = ('', self.token)

    def get_release(self, app: str, name: str) -> Dict[str, Any]:
        return self.get(self._path('apps', app, 'releases', name))

    @classmethod
    def from_config(cls, config: Config, session: Optional[requests.Session] = None):
        return cls(
            config.get('api', 'url'),
            token=config.get('api', 'token'),
            timeout=config.get_float('api', 'timeout'),
            session=session,
        )


class PlatformClient(BaseClient):
    """
    Client for the platform API.

    Requires a bearer token; releases are addressed by version number and
    carry a slug reference instead of a commit.
    """

    accept = 'application/vnd.heroku+json; version=3'

    def _authenticate(self) -> None:
        if not self.token:
            raise APIError("The platform API requires an API token")
        self.session.headers['Authorization'] = f"Bearer {self.token}"

    def get_release(self, app: str, name: str) -> Dict[str, Any]:
        version = name[1:] if name.startswith('v') else name
        return self.get(self._path('apps', app, 'releases', version))

    def get_slug(self, app: str, slug_id: str) -> Dict[str, Any]:
        return self.get(self._path('apps', app, 'slugs', slug_id))

    @classmethod
    def from_config(cls, config: Config, session: Optional[requests.Session] = None):
        base_url = config.get('api', 'platform_url')
        if not base_url:
            raise APIError("No platform API URL configured")
        return cls(
            base_url,
            token=config.get('api', 'token'),
            timeout=config.get_float('api', 'timeout'),
            session=session,
        )
