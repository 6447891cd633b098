"""Shared pytest fixtures for relgit tests."""

import pytest
import tempfile
import shutil
from pathlib import Path

from relgit.api.backend import DirectBackend, SlugBackend
from relgit.core.config import Config
from relgit.core.context import InvocationContext
from relgit.core.errors import GitError, NotFoundError
from relgit.core.remote import RemoteManager

FULL_A = 'a' * 40
FULL_B = 'b' * 40


class FakeGit:
    """
    Stand-in for relgit.core.git.Git.

    ``objects`` maps revisions git can resolve to their full SHA;
    ``remote_objects`` become resolvable after a fetch.
    """

    def __init__(self, objects=None, remote_objects=None, remotes=None, config=None,
                 fetch_status=0, system_status=0):
        self.objects = dict(objects or {})
        self.remote_objects = dict(remote_objects or {})
        self.remote_urls = dict(remotes or {})
        self.config = dict(config or {})
        self.fetch_status = fetch_status
        self.system_status = system_status
        self.verified = []
        self.fetches = []
        self.system_calls = []

    def verify(self, ref):
        self.verified.append(ref)
        if ref in self.objects.values():
            return ref
        return self.objects.get(ref, '')

    def fetch(self, target):
        self.fetches.append(target)
        if self.fetch_status != 0:
            raise GitError(['git', 'fetch', target], self.fetch_status, 'fatal: unreachable')
        self.objects.update(self.remote_objects)
        return ''

    def system(self, *args):
        self.system_calls.append(list(args))
        return self.system_status

    def config_get(self, key):
        return self.config.get(key)

    def remotes(self):
        return dict(self.remote_urls)

    def add_remote(self, name, url):
        if name in self.remote_urls:
            raise GitError(['git', 'remote', 'add', name, url], 3,
                           f"error: remote {name} already exists.")
        self.remote_urls[name] = url


class FakeLegacyClient:
    """In-memory legacy API: releases carry their commit."""

    def __init__(self, apps):
        self.apps = apps
        self.calls = []

    def _app(self, app):
        if app not in self.apps:
            raise NotFoundError(f"Not found: apps/{app}")
        return self.apps[app]

    def get_app(self, app):
        self.calls.append(('get_app', app))
        return {'name': app, 'git_url': self._app(app)['git_url']}

    def get_apps(self):
        self.calls.append(('get_apps',))
        return [{'name': name} for name in self.apps]

    def get_releases(self, app):
        self.calls.append(('get_releases', app))
        return list(self._app(app)['releases'])

    def get_release(self, app, name):
        self.calls.append(('get_release', app, name))
        for release in self._app(app)['releases']:
            if release['name'] == name:
                return release
        raise NotFoundError(f"Not found: apps/{app}/releases/{name}")


class FakePlatformClient(FakeLegacyClient):
    """In-memory platform API: releases reference slugs."""

    def __init__(self, apps, slugs):
        super().__init__(apps)
        self.slugs = slugs

    def get_slug(self, app, slug_id):
        self.calls.append(('get_slug', app, slug_id))
        self._app(app)
        if slug_id not in self.slugs:
            raise NotFoundError(f"Not found: apps/{app}/slugs/{slug_id}")
        return {'id': slug_id, 'commit': self.slugs[slug_id]}


def legacy_apps():
    return {
        'myapp': {
            'git_url': 'https://git.heroku.com/myapp.git',
            'releases': [
                {'name': 'v1', 'commit': 'aaaa111'},
                {'name': 'v2', 'commit': 'bbbb222'},
            ],
        },
        'empty': {
            'git_url': 'https://git.heroku.com/empty.git',
            'releases': [],
        },
    }


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def legacy_client():
    return FakeLegacyClient(legacy_apps())


@pytest.fixture
def platform_client():
    apps = legacy_apps()
    apps['myapp']['releases'] = [
        {'name': 'v1', 'version': 1, 'slug': {'id': 'slug-1'}},
        {'name': 'v2', 'version': 2, 'slug': {'id': 'slug-2'}},
    ]
    return FakePlatformClient(apps, {'slug-1': 'aaaa111', 'slug-2': 'bbbb222'})


@pytest.fixture
def backend(legacy_client):
    return DirectBackend(legacy_client)


@pytest.fixture
def slug_backend(platform_client):
    return SlugBackend(platform_client)


@pytest.fixture
def git():
    """Git that knows nothing locally but gets both commits from a fetch."""
    return FakeGit(
        remote_objects={'aaaa111': FULL_A, 'bbbb222': FULL_B},
        remotes={'production': 'https://git.heroku.com/myapp.git',
                 'origin': 'git@github.com:me/myapp.git'},
    )


@pytest.fixture
def context(git, backend):
    """Invocation context for 'myapp' backed by the legacy API."""
    return InvocationContext('myapp', git, backend, RemoteManager(git, 'heroku.com'))


@pytest.fixture
def config(temp_dir, monkeypatch):
    """Config with an isolated global file and no RELGIT_* environment."""
    for name in ('RELGIT_CORE_APP', 'RELGIT_API_URL', 'RELGIT_API_TOKEN',
                 'RELGIT_API_PLATFORM_URL', 'RELGIT_API_TIMEOUT', 'RELGIT_GIT_HOST'):
        monkeypatch.delenv(name, raising=False)
    return Config(git=FakeGit(), global_config_path=temp_dir / '.relgitconfig')


@pytest.fixture
def cli_obj(git, backend, config):
    """``obj`` for CliRunner.invoke wiring the fakes into the commands."""
    config.git = git
    return {'git': git, 'backend': backend, 'config': config}
