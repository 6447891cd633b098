"""Unit tests for the HTTP API clients."""

from unittest.mock import MagicMock

import pytest
import requests

from relgit.api.client import LegacyClient, PlatformClient
from relgit.core.errors import APIError, NotFoundError


def make_session(status_code=200, payload=None, text=''):
    session = MagicMock()
    session.headers = {}
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = text
    session.get.return_value = response
    return session


def test_legacy_client_uses_basic_auth():
    session = make_session()
    LegacyClient('https://api.example.com', token='secret', session=session)

    assert session.auth == ('', 'secret')
    assert session.headers['Accept'] == 'application/json'


def test_legacy_client_get_releases():
    releases = [{'name': 'v1', 'commit': 'aaaa111'}]
    session = make_session(payload=releases)
    client = LegacyClient('https://api.example.com/', token='secret', timeout=5, session=session)

    assert client.get_releases('myapp') == releases
    session.get.assert_called_once_with(
        'https://api.example.com/apps/myapp/releases', timeout=5)


def test_legacy_client_get_release_by_name():
    session = make_session(payload={'name': 'v3', 'commit': 'cccc333'})
    client = LegacyClient('https://api.example.com', session=session)

    assert client.get_release('myapp', 'v3')['commit'] == 'cccc333'
    assert session.get.call_args[0][0] == 'https://api.example.com/apps/myapp/releases/v3'


def test_platform_client_requires_token():
    with pytest.raises(APIError):
        PlatformClient('https://api.example.com', token=None, session=make_session())


def test_platform_client_headers():
    session = make_session()
    PlatformClient('https://api.example.com', token='secret', session=session)

    assert session.headers['Authorization'] == 'Bearer secret'
    assert 'version=3' in session.headers['Accept']


def test_platform_client_addresses_release_by_version():
    session = make_session(payload={'version': 12, 'slug': {'id': 'abc'}})
    client = PlatformClient('https://api.example.com', token='secret', session=session)

    client.get_release('myapp', 'v12')

    assert session.get.call_args[0][0] == 'https://api.example.com/apps/myapp/releases/12'


def test_platform_client_get_slug():
    session = make_session(payload={'id': 'abc', 'commit': 'dddd444'})
    client = PlatformClient('https://api.example.com', token='secret', session=session)

    assert client.get_slug('myapp', 'abc')['commit'] == 'dddd444'
    assert session.get.call_args[0][0] == 'https://api.example.com/apps/myapp/slugs/abc'


def test_not_found_raises_not_found_error():
    client = LegacyClient('https://api.example.com', session=make_session(status_code=404))
    with pytest.raises(NotFoundError):
        client.get_app('missing')


def test_server_error_raises_api_error():
    session = make_session(status_code=500, text='oops')
    client = LegacyClient('https://api.example.com', session=session)

    with pytest.raises(APIError) as excinfo:
        client.get_app('myapp')
    assert excinfo.value.status == 500
    assert not isinstance(excinfo.value, NotFoundError)


def test_network_error_raises_api_error():
    session = make_session()
    session.get.side_effect = requests.exceptions.ConnectionError('refused')
    client = LegacyClient('https://api.example.com', session=session)

    with pytest.raises(APIError, match='Network error'):
        client.get_apps()


def test_invalid_json_raises_api_error():
    session = make_session()
    session.get.return_value.json.side_effect = ValueError('no json')
    client = LegacyClient('https://api.example.com', session=session)

    with pytest.raises(APIError, match='Invalid JSON'):
        client.get_apps()


def test_path_segments_are_quoted():
    session = make_session(payload={})
    client = LegacyClient('https://api.example.com', session=session)

    client.get_app('my app')

    assert session.get.call_args[0][0] == 'https://api.example.com/apps/my%20app'


def test_from_config(config):
    config.set('api', 'url', 'https://legacy.example.com')
    config.set('api', 'timeout', '12')

    client = LegacyClient.from_config(config, session=make_session())

    assert client.base_url == 'https://legacy.example.com'
    assert client.timeout == 12.0
