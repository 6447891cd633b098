"""Platform API access.

This module contains:
- HTTP clients for the legacy and platform APIs
- Release backends that turn a release into a commit
"""

from relgit.api.client import LegacyClient, PlatformClient
from relgit.api.backend import ReleaseBackend, DirectBackend, SlugBackend, select_backend

__all__ = [
    'LegacyClient',
    'PlatformClient',
    'ReleaseBackend',
    'DirectBackend',
    'SlugBackend',
    'select_backend',
]
