"""Core functionality for relgit.

This module contains:
- The git subprocess wrapper
- Configuration management
- Remote/app bookkeeping
- Per-invocation context and release resolution

For API access, see relgit.api
"""

from relgit.core.errors import RelgitError, ConfigError, APIError, NotFoundError, GitError
from relgit.core.git import Git
from relgit.core.config import Config
from relgit.core.remote import RemoteManager
from relgit.core.context import InvocationContext, determine_app
from relgit.core.resolver import ReleaseResolver, TokenKind, classify, split_range

__all__ = [
    'RelgitError',
    'ConfigError',
    'APIError',
    'NotFoundError',
    'GitError',
    'Git',
    'Config',
    'RemoteManager',
    'InvocationContext',
    'determine_app',
    'ReleaseResolver',
    'TokenKind',
    'classify',
    'split_range',
]
