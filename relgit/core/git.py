"""Thin wrapper around the git binary."""

import logging
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Union

from relgit.core.errors import GitError

logger = logging.getLogger(__name__)


class Git:
    """
    Runs git as a subprocess in a working directory.

    Every call blocks until git exits. Captured calls return stdout with
    the trailing newline stripped; ``system`` inherits the terminal so
    pagers and progress output behave as in a plain git invocation.
    """

    def __init__(self, cwd: Optional[Union[str, Path]] = None, executable: str = 'git'):
        self.cwd = str(cwd) if cwd is not None else None
        self.executable = executable

    def _command(self, args) -> List[str]:
        return [self.executable, *args]

    def output(self, *args: str) -> str:
        """Run git and return its stdout, ignoring the exit status."""
        command = self._command(args)
        logger.debug("git: %s", ' '.join(command))
        result = subprocess.run(
            command,
            cwd=self.cwd,
            capture_output=True,
            text=True,
        )
        return result.stdout.strip()

    def run(self, *args: str) -> str:
        """
        Run git and return its stdout.

        Raises:
            GitError: If git exits with a non-zero status
        """
        command = self._command(args)
        logger.debug("git: %s", ' '.join(command))
        result = subprocess.run(
            command,
            cwd=self.cwd,
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            raise GitError(command, result.returncode, result.stderr)
        return result.stdout.strip()

    def system(self, *args: str) -> int:
        """Run git attached to the terminal and return its exit status."""
        command = self._command(args)
        logger.debug("git (attached): %s", ' '.join(command))
        return subprocess.run(command, cwd=self.cwd).returncode

    def verify(self, ref: str) -> str:
        """
        Resolve a revision quietly.

        Returns:
            The full SHA if the commit exists locally, otherwise ''
        """
        return self.output('rev-parse', '--quiet', '--verify', f'{ref}^{{commit}}')

    def fetch(self, target: str) -> str:
        """Fetch from a remote name or repository URL."""
        return self.run('fetch', target)

    def config_get(self, key: str) -> Optional[str]:
        """Read a single git config value, or None if unset."""
        value = self.output('config', '--get', key)
        return value or None

    def remotes(self) -> Dict[str, str]:
        """
        List configured remotes.

        Returns:
            Dict mapping remote names to URLs
        """
        listing = self.output('config', '--get-regexp', r'^remote\..*\.url$')
        remotes = {}
        for line in listing.splitlines():
            key, _, url = line.partition(' ')
            if not key.startswith('remote.') or not key.endswith('.url'):
                continue
            remotes[key[len('remote.'):-len('.url')]] = url.strip()
        return remotes

    def add_remote(self, name: str, url: str) -> None:
        """Add a remote."""
        self.run('remote', 'add', name, url)

    def is_repository(self) -> bool:
        return self.output('rev-parse', '--git-dir') != ''
