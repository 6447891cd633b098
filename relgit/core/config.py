"""Configuration management for relgit.

Settings come from three layers: environment variables, the current
repository's git config and a global INI file in the home directory.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict

from relgit.core.errors import ConfigError
from relgit.core.git import Git

DEFAULTS = {
    ('api', 'url'): 'https://api.heroku.com',
    ('api', 'timeout'): '30',
    ('git', 'host'): 'heroku.com',
}


class Config:
    """
    Manages relgit configuration.

    Priority order (highest to lowest):
    1. Environment variables (RELGIT_<SECTION>_<KEY>)
    2. Repository git config (relgit.<section>-<key>, underscores as dashes)
    3. Global config (~/.relgitconfig)
    4. Built-in defaults
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.relgitconfig'

    def __init__(self, git: Optional[Git] = None, global_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            git: Git invoker for the current repository, if any
            global_config_path: Override for the global config file
        """
        self.git = git
        if global_config_path is not None:
            self.GLOBAL_CONFIG_PATH = Path(global_config_path)
        self._global_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            if self.GLOBAL_CONFIG_PATH.exists():
                self._global_config.read(self.GLOBAL_CONFIG_PATH)
        return self._global_config

    def _repo_value(self, section: str, key: str) -> Optional[str]:
        if self.git is None:
            return None
        # git config names allow dashes but not underscores
        name = f'{section}-{key}'.replace('_', '-')
        return self.git.config_get(f'relgit.{name}')

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Args:
            section: Config section (e.g., 'api', 'git')
            key: Config key (e.g., 'url', 'token')
            fallback: Value used when no layer and no default defines the key

        Returns:
            Configuration value or fallback
        """
        env_key = f"RELGIT_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        repo_value = self._repo_value(section, key)
        if repo_value is not None:
            return repo_value

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        if fallback is not None:
            return fallback
        return DEFAULTS.get((section, key))

    def get_float(self, section: str, key: str) -> float:
        value = self.get(section, key)
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid number for {section}.{key}: {value!r}")

    def set(self, section: str, key: str, value: str) -> None:
        """Set a value in the global config file."""
        config = self.global_config
        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(self.GLOBAL_CONFIG_PATH, 'w') as f:
            config.write(f)

    def unset(self, section: str, key: str) -> bool:
        """
        Remove a value from the global config file.

        Returns:
            True if value was removed, False if it didn't exist
        """
        config = self.global_config
        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)

        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)

        with open(self.GLOBAL_CONFIG_PATH, 'w') as f:
            config.write(f)

        return True

    def list_all(self) -> Dict[str, Dict[str, str]]:
        """List the global configuration as nested section/key dicts."""
        result = {}
        for section in self.global_config.sections():
            result[section] = dict(self.global_config.items(section))
        return result
