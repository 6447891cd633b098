"""CLI commands for relgit."""

from relgit.cli.commands.remote import remote_cmd
from relgit.cli.commands.sha import sha_cmd
from relgit.cli.commands.push import push_cmd
from relgit.cli.commands.fetch import fetch_cmd
from relgit.cli.commands.log import log_cmd
from relgit.cli.commands.checkout import checkout_cmd
from relgit.cli.commands.config import config_cmd

__all__ = ['remote_cmd', 'sha_cmd', 'push_cmd', 'fetch_cmd', 'log_cmd', 'checkout_cmd',
           'config_cmd']
