"""Main CLI entry point for relgit."""

import logging

import click
from colorama import init

from relgit import __version__
from relgit.cli.output import BANNER
from relgit.cli.commands import (remote_cmd, sha_cmd, push_cmd, fetch_cmd, log_cmd,
                                 checkout_cmd, config_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class RelgitGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=RelgitGroup)
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Log API requests and git calls')
@click.pass_context
def cli(ctx, verbose):
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


# Commands that also live under 'remote'
for command in (sha_cmd, push_cmd, fetch_cmd, log_cmd, checkout_cmd):
    remote_cmd.add_command(command)

# Register commands
cli.add_command(remote_cmd)
cli.add_command(sha_cmd)
cli.add_command(push_cmd)
cli.add_command(fetch_cmd)
cli.add_command(log_cmd)
cli.add_command(checkout_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
