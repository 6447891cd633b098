"""Config command - manage relgit configuration."""

import click

from relgit.cli.options import collaborators
from relgit.cli.output import success, error, info


def split_key(key):
    """Split 'section.key' into its parts; bare keys live in 'core'."""
    return tuple(key.split('.', 1)) if '.' in key else ('core', key)


@click.group('config')
def config_cmd():
    """Get and set relgit options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.pass_context
def config_set(ctx, key, value):
    """
    Set a value in the global config file.

    Examples:
        relgit config set api.token 0123abcd
        relgit config set api.platform_url https://api.heroku.com
        relgit config set git.host heroku.com
    """
    _, config, _ = collaborators(ctx)
    section, option = split_key(key)
    config.set(section, option, value)
    click.echo(success(f"Set global config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.pass_context
def config_get(ctx, key):
    """
    Show the effective value of a setting.

    Environment variables and the repository's git config are taken
    into account.

    Examples:
        relgit config get api.url
        relgit config get core.app
    """
    _, config, _ = collaborators(ctx)
    section, option = split_key(key)
    value = config.get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"), err=True)
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.pass_context
def config_unset(ctx, key):
    """Remove a value from the global config file."""
    _, config, _ = collaborators(ctx)
    section, option = split_key(key)
    if not config.unset(section, option):
        click.echo(error(f"Config key not found: {key}"), err=True)
        raise click.Abort()
    click.echo(success(f"Unset global config: {key}"))


@config_cmd.command('list')
@click.pass_context
def config_list(ctx):
    """List the global config file."""
    _, config, _ = collaborators(ctx)
    values = config.list_all()
    if not values:
        click.echo(info("No configuration set"))
        return
    for section, items in values.items():
        for key, value in items.items():
            click.echo(f"{section}.{key}={value}")
