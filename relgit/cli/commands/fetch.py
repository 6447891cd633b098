"""Fetch command - fetch from the app's repository."""

import click

from relgit.cli.options import PASSTHROUGH_SETTINGS, PassthroughCommand, app_options, run_git


@click.command('fetch', cls=PassthroughCommand, context_settings=PASSTHROUGH_SETTINGS)
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@app_options
def fetch_cmd(context, args):
    """
    Git fetch from the app's repository.

    If a Git remote exists for the app, fetch that remote. Otherwise fetch
    the underlying repository URL, leaving the results only in FETCH_HEAD.

    Examples:
        relgit fetch
        relgit fetch --tags
    """
    run_git(context, 'fetch', context.fetch_target, *args, echo=True)
