"""Sha command - show the commit of a release."""

import sys

import click

from relgit.cli.options import app_options
from relgit.core.resolver import ReleaseResolver


@click.command('sha')
@click.argument('release', required=False)
@app_options
def sha_cmd(context, release):
    """
    Show the commit SHA for the given or latest release.

    If the commit is locally available, shows the full 40 digits.
    Otherwise just shows the short SHA returned by the API and exits
    with status 1.

    Examples:
        relgit sha
        relgit sha v102
    """
    commit = ReleaseResolver(context).resolve(release)
    # Branches and SHAs given verbatim are only checked here.
    sha = context.git.verify(commit)
    if not sha:
        click.echo(commit)
        sys.exit(1)
    click.echo(sha)
