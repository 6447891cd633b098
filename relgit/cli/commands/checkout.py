"""Checkout command - git checkout a release commit."""

import click

from relgit.cli.options import PASSTHROUGH_SETTINGS, PassthroughCommand, app_options, run_git
from relgit.core.resolver import TokenKind, ReleaseResolver, classify


def extract_release(args):
    """
    Pull the first release token before any '--' out of an argument list.

    Returns:
        (release or None, remaining arguments)
    """
    release = None
    remaining = []
    paths = False
    for arg in args:
        paths = paths or arg == '--'
        if release is None and not paths and classify(arg) is TokenKind.RELEASE:
            release = arg
        else:
            remaining.append(arg)
    return release, remaining


@click.command('checkout', cls=PassthroughCommand, context_settings=PASSTHROUGH_SETTINGS)
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@app_options
def checkout_cmd(context, args):
    """
    Invoke git checkout on a release commit.

    Defaults to the latest release.

    Examples:
        relgit checkout
        relgit checkout -b not_broken v123
    """
    release, remaining = extract_release(args)
    commit = ReleaseResolver(context).resolve(release)
    run_git(context, 'checkout', commit, *remaining)
