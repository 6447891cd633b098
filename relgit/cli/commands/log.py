"""Log command - git log on release commits."""

import click

from relgit.cli.options import PASSTHROUGH_SETTINGS, PassthroughCommand, app_options, run_git
from relgit.core.resolver import ReleaseResolver


@click.command('log', cls=PassthroughCommand, context_settings=PASSTHROUGH_SETTINGS)
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@app_options
def log_cmd(context, args):
    """
    Invoke git log on a release commit.

    Translates any arguments that look like releases (v followed by digits)
    to SHAs and invokes git log. If no releases appear in the argument list,
    the latest release is added.

    Examples:
        relgit log -p
        relgit log v101
        relgit log v102..v103
    """
    resolver = ReleaseResolver(context)
    arguments = []
    found = False
    paths = False
    for arg in args:
        if paths or arg == '--':
            paths = True
            arguments.append(arg)
            continue
        translated, is_release = resolver.translate(arg)
        found = found or is_release
        arguments.append(translated)

    if not found:
        arguments.insert(0, resolver.resolve())

    run_git(context, 'log', *arguments)
