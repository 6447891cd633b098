"""Push command - push a refspec to the app's repository."""

import click

from relgit.cli.options import PASSTHROUGH_SETTINGS, PassthroughCommand, app_options, run_git

DEFAULT_DESTINATION = ':master'


def build_refspec(refspec=None) -> str:
    """
    Default the refspec to HEAD and its destination to master.

    Examples:
        build_refspec() -> 'HEAD:master'
        build_refspec('topic') -> 'topic:master'
        build_refspec('topic:main') -> 'topic:main'
    """
    refspec = refspec or 'HEAD'
    if ':' in refspec or refspec.startswith('-'):
        return refspec
    return refspec + DEFAULT_DESTINATION


@click.command('push', cls=PassthroughCommand, context_settings=PASSTHROUGH_SETTINGS)
@click.argument('refspec', required=False)
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.option('--force', '-f', is_flag=True, help='Force push')
@click.option('--dry-run', '-n', is_flag=True, help="Don't actually send the updates")
@app_options
def push_cmd(context, refspec, args, force, dry_run):
    """
    Git push the given REFSPEC to the app's repository.

    If REFSPEC is not specified, it defaults to HEAD:master. If it is
    specified but does not contain a colon, :master is appended.

    Examples:
        relgit push
        relgit push topic
        relgit push -f HEAD:master
    """
    flags = []
    if dry_run:
        flags.append('--dry-run')
    if force:
        flags.append('--force')
    run_git(context, 'push', context.fetch_target, build_refspec(refspec), *flags, *args,
            echo=True)
