"""Options and helpers shared by the app-scoped commands."""

import sys
from contextlib import contextmanager
from functools import wraps

import click

from relgit.api.backend import select_backend
from relgit.cli.output import error, git_command
from relgit.core.config import Config
from relgit.core.context import InvocationContext, determine_app
from relgit.core.errors import GitError, RelgitError
from relgit.core.git import Git
from relgit.core.remote import RemoteManager

# Lets log/push/fetch/checkout hand unknown flags straight to git.
PASSTHROUGH_SETTINGS = {'ignore_unknown_options': True}


class PassthroughCommand(click.Command):
    """
    Command whose trailing '--' and everything after it go to git verbatim.

    click drops the separator while parsing, so it is split off first and
    appended to the ``args`` parameter afterwards.
    """

    def parse_args(self, ctx, args):
        if '--' in args:
            index = args.index('--')
            args, trailing = args[:index], args[index:]
        else:
            trailing = []
        rest = super().parse_args(ctx, args)
        ctx.params['args'] = tuple(ctx.params.get('args') or ()) + tuple(trailing)
        return rest


def app_options(f):
    """Add --app/--remote to a command and pass an InvocationContext as ``context``."""

    @click.option('--remote', '-r', 'remote_option', metavar='REMOTE',
                  help='Git remote of the app to use')
    @click.option('--app', '-a', 'app_option', metavar='APP', help='App to run command against')
    @click.pass_context
    @wraps(f)
    def wrapper(ctx, app_option, remote_option, *args, **kwargs):
        with reporting_errors():
            context = build_context(ctx, app_option, remote_option)
            return ctx.invoke(f, context, *args, **kwargs)

    return wrapper


def build_context(ctx: click.Context, app=None, remote=None) -> InvocationContext:
    """
    Create the state for this invocation.

    Collaborators placed in ``ctx.obj`` ('git', 'config', 'backend') are
    used instead of the real ones; 'app' and 'remote' set by the
    remote group apply when the command itself names neither.
    """
    obj = ctx.obj or {}
    git, config, remotes = collaborators(ctx)
    app_name = determine_app(config, remotes, app=app or obj.get('app'),
                             remote=remote or obj.get('remote'))
    backend = obj.get('backend') or select_backend(config)
    return InvocationContext(app_name, git, backend, remotes)


def collaborators(ctx: click.Context):
    """Return the (git, config, remotes) triple for this invocation."""
    obj = ctx.obj or {}
    git = obj.get('git') or Git()
    config = obj.get('config') or Config(git)
    remotes = RemoteManager(git, config.get('git', 'host'))
    return git, config, remotes


@contextmanager
def reporting_errors():
    """Turn relgit errors into CLI output and exit statuses."""
    try:
        yield
    except GitError as e:
        if e.stderr:
            click.echo(e.stderr.rstrip(), err=True)
        sys.exit(e.returncode)
    except RelgitError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()


def run_git(context: InvocationContext, *args: str, echo: bool = False) -> None:
    """Run git attached to the terminal; exit with its status if it fails."""
    if echo:
        click.echo(git_command(args))
    status = context.git.system(*args)
    if status != 0:
        sys.exit(status)
