"""Remote command - work with the app's Git remote."""

import click

from relgit.api.backend import select_backend
from relgit.cli.options import app_options, build_context, collaborators, reporting_errors
from relgit.cli.output import success, error, info, warning
from relgit.core.errors import GitError


@click.group('remote', invoke_without_command=True)
@click.option('--app', '-a', 'app_option', metavar='APP', help='App to run command against')
@click.option('--remote', '-r', 'remote_option', metavar='REMOTE',
              help='Git remote of the app to use')
@click.pass_context
def remote_cmd(ctx, app_option, remote_option):
    """
    Work with the app's Git remote.

    Without a subcommand, shows the Git remote name or Git URL for the app.
    """
    ctx.ensure_object(dict)
    if app_option:
        ctx.obj['app'] = app_option
    if remote_option:
        ctx.obj['remote'] = remote_option

    if ctx.invoked_subcommand is None:
        with reporting_errors():
            context = build_context(ctx)
            click.echo(context.remote_name or context.git_url)


@remote_cmd.command('url')
@app_options
def remote_url(context):
    """Show the Git URL for the app."""
    click.echo(context.git_url)


@remote_cmd.command('name')
@app_options
def remote_name(context):
    """Show the name of the Git remote for the app."""
    if not context.remote_name:
        click.echo(error(f"No remote for application {context.app}"), err=True)
        raise click.Abort()
    click.echo(context.remote_name)


@remote_cmd.command('add')
@click.argument('name', required=False)
@app_options
def remote_add(context, name):
    """
    Add a remote for the app.

    NAME: Remote name (defaults to the name of the app itself)

    Examples:
        relgit remote add
        relgit remote add production
    """
    name = name or context.app

    if context.remotes.has_remote(name):
        click.echo(warning(f"Git remote {name} already exists"))
        return

    try:
        context.git.add_remote(name, context.git_url)
    except GitError as e:
        click.echo(error(f"Failed to add remote: {e}"), err=True)
        raise click.Abort()

    click.echo(success(f"Git remote {name} added"))


@remote_cmd.command('apps')
@click.pass_context
def remote_apps(ctx):
    """
    List the apps available to your API token.

    Apps that already have a Git remote in this repository are marked
    with the remote name.
    """
    obj = ctx.obj or {}

    with reporting_errors():
        _, config, remotes = collaborators(ctx)
        backend = obj.get('backend') or select_backend(config)
        apps = backend.apps()
        bound = {app: name for name, app in remotes.list_remotes().items()}

    if not apps:
        click.echo(info("No apps found"))
        return

    for app in sorted(apps):
        if app in bound:
            click.echo(f"{app}\t{bound[app]}")
        else:
            click.echo(app)
