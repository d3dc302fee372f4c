"""Send and check commands."""

import json
import os

import click

from ..credentials.base import CredentialScope
from ..credentials.store import JsonFileCredentialStore
from ..dispatch.orchestrator import NotificationDispatcher
from ..dispatch.validation import has_errors, validate_step
from ..errors import CompositionError, NotiferError
from ..models.outcome import NotifyPolicy, Outcome
from ..models.step import NotifyStepParams

OUTCOMES = [o.value for o in Outcome]


def _step_options(func):
    """Options shared by send and check."""
    options = [
        click.option('--credentials-id', default='', help='Id of the credential holding the topic token'),
        click.option('--topic', default='', help='Destination topic (${VAR} placeholders allowed)'),
        click.option('--message', default=None, help='Message body (generated from the outcome if omitted)'),
        click.option('--priority', default='auto', show_default=True, help='1-5, min/low/default/high/max, or auto'),
        click.option('--tag', 'tags', multiple=True, help='Tag to attach (repeatable, max 5)'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command()
@_step_options
@click.option('--title', default=None, help='Title (generated from the outcome if omitted)')
@click.option('--outcome', type=click.Choice(OUTCOMES, case_sensitive=False),
              default='success', show_default=True, help='Build outcome to report')
@click.option('--fail-on-error', is_flag=True, help='Exit non-zero when delivery fails')
@click.option('--notify-on-success/--no-notify-on-success', default=True, show_default=True)
@click.option('--notify-on-failure/--no-notify-on-failure', default=True, show_default=True)
@click.option('--notify-on-unstable/--no-notify-on-unstable', default=True, show_default=True)
@click.option('--notify-on-aborted/--no-notify-on-aborted', default=False, show_default=True)
@click.option('--scope-item', default=None, help='Job the credential must be visible to (default: $JOB_NAME)')
@click.option('--principal', default='SYSTEM', show_default=True, help='Identity running the step')
@click.option('--credentials-file', default=None, help='JSON secrets file (default: $NOTIFER_CREDENTIALS_FILE)')
@click.pass_context
def send(ctx, credentials_id, topic, message, priority, tags, title, outcome, fail_on_error,
         notify_on_success, notify_on_failure, notify_on_unstable, notify_on_aborted,
         scope_item, principal, credentials_file):
    """Send a build notification to a topic."""
    config = ctx.obj['config']

    try:
        params = NotifyStepParams(
            credentials_id=credentials_id,
            topic=topic,
            message=message,
            title=title,
            priority=priority,
            tags=list(tags) or None,
            fail_on_error=fail_on_error,
            policy=NotifyPolicy(
                notify_on_success=notify_on_success,
                notify_on_failure=notify_on_failure,
                notify_on_unstable=notify_on_unstable,
                notify_on_aborted=notify_on_aborted,
            ),
        )
    except (ValueError, CompositionError) as e:
        raise click.UsageError(str(e))

    env = dict(os.environ)
    scope = CredentialScope(principal=principal, item=scope_item or env.get('JOB_NAME'))
    store = JsonFileCredentialStore(credentials_file or config.credentials_file)
    dispatcher = NotificationDispatcher.from_config(config, store)

    try:
        result = dispatcher.dispatch(params, outcome, env=env, scope=scope, sink=click.echo)
    except NotiferError:
        # The dispatcher already wrote the error line
        ctx.exit(1)

    if result.response is not None:
        click.echo(json.dumps(result.response.to_dict()))


@click.command()
@_step_options
@click.pass_context
def check(ctx, credentials_id, topic, message, priority, tags):
    """Validate step parameters without sending."""
    issues = validate_step(credentials_id, topic, message=message, priority=priority, tags=list(tags))

    if not issues:
        click.echo("OK")
        return

    for issue in issues:
        click.echo(str(issue))

    if has_errors(issues):
        ctx.exit(1)
