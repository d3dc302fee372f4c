"""
Notifer CLI

Command-line host for the dispatch engine, for shell-based pipelines.

Usage:
    notifer [OPTIONS] COMMAND [ARGS]...

Commands:
    send     Send a build notification to a topic
    check    Validate step parameters without sending
"""

import logging
import sys

import click
from dotenv import load_dotenv

from ..config import DispatchConfig
from ..monitoring.sentry.setup import init_sentry


def setup_logging(verbose: bool, quiet: bool = False):
    """Configure logging to stderr so stdout stays clean for step output."""
    if quiet:
        level = logging.WARNING
    else:
        level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(levelname)s %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, verbose, quiet):
    """Notifer - build notifications for CI pipelines."""
    load_dotenv()
    setup_logging(verbose, quiet)

    config = DispatchConfig.from_env()
    init_sentry(config)

    ctx.ensure_object(dict)
    ctx.obj['config'] = config


# Import and register commands
from .send import send, check

cli.add_command(send)
cli.add_command(check)


if __name__ == '__main__':
    cli()
