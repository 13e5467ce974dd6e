"""
Core CLI implementation for the roster package.
"""

import click

from .config import Config
from .logging import setup_logging, get_logger
from ..repl import InputError, Repl, RosterSession
from ..store import PersistenceError, RosterStore


@click.command()
@click.option('--debug', is_flag=True, help='Enable detailed debug output')
@click.pass_context
def cli(ctx, debug: bool):
    """Interactive company roster.

    Keeps a list of people per department in a JSON file and edits it
    through short commands typed at the prompt.
    """
    # Store debug flag in context for commands
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug

    try:
        config = Config.from_env()
        config.validate()
    except Exception as e:
        click.echo(f"Error initializing configuration: {str(e)}", err=True)
        ctx.exit(1)

    setup_logging(debug=debug, level=config.log_level)

    logger = get_logger('cli')
    if debug:
        logger.debug("Debug mode enabled")
        logger.debug(f"Using roster file: {config.roster_file}")
    ctx.obj['config'] = config

    try:
        store = RosterStore(config.roster_file, atomic_writes=config.atomic_writes)
        company = store.load()

        session = RosterSession(company, store)
        Repl(session).run()
    except (PersistenceError, InputError) as e:
        click.secho(f"Error: {str(e)}", fg='red', err=True)
        raise click.Abort()
