"""Interactive read-eval-print loop for the roster."""

import logging
from enum import Enum
from typing import Dict, Optional, TextIO

import click

from .error_tracker import ErrorTracker
from .help import HELP_TEXT
from .parser import parse_command
from .store import Company, RosterStore

logger = logging.getLogger(__name__)

PROMPT = "> "


class InputError(Exception):
    """Raised when a line from the input stream cannot be decoded."""


class ReplState(Enum):
    RUNNING = 'running'
    TERMINATED = 'terminated'


class RosterSession:
    """State shared by the commands of one prompt session."""

    def __init__(self, company: Company, store: RosterStore,
                 output: Optional[TextIO] = None,
                 error_tracker: Optional[ErrorTracker] = None):
        self.company = company
        self.store = store
        self.output = output
        self.error_tracker = error_tracker or ErrorTracker()
        self.state = ReplState.RUNNING

    @property
    def running(self) -> bool:
        return self.state is ReplState.RUNNING

    def echo(self, message: str = '', nl: bool = True) -> None:
        click.echo(message, file=self.output, nl=nl)

    def report(self, error_type: str, message: str, context: Optional[Dict] = None) -> None:
        """Show a recoverable input error and record it."""
        self.echo(message)
        self.error_tracker.add_error(error_type, message, context)

    def persist(self) -> None:
        """Write the whole company to the backing file."""
        self.store.save(self.company)

    def terminate(self) -> None:
        self.state = ReplState.TERMINATED


class Repl:
    """Reads commands line by line until ``exit`` or end of input."""

    def __init__(self, session: RosterSession, input_stream: Optional[TextIO] = None):
        self.session = session
        self.input_stream = input_stream

    def run(self) -> None:
        """Print the help page, then loop until the session terminates.

        Raises:
            PersistenceError: If saving after a change fails
            InputError: If a line cannot be decoded
        """
        self.session.echo(HELP_TEXT + "\n")

        try:
            while self.session.running:
                self.step()
        finally:
            self.session.error_tracker.log_summary(logger)

    def step(self) -> None:
        """Prompt for, parse and execute a single line."""
        self.session.echo(PROMPT, nl=False)
        line = self._read_line()

        if line is None:
            # End of input behaves like ``exit``
            logger.debug("End of input reached")
            self.session.echo()
            self.session.terminate()
            return

        command = parse_command(line)
        command.execute(self.session)

    def _read_line(self) -> Optional[str]:
        stream = self.input_stream or click.get_text_stream('stdin')
        try:
            line = stream.readline()
        except UnicodeDecodeError as e:
            raise InputError(f"Failed to read input: {e}") from e
        if not line:
            return None
        return line
