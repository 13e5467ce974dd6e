"""
Base command infrastructure for the roster prompt.
Provides common functionality for every command the parser can produce.
"""

import functools
import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from ..repl import RosterSession


class BaseCommand(ABC):
    """Base class for all roster commands."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

        # Get debug status from click context
        ctx = click.get_current_context(silent=True)
        self.debug = bool(ctx and ctx.obj and ctx.obj.get('debug'))

    @abstractmethod
    def execute(self, session: 'RosterSession') -> None:
        """Execute the command against the session. Must be implemented by subclasses."""
        pass

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        fields = ', '.join(
            f"{name}={value!r}" for name, value in vars(self).items()
            if name not in ('logger', 'debug')
        )
        return f"{self.__class__.__name__}({fields})"


def command_error_handler(f):
    """Decorator to log command execution consistently.

    Errors are logged and re-raised; deciding whether they are fatal is left
    to the caller.
    """
    @functools.wraps(f)
    def wrapper(self, *args, **kwargs):
        start = time.time()
        if self.debug:
            self.logger.debug(f"Starting command execution: {self!r}")

        try:
            result = f(self, *args, **kwargs)
        except Exception as e:
            self.logger.error(f"Command failed: {str(e)}", exc_info=self.debug)
            raise

        if self.debug:
            self.logger.debug(f"Command completed in {time.time() - start:.3f}s")
        return result
    return wrapper
