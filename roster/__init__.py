"""Interactive company roster package."""

from .store import Company, PersistenceError, RosterStore
from .parser import parse_command
from .repl import InputError, Repl, ReplState, RosterSession

__all__ = [
    'Company',
    'PersistenceError',
    'RosterStore',
    'parse_command',
    'InputError',
    'Repl',
    'ReplState',
    'RosterSession',
]
