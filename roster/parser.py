"""Parsing of prompt input into roster commands."""

import logging
from typing import List

from .cli.base import BaseCommand
from .commands import (
    AddPersonCommand,
    ExitCommand,
    HelpCommand,
    InvalidCommand,
    ListCompanyCommand,
    ListDepartmentCommand,
    RemovePersonCommand,
)

logger = logging.getLogger(__name__)


def tokenize(line: str) -> List[str]:
    """Split a line on runs of whitespace, dropping empty segments."""
    return line.split()


def parse_command(line: str) -> BaseCommand:
    """Match a line against the command grammar.

    Keywords are literal and case-sensitive. Lines that match no shape,
    including empty lines, produce an ``InvalidCommand``.

    Examples:
        >>> parse_command("add Bob to Sales")
        AddPersonCommand(person='Bob', department='Sales')
        >>> parse_command("list company")
        ListCompanyCommand()
    """
    tokens = tokenize(line)
    command = _match(tokens)
    if command is None:
        command = InvalidCommand(line.strip())
    logger.debug(f"Parsed {tokens!r} as {command!r}")
    return command


def _match(tokens: List[str]):
    if len(tokens) == 4:
        verb, person, preposition, department = tokens
        if verb == 'add' and preposition == 'to':
            return AddPersonCommand(person, department)
        if verb == 'remove' and preposition == 'from':
            return RemovePersonCommand(person, department)
    elif len(tokens) == 3:
        if tokens[0] == 'list' and tokens[1] == 'department':
            return ListDepartmentCommand(tokens[2])
    elif tokens == ['list', 'company']:
        return ListCompanyCommand()
    elif tokens == ['help']:
        return HelpCommand()
    elif tokens == ['exit']:
        return ExitCommand()
    return None
