"""
Command implementations for the roster prompt.
Each class handles one shape of the command grammar.
"""

from ..cli.base import BaseCommand, command_error_handler
from ..error_tracker import INVALID_COMMAND, UNKNOWN_DEPARTMENT, UNKNOWN_PERSON
from ..help import HELP_TEXT
from ..store import department_key


class AddPersonCommand(BaseCommand):
    """``add <person> to <department>``"""

    def __init__(self, person: str, department: str):
        super().__init__()
        self.person = person
        self.department = department

    @command_error_handler
    def execute(self, session) -> None:
        key = session.company.add(self.person, self.department)
        self.logger.debug(f"Stored {self.person} under department key {key}")
        session.persist()
        session.echo(f"Added {self.person} to {self.department}!")


class RemovePersonCommand(BaseCommand):
    """``remove <person> from <department>``

    The department is looked up by its lowercase key, the person by exact
    match. Nothing is written when either is missing.
    """

    def __init__(self, person: str, department: str):
        super().__init__()
        self.person = person
        self.department = department

    @command_error_handler
    def execute(self, session) -> None:
        key = department_key(self.department)

        if key not in session.company:
            message = f"Company doesn't have department with name {key}!"
            session.report(UNKNOWN_DEPARTMENT, message, {'department': key})
            return

        if not session.company.remove(self.person, self.department):
            message = f"Person {self.person} is not in {key}!"
            session.report(UNKNOWN_PERSON, message, {'person': self.person, 'department': key})
            return

        if key not in session.company:
            self.logger.debug(f"Department {key} is empty and was removed")
        session.persist()
        session.echo(f"Removed {self.person} from {self.department}!")


class ListDepartmentCommand(BaseCommand):
    """``list department <department>``

    Looks the department up by the literal token, without lowercasing it.
    """

    def __init__(self, department: str):
        super().__init__()
        self.department = department

    @command_error_handler
    def execute(self, session) -> None:
        people = session.company.get(self.department)
        if people is None:
            message = f"Department {self.department} doesn't exist!"
            session.report(UNKNOWN_DEPARTMENT, message, {'department': self.department})
            return

        session.echo(f"List of people in {self.department}")
        for name in people:
            session.echo(f"- {name}")


class ListCompanyCommand(BaseCommand):
    """``list company``"""

    @command_error_handler
    def execute(self, session) -> None:
        for department, people in session.company.items():
            session.echo(f"List of people in {department}:")
            for name in people:
                session.echo(f"- {name}")


class HelpCommand(BaseCommand):
    """``help``"""

    @command_error_handler
    def execute(self, session) -> None:
        session.echo(HELP_TEXT)


class ExitCommand(BaseCommand):
    """``exit``"""

    @command_error_handler
    def execute(self, session) -> None:
        session.terminate()


class InvalidCommand(BaseCommand):
    """Any line that matches no known command shape."""

    def __init__(self, line: str = ''):
        super().__init__()
        self.line = line

    @command_error_handler
    def execute(self, session) -> None:
        session.report(INVALID_COMMAND, "Invalid command!", {'input': self.line})


__all__ = [
    'AddPersonCommand',
    'RemovePersonCommand',
    'ListDepartmentCommand',
    'ListCompanyCommand',
    'HelpCommand',
    'ExitCommand',
    'InvalidCommand',
]
