"""Static help page for the roster prompt."""

HELP_TEXT = """Available commands:
- 'add x to y' - adds person x to department y
- 'remove x from y' - removes person x from department y
- 'list department x' - lists people from department x
- 'list company' - lists everyone by department
- 'help' - displays help page
- 'exit' - exits the program"""
