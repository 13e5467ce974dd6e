"""Tests for the roster command line entry point."""

import json
import logging
import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from ..cli.logging import DebugFormatter
from ..cli.main import cli
from ..help import HELP_TEXT
from ..store import RosterStore

CLEAN_ENV = {
    'ROSTER_FILE': None,
    'ROSTER_LOG_LEVEL': None,
    'ROSTER_ATOMIC_WRITES': None,
}


@pytest.fixture(autouse=True)
def restore_logging():
    """The entry point reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, DebugFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


def invoke(runner, input_text, args=None, env=None):
    return runner.invoke(cli, args or [], input=input_text, env={**CLEAN_ENV, **(env or {})})


def test_session_round_trip():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = invoke(runner, 'add Bob to Eng\nadd alice to eng\nlist company\nexit\n')

        assert result.exit_code == 0
        assert result.output.startswith(HELP_TEXT + "\n\n> ")
        assert 'Added Bob to Eng!' in result.output
        assert 'List of people in eng:\n- alice\n- Bob\n' in result.output
        assert json.loads(Path('company.json').read_text()) == {'eng': ['alice', 'Bob']}


def test_bootstrap_creates_empty_roster():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = invoke(runner, '')

        assert result.exit_code == 0
        assert json.loads(Path('company.json').read_text()) == {}


def test_state_survives_restart():
    runner = CliRunner()
    with runner.isolated_filesystem():
        invoke(runner, 'add carol to Sales\nexit\n')
        result = invoke(runner, 'list department sales\nexit\n')

        assert 'List of people in sales\n- carol\n' in result.output


def test_corrupt_roster_aborts():
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path('company.json').write_text('not json')

        result = invoke(runner, 'exit\n')

        assert result.exit_code == 1
        assert 'Error: Failed to load roster' in result.output
        assert HELP_TEXT not in result.output
        assert Path('company.json').read_text() == 'not json'


def test_roster_file_from_environment():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = invoke(runner, 'add x to y\nexit\n', env={'ROSTER_FILE': 'team.json'})

        assert result.exit_code == 0
        assert json.loads(Path('team.json').read_text()) == {'y': ['x']}
        assert not Path('company.json').exists()


def test_invalid_configuration_exits():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = invoke(runner, 'exit\n', env={'ROSTER_LOG_LEVEL': 'LOUD'})

        assert result.exit_code == 1
        assert 'Error initializing configuration' in result.output
        assert not Path('company.json').exists()


def test_debug_flag_enables_debug_logging():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = invoke(runner, 'exit\n', args=['--debug'])

        assert result.exit_code == 0
        assert 'Debug mode enabled' in result.output


def test_save_failure_during_session_aborts(monkeypatch):
    load = RosterStore.load

    def load_then_remove_directory(self):
        company = load(self)
        shutil.rmtree(self.path.parent)
        return company

    monkeypatch.setattr(RosterStore, 'load', load_then_remove_directory)

    runner = CliRunner()
    with runner.isolated_filesystem():
        Path('data').mkdir()

        result = invoke(runner, 'list company\nadd Bob to eng\nexit\n', env={'ROSTER_FILE': 'data/company.json'})

        assert result.exit_code == 1
        assert 'Error: Failed to save roster to data/company.json' in result.output
        assert 'Added Bob' not in result.output


def test_undecodable_input_aborts():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = invoke(runner, b'\xff\xfe\n')

        assert result.exit_code == 1
        assert 'Error: Failed to read input' in result.output
        assert 'Traceback' not in result.output
