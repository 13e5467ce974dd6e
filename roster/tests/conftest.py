"""Shared test fixtures and utilities."""

import io
import json
import pytest
from pathlib import Path

from ..repl import Repl, RosterSession
from ..store import Company, RosterStore


@pytest.fixture
def roster_path(tmp_path) -> Path:
    """Location of the backing file inside a temporary directory."""
    return tmp_path / 'company.json'


@pytest.fixture
def store(roster_path) -> RosterStore:
    return RosterStore(roster_path)


@pytest.fixture
def populated_store(store) -> RosterStore:
    """A store whose file already holds two departments."""
    store.path.write_text(json.dumps({
        'engineering': ['alice', 'Bob'],
        'sales': ['carol']
    }), encoding='utf-8')
    return store


@pytest.fixture
def run_session(store):
    """Run a prompt session over the given input text.

    Returns a function that feeds ``text`` to a fresh REPL and returns
    ``(output, session)``.
    """
    def _run(text: str, company: Company = None):
        output = io.StringIO()
        session = RosterSession(company if company is not None else store.load(), store, output=output)
        Repl(session, input_stream=io.StringIO(text)).run()
        return output.getvalue(), session
    return _run


def read_roster(path: Path) -> dict:
    """Decode the backing file."""
    return json.loads(path.read_text(encoding='utf-8'))
