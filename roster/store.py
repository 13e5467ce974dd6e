"""Roster persistence.

Holds the in-memory ``Company`` (department name -> ordered list of people)
and the ``RosterStore`` that reads and writes it as a single JSON document.
"""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_ROSTER_FILE = Path('company.json')


class PersistenceError(Exception):
    """Raised when the backing file cannot be read, parsed or written."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


def department_key(name: str) -> str:
    """Normalize a department name into its storage key."""
    return name.lower()


class Company:
    """Mapping of department key to the people in that department.

    People are kept sorted case-insensitively. A department only exists
    while it has at least one person in it.
    """

    def __init__(self, departments: Optional[Dict[str, List[str]]] = None):
        self._departments: Dict[str, List[str]] = {}
        for name, people in (departments or {}).items():
            self._departments[name] = list(people)

    def __contains__(self, department: str) -> bool:
        return department in self._departments

    def __iter__(self) -> Iterator[str]:
        return iter(self._departments)

    def __len__(self) -> int:
        return len(self._departments)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Company):
            return NotImplemented
        return self._departments == other._departments

    def __repr__(self) -> str:
        return f"Company({self._departments!r})"

    def get(self, department: str) -> Optional[List[str]]:
        """Return the people of a department, looked up by the exact key."""
        return self._departments.get(department)

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        return iter(self._departments.items())

    def add(self, person: str, department: str) -> str:
        """Add a person to a department, creating it if needed.

        Returns:
            str: The department key the person was stored under
        """
        key = department_key(department)
        people = self._departments.setdefault(key, [])
        people.append(person)
        people.sort(key=str.lower)
        return key

    def remove(self, person: str, department: str) -> bool:
        """Remove the first entry exactly matching ``person``.

        The department must exist. Empty departments are dropped.

        Returns:
            bool: True if the person was found and removed
        """
        key = department_key(department)
        people = self._departments[key]
        try:
            people.remove(person)
        except ValueError:
            return False

        if not people:
            del self._departments[key]
        return True

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: list(people) for name, people in self._departments.items()}

    @classmethod
    def from_dict(cls, data) -> 'Company':
        """Build a company from decoded JSON.

        Raises:
            ValueError: If ``data`` is not an object of string arrays
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        for name, people in data.items():
            if not isinstance(people, list):
                raise ValueError(f"department {name!r} must be an array of names")
            for person in people:
                if not isinstance(person, str):
                    raise ValueError(f"department {name!r} contains a non-string entry: {person!r}")

        return cls(data)


class RosterStore:
    """Reads and writes a ``Company`` to a single JSON file."""

    def __init__(self, path: Path = DEFAULT_ROSTER_FILE, atomic_writes: bool = True):
        self.path = Path(path)
        self.atomic_writes = atomic_writes

    def load(self) -> Company:
        """Load the company from disk, creating an empty file if none exists.

        Raises:
            PersistenceError: If the file exists but cannot be read or parsed
        """
        if not self.path.exists():
            logger.info(f"No roster found at {self.path}, creating an empty one")
            company = Company()
            self.save(company)
            return company

        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
            company = Company.from_dict(data)
        except (OSError, ValueError) as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            raise PersistenceError(f"Failed to load roster from {self.path}: {e}", self.path) from e

        logger.debug(f"Loaded {len(company)} departments from {self.path}")
        return company

    def save(self, company: Company) -> None:
        """Overwrite the backing file with the full company.

        Raises:
            PersistenceError: On any I/O or encoding failure
        """
        try:
            document = json.dumps(company.to_dict(), ensure_ascii=False, indent=2).encode('utf-8')
            if self.atomic_writes:
                self._replace(document)
            else:
                self.path.write_bytes(document)
        except (OSError, ValueError) as e:
            # UnicodeEncodeError is a ValueError
            raise PersistenceError(f"Failed to save roster to {self.path}: {e}", self.path) from e

        logger.debug(f"Saved {len(company)} departments to {self.path}")

    def _file_mode(self) -> int:
        """Mode the backing file has now, or would get from a plain create."""
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def _replace(self, document: bytes) -> None:
        """Write to a temporary sibling file, then move it over the target."""
        with tempfile.NamedTemporaryFile(
            'wb', dir=str(self.path.parent), prefix=f".{self.path.name}.", delete=False
        ) as handle:
            tmp_name = handle.name
            try:
                handle.write(document)
                handle.flush()
                os.fsync(handle.fileno())
            except BaseException:
                handle.close()
                os.unlink(tmp_name)
                raise

        try:
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except BaseException:
            os.unlink(tmp_name)
            raise
