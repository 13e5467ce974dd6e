"""
Configuration management for the roster CLI.
Handles loading and validating configuration from environment variables and .env files.
"""

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path
from dotenv import find_dotenv, load_dotenv

from ..store import DEFAULT_ROSTER_FILE

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class Config:
    """Configuration settings for the roster CLI."""

    # Storage settings
    roster_file: Path = DEFAULT_ROSTER_FILE
    atomic_writes: bool = True

    # Logging settings
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> 'Config':
        """Create configuration from environment variables.

        Every setting is optional. Variables already present in the
        environment take precedence over the .env file.

        Args:
            env_file: Optional path to .env file

        Returns:
            Config: Configuration instance
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv(find_dotenv(usecwd=True))

        return cls(
            roster_file=Path(os.getenv('ROSTER_FILE') or DEFAULT_ROSTER_FILE),
            atomic_writes=os.getenv('ROSTER_ATOMIC_WRITES', 'true').lower() == 'true',
            log_level=os.getenv('ROSTER_LOG_LEVEL', 'WARNING').upper()
        )

    def validate(self) -> bool:
        """Validate configuration settings.

        Returns:
            bool: True if configuration is valid

        Raises:
            ValueError: If a setting is unusable
        """
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")

        if self.roster_file.is_dir():
            raise ValueError(f"roster_file must be a file, not a directory: {self.roster_file}")

        return True
