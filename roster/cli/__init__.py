"""
CLI module for the roster package.
Provides the command base class, configuration and logging utilities.
The click entry point lives in ``roster.cli.main``.
"""

from .base import BaseCommand, command_error_handler
from .config import Config
from .logging import setup_logging, get_logger

__all__ = ['BaseCommand', 'command_error_handler', 'Config', 'setup_logging', 'get_logger']
