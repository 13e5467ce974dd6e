"""Tracking of recoverable user-input errors during a roster session."""

from collections import defaultdict
from typing import Dict, Optional, Set
import logging

INVALID_COMMAND = 'INVALID_COMMAND'
UNKNOWN_DEPARTMENT = 'UNKNOWN_DEPARTMENT'
UNKNOWN_PERSON = 'UNKNOWN_PERSON'


class ErrorTracker:
    """Count and sample the user errors reported at the prompt."""

    def __init__(self, max_samples: int = 3):
        """Initialize error tracker.

        Args:
            max_samples: Maximum number of samples to store per error type
        """
        self.error_counts = defaultdict(int)
        self.error_samples = defaultdict(list)
        self.max_samples = max_samples
        self.seen_errors: Set[str] = set()

    def add_error(self, error_type: str, message: str, context: Optional[Dict] = None) -> None:
        """Record an error occurrence.

        Every occurrence is counted; only the first ``max_samples`` distinct
        messages per type are kept as samples.

        Args:
            error_type: Category/type of error
            message: Message shown to the user
            context: Optional context data for the error
        """
        self.error_counts[error_type] += 1

        error_key = f"{error_type}:{message}"
        if error_key in self.seen_errors:
            return
        self.seen_errors.add(error_key)

        if len(self.error_samples[error_type]) < self.max_samples:
            self.error_samples[error_type].append({
                'message': message,
                'context': context or {}
            })

    @property
    def total(self) -> int:
        return sum(self.error_counts.values())

    def get_summary(self) -> Dict:
        """Get error summary.

        Returns:
            Dict containing error counts and samples
        """
        return {
            'counts': dict(self.error_counts),
            'samples': dict(self.error_samples)
        }

    def log_summary(self, logger: logging.Logger) -> None:
        """Log the error summary at INFO level.

        Args:
            logger: Logger to use for output
        """
        if not self.error_counts:
            return

        logger.info(f"Session had {self.total} input errors")
        for error_type, count in self.error_counts.items():
            logger.info(f"{error_type} ({count} occurrences)")
            for sample in self.error_samples[error_type]:
                logger.info(f"  {sample['message']}")
                for key, value in sample['context'].items():
                    logger.info(f"    {key}: {value}")
