"""Diagnostic reporter — writes one block per invalid sentence."""

import sys
from typing import Iterable, Optional, TextIO

import structlog

from sentence_checker.validators.models import ValidationResult

logger = structlog.get_logger()


class DiagnosticReporter:
    """Prints diagnostics for invalid sentences; valid ones produce no output."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.reported = 0

    def report(self, result: ValidationResult) -> bool:
        """Write the diagnostic for one result. Returns True if anything was written."""
        if result.is_valid:
            return False

        if result.is_empty:
            # Nothing to explain for an empty line
            logger.warning("empty_sentence_skipped")
            return False

        print(result.format_diagnostic(), file=self.stream)
        self.reported += 1
        return True

    def report_all(self, results: Iterable[ValidationResult]) -> int:
        """Report every result in order. Returns how many diagnostics were written."""
        return sum(1 for result in results if self.report(result))
