"""Sentence Analyzer — one sentence, evaluated at most once.

Tracks the UNEVALUATED → EVALUATED lifecycle on top of SentenceValidator,
for callers that ask "is it valid?" first and fetch the diagnostic later.
"""

from enum import Enum
from typing import Optional

from sentence_checker.validators.engine import SentenceValidator, sentence_validator
from sentence_checker.validators.models import ValidationResult

NOT_ANALYZED_MESSAGE = "Sentence has not been analyzed"


class AnalysisState(str, Enum):
    UNEVALUATED = "unevaluated"
    VALID = "valid"
    INVALID = "invalid"


class SentenceAnalyzer:
    """Lazily validates a single sentence and caches the result."""

    def __init__(self, sentence: str, validator: Optional[SentenceValidator] = None):
        self.sentence = sentence
        self._validator = validator or sentence_validator
        self._result: Optional[ValidationResult] = None

    @property
    def state(self) -> AnalysisState:
        if self._result is None:
            return AnalysisState.UNEVALUATED
        return AnalysisState.VALID if self._result.is_valid else AnalysisState.INVALID

    @property
    def result(self) -> Optional[ValidationResult]:
        """The cached result, or None before is_valid() has run."""
        return self._result

    def is_valid(self) -> bool:
        if self._result is None:
            self._result = self._validator.validate(self.sentence)
        return self._result.is_valid

    @property
    def error_message(self) -> str:
        """Diagnostic block for the sentence.

        Returns a placeholder while the sentence has not been evaluated yet.
        Once evaluated, raises DiagnosticUnavailableError if there is nothing
        to report (valid or empty sentence).
        """
        if self._result is None:
            return NOT_ANALYZED_MESSAGE
        return self._result.format_diagnostic()
