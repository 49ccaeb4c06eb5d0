"""Terminal Period Validator — the last character must be a period."""

from typing import Optional

from sentence_checker.validators.base import BaseValidator
from sentence_checker.validators.models import RuleViolation
from sentence_checker.validators.reference_data import PERIOD


class TerminalPeriodValidator(BaseValidator):
    """Looks only at the final character; the period count is checked separately."""

    @property
    def name(self) -> str:
        return "TerminalPeriodValidator"

    @property
    def violation(self) -> RuleViolation:
        return RuleViolation.MISSING_TERMINAL_PERIOD

    def validate(self, sentence: str, words: list[str]) -> Optional[RuleViolation]:
        return self._fail_unless(sentence[-1] == PERIOD)
