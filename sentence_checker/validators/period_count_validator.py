"""Period Count Validator — at most one period per sentence.

Runs after TerminalPeriodValidator, so it never sees a sentence without
a period: together the two rules mean "exactly one period, at the end".
"""

from typing import Optional

from sentence_checker.validators.base import BaseValidator
from sentence_checker.validators.models import RuleViolation
from sentence_checker.validators.reference_data import PERIOD


class PeriodCountValidator(BaseValidator):

    @property
    def name(self) -> str:
        return "PeriodCountValidator"

    @property
    def violation(self) -> RuleViolation:
        return RuleViolation.MULTIPLE_PERIODS

    def validate(self, sentence: str, words: list[str]) -> Optional[RuleViolation]:
        return self._fail_unless(self._count(sentence, PERIOD) <= 1)
