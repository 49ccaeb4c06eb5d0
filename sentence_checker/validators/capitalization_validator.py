"""Capitalization Validator — the sentence must open with a capital A-Z."""

from typing import Optional

from sentence_checker.validators.base import BaseValidator
from sentence_checker.validators.models import RuleViolation
from sentence_checker.validators.reference_data import CAPITAL_FIRST, CAPITAL_LAST


class CapitalizationValidator(BaseValidator):
    """Checks the first character of the first word against the ASCII capitals.

    Accented or non-Latin capitals do not count. A sentence starting with a
    space has an empty first word and fails this rule.
    """

    @property
    def name(self) -> str:
        return "CapitalizationValidator"

    @property
    def violation(self) -> RuleViolation:
        return RuleViolation.CAPITALIZATION

    def validate(self, sentence: str, words: list[str]) -> Optional[RuleViolation]:
        first_word = words[0]
        if not first_word:
            return self.violation

        return self._fail_unless(CAPITAL_FIRST <= first_word[0] <= CAPITAL_LAST)
