"""Quotation Validator — double quotes must come in pairs."""

from typing import Optional

from sentence_checker.validators.base import BaseValidator
from sentence_checker.validators.models import RuleViolation
from sentence_checker.validators.reference_data import QUOTATION


class QuotationValidator(BaseValidator):
    """Counts '"' over the raw sentence, not per word."""

    @property
    def name(self) -> str:
        return "QuotationValidator"

    @property
    def violation(self) -> RuleViolation:
        return RuleViolation.UNBALANCED_QUOTATION

    def validate(self, sentence: str, words: list[str]) -> Optional[RuleViolation]:
        return self._fail_unless(self._count(sentence, QUOTATION) % 2 == 0)
