"""Numeral Validator — numbers below thirteen must be spelled out.

Matching is by exact token: "4" fails, but "4." or "(4)" or "04" do not,
since punctuation is never stripped from words.
"""

from typing import Optional

from sentence_checker.validators.base import BaseValidator
from sentence_checker.validators.models import RuleViolation
from sentence_checker.validators.reference_data import SPELLED_OUT_NUMERALS


class NumeralValidator(BaseValidator):

    @property
    def name(self) -> str:
        return "NumeralValidator"

    @property
    def violation(self) -> RuleViolation:
        return RuleViolation.UNSPELLED_NUMERAL

    def validate(self, sentence: str, words: list[str]) -> Optional[RuleViolation]:
        return self._fail_unless(
            not any(word in SPELLED_OUT_NUMERALS for word in words)
        )
