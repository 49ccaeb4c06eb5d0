"""Validation Engine — runs the sentence rules in order, first failure wins.

This is the main entry point for sentence validation.

Usage:
    validator = SentenceValidator()
    result = validator.validate("The cat sat on the mat.")
    if not result.is_valid and result.violation:
        print(result.format_diagnostic())
"""

import time
from typing import Iterable

import structlog

from sentence_checker.validators.base import BaseValidator
from sentence_checker.validators.models import ValidationResult
from sentence_checker.validators.reference_data import WORD_SEPARATOR

# Import all validators
from sentence_checker.validators.capitalization_validator import CapitalizationValidator
from sentence_checker.validators.terminal_period_validator import TerminalPeriodValidator
from sentence_checker.validators.numeral_validator import NumeralValidator
from sentence_checker.validators.quotation_validator import QuotationValidator
from sentence_checker.validators.period_count_validator import PeriodCountValidator

logger = structlog.get_logger()


def tokenize(sentence: str) -> list[str]:
    """Split a sentence on single spaces. Empty tokens are kept."""
    return sentence.split(WORD_SEPARATOR)


class SentenceValidator:
    """Applies the fixed rule chain to one sentence at a time.

    Design principles:
        - Deterministic: same input → same output
        - Short-circuit: no rule runs after the first failure
        - Stateless between calls: safe to share across threads
        - Never raises for a rule violation; always returns a result
    """

    def __init__(self):
        self.validators = self._default_validators()

    @staticmethod
    def _default_validators() -> tuple[BaseValidator, ...]:
        """The rule chain in execution order. The order is part of the contract."""
        return (
            CapitalizationValidator(),
            TerminalPeriodValidator(),   # Guarantees at least one period
            NumeralValidator(),
            QuotationValidator(),
            PeriodCountValidator(),      # Guarantees at most one period
        )

    def validate(self, sentence: str) -> ValidationResult:
        """Validate one sentence.

        Args:
            sentence: Raw sentence text. Leading/trailing whitespace is significant.

        Returns:
            ValidationResult; an empty sentence is invalid with no violation
        """
        start_time = time.perf_counter()

        if len(sentence) == 0:
            logger.debug(
                "sentence_validated",
                passed=False,
                rule=None,
                empty=True,
                word_count=0,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
            )
            return ValidationResult.empty()

        words = tokenize(sentence)
        result = ValidationResult.passed(sentence)
        failed_rule = None

        for validator in self.validators:
            violation = validator.validate(sentence, words)
            if violation is not None:
                result = ValidationResult.failed(sentence, violation)
                failed_rule = validator.name
                break

        logger.debug(
            "sentence_validated",
            passed=result.is_valid,
            rule=failed_rule,
            word_count=len(words),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return result

    def validate_many(self, sentences: Iterable[str]) -> list[ValidationResult]:
        """Validate each sentence independently, preserving input order."""
        start_time = time.perf_counter()

        results = [self.validate(sentence) for sentence in sentences]

        summary: dict[str, int] = {}
        for result in results:
            if result.violation is not None:
                summary[result.violation.value] = summary.get(result.violation.value, 0) + 1

        logger.info(
            "batch_validation_complete",
            total=len(results),
            valid=sum(1 for r in results if r.is_valid),
            empty=sum(1 for r in results if r.is_empty),
            violations=summary,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return results


# Module-level singleton
sentence_validator = SentenceValidator()
