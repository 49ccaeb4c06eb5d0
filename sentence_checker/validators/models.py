"""Validation models — rule violation kinds and the per-sentence result.

Which rule failed (RuleViolation) is kept apart from how it is displayed
(ValidationResult.format_diagnostic).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from sentence_checker.exceptions import DiagnosticUnavailableError
from sentence_checker.validators.reference_data import MIN_NUM_NOT_SPELLED


class RuleViolation(str, Enum):
    """One member per sentence rule, in evaluation order."""

    CAPITALIZATION = "CAPITALIZATION"
    MISSING_TERMINAL_PERIOD = "MISSING_TERMINAL_PERIOD"
    UNSPELLED_NUMERAL = "UNSPELLED_NUMERAL"
    UNBALANCED_QUOTATION = "UNBALANCED_QUOTATION"
    MULTIPLE_PERIODS = "MULTIPLE_PERIODS"

    @property
    def message(self) -> str:
        """Human-readable explanation of the violated rule."""
        return VIOLATION_MESSAGES[self]


VIOLATION_MESSAGES: dict[RuleViolation, str] = {
    RuleViolation.CAPITALIZATION: "Sentence must start with a capital letter.",
    RuleViolation.MISSING_TERMINAL_PERIOD: "Sentence must end with a period.",
    RuleViolation.UNSPELLED_NUMERAL: f"Numbers below {MIN_NUM_NOT_SPELLED} must be spelled out.",
    RuleViolation.UNBALANCED_QUOTATION: "Sentence must have an even number of quotations.",
    RuleViolation.MULTIPLE_PERIODS: "Periods may only be used at the end of a sentence.",
}


class ValidationResult(BaseModel):
    """Outcome of validating one sentence. Immutable once built.

    Three shapes are possible:
        - valid:   is_valid=True,  violation=None
        - invalid: is_valid=False, violation=<RuleViolation>
        - empty:   is_valid=False, violation=None  (zero-length sentence)
    """

    sentence: str
    is_valid: bool
    violation: Optional[RuleViolation] = Field(
        default=None, description="First rule that failed, if any"
    )

    model_config = {"frozen": True}

    @classmethod
    def passed(cls, sentence: str) -> "ValidationResult":
        return cls(sentence=sentence, is_valid=True)

    @classmethod
    def failed(cls, sentence: str, violation: RuleViolation) -> "ValidationResult":
        return cls(sentence=sentence, is_valid=False, violation=violation)

    @classmethod
    def empty(cls) -> "ValidationResult":
        return cls(sentence="", is_valid=False)

    @property
    def error_message(self) -> Optional[str]:
        return self.violation.message if self.violation is not None else None

    @property
    def is_empty(self) -> bool:
        return not self.is_valid and self.violation is None

    def format_diagnostic(self) -> str:
        """Render the diagnostic block for an invalid sentence.

        Format:
            Invalid sentence: <sentence>
            \\tReason: <message>
            <blank>

        Raises:
            DiagnosticUnavailableError: the result carries no violation
                (the sentence was valid, or empty).
        """
        if self.violation is None:
            reason = "sentence is valid" if self.is_valid else "sentence is empty"
            raise DiagnosticUnavailableError(self.sentence, reason)

        return (
            f"Invalid sentence: {self.sentence}\n"
            f"\tReason: {self.violation.message}\n"
        )
