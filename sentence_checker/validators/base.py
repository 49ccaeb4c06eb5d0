"""Base validator — abstract class implementing the Strategy Pattern.

Each validator checks exactly one sentence rule and is independently testable.
"""

from abc import ABC, abstractmethod
from typing import Optional

from sentence_checker.validators.models import RuleViolation


class BaseValidator(ABC):
    """Abstract base for all sentence rules.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() returns the violation it detects, or None when the rule holds
        - validate() never mutates the sentence or the word list
        - validate() is only called with a non-empty sentence
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @property
    @abstractmethod
    def violation(self) -> RuleViolation:
        """The violation kind this rule reports."""
        ...

    @abstractmethod
    def validate(self, sentence: str, words: list[str]) -> Optional[RuleViolation]:
        """Check the rule against one sentence.

        Args:
            sentence: Raw sentence text, never trimmed
            words: The sentence split on single spaces

        Returns:
            The rule's RuleViolation if it fails, otherwise None
        """
        ...

    # ── Helper Methods ──

    def _fail_unless(self, condition: bool) -> Optional[RuleViolation]:
        """Return this rule's violation when condition is false."""
        return None if condition else self.violation

    def _count(self, sentence: str, character: str) -> int:
        """Number of times character appears anywhere in the sentence."""
        return sentence.count(character)
