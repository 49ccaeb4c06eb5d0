"""Sentence validators — fixed, ordered rule chain for single sentences.

Usage:
    from sentence_checker.validators import sentence_validator

    result = sentence_validator.validate("The cat has 4 legs.")
    if result.violation:
        print(result.format_diagnostic())
"""

from sentence_checker.validators.analyzer import AnalysisState, SentenceAnalyzer
from sentence_checker.validators.engine import SentenceValidator, sentence_validator, tokenize
from sentence_checker.validators.models import RuleViolation, ValidationResult

__all__ = [
    "AnalysisState",
    "SentenceAnalyzer",
    "SentenceValidator",
    "sentence_validator",
    "tokenize",
    "RuleViolation",
    "ValidationResult",
]
