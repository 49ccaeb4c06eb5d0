"""I/O collaborators around the validation engine."""

from sentence_checker.services.reporter import DiagnosticReporter
from sentence_checker.services.sentence_source import read_sentences

__all__ = ["DiagnosticReporter", "read_sentences"]
