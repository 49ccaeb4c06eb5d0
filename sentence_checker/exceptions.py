"""Exception hierarchy.

Rule violations are never raised: they are returned as values on a
ValidationResult. Exceptions here cover misuse of a result and the
unreadable-input conditions handled by the CLI.
"""


class SentenceCheckerError(Exception):
    """Base class for all sentence-checker errors."""


class DiagnosticUnavailableError(SentenceCheckerError):
    """Raised when a diagnostic is requested for a result that has none."""

    def __init__(self, sentence: str, reason: str):
        self.sentence = sentence
        self.reason = reason
        super().__init__(f"No diagnostic available for sentence {sentence!r}: {reason}")


class InputNotFoundError(SentenceCheckerError):
    """Raised when the sentence input file cannot be located or opened."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File {path} not found")


class InputDecodeError(SentenceCheckerError):
    """Raised when the sentence input file is not valid UTF-8 text."""

    def __init__(self, path: str, position: int):
        self.path = path
        self.position = position
        super().__init__(f"File {path} is not valid UTF-8 (byte {position})")
