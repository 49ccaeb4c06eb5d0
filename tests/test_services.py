"""Tests for the sentence source and the diagnostic reporter."""

import io

import pytest
from structlog.testing import capture_logs

from sentence_checker.exceptions import InputDecodeError, InputNotFoundError, SentenceCheckerError
from sentence_checker.services import DiagnosticReporter, read_sentences
from sentence_checker.validators import RuleViolation, ValidationResult


class TestReadSentences:

    def test_reads_lines_verbatim(self, write_input):
        path = write_input("The cat.\n  padded line  \nlast line.\n")
        assert list(read_sentences(path)) == ["The cat.", "  padded line  ", "last line."]

    def test_last_line_without_newline(self, write_input):
        path = write_input("One.\nTwo.")
        assert list(read_sentences(path)) == ["One.", "Two."]

    def test_blank_lines_inside_are_kept(self, write_input):
        path = write_input("One.\n\nTwo.\n")
        assert list(read_sentences(path)) == ["One.", "", "Two."]

    def test_trailing_blank_lines_are_dropped(self, write_input):
        path = write_input("One.\n\n   \n\n")
        assert list(read_sentences(path)) == ["One."]

    def test_windows_line_endings(self, write_input):
        path = write_input("One.\r\nTwo.\r\n")
        assert list(read_sentences(path)) == ["One.", "Two."]

    def test_form_feed_does_not_split_a_line(self, write_input):
        """Only real line terminators end a sentence; other control characters stay put."""
        path = write_input("The cat\x0csat.\nA\x0bB\x1c.\n")
        assert list(read_sentences(path)) == ["The cat\x0csat.", "A\x0bB\x1c."]

    def test_unicode_line_terminators(self, write_input):
        path = write_input("One.\u2028Two.\u2029Three.\u0085Four.\rFive.\n")
        assert list(read_sentences(path)) == ["One.", "Two.", "Three.", "Four.", "Five."]

    def test_empty_file(self, write_input):
        assert list(read_sentences(write_input(""))) == []

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "nope.txt"
        with pytest.raises(InputNotFoundError) as exc_info:
            list(read_sentences(missing))
        assert str(exc_info.value) == f"File {missing} not found"
        assert exc_info.value.path == str(missing)

    def test_file_that_is_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"The caf\xe9 is open.\nthe cat.\n")

        with capture_logs() as logs:
            with pytest.raises(InputDecodeError) as exc_info:
                list(read_sentences(path))

        assert isinstance(exc_info.value, SentenceCheckerError)
        assert exc_info.value.path == str(path)
        assert exc_info.value.position == 7
        assert str(exc_info.value) == f"File {path} is not valid UTF-8 (byte 7)"
        assert [log["event"] for log in logs] == ["input_not_decodable"]


class TestDiagnosticReporter:

    def test_reports_invalid_sentence(self):
        stream = io.StringIO()
        reporter = DiagnosticReporter(stream)

        written = reporter.report(ValidationResult.failed("the cat.", RuleViolation.CAPITALIZATION))

        assert written is True
        assert stream.getvalue() == (
            "Invalid sentence: the cat.\n"
            "\tReason: Sentence must start with a capital letter.\n"
            "\n"
        )

    def test_valid_sentence_is_silent(self):
        stream = io.StringIO()
        assert DiagnosticReporter(stream).report(ValidationResult.passed("Fine.")) is False
        assert stream.getvalue() == ""

    def test_empty_sentence_is_logged_not_printed(self):
        stream = io.StringIO()
        with capture_logs() as logs:
            written = DiagnosticReporter(stream).report(ValidationResult.empty())

        assert written is False
        assert stream.getvalue() == ""
        assert [log["event"] for log in logs] == ["empty_sentence_skipped"]
        assert logs[0]["log_level"] == "warning"

    def test_report_all_counts(self):
        stream = io.StringIO()
        reporter = DiagnosticReporter(stream)
        results = [
            ValidationResult.passed("Fine."),
            ValidationResult.failed("bad.", RuleViolation.CAPITALIZATION),
            ValidationResult.empty(),
            ValidationResult.failed("Bad", RuleViolation.MISSING_TERMINAL_PERIOD),
        ]

        assert reporter.report_all(results) == 2
        assert reporter.reported == 2
        assert stream.getvalue().count("Invalid sentence:") == 2
