"""Command-line entry point: validate every sentence in a text file.

Usage:
    sentence-checker [INPUT] [--log-level LEVEL] [--debug]
"""

from __future__ import annotations

import argparse
import sys

import structlog

from .config import get_settings
from .exceptions import SentenceCheckerError
from .logging_config import LOG_LEVELS, configure_logging
from .services.reporter import DiagnosticReporter
from .services.sentence_source import read_sentences
from .validators.engine import sentence_validator

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    p = argparse.ArgumentParser(
        prog="sentence-checker",
        description="Report the first rule each sentence in a file breaks.",
    )
    p.add_argument(
        "input",
        nargs="?",
        default=settings.INPUT_FILE,
        help="Text file with one sentence per line (default: %(default)s).",
    )
    p.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVELS,
        default=settings.LOG_LEVEL,
        help="Minimum log level on stderr (default: %(default)s).",
    )
    p.add_argument("--debug", action="store_true", default=settings.DEBUG, help="Console-formatted logs.")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, debug=args.debug)

    try:
        sentences = list(read_sentences(args.input))
    except SentenceCheckerError as e:
        print(str(e))
        return 1

    results = sentence_validator.validate_many(sentences)
    reported = DiagnosticReporter(sys.stdout).report_all(results)

    logger.info("run_complete", input=args.input, sentences=len(results), reported=reported)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
