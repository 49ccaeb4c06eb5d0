"""Sentence source — reads one sentence per line from a text file."""

import re
from pathlib import Path
from typing import Iterator, Union

import structlog

from sentence_checker.exceptions import InputDecodeError, InputNotFoundError

logger = structlog.get_logger()

# Line terminators; other control characters (form feed, vertical tab) stay in the line
LINE_SEPARATOR = re.compile(r"\r\n|[\n\r\u2028\u2029\u0085]")


def read_sentences(path: Union[str, Path]) -> Iterator[str]:
    """Yield every line of the file verbatim, without its line terminator.

    Whitespace inside a line is preserved. Blank lines in the middle of the
    file are yielded as empty sentences; whitespace-only lines at the end
    of the file are dropped.

    Raises:
        InputNotFoundError: the file does not exist or cannot be opened
        InputDecodeError: the file is not valid UTF-8
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.error("input_not_found", path=str(path), error=str(e))
        raise InputNotFoundError(str(path)) from e
    except UnicodeDecodeError as e:
        logger.error("input_not_decodable", path=str(path), position=e.start, error=str(e))
        raise InputDecodeError(str(path), e.start) from e

    lines = LINE_SEPARATOR.split(text)
    while lines and not lines[-1].strip():
        lines.pop()

    logger.info("sentences_loaded", path=str(path), count=len(lines))

    yield from lines
