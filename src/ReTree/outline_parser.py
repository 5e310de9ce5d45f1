"""Outline splitting, format validation and depth calculation."""

from __future__ import annotations

import logging

from ReTree.models import FormatCheckResult, OutlineEntry

logger = logging.getLogger(__name__)

MARKER = "- "
INDENT_UNIT = 4

FORMAT_OK = "format ok."
FORMAT_ERROR = "format error."


class OutlineFormatError(ValueError):
    """Raised when an outline does not follow the ``- `` / 4-space syntax."""

    def __init__(self, result: FormatCheckResult | None = None):
        super().__init__(FORMAT_ERROR)
        self.result = result


def split_lines(text: str) -> list[str]:
    """Strip the whole input and split it into lines.

    Blank interior lines are kept; the validator rejects them.
    """
    return text.strip().split("\n")


def marker_offset(line: str) -> int:
    """Return the column of the first ``- `` in *line*, or -1."""
    return line.find(MARKER)


def format_check(lines: list[str]) -> FormatCheckResult:
    """Check every line for the marker and a 4-space-multiple indent.

    The offset is measured on the untrimmed line; exactly one line may
    carry the marker at column 0 (the root).
    """
    error_lines = [
        number
        for number, line in enumerate(lines, start=1)
        if not line.strip().startswith(MARKER)
        or marker_offset(line) % INDENT_UNIT != 0
    ]
    root_count = sum(1 for line in lines if line.startswith(MARKER))

    result = FormatCheckResult(error_lines=error_lines, root_count=root_count)
    if error_lines or root_count != 1:
        result.message = FORMAT_ERROR
    else:
        result.status = True
        result.message = FORMAT_OK
    return result


def calc_depth(lines: list[str]) -> list[OutlineEntry]:
    """Annotate each validated line with its nesting depth."""
    return [
        OutlineEntry(depth=marker_offset(line) // INDENT_UNIT, name=line)
        for line in lines
    ]


def parse_outline(text: str) -> list[OutlineEntry]:
    """Split, validate and depth-annotate *text*.

    Raises:
        OutlineFormatError: if any line is malformed or the root count is
            not exactly one.
    """
    lines = split_lines(text)
    result = format_check(lines)
    logger.debug(result.message)
    if not result.status:
        raise OutlineFormatError(result)
    return calc_depth(lines)
