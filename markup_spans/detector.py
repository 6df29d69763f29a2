"""Markup format detection."""

from __future__ import annotations

import logging
import re

from .constants import ASCIIDOC_LINE_PATTERNS, MARKDOWN_HEADER_LINE_PATTERN
from .exceptions import InputInvalidError
from .models import Format

logger = logging.getLogger(__name__)


def _is_asciidoc_line(line: str) -> bool:
    return any(pattern.match(line) for pattern in ASCIIDOC_LINE_PATTERNS)


def _is_markdown_line(line: str) -> bool:
    return MARKDOWN_HEADER_LINE_PATTERN.match(line) is not None


def score_lines(text: str) -> tuple[int, int]:
    """Count the lines that look like AsciiDoc and like Markdown.

    Each line is stripped and scored on its own. A line adds at most one point
    to the AsciiDoc score (header, attribute list, block title or source block
    opener) and, independently, one point to the Markdown score (``#`` header).

    Args:
        text: Text to score, lines separated by ``"\\n"``.

    Returns:
        tuple[int, int]: AsciiDoc score and Markdown score.

    Examples:
        score_lines("= Title\\n[source,python]\\n# comment")  # (2, 1)
    """
    asciidoc_score = 0
    markdown_score = 0
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if _is_asciidoc_line(line):
            asciidoc_score += 1
        if _is_markdown_line(line):
            markdown_score += 1
    return asciidoc_score, markdown_score


def detect_format(text: str) -> Format:
    """Decide whether `text` is Markdown or AsciiDoc.

    AsciiDoc is chosen only when strictly more lines look like AsciiDoc than
    like Markdown; ties, empty text and text without any recognizable lines
    resolve to Markdown. A scoring failure also resolves to Markdown.

    Args:
        text: Text to classify.

    Returns:
        Format: The detected dialect.

    Raises:
        InputInvalidError: If `text` is not a string.

    Examples:
        detect_format("== Section\\nSome text")  # Format.ASCIIDOC
        detect_format("")  # Format.MARKDOWN
    """
    if not isinstance(text, str):
        raise InputInvalidError(type(text).__name__)

    try:
        asciidoc_score, markdown_score = score_lines(text)
    except (re.error, RecursionError) as error:
        logger.warning("Format detection failed, assuming Markdown: %s", error)
        return Format.MARKDOWN

    logger.debug("Format scores: asciidoc=%d markdown=%d", asciidoc_score, markdown_score)
    if asciidoc_score > markdown_score:
        return Format.ASCIIDOC
    return Format.MARKDOWN
