"""AsciiDoc line parsing."""

from __future__ import annotations

import re

from .constants import MAX_HEADER_LEVEL
from .models import LineResult, StyleKind, StyleSpan
from .spans import clip_spans, first_group, resolve_pass

HEADER_PATTERN = re.compile(r"^(=+)\s+(.*)$")
BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")
# Double backticks win over single ones at the same position.
CODE_PATTERN = re.compile(r"``(.+?)``|`([^`]+)`")
ITALIC_PATTERN = re.compile(r"(?<!\*)\*(?!\*)([^*]+?)(?<!\*)\*(?!\*)")
LINK_PATTERN = re.compile(
    r"(?:link:([^\s\[\]]+)|((?:https?|ftp|irc|mailto|file):[^\s\[\]]+))\[([^\]]*)\]"
)


def _link(match: re.Match[str]) -> tuple[str, str]:
    url = match.group(1) or match.group(2)
    # An empty label shows the target itself
    return match.group(3) or url, url


def parse_asciidoc_line(line: str) -> LineResult:
    """Strip AsciiDoc syntax from one line and record its styling.

    A section title is returned as soon as it is recognized, with no inline
    parsing; its level is the number of ``=`` characters, capped at six. Other
    lines go through bold, code, italic and link passes in that order.

    Args:
        line: A single line, without its line break.

    Returns:
        LineResult: Plain text, header level and spans over the plain text.

    Examples:
        parse_asciidoc_line("== Section Title")  # header_level=2
        parse_asciidoc_line("Visit https://x.com[our site] today")
        # plain_text="Visit our site today", spans=(StyleSpan(6, 13, LINK, "https://x.com"),)
    """
    header_match = HEADER_PATTERN.match(line)
    if header_match:
        level = min(len(header_match.group(1)), MAX_HEADER_LEVEL)
        return LineResult(plain_text=header_match.group(2), header_level=level)

    text = line
    spans: list[StyleSpan] = []

    text, found = resolve_pass(text, BOLD_PATTERN, StyleKind.BOLD, first_group)
    spans.extend(found)
    text, found = resolve_pass(text, CODE_PATTERN, StyleKind.CODE, first_group)
    spans.extend(found)
    text, found = resolve_pass(text, ITALIC_PATTERN, StyleKind.ITALIC, first_group)
    spans.extend(found)
    text, found = resolve_pass(text, LINK_PATTERN, StyleKind.LINK, _link)
    spans.extend(found)

    return LineResult(plain_text=text, spans=clip_spans(spans, len(text)))
