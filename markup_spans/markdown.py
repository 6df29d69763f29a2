"""Markdown line parsing."""

from __future__ import annotations

import re

from .models import LineResult, StyleKind, StyleSpan
from .spans import clip_spans, first_group, resolve_pass, shift_spans

HEADER_PATTERN = re.compile(r"^(#{1,6}) +(.*)$")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*|__(.+?)__")
CODE_PATTERN = re.compile(r"`([^`]+)`")
# A lone delimiter only; `*` or `_` touching the same character belongs to a
# double-delimiter token.
ITALIC_PATTERN = re.compile(
    r"(?<!\*)\*(?!\*)([^*]+?)(?<!\*)\*(?!\*)|(?<!_)_(?!_)([^_]+?)(?<!_)_(?!_)"
)
LIST_MARKER_PATTERN = re.compile(r"^\s*[-*+]\s+")


def _link(match: re.Match[str]) -> tuple[str, str]:
    return match.group(1), match.group(2).strip()


def parse_markdown_line(line: str, strip_list_markers: bool = True) -> LineResult:
    """Strip Markdown syntax from one line and record its styling.

    A header line is returned as soon as it is recognized, with no inline
    parsing. Other lines go through links, bold, code and italic passes in
    that order, then lose any leading list marker.

    Args:
        line: A single line, without its line break.
        strip_list_markers: Remove a leading ``-``, ``*`` or ``+`` marker.

    Returns:
        LineResult: Plain text, header level and spans over the plain text.

    Examples:
        parse_markdown_line("## Install")  # header_level=2, plain_text="Install"
        parse_markdown_line("See [docs](http://example.com) now")
        # plain_text="See docs now", spans=(StyleSpan(4, 7, LINK, "http://example.com"),)
    """
    header_match = HEADER_PATTERN.match(line)
    if header_match:
        return LineResult(plain_text=header_match.group(2), header_level=len(header_match.group(1)))

    text = line
    spans: list[StyleSpan] = []

    text, found = resolve_pass(text, LINK_PATTERN, StyleKind.LINK, _link)
    spans.extend(found)
    text, found = resolve_pass(text, BOLD_PATTERN, StyleKind.BOLD, first_group)
    spans.extend(found)
    text, found = resolve_pass(text, CODE_PATTERN, StyleKind.CODE, first_group)
    spans.extend(found)
    text, found = resolve_pass(text, ITALIC_PATTERN, StyleKind.ITALIC, first_group)
    spans.extend(found)

    if strip_list_markers:
        marker = LIST_MARKER_PATTERN.match(text)
        if marker:
            text = text[marker.end() :]
            spans = shift_spans(spans, marker.end(), len(text))

    return LineResult(plain_text=text, spans=clip_spans(spans, len(text)))
