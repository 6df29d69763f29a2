"""Span resolution shared by the line parsers.

Each markup kind is handled by one pass: every occurrence of the kind is
collected from the working text, the occurrences are replaced by their plain
text, and a span is recorded for each replacement. A pass never touches spans
recorded by earlier passes, so a later pass that shortens the text to the
left of an earlier span leaves that span pointing at shifted characters.
Parsers order their passes to keep this rare and clip whatever falls outside
the final text.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable

from .constants import DEFAULT_HEADER_SIZE, HEADER_SIZES
from .models import MarkupMatch, StyleKind, StyleSpan

logger = logging.getLogger(__name__)

# Maps a regex match to its replacement text and optional URL.
MatchBuilder = Callable[[re.Match[str]], tuple[str, str | None]]


def find_matches(pattern: re.Pattern[str], text: str, build: MatchBuilder) -> list[MarkupMatch]:
    """Collect every non-overlapping occurrence of `pattern`, left to right.

    A pattern that fails while scanning is treated as matching nothing.

    Args:
        pattern: Compiled pattern for one markup kind.
        text: Current working text.
        build: Callable returning ``(replacement, url)`` for a match.

    Returns:
        list[MarkupMatch]: Matches in ascending start order.

    Examples:
        find_matches(re.compile(r"`([^`]+)`"), "a `b`", lambda m: (m.group(1), None))
        # [MarkupMatch(original="`b`", replacement="b", url=None, start=2)]
    """
    try:
        matches = []
        for match in pattern.finditer(text):
            replacement, url = build(match)
            matches.append(MarkupMatch(match.group(0), replacement, url, match.start()))
        return matches
    except (re.error, RecursionError) as error:
        logger.warning("Pattern %r failed on %r: %s", pattern.pattern, text[:80], error)
        return []


def apply_matches(
    text: str, matches: list[MarkupMatch], kind: StyleKind
) -> tuple[str, list[StyleSpan]]:
    """Substitute matches into `text` and record one span per replacement.

    Substitutions run from the highest start index down so the indices of
    earlier matches stay valid. Span positions refer to the text after every
    substitution of this pass. Empty replacements produce no span.

    Args:
        text: Working text the matches were collected from.
        matches: Matches in ascending start order.
        kind: Style recorded for each replacement.

    Returns:
        tuple[str, list[StyleSpan]]: Rewritten text and spans in ascending order.

    Examples:
        apply_matches("a **b**", [MarkupMatch("**b**", "b", None, 2)], StyleKind.BOLD)
        # ("a b", [StyleSpan(2, 2, StyleKind.BOLD)])
    """
    for match in reversed(matches):
        end = match.start + len(match.original)
        text = text[: match.start] + match.replacement + text[end:]

    spans = []
    shrink = 0  # characters removed to the left of the current match
    for match in matches:
        start = match.start - shrink
        if match.replacement:
            spans.append(StyleSpan(start, start + len(match.replacement) - 1, kind, match.url))
        shrink += len(match.original) - len(match.replacement)
    return text, spans


def resolve_pass(
    text: str, pattern: re.Pattern[str], kind: StyleKind, build: MatchBuilder
) -> tuple[str, list[StyleSpan]]:
    """Run one markup-kind pass over `text`.

    Args:
        text: Working text.
        pattern: Compiled pattern for the markup kind.
        kind: Style recorded for each occurrence.
        build: Callable returning ``(replacement, url)`` for a match.

    Returns:
        tuple[str, list[StyleSpan]]: New text and spans in its coordinates.
    """
    matches = find_matches(pattern, text, build)
    if not matches:
        return text, []
    return apply_matches(text, matches, kind)


def first_group(match: re.Match[str]) -> tuple[str, None]:
    """Replace a match with its first non-empty capture group."""
    return next((group for group in match.groups() if group is not None), ""), None


def shift_spans(spans: Iterable[StyleSpan], offset: int, length: int) -> list[StyleSpan]:
    """Move spans left by `offset` characters after a prefix was removed.

    Spans that no longer fit inside a text of `length` characters are dropped.
    """
    shifted = []
    for span in spans:
        moved = StyleSpan(span.start - offset, span.end - offset, span.kind, span.url)
        if moved.fits(length):
            shifted.append(moved)
        else:
            logger.debug("Dropping %s span shifted out of range: %r", span.kind.value, moved)
    return shifted


def clip_spans(spans: Iterable[StyleSpan], length: int) -> tuple[StyleSpan, ...]:
    """Drop spans that fall outside a text of `length` characters."""
    kept = []
    for span in spans:
        if span.fits(length):
            kept.append(span)
        else:
            logger.debug("Dropping out-of-range %s span %d-%d", span.kind.value, span.start, span.end)
    return tuple(kept)


def header_size(level: object) -> int:
    """Map a header level to a font size.

    Args:
        level: Header level; anything other than an integer from 1 to 6 falls
            back to the default size.

    Returns:
        int: Size in points.

    Examples:
        header_size(1)  # 24
        header_size(3)  # 16
        header_size(None)  # 11
    """
    if isinstance(level, bool) or not isinstance(level, int):
        return DEFAULT_HEADER_SIZE
    return HEADER_SIZES.get(level, DEFAULT_HEADER_SIZE)
