"""Data models for markup-spans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Format(str, Enum):
    """Lightweight markup dialects the converter understands.

    Attributes:
        MARKDOWN: Markdown, the default when detection is inconclusive.
        ASCIIDOC: AsciiDoc.
    """

    MARKDOWN = "markdown"
    ASCIIDOC = "asciidoc"


class StyleKind(str, Enum):
    """Inline styles a span can carry.

    Attributes:
        BOLD: Strong emphasis.
        ITALIC: Emphasis.
        CODE: Inline code.
        LINK: Hyperlink; spans of this kind carry a URL.
    """

    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    LINK = "link"


@dataclass(frozen=True)
class StyleSpan:
    """A styled range of one line's plain text.

    Attributes:
        start: Zero-based offset of the first styled character.
        end: Zero-based offset of the last styled character (inclusive).
        kind: Style applied to the range.
        url: Link target for `StyleKind.LINK` spans, otherwise None.
    """

    start: int
    end: int
    kind: StyleKind
    url: str | None = None

    def fits(self, length: int) -> bool:
        """Return True when the span lies inside a text of `length` characters."""
        return 0 <= self.start <= self.end < length


@dataclass(frozen=True)
class LineResult:
    """Structured result of parsing a single line.

    Attributes:
        plain_text: Line content with markup syntax removed.
        header_level: Header level (1-6) when the line is a header, else None.
        spans: Styled ranges over `plain_text`; always empty for headers.
        parsed: False when the line was passed through without parsing.
    """

    plain_text: str
    header_level: int | None = None
    spans: tuple[StyleSpan, ...] = ()
    parsed: bool = True

    @classmethod
    def unparsed(cls, line: str) -> LineResult:
        """Build the fallback result: the original line, unstyled."""
        return cls(plain_text=line, parsed=False)


class MarkupMatch(NamedTuple):
    """One occurrence of a markup kind in the working text."""

    original: str
    replacement: str
    url: str | None
    start: int


@dataclass(frozen=True)
class DocumentSpan:
    """A style span translated into the joined output text.

    Attributes:
        start: Zero-based offset into the joined text.
        end: Inclusive end offset into the joined text.
        kind: Style applied to the range.
        url: Link target for link spans.
    """

    start: int
    end: int
    kind: StyleKind
    url: str | None = None


@dataclass(frozen=True)
class HeaderRange:
    """A header line's extent in the joined output text.

    Attributes:
        start: Offset of the first header character.
        end: Inclusive offset of the last header character.
        level: Header level, 1-6.
        size: Font size suggested for the level.
    """

    start: int
    end: int
    level: int
    size: int


@dataclass
class Conversion:
    """Outcome of converting a block of marked-up text.

    Attributes:
        format: Dialect used to parse every line.
        text: Plain lines joined by newlines.
        lines: Per-line parse results, in input order.
        spans: Style spans positioned in `text`.
        headers: Header ranges positioned in `text`.
        skipped: Number of spans dropped because they could not be applied.
    """

    format: Format
    text: str
    lines: tuple[LineResult, ...] = ()
    spans: tuple[DocumentSpan, ...] = ()
    headers: tuple[HeaderRange, ...] = ()
    skipped: int = 0

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable view of the conversion."""
        return {
            "format": self.format.value,
            "text": self.text,
            "headers": [
                {"start": h.start, "end": h.end, "level": h.level, "size": h.size}
                for h in self.headers
            ],
            "spans": [
                {
                    "start": span.start,
                    "end": span.end,
                    "kind": span.kind.value,
                    **({"url": span.url} if span.url is not None else {}),
                }
                for span in self.spans
            ],
            "skipped": self.skipped,
        }
