"""Conversion of marked-up text blocks into plain text and styled ranges."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from .asciidoc import parse_asciidoc_line
from .config import ConverterConfig, normalize_config, validate_config
from .detector import detect_format
from .exceptions import DocumentTooLargeError, InputInvalidError
from .markdown import parse_markdown_line
from .models import Conversion, DocumentSpan, Format, HeaderRange, LineResult, StyleKind
from .spans import header_size

logger = logging.getLogger(__name__)

LineParser = Callable[[str], LineResult]


def get_line_parser(fmt: Format, config: ConverterConfig | None = None) -> LineParser:
    """Return the line parser for `fmt`.

    Args:
        fmt: Dialect to parse.
        config: Configuration supplying parser options.

    Returns:
        LineParser: Callable turning one line into a `LineResult`.

    Examples:
        parse = get_line_parser(Format.ASCIIDOC)
        parse("== Title").header_level  # 2
    """
    config = config or ConverterConfig()
    if fmt is Format.ASCIIDOC:
        return parse_asciidoc_line
    return partial(parse_markdown_line, strip_list_markers=config.strip_list_markers)


def parse_lines(
    text: str, fmt: Format, config: ConverterConfig | None = None
) -> list[LineResult]:
    """Parse every line of `text` with the parser for `fmt`.

    Lines longer than `config.max_line_length`, and lines whose parsing
    fails, are passed through unparsed so the rest of the text still
    converts.

    Args:
        text: Text whose lines are separated by ``"\\n"``.
        fmt: Dialect to parse.
        config: Configuration controlling limits and parser options.

    Returns:
        list[LineResult]: One result per input line.
    """
    config = config or ConverterConfig()
    parse = get_line_parser(fmt, config)

    results = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        if len(line) > config.max_line_length:
            logger.warning(
                "Line %d exceeds maximum allowed length of %d characters; left unparsed",
                line_number,
                config.max_line_length,
            )
            results.append(LineResult.unparsed(line))
            continue
        try:
            results.append(parse(line))
        except Exception as error:
            logger.warning("Could not parse line %d, left unparsed: %s", line_number, error)
            results.append(LineResult.unparsed(line))
    return results


def _is_applicable_url(url: str | None) -> bool:
    return bool(url) and not any(character.isspace() for character in url)


def convert_text(
    text: str, config: ConverterConfig | None = None, fmt: Format | None = None
) -> Conversion:
    """Convert a block of Markdown or AsciiDoc into plain text and styled ranges.

    The dialect is `fmt` when given, otherwise the configured format, otherwise
    the detected one. Plain lines are joined with ``"\\n"`` and every line span
    is moved to its position in the joined text. Spans that cannot be applied
    (out of range, or links without a usable URL) are skipped and counted;
    the remaining spans and lines are unaffected.

    Args:
        text: Text to convert.
        config: Configuration controlling format choice and limits.
        fmt: Dialect to use regardless of configuration and detection.

    Returns:
        Conversion: Joined plain text with headers and spans.

    Raises:
        InputInvalidError: If `text` is not a string.
        DocumentTooLargeError: If `text` exceeds `config.max_file_size`.
        ConfigError: If the configuration fails validation.

    Examples:
        result = convert_text("# Title\\nSome **bold** text")
        result.text  # "Title\\nSome bold text"
        result.spans  # (DocumentSpan(11, 14, StyleKind.BOLD),)
    """
    if not isinstance(text, str):
        raise InputInvalidError(type(text).__name__)

    config = normalize_config(config or ConverterConfig())
    validate_config(config)
    if len(text) > config.max_file_size:
        raise DocumentTooLargeError(len(text), config.max_file_size)

    if fmt is None:
        fmt = detect_format(text) if config.format == "auto" else Format(config.format)
    logger.debug("Converting %d characters as %s", len(text), fmt.value)

    lines = parse_lines(text, fmt, config)
    joined = "\n".join(result.plain_text for result in lines)

    spans: list[DocumentSpan] = []
    headers: list[HeaderRange] = []
    skipped = 0
    line_start = 0
    for result in lines:
        if result.header_level is not None and result.plain_text:
            headers.append(
                HeaderRange(
                    start=line_start,
                    end=line_start + len(result.plain_text) - 1,
                    level=result.header_level,
                    size=header_size(result.header_level),
                )
            )

        for span in result.spans:
            start = line_start + span.start
            end = line_start + span.end
            if not 0 <= start <= end < len(joined):
                logger.debug("Skipping %s span %d-%d outside the text", span.kind.value, start, end)
                skipped += 1
                continue
            if span.kind is StyleKind.LINK and not _is_applicable_url(span.url):
                logger.debug("Skipping link span %d-%d with unusable URL %r", start, end, span.url)
                skipped += 1
                continue
            spans.append(DocumentSpan(start, end, span.kind, span.url))

        line_start += len(result.plain_text) + 1

    return Conversion(
        format=fmt,
        text=joined,
        lines=tuple(lines),
        spans=tuple(spans),
        headers=tuple(headers),
        skipped=skipped,
    )
