"""
markup-spans: turn Markdown or AsciiDoc into plain text and styled ranges.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    markup-spans notes.md

Library Usage:
    from pathlib import Path
    from markup_spans import convert_text

    result = convert_text(Path("guide.adoc").read_text())
    result.text  # markup removed, lines joined with newlines
    result.spans  # styled ranges positioned in result.text
"""

from .config import ConfigError, ConverterConfig
from .converter import convert_text, get_line_parser, parse_lines
from .detector import detect_format
from .exceptions import ConversionError, DocumentTooLargeError, InputInvalidError
from .models import Conversion, DocumentSpan, Format, HeaderRange, LineResult, StyleKind, StyleSpan
from .asciidoc import parse_asciidoc_line
from .markdown import parse_markdown_line
from .spans import header_size

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "detect_format",
    "parse_markdown_line",
    "parse_asciidoc_line",
    "convert_text",
    "parse_lines",
    "get_line_parser",
    "header_size",
    # Data models
    "Format",
    "StyleKind",
    "StyleSpan",
    "LineResult",
    "DocumentSpan",
    "HeaderRange",
    "Conversion",
    # Configuration
    "ConverterConfig",
    # Exceptions
    "ConfigError",
    "ConversionError",
    "DocumentTooLargeError",
    "InputInvalidError",
    # Version
    "__version__",
]
