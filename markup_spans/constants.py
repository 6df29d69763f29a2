"""Constants used across the markup-spans package."""

from __future__ import annotations

import re

from .config import ConverterConfig

DEFAULT_CONFIG = ConverterConfig()

# Format detection patterns, matched against stripped lines.
# AsciiDoc patterns are tried in order; the first hit scores the line.
ASCIIDOC_LINE_PATTERNS = (
    re.compile(r"^=+\s"),  # header
    re.compile(r"^\[.*\]$"),  # attribute list
    re.compile(r"^\.{3,}"),  # block title
    re.compile(r"^\[source"),  # source block opener
)
MARKDOWN_HEADER_LINE_PATTERN = re.compile(r"^#{1,6}\s")

# Header sizes by level; consumers render headers bold as well.
HEADER_SIZES = {1: 24, 2: 20, 3: 16, 4: 14, 5: 12, 6: 11}
DEFAULT_HEADER_SIZE = 11
MAX_HEADER_LEVEL = 6

# Limits
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size
DEFAULT_MAX_LINE_LENGTH = DEFAULT_CONFIG.max_line_length

SUPPORTED_EXTENSIONS = (".md", ".markdown", ".adoc", ".asciidoc", ".asc", ".txt")
