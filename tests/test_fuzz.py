from __future__ import annotations

import os

import pytest
from markup_spans import convert_text, detect_format, parse_asciidoc_line, parse_markdown_line

atheris = pytest.importorskip("atheris")


def test_line_parsers_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    parsed = 0

    while provider.remaining_bytes() > 0 and parsed < 128:
        line = provider.ConsumeUnicodeNoSurrogates(64)
        for parse in (parse_markdown_line, parse_asciidoc_line):
            result = parse(line)
            for span in result.spans:
                assert 0 <= span.start <= span.end < len(result.plain_text)
        parsed += 1

    assert parsed  # ensure we exercised the loop


def test_convert_text_with_fuzzed_document():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    lines: list[str] = []

    while provider.remaining_bytes() > 0 and len(lines) < 32:
        prefix = provider.PickValueInList(["", "# ", "== ", "- ", "[source]", "..."])
        lines.append(prefix + provider.ConsumeUnicodeNoSurrogates(32))

    content = "\n".join(lines)
    result = convert_text(content)
    assert result.format is detect_format(content)
    for span in result.spans:
        assert 0 <= span.end < len(result.text)
