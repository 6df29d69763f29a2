from __future__ import annotations

import textwrap

import pytest
from hypothesis import given
from hypothesis import strategies as st

import markup_spans.detector as detector_module
from markup_spans.detector import detect_format, score_lines
from markup_spans.exceptions import InputInvalidError
from markup_spans.models import Format

ASCIIDOC_LINES = ["= Title", "== Section", "[NOTE]", "[source,python]", "...Block title", "...."]
MARKDOWN_LINES = ["# Title", "## Section", "###### Deep"]
NEUTRAL_LINES = ["", "plain text", "- item", "some *emphasis*", "####### seven", "=no-space"]


def test_empty_text_is_markdown():
    assert detect_format("") is Format.MARKDOWN


def test_plain_text_is_markdown():
    assert detect_format("just some words\nand more words") is Format.MARKDOWN


def test_asciidoc_document():
    content = textwrap.dedent(
        """
        = Guide
        :toc:

        == Install

        [source,bash]
        ----
        make install
        ----
        """
    )

    assert detect_format(content) is Format.ASCIIDOC


def test_markdown_document():
    content = textwrap.dedent(
        """
        # Guide

        ## Install

        Run `make install`.
        """
    )

    assert detect_format(content) is Format.MARKDOWN


def test_tie_resolves_to_markdown():
    assert detect_format("== Section\n## Section") is Format.MARKDOWN


def test_indented_lines_are_trimmed_before_scoring():
    assert score_lines("   == Indented\n\t# Also indented") == (1, 1)


def test_line_scores_asciidoc_at_most_once():
    # "[source]" is both an attribute list and a source block opener
    assert score_lines("[source]") == (1, 0)


def test_score_lines_counts_each_dialect():
    assert score_lines("= Title\n[source,python]\n# comment") == (2, 1)


def test_two_dots_are_not_a_block_title():
    assert score_lines("..\n.single") == (0, 0)


@pytest.mark.parametrize("value", [None, 42, b"= Title", ["= Title"]])
def test_non_string_input_is_rejected(value: object):
    with pytest.raises(InputInvalidError):
        detect_format(value)


def test_scoring_failure_falls_back_to_markdown(monkeypatch):
    def _explode(text: str) -> tuple[int, int]:
        raise RecursionError("too deep")

    monkeypatch.setattr(detector_module, "score_lines", _explode)

    assert detect_format("= Title\n== Section") is Format.MARKDOWN


@given(
    st.lists(st.sampled_from(ASCIIDOC_LINES), max_size=8),
    st.lists(st.sampled_from(MARKDOWN_LINES), max_size=8),
    st.lists(st.sampled_from(NEUTRAL_LINES), max_size=8),
)
def test_asciidoc_needs_strict_majority(asciidoc: list[str], markdown: list[str], neutral: list[str]):
    content = "\n".join(asciidoc + neutral + markdown)
    expected = Format.ASCIIDOC if len(asciidoc) > len(markdown) else Format.MARKDOWN

    assert detect_format(content) is expected


@given(
    st.lists(st.sampled_from(MARKDOWN_LINES), min_size=1, max_size=8),
    st.lists(st.sampled_from(NEUTRAL_LINES), max_size=8),
)
def test_markdown_headers_without_asciidoc_lines_are_markdown(
    markdown: list[str], neutral: list[str]
):
    assert detect_format("\n".join(neutral + markdown)) is Format.MARKDOWN


@given(st.text())
def test_detect_format_never_fails_on_text(content: str):
    assert detect_format(content) in (Format.MARKDOWN, Format.ASCIIDOC)
