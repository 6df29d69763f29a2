from markup_spans.models import Conversion, Format, LineResult, StyleKind, StyleSpan


def test_format_members():
    assert list(Format) == [Format.MARKDOWN, Format.ASCIIDOC]
    assert Format("asciidoc") is Format.ASCIIDOC


def test_line_result_defaults():
    result = LineResult(plain_text="text")

    assert result.header_level is None
    assert result.spans == ()
    assert result.parsed is True


def test_unparsed_line_result_keeps_the_line():
    result = LineResult.unparsed("**raw**")

    assert result.plain_text == "**raw**"
    assert result.header_level is None
    assert result.spans == ()
    assert result.parsed is False


def test_style_span_fits():
    span = StyleSpan(2, 4, StyleKind.CODE)

    assert span.fits(5) is True
    assert span.fits(4) is False
    assert StyleSpan(3, 2, StyleKind.CODE).fits(10) is False


def test_empty_conversion_to_dict():
    assert Conversion(format=Format.MARKDOWN, text="").to_dict() == {
        "format": "markdown",
        "text": "",
        "headers": [],
        "spans": [],
        "skipped": 0,
    }
