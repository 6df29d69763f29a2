"""
Converts a Markdown or AsciiDoc file into plain text and styled ranges.
Prints the result as JSON, or only the plain text.
"""

from __future__ import annotations

import json
import logging
import click
from .config import FORMAT_CHOICES, ConfigError, apply_overrides, build_config
from .converter import convert_text
from .exceptions import ConversionError
from .filesystem import get_max_file_size, get_max_line_length, normalize_filepath, read_text

__all__ = ["cli"]


@click.command()
@click.version_option()
@click.option(
    "--format",
    "fmt",
    type=click.Choice(FORMAT_CHOICES),
    help="Markup dialect; detected from the content when 'auto'",
)
@click.option(
    "--strip-list-markers/--keep-list-markers",
    default=None,
    help="Remove Markdown list markers from line starts",
)
@click.option("--max-line-length", type=int, help="Longest line that will be parsed")
@click.option(
    "--output",
    type=click.Choice(["json", "text"]),
    default="json",
    show_default=True,
    help="Print the full conversion as JSON or only the plain text",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    fmt: str | None = None,
    strip_list_markers: bool | None = None,
    max_line_length: int | None = None,
    output: str = "json",
    verbose: bool = False,
):
    """
    Entry point for converting a marked-up file.

    Args:
        filepath: Path to the Markdown or AsciiDoc file to convert.
        fmt: Override for the markup dialect.
        strip_list_markers: Override for Markdown list-marker stripping.
        max_line_length: Override for the longest line that is parsed.
        output: ``json`` for the whole conversion, ``text`` for plain text.
        verbose: Log debug details to stderr.

    Returns:
        None.

    Raises:
        click.BadParameter: If the path or configuration overrides are invalid.
        click.ClickException: If the file cannot be read or converted.

    Examples:
        markup-spans guide.adoc --output text
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        filepath = normalize_filepath(filepath)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(
            filepath.parent,
            format=fmt,
            strip_list_markers=strip_list_markers,
            max_line_length=max_line_length,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    # Environment limits sit between the config file and explicit options
    try:
        config = apply_overrides(
            config,
            max_file_size=get_max_file_size(default=config.max_file_size),
            max_line_length=max_line_length
            or get_max_line_length(default=config.max_line_length),
        )
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        content = read_text(filepath, config.max_file_size)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    try:
        conversion = convert_text(content, config)
    except (ConversionError, ConfigError) as error:
        raise click.ClickException(f"{filepath}: {error}") from error

    if output == "text":
        click.echo(conversion.text)
    else:
        click.echo(json.dumps(conversion.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
