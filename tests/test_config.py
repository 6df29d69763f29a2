from __future__ import annotations

import textwrap
import pytest
from pathlib import Path

from markup_spans.config import (
    ConfigError,
    ConverterConfig,
    apply_overrides,
    build_config,
    load_config,
    normalize_config,
    validate_config,
)


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def _write_dotfile(base: Path, body: str) -> Path:
    path = base / ".markup-spans.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_loads_config_from_pyproject(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.markup-spans]
        format = "asciidoc"
        strip_list_markers = false
        max_line_length = 120
        max_file_size = 2048
        """,
    )

    config = load_config(tmp_path)

    assert config == ConverterConfig(
        format="asciidoc",
        strip_list_markers=False,
        max_line_length=120,
        max_file_size=2048,
    )


def test_loads_config_from_dotfile(tmp_path: Path):
    _write_dotfile(
        tmp_path,
        """
        [markup-spans]
        format = "md"
        strip-list-markers = false
        """,
    )
    nested = tmp_path / "child"
    nested.mkdir()

    config = load_config(nested)

    assert config.format == "markdown"
    assert config.strip_list_markers is False


def test_load_config_walks_up_directories(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.markup-spans]
        format = "adoc"
        """,
    )
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert load_config(nested).format == "asciidoc"


def test_pyproject_without_table_falls_through_to_dotfile(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [project]
        name = "demo"
        """,
    )
    _write_dotfile(
        tmp_path,
        """
        [tool.markup-spans]
        max_line_length = 50
        """,
    )

    assert load_config(tmp_path).max_line_length == 50


def test_empty_table_returns_defaults(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.markup-spans]
        """,
    )

    assert load_config(tmp_path) == ConverterConfig()


def test_invalid_toml_is_skipped(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text("[tool.markup-spans\nformat =", encoding="utf-8")

    assert load_config(tmp_path) == ConverterConfig()


def test_unknown_keys_raise_config_error(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.markup-spans]
        colour = "blue"
        """,
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_mapping_table_raises_config_error(tmp_path: Path):
    _write_dotfile(
        tmp_path,
        """
        markup-spans = "markdown"
        """,
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_normalize_config_maps_aliases():
    assert normalize_config(ConverterConfig(format=" ADOC ")).format == "asciidoc"
    assert normalize_config(ConverterConfig(format="md")).format == "markdown"
    assert normalize_config(ConverterConfig(format="auto")).format == "auto"


@pytest.mark.parametrize(
    "config",
    [
        ConverterConfig(format="rst"),
        ConverterConfig(format=3),
        ConverterConfig(strip_list_markers="yes"),
        ConverterConfig(max_line_length=0),
        ConverterConfig(max_file_size=-1),
        ConverterConfig(max_line_length=True),
        ConverterConfig(max_file_size=1.5),
    ],
)
def test_validate_config_rejects_invalid_values(config: ConverterConfig):
    with pytest.raises(ConfigError):
        validate_config(config)


def test_apply_overrides_ignores_none():
    config = ConverterConfig()

    assert apply_overrides(config, format=None, max_line_length=None) is config
    assert apply_overrides(config, format="markdown").format == "markdown"


def test_build_config_applies_overrides_over_file(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.markup-spans]
        format = "asciidoc"
        max_line_length = 80
        """,
    )

    config = build_config(tmp_path, format="md", strip_list_markers=None)

    assert config.format == "markdown"
    assert config.max_line_length == 80


def test_build_config_validates(tmp_path: Path):
    with pytest.raises(ConfigError):
        build_config(tmp_path, max_line_length=-5)
