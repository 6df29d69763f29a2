"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

FORMAT_CHOICES = ("auto", "markdown", "asciidoc")
_FORMAT_ALIASES = {"md": "markdown", "adoc": "asciidoc"}


@dataclass
class ConverterConfig:
    """Configuration for converting marked-up text into styled spans.

    Attributes:
        format: Dialect to parse with (``"markdown"`` or ``"asciidoc"``), or
            ``"auto"`` to detect it per conversion. Aliases ``"md"`` and
            ``"adoc"`` are accepted.
        strip_list_markers: Whether Markdown list markers (``-``, ``*``,
            ``+``) are removed from the start of lines.
        max_line_length: Lines longer than this are passed through unparsed.
        max_file_size: Maximum text size, in characters, that will be
            converted.

    Examples:
        ConverterConfig(format="asciidoc", strip_list_markers=False)
    """

    format: str = "auto"
    strip_list_markers: bool = True

    # Limits
    max_line_length: int = 10_000
    max_file_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Attributes:
        args: Arguments provided to the underlying `ValueError`.

    Examples:
        raise ConfigError("`format` must be one of: auto, markdown, asciidoc")
    """


def load_config(search_path: Path) -> ConverterConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.markup-spans]`` table from `pyproject.toml` and the
    ``[markup-spans]`` or ``[tool.markup-spans]`` table from
    `.markup-spans.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        ConverterConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "markup-spans")]
        )
        if pyproject_config is not None:
            return normalize_config(pyproject_config)

        dotfile_config = _load_from_file(
            current / ".markup-spans.toml",
            table_paths=[("markup-spans",), ("tool", "markup-spans")],
        )
        if dotfile_config is not None:
            return normalize_config(dotfile_config)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return ConverterConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> ConverterConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> ConverterConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # TOML keys use dashes; dataclass fields use underscores
    fields = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return ConverterConfig(**fields)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def normalize_config(config: ConverterConfig) -> ConverterConfig:
    """Return `config` with format aliases mapped to canonical names."""
    fmt = config.format
    if isinstance(fmt, str):
        fmt = fmt.strip().lower()
        fmt = _FORMAT_ALIASES.get(fmt, fmt)
    return replace(config, format=fmt)


def validate_config(config: ConverterConfig) -> None:
    """Validate a `ConverterConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If the format is unknown, the list-marker flag is not a
            boolean, or numeric limits are not positive integers.

    Examples:
        validate_config(ConverterConfig(format="md"))
    """
    config = normalize_config(config)

    if config.format not in FORMAT_CHOICES:
        raise ConfigError(f"`format` must be one of: {', '.join(FORMAT_CHOICES)}, md, adoc")
    if not isinstance(config.strip_list_markers, bool):
        raise ConfigError("`strip_list_markers` must be a boolean")

    limits = {
        "max_line_length": config.max_line_length,
        "max_file_size": config.max_file_size,
    }
    _ensure_integers(limits)
    _ensure_positive(limits)


def apply_overrides(config: ConverterConfig, **overrides: object) -> ConverterConfig:
    """Apply override values to a `ConverterConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        ConverterConfig: New configuration with the provided overrides applied.
        The original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `ConverterConfig`.

    Examples:
        updated = apply_overrides(config, format="asciidoc", max_line_length=200)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> ConverterConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        ConverterConfig: Validated configuration ready for conversion.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), format="markdown")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    config = normalize_config(config)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
