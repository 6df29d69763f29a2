"""Filesystem helpers for markup-spans."""

from __future__ import annotations

import os
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_LINE_LENGTH, SUPPORTED_EXTENSIONS

MAX_FILE_SIZE_ENV_VAR = "MARKUP_SPANS_MAX_FILE_SIZE"
MAX_LINE_LENGTH_ENV_VAR = "MARKUP_SPANS_MAX_LINE_LENGTH"


def _positive_int_from_env(name: str, default: int) -> int:
    env_value = os.environ.get(name)
    if env_value is None:
        return default

    try:
        value = int(env_value)
    except ValueError as error:
        error_message = f"Invalid value for {name}: {env_value} (expected positive integer)"
        raise ValueError(error_message) from error

    if value <= 0:
        error_message = f"{name} must be a positive integer, got {value}."
        raise ValueError(error_message)

    return value


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed file size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["MARKUP_SPANS_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    return _positive_int_from_env(MAX_FILE_SIZE_ENV_VAR, default)


def get_max_line_length(default: int = DEFAULT_MAX_LINE_LENGTH) -> int:
    """Resolve the maximum line length that will be parsed."""
    return _positive_int_from_env(MAX_LINE_LENGTH_ENV_VAR, default)


def normalize_filepath(raw_path: str) -> Path:
    """Resolve a user-supplied path to a readable markup file.

    Args:
        raw_path: Path to a Markdown or AsciiDoc file, absolute or relative.

    Returns:
        Path: Absolute path to the file.

    Raises:
        ValueError: If the path is missing, not a regular file, or carries an
            unsupported extension.

    Examples:
        normalize_filepath("~/notes/guide.adoc")
    """
    path = Path(raw_path).expanduser()
    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        raise ValueError(f"{path} does not exist.") from error
    except OSError as error:
        raise ValueError(f"Error resolving {path}: {error}") from error

    if not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")

    if resolved.suffix.lower() not in SUPPORTED_EXTENSIONS:
        error_message = f"{resolved} is not a supported markup file.\n"
        error_message += f"Supported extensions are: {', '.join(SUPPORTED_EXTENSIONS)}"
        raise ValueError(error_message)

    return resolved


def read_text(filepath: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Read a markup file as UTF-8 once its size is known to be acceptable.

    Args:
        filepath: Path to the file.
        max_size: Maximum allowed size in bytes.

    Returns:
        str: File content.

    Raises:
        IOError: If the file is inaccessible, too large, or not valid UTF-8.
    """
    try:
        size = filepath.stat().st_size
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if size > max_size:
        raise IOError(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")

    try:
        with open(filepath, "r", encoding="UTF-8") as handle:
            return handle.read()
    except UnicodeDecodeError as error:
        raise IOError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error
