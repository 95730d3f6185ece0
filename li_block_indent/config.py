"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
import tomllib

from .constants import (
    DEFAULT_INDENT,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_MAX_LINE_LENGTH,
    DEFAULT_START_INDENT,
    RULE_NAME,
)


@dataclass(frozen=True)
class LintConfig:
    """Settings for one indentation check run.

    Attributes:
        indent: Columns one level of unordered sub-list nesting is indented
            by, counted from the parent item's marker.
        start_indent: Indentation of top-level content.
        max_file_size: Maximum file size in bytes that will be processed.
        max_line_length: Maximum line length allowed in a document.

    Examples:
        LintConfig(indent=4, start_indent=0)
    """

    indent: int = DEFAULT_INDENT
    start_indent: int = DEFAULT_START_INDENT

    # Limits
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`indent` must be a positive integer")
    """


# Spellings accepted from markdownlint-style configuration files.
_ALIASES = {
    "startIndent": "start_indent",
    "start-indent": "start_indent",
    "maxFileSize": "max_file_size",
    "maxLineLength": "max_line_length",
}


def load_config(search_path: Path) -> LintConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.li-block-indent]`` table from `pyproject.toml` and the
    ``[li-block-indent]`` or ``[tool.li-block-indent]`` table from
    `.li-block-indent.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        LintConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", RULE_NAME)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / f".{RULE_NAME}.toml",
            table_paths=[(RULE_NAME,), ("tool", RULE_NAME)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return LintConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> LintConfig | None:
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
) -> LintConfig:
    table_display = ".".join(table_path)

    if raw_config is None:
        return LintConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    try:
        return LintConfig(**normalize_keys(raw_config))
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def normalize_keys(raw_config: dict[str, object]) -> dict[str, object]:
    """Map camelCase and dashed option names onto `LintConfig` fields.

    Examples:
        normalize_keys({"startIndent": 2})  # {"start_indent": 2}
    """
    return {_ALIASES.get(key, key): value for key, value in raw_config.items()}


def validate_config(config: LintConfig) -> None:
    """Validate a `LintConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If a value is not an integer, `indent` is not positive,
            `start_indent` is negative, or a limit is not positive.

    Examples:
        validate_config(LintConfig(indent=4))
    """
    _ensure_integers({item.name: getattr(config, item.name) for item in fields(config)})

    if config.indent < 1:
        raise ConfigError("`indent` must be a positive integer")
    if config.start_indent < 0:
        raise ConfigError("`start_indent` must be >= 0")

    _ensure_positive(
        {
            "max_file_size": config.max_file_size,
            "max_line_length": config.max_line_length,
        }
    )


def apply_overrides(config: LintConfig, **overrides: object) -> LintConfig:
    """Apply override values to a `LintConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        LintConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `LintConfig`.

    Examples:
        updated = apply_overrides(config, indent=4)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> LintConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        LintConfig: Validated configuration ready for linting.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), start_indent=2)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
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
