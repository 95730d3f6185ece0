"""
Checks that blocks nested in Markdown list items and blockquotes are indented
to the column their container mandates.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, apply_overrides, build_config
from .constants import RULE_INFORMATION
from .exceptions import LintFileError
from .filesystem import get_max_file_size, get_max_line_length, normalize_filepath
from .linter import lint_file
from .reporter import format_violation

__all__ = ["cli"]


@click.command(epilog=f"Rule details: {RULE_INFORMATION}")
@click.version_option()
@click.option("--indent", type=int, help="Indentation of nested unordered lists")
@click.option("--start-indent", type=int, help="Indentation of top-level content")
@click.option("--verbose", is_flag=True, help="Log debugging details to stderr")
@click.argument("filepaths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def cli(
    filepaths: tuple[str, ...],
    indent: int | None = None,
    start_indent: int | None = None,
    verbose: bool = False,
):
    """
    Entry point for checking list item block indentation.

    Args:
        filepaths: Paths to the Markdown files to check.
        indent: Override for the nested unordered list indentation.
        start_indent: Override for the top-level indentation.
        verbose: Whether to log debugging details.

    Returns:
        None.

    Raises:
        click.BadParameter: If a path is not a Markdown file or configuration
            values are invalid.
        click.ClickException: If a file cannot be read or exceeds the limits.

    Examples:
        li-block-indent README.md docs/guide.md --indent 4
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        paths = [normalize_filepath(filepath) for filepath in filepaths]
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(Path.cwd(), indent=indent, start_indent=start_indent)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = apply_overrides(
            config,
            max_file_size=get_max_file_size(default=config.max_file_size),
            max_line_length=get_max_line_length(default=config.max_line_length),
        )
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    violation_count = 0
    for path in paths:
        try:
            violations = lint_file(path, config)
        except LintFileError as error:
            raise click.ClickException(str(error)) from error

        for violation in violations:
            click.echo(format_violation(violation, _display_path(path)))
        violation_count += len(violations)

    if violation_count:
        click.echo(f"Found {violation_count} violation(s) in {len(paths)} file(s)", err=True)
        raise click.exceptions.Exit(1)


def _display_path(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd().resolve()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    cli()
