"""Block tree traversal and the public linting entry points."""

from __future__ import annotations

import logging
from pathlib import Path

from .checks import CHECKS
from .config import ConfigError, LintConfig, validate_config
from .document import Document, parse_document
from .exceptions import LineTooLongError, LintError, LintFileError
from .filesystem import collect_file_stat, enforce_file_size, safe_read
from .models import LIST_KINDS, BlockKind, BlockNode, SourceLines, TraversalContext, Violation
from .reporter import ViolationReporter, ViolationSink
from .resolver import expected_column

logger = logging.getLogger(__name__)


def _enter(
    node: BlockNode, context: TraversalContext, lines: SourceLines, config: LintConfig
) -> TraversalContext:
    """Derive the context seen by the children of `node`."""
    if node.kind in LIST_KINDS:
        return context.enter_list(node, expected_column(node, config, context, lines))
    if node.kind is BlockKind.LIST_ITEM:
        return context.enter_item(node)
    if node.kind is BlockKind.BLOCKQUOTE:
        return context.enter_blockquote(node, expected_column(node, config, context, lines))
    return context


def _visit(
    node: BlockNode,
    context: TraversalContext,
    lines: SourceLines,
    config: LintConfig,
    reporter: ViolationReporter,
) -> None:
    check = CHECKS.get(node.kind)
    if check is not None:
        check(node, context, lines, config, reporter)

    if not node.children:
        return

    child_context = _enter(node, context, lines, config)
    for child in node.children:
        _visit(child, child_context, lines, config, reporter)


def lint_document(
    document: Document, config: LintConfig | None = None, sink: ViolationSink | None = None
) -> list[Violation]:
    """Check the block indentation of a parsed document.

    Walks the block tree depth-first in document order. Paragraphs, lists,
    blockquotes, and fenced code blocks are checked before their children are
    visited; each branch carries its own snapshot of the enclosing containers.

    Args:
        document: Parsed document.
        config: Settings of the run. Defaults to a new `LintConfig` when omitted.
        sink: Optional callback receiving each violation as it is found.

    Returns:
        list[Violation]: At most one violation per line, ordered by line.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        violations = lint_document(parse_document("  * item\\n continued\\n"))
        violations[0].line  # 2
    """
    config = config or LintConfig()
    validate_config(config)

    reporter = ViolationReporter(sink)
    for child in document.root.children:
        _visit(child, TraversalContext(), document.lines, config, reporter)

    violations = reporter.violations
    logger.debug("Checked %d lines, found %d violations", len(document.lines), len(violations))
    return violations


def lint_text(
    text: str, config: LintConfig | None = None, sink: ViolationSink | None = None
) -> list[Violation]:
    """Parse Markdown text and check its block indentation.

    Args:
        text: Markdown source.
        config: Settings of the run. Defaults to a new `LintConfig` when omitted.
        sink: Optional callback receiving each violation as it is found.

    Returns:
        list[Violation]: Violations ordered by line.

    Raises:
        ConfigError: If the configuration fails validation.
        LineTooLongError: If a line exceeds `config.max_line_length`.

    Examples:
        lint_text("  * ul item\\n    continued paragraph\\n")  # []
    """
    config = config or LintConfig()
    validate_config(config)
    return lint_document(parse_document(text, config), config, sink)


def lint_file(filepath: Path, config: LintConfig | None = None) -> list[Violation]:
    """Read a Markdown file and check its block indentation.

    Args:
        filepath: Path to the Markdown file.
        config: Settings of the run; defaults to a new `LintConfig` when omitted.

    Returns:
        list[Violation]: Violations ordered by line.

    Raises:
        LintFileError: If configuration is invalid, the file exceeds the size or
            line length limits, or the file cannot be read or decoded.

    Examples:
        violations = lint_file(Path("README.md"))
    """
    config = config or LintConfig()
    try:
        validate_config(config)
    except ConfigError as error:
        raise LintFileError(str(error)) from error

    try:
        enforce_file_size(collect_file_stat(filepath), config.max_file_size, filepath)
        with safe_read(filepath) as file:
            content = file.read()
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise LintFileError(error_message) from error
    except IOError as error:
        raise LintFileError(str(error)) from error

    try:
        document = parse_document(content, config)
    except LineTooLongError as error:
        error_message = (
            f"{filepath} contains a line at line {error.line_number} "
            f"exceeding the maximum allowed length of {error.max_line_length} characters."
        )
        raise LintFileError(error_message) from error
    except LintError as error:
        raise LintFileError(f"{filepath}: {error}") from error

    logger.debug("Linting %s", filepath)
    return lint_document(document, config)
