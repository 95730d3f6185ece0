"""Alignment checks for paragraphs, lists, blockquotes, and fences.

Every check compares the column a block starts at with the column its
container mandates (see :func:`li_block_indent.resolver.expected_column`)
and reports mismatches through a :class:`ViolationReporter`.

Lines inside blockquotes have two indentations: the one before the quote
markers and the one after them. The after-marker column is compared with
the expected column first so a misplaced line inside the quote is never
hidden. When it matches and the line is not part of a list nested in the
quote, the before-marker column is compared with the column where the
outermost open quote was expected to start.
"""

from __future__ import annotations

from .config import LintConfig
from .constants import CLOSING_FENCE_PATTERN, CODE_INDENT
from .markers import (
    measure_line,
    parse_list_marker,
    quote_marker_columns,
    skip_blanks,
    skip_quote_markers,
)
from .models import BlockKind, BlockNode, SourceLines, TraversalContext
from .reporter import ViolationReporter
from .resolver import expected_column


def check_line(
    line_number: int,
    expected: int,
    context: TraversalContext,
    lines: SourceLines,
    reporter: ViolationReporter,
) -> bool:
    """Check that one physical line starts at the expected column.

    Blank lines always pass.

    Args:
        line_number: One-based line to check.
        expected: Expected column of the line's content.
        context: Containers enclosing the line's block.
        lines: Source lines of the document.
        reporter: Destination for violations.

    Returns:
        bool: True when the line is aligned.
    """
    text = lines[line_number]
    if not text.strip():
        return True

    indent = measure_line(text, context.quote_depth)
    if not context.blockquotes:
        if indent.before == expected:
            return True
        reporter.report(line_number, expected, indent.before, text)
        return False

    if indent.after != expected:
        reporter.report(line_number, expected, indent.after, text)
        return False

    outer_expected = context.blockquotes[0].expected_column
    if not context.in_list and indent.before != outer_expected:
        reporter.report(line_number, outer_expected, indent.before, text)
        return False

    return True


def _marker_line(context: TraversalContext) -> int | None:
    """Line carrying the marker of the enclosing list item, if any."""
    list_context = context.list_context
    if list_context is None or list_context.item is None:
        return None
    return list_context.item.start_line


def _is_folded_marker(text: str, context: TraversalContext) -> bool:
    """True for a sub-list marker the parser folded into a list item's paragraph.

    A marker indented a code block's width past the list's container cannot
    open a sub-list, so it reads as paragraph text. The sub-list it was meant
    to open is not checked. Markers anywhere else are checked like text.
    """
    list_context = context.list_context
    if not context.in_list or list_context is None:
        return False

    marker = parse_list_marker(text, skip_quote_markers(text, context.quote_depth))
    return marker is not None and marker.column - list_context.container_column >= CODE_INDENT


def check_paragraph(
    node: BlockNode,
    context: TraversalContext,
    lines: SourceLines,
    config: LintConfig,
    reporter: ViolationReporter,
) -> None:
    """Check every line of a paragraph against the expected column.

    The line holding the enclosing item's marker belongs to the list-marker
    check and is skipped, as are sub-list markers folded into the paragraph.
    Each misaligned line is reported.
    """
    expected = expected_column(node, config, context, lines)
    marker_line = _marker_line(context)
    for line_number in range(node.start_line, node.end_line + 1):
        if line_number == marker_line:
            continue
        if line_number > node.start_line and _is_folded_marker(lines[line_number], context):
            continue
        check_line(line_number, expected, context, lines, reporter)


def check_list(
    node: BlockNode,
    context: TraversalContext,
    lines: SourceLines,
    config: LintConfig,
    reporter: ViolationReporter,
) -> None:
    """Check a list's markers.

    A list nested in a list item must start at the expected column. All items
    of a list must share the first item's column. Lists at the top level of
    the document or of a blockquote are free to start anywhere. Only the first
    failure is reported.
    """
    if context.in_list:
        expected = expected_column(node, config, context, lines)
        if node.start_column != expected:
            reporter.report(node.start_line, expected, node.start_column, lines[node.start_line])
            return

    for item in node.children:
        if item.kind is not BlockKind.LIST_ITEM:
            continue
        if item.start_column != node.start_column:
            reporter.report(
                item.start_line, node.start_column, item.start_column, lines[item.start_line]
            )
            return


def check_blockquote(
    node: BlockNode,
    context: TraversalContext,
    lines: SourceLines,
    config: LintConfig,
    reporter: ViolationReporter,
) -> None:
    """Check a blockquote's prefix column.

    The quote marker must start at the expected column, and every later line
    that carries this quote's marker must carry it at the same column. Only
    the first failure is reported.
    """
    expected = expected_column(node, config, context, lines)
    if node.start_column != expected:
        reporter.report(node.start_line, expected, node.start_column, lines[node.start_line])
        return

    depth = context.quote_depth
    for line_number in range(node.start_line + 1, node.end_line + 1):
        columns = quote_marker_columns(lines[line_number], limit=depth + 1)
        if len(columns) <= depth:
            continue
        if columns[depth] != node.start_column:
            reporter.report(line_number, node.start_column, columns[depth], lines[line_number])
            return


def closing_fence_line(node: BlockNode, lines: SourceLines, quote_depth: int = 0) -> int | None:
    """Find the closing delimiter line of a fenced code block.

    Args:
        node: Fence node.
        lines: Source lines of the document.
        quote_depth: Number of quotes whose markers prefix the fence's lines.

    Returns:
        int | None: One-based line of the closing delimiter, or None for a
            fence left open until the end of its container.
    """
    if node.end_line <= node.start_line or not node.text:
        return None

    text = lines[node.end_line]
    start = skip_blanks(text, skip_quote_markers(text, quote_depth))
    match = CLOSING_FENCE_PATTERN.match(text[start:])
    if not match:
        return None

    fence = match.group("fence")
    if fence[0] != node.text[0] or len(fence) < len(node.text):
        return None
    return node.end_line


def check_fence(
    node: BlockNode,
    context: TraversalContext,
    lines: SourceLines,
    config: LintConfig,
    reporter: ViolationReporter,
) -> None:
    """Check the opening and closing delimiters of a fenced code block.

    Content lines are never checked.
    """
    expected = expected_column(node, config, context, lines)
    if node.start_line == _marker_line(context):
        if node.start_column != expected:
            reporter.report(node.start_line, expected, node.start_column, lines[node.start_line])
    else:
        check_line(node.start_line, expected, context, lines, reporter)

    closing_line = closing_fence_line(node, lines, context.quote_depth)
    if closing_line is not None:
        check_line(closing_line, expected, context, lines, reporter)


CHECKS = {
    BlockKind.PARAGRAPH: check_paragraph,
    BlockKind.BULLET_LIST: check_list,
    BlockKind.ORDERED_LIST: check_list,
    BlockKind.BLOCKQUOTE: check_blockquote,
    BlockKind.FENCE: check_fence,
}
