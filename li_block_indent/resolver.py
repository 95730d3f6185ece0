"""Expected column resolution for block nodes."""

from __future__ import annotations

from .config import LintConfig
from .markers import marker_width
from .models import BlockKind, BlockNode, SourceLines, TraversalContext


def expected_column(
    node: BlockNode,
    config: LintConfig,
    context: TraversalContext,
    lines: SourceLines,
) -> int:
    """Compute the column a node is expected to start at.

    The nearest list item wins over the nearest blockquote, which wins over the
    document root. A list only counts while no quote has been opened between
    it and the node, since its columns are measured before the quote marker.

    Content of a list item starts at the list's column plus the item's marker
    width. An unordered list nested in an unordered list instead starts
    `config.indent` columns after the parent item's marker.

    Args:
        node: Node whose position is checked.
        config: Settings of the run.
        context: Containers enclosing `node`.
        lines: Source lines of the document.

    Returns:
        int: Expected one-based column.

    Examples:
        # "  * ul item" / "    continued": content of the item starts at column 5
        expected_column(paragraph, LintConfig(), context, lines)  # 5
    """
    list_context = context.list_context
    if context.in_list and list_context is not None:
        item = list_context.item
        if (
            item is not None
            and node.kind is BlockKind.BULLET_LIST
            and not list_context.ordered
        ):
            return item.start_column + config.indent
        return list_context.base_column + marker_width(item, lines)

    if context.blockquotes:
        return context.blockquotes[-1].end_column

    return config.start_indent + 1
