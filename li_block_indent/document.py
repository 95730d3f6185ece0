"""Markdown documents as block trees.

Uses ``markdown-it-py`` to tokenize Markdown, then folds the flat token
stream into a :class:`BlockNode` tree whose marker columns are located on
the raw source lines.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .config import LintConfig
from .constants import QUOTE_MARKER
from .exceptions import LineTooLongError
from .markers import (
    column_at,
    parse_list_marker,
    skip_blanks,
    skip_quote_markers,
)
from .models import LIST_KINDS, BlockKind, BlockNode, SourceLines

_BLOCK_KINDS = {
    "bullet_list": BlockKind.BULLET_LIST,
    "ordered_list": BlockKind.ORDERED_LIST,
    "list_item": BlockKind.LIST_ITEM,
    "blockquote": BlockKind.BLOCKQUOTE,
    "paragraph": BlockKind.PARAGRAPH,
    "heading": BlockKind.HEADING,
    "fence": BlockKind.FENCE,
    "code_block": BlockKind.CODE_BLOCK,
    "inline": BlockKind.INLINE,
}


@dataclass(frozen=True)
class Document:
    """A parsed Markdown document.

    Attributes:
        lines: Raw source lines.
        root: Root of the block tree.
    """

    lines: SourceLines
    root: BlockNode


def _kind_of(token: Token) -> BlockKind:
    name = token.type
    if token.nesting == 1:
        name = name[: -len("_open")]
    return _BLOCK_KINDS.get(name, BlockKind.OTHER)


class _MarkerCursor:
    """Tracks how far container markers have been consumed on each line."""

    def __init__(self, lines: SourceLines):
        self._lines = lines
        self._positions: dict[int, int] = {}

    def _position(self, line_number: int, stack: list[BlockNode]) -> int:
        if line_number not in self._positions:
            # Quotes opened on earlier lines prefix this line with their markers.
            quote_depth = sum(1 for node in stack if node.kind is BlockKind.BLOCKQUOTE)
            self._positions[line_number] = skip_quote_markers(
                self._lines[line_number], quote_depth
            )
        return self._positions[line_number]

    def place(self, node: BlockNode, token: Token, stack: list[BlockNode]) -> None:
        """Locate the node's marker on its first line and set its columns."""
        line = self._lines[node.start_line]
        start = skip_blanks(line, self._position(node.start_line, stack))
        node.start_column = node.end_column = column_at(line, start)

        if node.kind in LIST_KINDS or node.kind is BlockKind.LIST_ITEM:
            marker = parse_list_marker(line, start)
            if marker is None:
                return
            node.start_column = marker.column
            node.end_column = marker.content_column
            if node.kind is BlockKind.LIST_ITEM:
                self._positions[node.start_line] = marker.end_index
        elif node.kind is BlockKind.BLOCKQUOTE:
            if start >= len(line) or line[start] != QUOTE_MARKER:
                return
            end = start + 1
            if end < len(line) and line[end] in " \t":
                end += 1
            node.end_column = column_at(line, end)
            self._positions[node.start_line] = end
        elif node.kind is BlockKind.FENCE:
            node.end_column = column_at(line, start + len(token.markup))


def build_tree(tokens: Iterable[Token], lines: SourceLines) -> BlockNode:
    """Fold a flat markdown-it token stream into a block tree.

    Opening tokens push a node, closing tokens pop it, and self-contained
    tokens become leaves of the current node.

    Args:
        tokens: Block-level tokens in document order.
        lines: Raw source lines the tokens were produced from.

    Returns:
        BlockNode: Document root whose children are the top-level blocks.

    Examples:
        root = build_tree(MarkdownIt().parse("* item"), SourceLines.from_text("* item"))
        root.children[0].kind  # BlockKind.BULLET_LIST
    """
    root = BlockNode(kind=BlockKind.DOCUMENT, start_line=1, end_line=max(len(lines), 1))
    stack = [root]
    cursor = _MarkerCursor(lines)

    for token in tokens:
        if token.nesting == -1:
            if len(stack) > 1:
                stack.pop()
            continue

        parent = stack[-1]
        if token.map:
            start_line = token.map[0] + 1
            end_line = max(token.map[1], start_line)
        else:
            start_line, end_line = parent.start_line, parent.end_line

        node = BlockNode(
            kind=_kind_of(token),
            start_line=start_line,
            end_line=end_line,
            text=token.markup,
            info=token.info,
        )
        if node.kind is BlockKind.INLINE:
            node.start_column, node.end_column = parent.start_column, parent.end_column
        else:
            cursor.place(node, token, stack)

        parent.children.append(node)
        if token.nesting == 1:
            stack.append(node)

    return root


def parse_document(text: str, config: LintConfig | None = None) -> Document:
    """Parse Markdown text into a :class:`Document`.

    Args:
        text: Markdown source.
        config: Configuration providing the line length limit. Defaults to a
            new `LintConfig` when omitted.

    Returns:
        Document: Source lines and block tree.

    Raises:
        LineTooLongError: If a line exceeds `config.max_line_length`.

    Examples:
        document = parse_document("* item\\n  continued\\n")
        document.lines[2]  # "  continued"
    """
    config = config or LintConfig()
    lines = SourceLines.from_text(text)
    for line_number, line in enumerate(lines, start=1):
        if len(line) > config.max_line_length:
            raise LineTooLongError(line_number, config.max_line_length)

    tokens = MarkdownIt("commonmark").parse(text)
    return Document(lines=lines, root=build_tree(tokens, lines))
