from __future__ import annotations

from li_block_indent.config import LintConfig
from li_block_indent.document import parse_document
from li_block_indent.models import BlockKind, BlockNode, SourceLines, TraversalContext
from li_block_indent.resolver import expected_column


def _paragraph() -> BlockNode:
    return BlockNode(kind=BlockKind.PARAGRAPH, start_line=2, end_line=2)


def _item_context(text: str) -> tuple[TraversalContext, SourceLines]:
    document = parse_document(text)
    bullet_list = document.root.children[0]
    item = bullet_list.children[0]
    context = TraversalContext().enter_list(bullet_list).enter_item(item)
    return context, document.lines


def test_top_level_uses_start_indent():
    lines = parse_document("text").lines

    assert expected_column(_paragraph(), LintConfig(), TraversalContext(), lines) == 1
    assert expected_column(_paragraph(), LintConfig(start_indent=2), TraversalContext(), lines) == 3


def test_item_content_starts_after_marker():
    context, lines = _item_context("  * ul item\n    continued paragraph\n")

    assert expected_column(_paragraph(), LintConfig(), context, lines) == 5


def test_ordered_item_content_starts_after_marker():
    context, lines = _item_context("10. item\n")

    assert expected_column(_paragraph(), LintConfig(), context, lines) == 5


def test_unordered_sublist_uses_indent():
    context, lines = _item_context("* item\n")
    sublist = BlockNode(kind=BlockKind.BULLET_LIST, start_line=2, end_line=2)

    assert expected_column(sublist, LintConfig(), context, lines) == 3
    assert expected_column(sublist, LintConfig(indent=4), context, lines) == 5


def test_ordered_sublist_uses_marker_width():
    context, lines = _item_context("* item\n")
    sublist = BlockNode(kind=BlockKind.ORDERED_LIST, start_line=2, end_line=2)

    assert expected_column(sublist, LintConfig(indent=4), context, lines) == 3


def test_blockquote_uses_content_column():
    quote = BlockNode(kind=BlockKind.BLOCKQUOTE, start_line=1, end_line=1, end_column=3)
    context = TraversalContext().enter_blockquote(quote, expected_column=1)
    lines = parse_document("> quote").lines

    assert expected_column(_paragraph(), LintConfig(), context, lines) == 3


def test_quote_inside_item_wins_over_item():
    context, lines = _item_context("* > quote\n")
    quote = BlockNode(
        kind=BlockKind.BLOCKQUOTE, start_line=1, end_line=1, start_column=3, end_column=5
    )
    context = context.enter_blockquote(quote, expected_column=3)

    assert not context.in_list
    assert expected_column(_paragraph(), LintConfig(), context, lines) == 5
