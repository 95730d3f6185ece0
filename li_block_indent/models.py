"""Data models for li-block-indent."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto


class BlockKind(Enum):
    """Block categories produced by the document adapter.

    Attributes:
        DOCUMENT: Root of the tree.
        PARAGRAPH: Paragraph block.
        BULLET_LIST: Unordered list container.
        ORDERED_LIST: Ordered list container.
        LIST_ITEM: Item of either list kind.
        BLOCKQUOTE: Blockquote container.
        FENCE: Fenced code block.
        CODE_BLOCK: Indented code block.
        HEADING: ATX or setext heading.
        INLINE: Inline text run belonging to a paragraph or heading.
        OTHER: Any block the checker does not inspect.
    """

    DOCUMENT = auto()
    PARAGRAPH = auto()
    BULLET_LIST = auto()
    ORDERED_LIST = auto()
    LIST_ITEM = auto()
    BLOCKQUOTE = auto()
    FENCE = auto()
    CODE_BLOCK = auto()
    HEADING = auto()
    INLINE = auto()
    OTHER = auto()


LIST_KINDS = frozenset({BlockKind.BULLET_LIST, BlockKind.ORDERED_LIST})


@dataclass(frozen=True)
class SourceLines:
    """One-based, read-only view of a document's raw lines.

    Lookups outside the document return an empty string.

    Attributes:
        lines: Raw lines without line endings.

    Examples:
        SourceLines(("# Title", "text"))[2]  # "text"
    """

    lines: tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> SourceLines:
        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        return cls(tuple(normalized.split("\n")))

    def __getitem__(self, line_number: int) -> str:
        if 1 <= line_number <= len(self.lines):
            return self.lines[line_number - 1]
        return ""

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)


@dataclass
class BlockNode:
    """A block of the parsed document tree.

    Lines and columns are 1-based. ``end_line`` is inclusive.

    Attributes:
        kind: Block category.
        start_line: First source line of the block.
        end_line: Last source line of the block.
        start_column: Column of the block's marker, or of its first character
            when it has no marker.
        end_column: Column where the block's content begins after its marker
            and spacing.
        text: Marker or prefix text (``*``, ``.``, ``>``, the fence run).
        info: Ordinal of ordered items or the info string of fences.
        children: Child blocks in document order.
    """

    kind: BlockKind
    start_line: int
    end_line: int
    start_column: int = 1
    end_column: int = 1
    text: str = ""
    info: str = ""
    children: list[BlockNode] = field(default_factory=list)


@dataclass(frozen=True)
class ListContext:
    """The list container enclosing the current branch.

    Attributes:
        base_column: Column of the list's first marker.
        ordered: Whether the list is ordered.
        quote_depth: Number of blockquotes open when the list was entered.
        container_column: Column where the content of the list's container
            begins.
        item: Most recently opened item of the list, if any.
    """

    base_column: int
    ordered: bool
    quote_depth: int = 0
    container_column: int = 1
    item: BlockNode | None = None


@dataclass(frozen=True)
class BlockQuoteRef:
    """Column facts about an open blockquote.

    Attributes:
        start_column: Column of the ``>`` marker.
        end_column: Column after the marker and its optional space.
        expected_column: Column where the marker was expected to start.
    """

    start_column: int
    end_column: int
    expected_column: int


@dataclass(frozen=True)
class TraversalContext:
    """Snapshot of the containers enclosing a node.

    Each transition returns a new snapshot, so a subtree never changes what
    its siblings see.

    Attributes:
        list_context: Nearest enclosing list container.
        blockquotes: Open blockquotes, outermost first.
    """

    list_context: ListContext | None = None
    blockquotes: tuple[BlockQuoteRef, ...] = ()

    @property
    def quote_depth(self) -> int:
        return len(self.blockquotes)

    @property
    def in_list(self) -> bool:
        """True when the nearest list sits inside the innermost open quote."""
        return self.list_context is not None and self.list_context.quote_depth == self.quote_depth

    def enter_list(self, node: BlockNode, container_column: int = 1) -> TraversalContext:
        base_column = node.children[0].start_column if node.children else node.start_column
        list_context = ListContext(
            base_column=base_column,
            ordered=node.kind is BlockKind.ORDERED_LIST,
            quote_depth=self.quote_depth,
            container_column=container_column,
        )
        return replace(self, list_context=list_context)

    def enter_item(self, node: BlockNode) -> TraversalContext:
        if self.list_context is None:
            return self
        return replace(self, list_context=replace(self.list_context, item=node))

    def enter_blockquote(self, node: BlockNode, expected_column: int) -> TraversalContext:
        quote = BlockQuoteRef(
            start_column=node.start_column,
            end_column=node.end_column,
            expected_column=expected_column,
        )
        return replace(self, blockquotes=(*self.blockquotes, quote))


@dataclass(frozen=True)
class LineIndent:
    """Indentation of one physical line.

    Attributes:
        before: Column of the first non-blank character.
        after: Column of the first non-blank character after quote markers.
    """

    before: int
    after: int


@dataclass(frozen=True)
class Violation:
    """A single indentation violation.

    Attributes:
        line: One-based source line.
        expected_column: Column the line should start at.
        actual_column: Column the line starts at.
        message: Human readable detail.
        context: Stripped source line.
    """

    line: int
    expected_column: int
    actual_column: int
    message: str
    context: str
