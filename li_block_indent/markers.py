"""List marker grammar, marker widths, and column measurement."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    BULLET_MARKERS,
    LIST_MARKER_PATTERN,
    QUOTE_MARKER,
    TAB_WIDTH,
)
from .models import BlockKind, BlockNode, LineIndent, SourceLines


@dataclass(frozen=True)
class ListMarker:
    """A list marker found on a source line.

    Attributes:
        marker: Marker text, e.g. ``*`` or ``12.``.
        start_index: Index of the marker in the line.
        end_index: Index just past the marker glyph(s).
        column: One-based column of the marker.
        content_column: One-based column where the item content begins.
    """

    marker: str
    start_index: int
    end_index: int
    column: int
    content_column: int

    @property
    def ordered(self) -> bool:
        return self.marker[-1] not in BULLET_MARKERS

    @property
    def width(self) -> int:
        return self.content_column - self.column


def display_width(text: str, start_column: int = 0) -> int:
    """Compute the display width of `text`.

    Tabs advance to the next multiple of four columns to match Markdown
    indentation rules.

    Args:
        text: Text to measure.
        start_column: Zero-based column at which `text` begins.

    Returns:
        int: Number of columns occupied by `text`.

    Examples:
        display_width("  *")  # 3
        display_width("\\t*")  # 5
    """
    column = start_column
    for character in text:
        if character == "\t":
            column += TAB_WIDTH - (column % TAB_WIDTH)
        else:
            column += 1
    return column - start_column


def column_at(line: str, index: int) -> int:
    """Return the one-based column of `line[index]`."""
    return display_width(line[:index]) + 1


def skip_blanks(line: str, index: int = 0) -> int:
    while index < len(line) and line[index] in " \t":
        index += 1
    return index


def leading_columns(line: str) -> int:
    """Compute the column width of leading whitespace.

    Examples:
        leading_columns("    text")  # 4
        leading_columns("\\ttext")  # 4
    """
    return display_width(line[: skip_blanks(line)])


def parse_list_marker(line: str, start: int = 0) -> ListMarker | None:
    """Match a list marker at or after `start`.

    Leading blanks are skipped. The marker must be followed by a blank or end
    the line; the content column counts the blanks after the marker exactly as
    they appear in the source. A marker with nothing after it is treated as
    followed by a single space.

    Args:
        line: Raw source line.
        start: Index where scanning begins.

    Returns:
        ListMarker | None: The marker, or None when the text at `start` is not
            a list marker.

    Examples:
        parse_list_marker("  * item").width  # 2
        parse_list_marker("10.  item").width  # 5
    """
    index = skip_blanks(line, start)
    match = LIST_MARKER_PATTERN.match(line, index)
    if not match:
        return None

    marker = match.group("marker")
    spacing = match.group("spacing")
    rest = match.group("rest")
    if not spacing and rest:
        return None

    column = column_at(line, index)
    end_index = match.end("marker")
    if not rest.strip():
        content_column = column + len(marker) + 1
    else:
        content_column = column_at(line, match.end("spacing"))

    return ListMarker(
        marker=marker,
        start_index=index,
        end_index=end_index,
        column=column,
        content_column=content_column,
    )


def index_at_column(line: str, column: int) -> int:
    """Return the index of the character that occupies `column`."""
    width = 0
    for index, character in enumerate(line):
        if width + 1 >= column:
            return index
        width += display_width(character, width)
    return len(line)


def marker_width(node: BlockNode | None, lines: SourceLines) -> int:
    """Compute the columns a list item's marker and trailing blanks occupy.

    The width is re-derived from the raw source line rather than taken from
    the parser, since it decides where content nested under the item begins.

    Args:
        node: Node to measure.
        lines: Source lines of the document.

    Returns:
        int: Marker width, or 0 for non-items and unmatched markers.

    Examples:
        marker_width(item_node, SourceLines(("  * ul item",)))  # 2
    """
    if node is None or node.kind is not BlockKind.LIST_ITEM:
        return 0

    line = lines[node.start_line]
    marker = parse_list_marker(line, index_at_column(line, node.start_column))
    if marker is None:
        return 0
    return marker.width


def skip_quote_markers(line: str, count: int, start: int = 0) -> int:
    """Consume up to `count` blockquote markers.

    Each marker may be preceded by blanks and swallows one following blank.

    Returns:
        int: Index after the last consumed marker.
    """
    index = start
    for _ in range(count):
        candidate = skip_blanks(line, index)
        if candidate >= len(line) or line[candidate] != QUOTE_MARKER:
            break
        index = candidate + 1
        if index < len(line) and line[index] in " \t":
            index += 1
    return index


def quote_marker_columns(line: str, limit: int | None = None) -> list[int]:
    """List the columns of the leading blockquote markers of `line`.

    Args:
        line: Raw source line.
        limit: Maximum number of markers to collect.

    Returns:
        list[int]: One-based columns, outermost first.

    Examples:
        quote_marker_columns(">> * item")  # [1, 2]
        quote_marker_columns("  >   > text")  # [3, 7]
    """
    columns: list[int] = []
    index = 0
    while limit is None or len(columns) < limit:
        index = skip_blanks(line, index)
        if index >= len(line) or line[index] != QUOTE_MARKER:
            break
        columns.append(column_at(line, index))
        index += 1
    return columns


def measure_line(line: str, quote_depth: int = 0) -> LineIndent:
    """Measure a line's indentation on both sides of its quote markers.

    Args:
        line: Raw source line.
        quote_depth: Number of open blockquotes whose markers may prefix the
            line.

    Returns:
        LineIndent: Columns of the first non-blank character before and after
            stripping the quote markers.

    Examples:
        measure_line("     > b", 1)  # LineIndent(before=6, after=8)
        measure_line("  continued")  # LineIndent(before=3, after=3)
    """
    before = leading_columns(line) + 1
    if quote_depth == 0:
        return LineIndent(before=before, after=before)

    index = skip_blanks(line, skip_quote_markers(line, quote_depth))
    return LineIndent(before=before, after=column_at(line, index))
