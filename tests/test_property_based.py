from __future__ import annotations

import string

from hypothesis import assume, given
from hypothesis import strategies as st

from li_block_indent import lint_text
from li_block_indent.markers import parse_list_marker

word_strategy = st.text(alphabet=string.ascii_letters, min_size=1, max_size=12)
line_strategy = st.lists(word_strategy, min_size=1, max_size=6).map(" ".join)
paragraph_strategy = st.lists(line_strategy, min_size=1, max_size=5).map("\n".join)


@given(st.lists(paragraph_strategy, min_size=1, max_size=5))
def test_unindented_paragraphs_are_valid(paragraphs: list[str]):
    assert lint_text("\n\n".join(paragraphs)) == []


@given(
    lines=st.lists(line_strategy, min_size=2, max_size=5),
    indent=st.integers(min_value=1, max_value=3),
    position=st.integers(min_value=1, max_value=4),
)
def test_indented_continuation_line_is_reported(lines: list[str], indent: int, position: int):
    assume(position < len(lines))
    lines[position] = " " * indent + lines[position]

    violations = lint_text("\n".join(lines))

    assert [violation.line for violation in violations] == [position + 1]


@given(
    column=st.integers(min_value=0, max_value=3),
    marker=st.sampled_from("*-+"),
    spaces=st.integers(min_value=1, max_value=4),
    text=line_strategy,
)
def test_continuation_at_content_column_is_valid(column: int, marker: str, spaces: int, text: str):
    item = f"{' ' * column}{marker}{' ' * spaces}item"
    continuation = " " * (column + 1 + spaces) + text

    assert lint_text(f"{item}\n{continuation}\n") == []


@given(
    column=st.integers(min_value=0, max_value=3),
    marker=st.sampled_from("*-+"),
    spaces=st.integers(min_value=1, max_value=4),
    indent=st.integers(min_value=0, max_value=12),
    text=line_strategy,
)
def test_continuation_elsewhere_is_reported(
    column: int, marker: str, spaces: int, indent: int, text: str
):
    assume(indent != column + 1 + spaces)
    item = f"{' ' * column}{marker}{' ' * spaces}item"
    source = f"{item}\n{' ' * indent}{text}\n"

    violations = lint_text(source)

    assert [violation.line for violation in violations] == [2]
    assert lint_text(source) == violations


@given(st.lists(st.tuples(st.integers(min_value=0, max_value=20), line_strategy), max_size=8))
def test_top_level_fence_content_is_not_checked(content: list[tuple[int, str]]):
    body = [" " * indent + text for indent, text in content]

    assert lint_text("\n".join(["```", *body, "```"])) == []


@given(st.lists(st.tuples(st.integers(min_value=0, max_value=15), line_strategy), max_size=8))
def test_fence_content_in_list_is_not_checked(content: list[tuple[int, str]]):
    body = ["     " + " " * indent + text for indent, text in content]

    assert lint_text("\n".join(["   * ul item", "     ```", *body, "     ```"])) == []


@given(
    number=st.integers(min_value=0, max_value=10**9 - 1),
    delimiter=st.sampled_from(".)"),
    spaces=st.integers(min_value=1, max_value=4),
)
def test_ordered_marker_width(number: int, delimiter: str, spaces: int):
    marker = parse_list_marker(f"{number}{delimiter}{' ' * spaces}item")

    assert marker is not None
    assert marker.width == len(str(number)) + 1 + spaces
