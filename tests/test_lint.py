from __future__ import annotations

import pytest

from li_block_indent import LintConfig, lint_text
from li_block_indent.document import parse_document
from li_block_indent.linter import lint_document


def _lint(lines: list[str], config: LintConfig | None = None):
    return lint_text("\n".join(lines), config)


def _lines(lines: list[str], config: LintConfig | None = None) -> list[int]:
    return [violation.line for violation in _lint(lines, config)]


def test_left_aligned_paragraphs_are_valid():
    assert _lint(
        [
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
            "Pellentesque vestibulum lectus non tellus congue,",
            "eu ultricies metus ultrices.",
            "",
            "Curabitur ut posuere est, quis convallis orci.",
            "Nam lectus magna, pellentesque at rutrum in, commodo a nisi.",
        ]
    ) == []


def test_misaligned_paragraphs_are_reported():
    assert _lines(
        [
            "    Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
            "Pellentesque vestibulum lectus non tellus congue,",
            "  eu ultricies metus ultrices.",
            "",
            "Curabitur ut posuere est, quis convallis orci.",
            "   Nam lectus magna, pellentesque at rutrum in, commodo a nisi.",
        ]
    ) == [3, 6]


def test_indented_paragraphs_are_valid():
    assert _lint(
        [
            "",
            "  * ul item",
            "  * ul item",
            "    continued paragraph",
            "    continued paragraph",
            "    * ul item",
            "      continued paragraph",
            "  * ul item",
            "    continued paragraph",
            "  1. ol item",
            "     continued paragraph",
        ]
    ) == []


def test_misindented_paragraphs_are_reported_per_line():
    assert _lines(
        [
            "",
            "  * ul item",
            "  * ul item",
            " continued paragraph",
            " continued paragraph",
            "    * ul item",
            "     continued paragraph",
            "  * ul item",
            "continued paragraph",
            "  1. ol item",
            "       continued paragraph",
        ]
    ) == [4, 5, 7, 9, 11]


def test_blockquote_inside_list_item_is_valid():
    assert _lint(
        [
            "Test",
            "   * **Message:**",
            "",
            "     > a\\",
            "     > b",
            "     > c",
            "",
        ]
    ) == []


def test_misindented_blockquotes_and_lists_are_reported():
    assert _lines(
        [
            "",
            ">> * ul item",
            ">> * ul item",
            "    >> continued paragraph",
            "    >> continued paragraph",
            ">> * ul item",
            "      >> continued paragraph",
            ">  * ul item",
            "      > continued paragraph",
            "> 1. ol item",
            ">    continued paragraph",
            "",
            "* ul item",
            "",
            " > indented blockquote",
        ]
    ) == [4, 5, 7, 9, 15]


@pytest.mark.parametrize(
    "lines",
    [
        [
            "",
            "   * ul item",
            "   * ul item",
            "     continued paragraph",
            "     ```",
            "                  This content is not checked();",
            "             not checked();",
            "            not checked();",
            "             not checked();",
            "     ```",
            "     * ul item",
            "       continued paragraph",
            "   * ul item",
            "     continued paragraph",
            "   1. ol item",
            "      continued paragraph",
        ],
        [
            "```",
            "              This content is not checked();",
            "          not checked();",
            "         not checked();",
            "      not checked();",
            "```",
        ],
    ],
    ids=["in-list", "top-level"],
)
def test_fenced_code_content_is_not_checked(lines):
    assert _lint(lines) == []


def test_misindented_fence_delimiters_in_list_are_reported():
    assert _lines(
        [
            "",
            "   * ul item",
            "   * ul item",
            "     continued paragraph",
            "      ```",
            "                  This content is not checked();",
            "             not checked();",
            "            not checked();",
            "             not checked();",
            "      ```",
            "     * ul item",
            "       continued paragraph",
            "   * ul item",
            "     continued paragraph",
            "   1. ol item",
            "      continued paragraph",
        ]
    ) == [5, 10]


def test_misindented_top_level_fence_delimiters_are_reported():
    violations = _lint(
        [
            " ```",
            "              This content is not checked();",
            "          not checked();",
            "         not checked();",
            "      not checked();",
            "  ```",
        ]
    )

    assert [(v.line, v.expected_column, v.actual_column) for v in violations] == [
        (1, 1, 2),
        (6, 1, 3),
    ]


def test_invalid_inline_fence_is_checked_as_paragraph_text():
    assert _lines(
        [
            "",
            "   * ul item",
            "   * ul item",
            "     continued paragraph",
            "     continued paragraph",
            "     continued paragraph",
            "      ``` testingCode();```",
            "     * ul item",
            "       continued paragraph",
            "   * ul item",
            "     continued paragraph",
            "   1. ol item",
            "      continued paragraph",
        ]
    ) == [7]


def test_overindented_sublist_is_ignored():
    assert _lint(["", "   1. ol item", "   2. ol item", "     * test"]) == []


def test_underindented_text_in_item_paragraph_is_reported():
    assert _lines(["* a", " b"]) == [2]


def test_marker_folded_short_of_item_content_is_ignored():
    assert _lint(["10.  item", "    - x"]) == []


def test_underindented_marker_after_item_opens_top_level_list():
    assert _lint(["* a", " 2. b"]) == []


def test_indented_marker_in_top_level_paragraph_is_reported():
    assert _lines(["text", "    - foo"]) == [2]
    assert _lines(["text", "    foo"]) == [2]


def test_three_space_indent_is_valid():
    assert _lint(
        [
            "",
            "## Legal Offices Page",
            "",
            "   * Includes body content and a [**Contact Information Chooser**](#TODO) for legal office",
            "     contact information",
        ]
    ) == []


def test_unclosed_fence_is_valid():
    assert _lint(
        [
            "",
            "   * ul item",
            "   * ul item",
            "     continued paragraph",
            "     ```",
            "                  This content is not checked();",
            "             not checked();",
            "            not checked();",
            "             not checked();",
            "             not checked();",
        ]
    ) == []


def test_continuation_at_item_content_column_is_valid():
    assert _lint(["  * ul item", "    continued paragraph"]) == []


def test_continuation_before_item_content_column_is_reported():
    violations = _lint(["  * ul item", " continued paragraph"])

    assert len(violations) == 1
    violation = violations[0]
    assert violation.line == 2
    assert violation.expected_column == 5
    assert violation.actual_column == 2
    assert violation.message == "Expected indentation: 4; Actual: 1"
    assert violation.context == "continued paragraph"


def test_unindented_fence_is_valid():
    assert _lint(["```", "  x", "```"]) == []


def test_fence_inside_blockquote_is_valid():
    assert _lint(["> ```", "> code", ">     more code", "> ```"]) == []


def test_blockquote_paragraph_is_valid():
    assert _lint(["> quoted", "> text", "", "plain"]) == []


def test_inconsistent_blockquote_marker_is_reported():
    assert _lines(["> a", "  > b"]) == [2]


def test_misaligned_sibling_item_is_reported():
    violations = _lint(["- a", " - b"])

    assert [(v.line, v.expected_column, v.actual_column) for v in violations] == [(2, 1, 2)]


def test_nested_unordered_list_uses_configured_indent():
    lines = ["* item", "    * nested"]

    assert _lines(lines) == [2]
    assert _lint(lines, LintConfig(indent=4)) == []


def test_ordered_list_nested_in_unordered_list_uses_marker_width():
    assert _lint(["* item", "  1. nested"]) == []
    assert _lines(["* item", "   1. nested"]) == [2]


def test_unordered_list_nested_in_ordered_list_uses_marker_width():
    assert _lint(["1. item", "   * nested"]) == []
    assert _lint(["10. item", "    * nested"]) == []


def test_start_indent_shifts_top_level_expectation():
    config = LintConfig(start_indent=2)

    assert _lint(["  text"], config) == []
    assert _lines(["text"], config) == [1]


def test_lazy_line_inside_blockquote_is_reported():
    assert _lines(["> quoted", "lazy"]) == [2]


def test_headings_and_indented_code_are_not_checked():
    assert _lint(["# Title", "", "    indented code", "", "Setext", "======"]) == []


def test_sink_receives_each_violation():
    collected = []

    violations = lint_text("  * ul item\n continued\ncontinued\n", sink=collected.append)

    assert sorted(collected, key=lambda violation: violation.line) == violations
    assert [violation.line for violation in violations] == [2, 3]


def test_lint_is_idempotent():
    text = ">> * ul item\n    >> continued paragraph\n"

    assert lint_text(text) == lint_text(text)


def test_lint_document_accepts_parsed_document():
    document = parse_document("* item\n continued\n")

    assert [violation.line for violation in lint_document(document)] == [2]


def test_lint_handles_empty_text():
    assert lint_text("") == []


def test_crlf_line_endings_are_supported():
    assert lint_text("  * ul item\r\n    continued paragraph\r\n") == []
