from __future__ import annotations

from li_block_indent import RULE_DESCRIPTION, RULE_NAME, RULE_TAGS
from li_block_indent.models import Violation
from li_block_indent.reporter import ViolationReporter, format_violation


def test_reporter_keeps_first_violation_per_line():
    reporter = ViolationReporter()

    assert reporter.report(2, 5, 2, " continued paragraph")
    assert not reporter.report(2, 3, 2, " continued paragraph")

    [violation] = reporter.violations
    assert violation.expected_column == 5
    assert violation.message == "Expected indentation: 4; Actual: 1"
    assert violation.context == "continued paragraph"


def test_reporter_orders_by_line():
    reporter = ViolationReporter()
    reporter.report(9, 5, 1, "late")
    reporter.report(4, 5, 2, "early")

    assert [violation.line for violation in reporter.violations] == [4, 9]


def test_reporter_forwards_to_sink():
    received: list[Violation] = []
    reporter = ViolationReporter(received.append)

    reporter.report(1, 1, 3, "  text")
    reporter.report(1, 1, 3, "  text")

    assert received == reporter.violations
    assert len(received) == 1


def test_format_violation():
    violation = Violation(
        line=2,
        expected_column=5,
        actual_column=2,
        message="Expected indentation: 4; Actual: 1",
        context="continued paragraph",
    )

    assert format_violation(violation, "README.md") == (
        "README.md:2: li-block-indent List item block indentation "
        '[Expected indentation: 4; Actual: 1] [Context: "continued paragraph"]'
    )
    assert format_violation(violation).startswith("2: li-block-indent")


def test_rule_metadata():
    assert RULE_NAME == "li-block-indent"
    assert RULE_DESCRIPTION == "List item block indentation"
    assert "indentation" in RULE_TAGS
