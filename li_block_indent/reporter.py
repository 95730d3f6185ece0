"""Violation collection and formatting."""

from __future__ import annotations

from collections.abc import Callable

from .constants import RULE_DESCRIPTION, RULE_NAME
from .models import Violation

ViolationSink = Callable[[Violation], None]


class ViolationReporter:
    """Collect violations, keeping one record per source line.

    Each accepted violation is also forwarded to `sink` when one is given.

    Args:
        sink: Optional callback receiving each accepted violation.

    Examples:
        reporter = ViolationReporter()
        reporter.report(2, expected_column=5, actual_column=2, context=" continued")
        reporter.violations[0].message  # "Expected indentation: 4; Actual: 1"
    """

    def __init__(self, sink: ViolationSink | None = None):
        self._sink = sink
        self._by_line: dict[int, Violation] = {}

    def report(self, line: int, expected_column: int, actual_column: int, context: str) -> bool:
        """Record a violation unless the line was already reported.

        Returns:
            bool: True when the violation was recorded.
        """
        if line in self._by_line:
            return False

        violation = Violation(
            line=line,
            expected_column=expected_column,
            actual_column=actual_column,
            message=f"Expected indentation: {expected_column - 1}; Actual: {actual_column - 1}",
            context=context.strip(),
        )
        self._by_line[line] = violation
        if self._sink is not None:
            self._sink(violation)
        return True

    @property
    def violations(self) -> list[Violation]:
        return sorted(self._by_line.values(), key=lambda violation: violation.line)


def format_violation(violation: Violation, source: str | None = None) -> str:
    """Render a violation in markdownlint's output style.

    Args:
        violation: Violation to render.
        source: File name or label prefixed to the line number.

    Returns:
        str: One line of text without a trailing newline.

    Examples:
        format_violation(violation, "README.md")
        # 'README.md:2: li-block-indent List item block indentation
        #  [Expected indentation: 4; Actual: 1] [Context: "continued"]'
    """
    location = f"{source}:{violation.line}" if source else str(violation.line)
    return (
        f"{location}: {RULE_NAME} {RULE_DESCRIPTION} "
        f'[{violation.message}] [Context: "{violation.context}"]'
    )
