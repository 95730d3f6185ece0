"""
li-block-indent: List item block indentation checker for Markdown files.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    li-block-indent README.md

Library Usage:
    from pathlib import Path
    from li_block_indent import lint_text

    content = Path("README.md").read_text()
    for violation in lint_text(content):
        print(violation.line, violation.message)
"""

from .config import ConfigError, LintConfig
from .constants import RULE_DESCRIPTION, RULE_INFORMATION, RULE_NAME, RULE_TAGS
from .document import Document, build_tree, parse_document
from .exceptions import LineTooLongError, LintError, LintFileError
from .linter import lint_document, lint_file, lint_text
from .markers import marker_width, parse_list_marker
from .models import BlockKind, BlockNode, SourceLines, Violation
from .reporter import ViolationReporter, format_violation

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "lint_text",
    "lint_document",
    "lint_file",
    "parse_document",
    "build_tree",
    "marker_width",
    "parse_list_marker",
    # Data models
    "BlockKind",
    "BlockNode",
    "Document",
    "SourceLines",
    "Violation",
    "LintConfig",
    # Reporting
    "ViolationReporter",
    "format_violation",
    # Rule metadata
    "RULE_NAME",
    "RULE_DESCRIPTION",
    "RULE_INFORMATION",
    "RULE_TAGS",
    # Exceptions
    "ConfigError",
    "LineTooLongError",
    "LintError",
    "LintFileError",
    # Version
    "__version__",
]
