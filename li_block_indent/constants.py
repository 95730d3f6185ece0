"""Constants used across the li-block-indent package."""

from __future__ import annotations

import re

# Rule metadata
RULE_NAME = "li-block-indent"
RULE_DESCRIPTION = "List item block indentation"
RULE_INFORMATION = "https://github.com/silvermine/markdownlint-rule-li-block-indent"
RULE_TAGS = ("bullet", "ul", "il", "indentation")

# Settings defaults
DEFAULT_INDENT = 2
DEFAULT_START_INDENT = 0
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_LINE_LENGTH = 10_000

# Markdown marker grammar
BULLET_MARKERS = "*-+"
ORDERED_DELIMITERS = ".)"
MAX_ORDINAL_DIGITS = 9
QUOTE_MARKER = ">"
TAB_WIDTH = 4
CODE_INDENT = 4

LIST_MARKER_PATTERN = re.compile(
    rf"(?P<marker>[{re.escape(BULLET_MARKERS)}]"
    rf"|\d{{1,{MAX_ORDINAL_DIGITS}}}[{re.escape(ORDERED_DELIMITERS)}])"
    r"(?P<spacing>[ \t]*)"
    r"(?P<rest>.*)$"
)
CLOSING_FENCE_PATTERN = re.compile(r"^(?P<fence>`{3,}|~{3,})[ \t]*$")

MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdown", ".mkd", ".mkdn")
